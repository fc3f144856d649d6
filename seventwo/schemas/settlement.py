from typing import List, Optional
from pydantic import BaseModel

from seventwo.models.settlement import Debt, SettlementTransaction


class PlayerStanding(BaseModel):
    """Signed result for one cashed-out player."""
    user_id: str
    user_name: str
    net_profit_loss: float


class SettlementResult(BaseModel):
    debts: List[Debt] = []
    total_pot: float = 0.0
    participants_count: int = 0
    balance_check: float = 0.0
    winners: List[PlayerStanding] = []
    losers: List[PlayerStanding] = []


class SettlementPreview(BaseModel):
    can_settle: bool
    reason: Optional[str] = None
    debts: List[Debt] = []
    total_pot: float = 0.0
    balance_check: float = 0.0


class SettlementFinalization(BaseModel):
    event_id: str
    status: str = "completed"
    debts_created: int
    debts: List[Debt]
    transactions: List[SettlementTransaction]
    player_results: List[PlayerStanding]
