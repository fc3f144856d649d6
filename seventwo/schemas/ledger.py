from typing import List, Optional
from pydantic import BaseModel, Field

from seventwo.core.config import settings
from seventwo.models.ledger import LedgerEntry
from seventwo.models.participant import Participant


class LedgerAggregateRequest(BaseModel):
    """Ordered ledger entries for one participant."""
    entries: List[LedgerEntry] = []


class LedgerAggregate(BaseModel):
    """Buy-in totals derived from a participant's ledger."""
    initial_buy_in: float = 0.0
    rebuy_count: int = 0
    total_rebuys: float = 0.0
    total_buy_in: float = 0.0
    has_bought_in: bool = False


class ParticipantSummary(LedgerAggregate):
    participant_id: str
    user_id: str
    display_name: str
    cash_out: Optional[float] = None
    net_profit_loss: float = 0.0
    is_cashed_out: bool = False


class BuyInRequest(BaseModel):
    participant: Participant
    amount: float = Field(..., gt=0, le=settings.MAX_BUY_IN)
    notes: Optional[str] = Field(None, max_length=500)


class BuyInRecord(BaseModel):
    """The one new ledger entry to persist, plus the resulting total."""
    ledger_entry: LedgerEntry
    participant_total_buy_in: float
