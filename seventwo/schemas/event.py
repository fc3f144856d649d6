from typing import List, Optional
from pydantic import BaseModel

from seventwo.models.participant import Participant
from seventwo.schemas.ledger import ParticipantSummary


class EventSnapshot(BaseModel):
    """All participants of one event with their ledgers and cash-out state."""
    participants: List[Participant] = []


class EventFinancialSummary(BaseModel):
    total_buy_ins: float = 0.0
    total_cash_outs: float = 0.0
    money_in_play: float = 0.0
    balance_check: float = 0.0
    is_balanced: bool = True
    participants_count: int = 0
    participants_cashed_out: int = 0
    participants_still_playing: int = 0
    can_settle: bool = False


class SettlementCheck(BaseModel):
    can_settle: bool
    reason: Optional[str] = None
    summary: EventFinancialSummary


class EventLedgerSummary(EventFinancialSummary):
    event_id: str
    participants: List[ParticipantSummary] = []
