from typing import List, Optional
from pydantic import BaseModel, Field

from seventwo.core.config import settings
from seventwo.models.participant import Participant


class CashOutRequest(BaseModel):
    participant_id: str
    amount: float = Field(..., ge=0, le=settings.MAX_CASH_OUT)
    participants: List[Participant] = []


class CashOutValidation(BaseModel):
    is_valid: bool
    errors: List[str] = []
    warnings: List[str] = []
    suggested_amount: Optional[float] = None


class CashOutRecord(BaseModel):
    """Participant with the cash-out applied, ready to persist."""
    participant: Participant
    net_profit_loss: float
    warnings: List[str] = []
