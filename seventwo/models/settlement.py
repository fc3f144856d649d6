from enum import Enum
from pydantic import BaseModel, Field


class TransactionStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class Debt(BaseModel):
    """Loser pays winner ``amount``."""
    from_user_id: str
    from_user_name: str
    to_user_id: str
    to_user_name: str
    amount: float = Field(..., gt=0)


class SettlementTransaction(BaseModel):
    """Persistable record of a finalized debt."""
    event_id: str
    from_user_id: str
    to_user_id: str
    amount: float
    status: TransactionStatus = TransactionStatus.PENDING
