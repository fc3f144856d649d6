from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict

from seventwo.core.config import settings
from seventwo.models.base import new_id
from seventwo.models.ledger import LedgerEntry


class Participant(BaseModel):
    """One user's seat in one event, with its buy-in ledger.

    ``cash_out_amount`` is ``None`` while the player is still at the table.
    Once set it is never changed by the engine.
    """
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str = Field(default_factory=new_id)
    user_id: str
    display_name: Optional[str] = None
    buy_in_ledger: List[LedgerEntry] = []
    cash_out_amount: Optional[float] = None
    cashed_out_at: Optional[datetime] = None

    @property
    def name(self) -> str:
        return self.display_name or settings.UNKNOWN_PLAYER_NAME

    @property
    def is_cashed_out(self) -> bool:
        return self.cash_out_amount is not None

    def ordered_ledger(self) -> List[LedgerEntry]:
        """Ledger entries in creation order (stable for equal timestamps)."""
        return sorted(self.buy_in_ledger, key=lambda entry: entry.created_at)
