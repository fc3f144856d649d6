"""
Ledger model - money entering play for one participant.

Design principles:
- One entry per buy-in or rebuy action recorded by the host
- Immutable once created (edits/deletes are host overrides outside the engine)
- The first entry by creation order is the initial buy-in, later ones are rebuys
- Amounts are positive and carry two decimals
"""

from typing import Optional
from datetime import datetime, timezone
from pydantic import BaseModel, Field, ConfigDict, field_validator

from seventwo.models.base import new_id, utcnow


class LedgerEntry(BaseModel):
    """
    A single buy-in or rebuy.

    Invariants:
    - amount > 0
    - is_rebuy as supplied by the caller is informational only; the ledger
      service recomputes it from entry order
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(default_factory=new_id)
    participant_id: str
    amount: float = Field(..., gt=0)
    is_rebuy: bool = False
    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("created_at")
    @classmethod
    def ensure_aware(cls, value: datetime) -> datetime:
        # Naive timestamps are treated as UTC so entries stay comparable
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
