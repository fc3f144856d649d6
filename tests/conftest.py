from datetime import datetime, timedelta, timezone
from typing import List, Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from seventwo.main import app
from seventwo.models.ledger import LedgerEntry
from seventwo.models.participant import Participant

BASE_TIME = datetime(2025, 1, 15, 19, 30, tzinfo=timezone.utc)


@pytest.fixture
def make_participant():
    """Factory for participants whose ledger entries are spaced a minute apart."""
    def _make(
        name: str,
        buy_ins: List[float] = (),
        cash_out: Optional[float] = None,
        display_name: Optional[str] = "",
    ) -> Participant:
        participant_id = f"p-{name.lower()}"
        ledger = [
            LedgerEntry(
                id=f"{participant_id}-{index}",
                participant_id=participant_id,
                amount=amount,
                created_at=BASE_TIME + timedelta(minutes=index),
            )
            for index, amount in enumerate(buy_ins)
        ]
        return Participant(
            id=participant_id,
            user_id=f"u-{name.lower()}",
            display_name=name if display_name == "" else display_name,
            buy_in_ledger=ledger,
            cash_out_amount=cash_out,
        )
    return _make


@pytest.fixture
def poker_night(make_participant) -> List[Participant]:
    """Eight players, everyone cashed out, 1400 in and 1400 out."""
    return [
        make_participant("Alice", [100], 400),
        make_participant("Bob", [100, 50], 250),
        make_participant("Charlie", [200], 200),
        make_participant("Diana", [100, 100], 200),
        make_participant("Eve", [150], 100),
        make_participant("Frank", [200], 120),
        make_participant("Grace", [100, 100, 50], 70),
        make_participant("Henry", [150], 60),
    ]


@pytest.fixture
def snapshot():
    """Serialize participants the way a caller would send them over HTTP."""
    def _dump(participants: List[Participant]) -> List[dict]:
        return [p.model_dump(mode="json") for p in participants]
    return _dump


@pytest_asyncio.fixture
async def client():
    """Async HTTP client bound to the app, no network involved."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
