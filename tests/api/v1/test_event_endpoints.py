import pytest
from fastapi import status


@pytest.mark.asyncio
async def test_event_summary(client, poker_night, snapshot):
    response = await client.post(
        "/api/v1/events/evt-1/summary",
        json={"participants": snapshot(poker_night)}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["event_id"] == "evt-1"
    assert data["total_buy_ins"] == 1400
    assert data["balance_check"] == 0
    assert data["can_settle"] is True
    assert len(data["participants"]) == 8


@pytest.mark.asyncio
async def test_validate_cash_out_suggests_last_amount(client, make_participant, snapshot):
    participants = [
        make_participant("Alice", [100], 160),
        make_participant("Bob", [100]),
    ]

    response = await client.post(
        "/api/v1/events/evt-1/cash-out/validate",
        json={"participant_id": "p-bob", "amount": 60, "participants": snapshot(participants)}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["is_valid"] is True
    assert data["suggested_amount"] == 40
    assert len(data["warnings"]) == 1


@pytest.mark.asyncio
async def test_record_cash_out(client, make_participant, snapshot):
    participants = [
        make_participant("Alice", [100, 100]),
        make_participant("Bob", [100]),
    ]

    response = await client.post(
        "/api/v1/events/evt-1/cash-out",
        json={"participant_id": "p-alice", "amount": 250, "participants": snapshot(participants)}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["participant"]["cash_out_amount"] == 250
    assert data["participant"]["cashed_out_at"] is not None
    assert data["net_profit_loss"] == 50


@pytest.mark.asyncio
async def test_record_cash_out_twice(client, make_participant, snapshot):
    participants = [
        make_participant("Alice", [100], 90),
        make_participant("Bob", [100]),
    ]

    response = await client.post(
        "/api/v1/events/evt-1/cash-out",
        json={"participant_id": "p-alice", "amount": 120, "participants": snapshot(participants)}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    detail = response.json()["detail"]
    assert "Participant has already cashed out" in detail["details"]["errors"]


@pytest.mark.asyncio
async def test_cash_out_unknown_participant(client, make_participant, snapshot):
    participants = [make_participant("Alice", [100])]

    response = await client.post(
        "/api/v1/events/evt-1/cash-out",
        json={"participant_id": "p-nobody", "amount": 10, "participants": snapshot(participants)}
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_cash_out_negative_amount_is_rejected_at_the_boundary(client, make_participant, snapshot):
    participants = [make_participant("Alice", [100])]

    response = await client.post(
        "/api/v1/events/evt-1/cash-out/validate",
        json={"participant_id": "p-alice", "amount": -1, "participants": snapshot(participants)}
    )

    assert response.status_code == 422
