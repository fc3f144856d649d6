from typing import Sequence
from fastapi import APIRouter, HTTPException, status
from seventwo.models.participant import Participant
from seventwo.schemas.event import EventSnapshot, EventLedgerSummary
from seventwo.schemas.cash_out import CashOutRequest, CashOutValidation, CashOutRecord
from seventwo.services.summary_service import EventSummaryService
from seventwo.services.cash_out_service import CashOutService
from seventwo.utils.ledger_validation import CashOutError

router = APIRouter()


def _find_participant(participants: Sequence[Participant], participant_id: str) -> Participant:
    for participant in participants:
        if participant.id == participant_id:
            return participant
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"code": "NOT_FOUND", "message": "Participant not found in this event"}
    )


@router.post("/{event_id}/summary", response_model=EventLedgerSummary)
async def get_event_summary(event_id: str, body: EventSnapshot):
    """Event-wide totals plus a summary per participant"""
    return EventSummaryService.ledger_summary(event_id, body.participants)


@router.post("/{event_id}/cash-out/validate", response_model=CashOutValidation)
async def validate_cash_out(event_id: str, body: CashOutRequest):
    """Dry-run a cash-out; errors and warnings are returned, never raised"""
    participant = _find_participant(body.participants, body.participant_id)
    return CashOutService.validate(body.amount, participant, body.participants)


@router.post("/{event_id}/cash-out", response_model=CashOutRecord)
async def record_cash_out(event_id: str, body: CashOutRequest):
    participant = _find_participant(body.participants, body.participant_id)
    try:
        return CashOutService.record(body.amount, participant, body.participants)
    except CashOutError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.to_detail()
        )
