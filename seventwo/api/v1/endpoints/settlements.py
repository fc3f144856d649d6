from fastapi import APIRouter, HTTPException, status
from seventwo.schemas.event import EventSnapshot
from seventwo.schemas.settlement import SettlementPreview, SettlementFinalization
from seventwo.services.settlement_service import SettlementService
from seventwo.utils.ledger_validation import SettlementError

router = APIRouter()

@router.post("/{event_id}/settle/preview", response_model=SettlementPreview)
async def preview_settlement(event_id: str, body: EventSnapshot):
    """Show the debts finalizing would create, without refusing on unbalanced books"""
    return SettlementService.preview(body.participants)

@router.post("/{event_id}/settle", response_model=SettlementFinalization)
async def settle_event(event_id: str, body: EventSnapshot):
    """Finalize the event and return the transactions to persist"""
    try:
        return SettlementService.finalize(event_id, body.participants)
    except SettlementError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.to_detail()
        )
