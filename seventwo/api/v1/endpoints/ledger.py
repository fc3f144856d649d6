from fastapi import APIRouter, HTTPException, status
from seventwo.schemas.ledger import LedgerAggregateRequest, LedgerAggregate, BuyInRequest, BuyInRecord
from seventwo.services.ledger_service import LedgerService
from seventwo.utils.ledger_validation import BuyInError

router = APIRouter()

@router.post("/aggregate", response_model=LedgerAggregate)
async def aggregate_ledger(body: LedgerAggregateRequest):
    """Buy-in totals for one participant's ordered ledger"""
    return LedgerService.aggregate(body.entries)

@router.post("/buy-in", response_model=BuyInRecord)
async def record_buy_in(body: BuyInRequest):
    """Build the ledger entry for a buy-in or rebuy"""
    try:
        return LedgerService.record_buy_in(body.participant, body.amount, body.notes)
    except BuyInError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.to_detail()
        )
