from fastapi import APIRouter
from seventwo.api.v1.endpoints import ledger, events, settlements

api_router = APIRouter()

api_router.include_router(ledger.router, prefix="/ledger", tags=["ledger"])
api_router.include_router(events.router, prefix="/events", tags=["events"])
api_router.include_router(settlements.router, prefix="/events", tags=["settlements"])
