from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from seventwo.core.config import settings
from seventwo.core.log import configure_logging
from seventwo.api.v1.api import api_router

configure_logging()

app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.DESCRIPTION,
    version=settings.PROJECT_VERSION,
    debug=settings.DEBUG
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
async def root():
    return {"message": "Welcome to Seventwo Ledger API"}

@app.get("/health")
async def health():
    return {"status": "healthy"}

app.include_router(api_router, prefix=settings.API_V1_STR)
