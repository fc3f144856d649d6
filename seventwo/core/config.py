from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # API Settings
    PROJECT_NAME: str = "Seventwo Ledger API"
    API_V1_STR: str = "/api/v1"
    PROJECT_VERSION: str = "0.1.0"
    DESCRIPTION: str = "Buy-in tracking, cash-out validation and debt settlement for poker nights"

    # Money
    MONEY_TOLERANCE: float = 0.01
    LARGE_WIN_MULTIPLIER: float = 3.0
    MAX_BUY_IN: float = 100000.0
    CURRENCY_SYMBOL: str = "$"

    # Display
    UNKNOWN_PLAYER_NAME: str = "Unknown"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env"
    )

    @property
    def MAX_CASH_OUT(self) -> float:
        return self.MAX_BUY_IN * 10

settings = Settings()
