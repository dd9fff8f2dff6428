"""Environment-driven application configuration."""

import os
from dataclasses import dataclass, field
from typing import Tuple

from fintechora.core.maturity import RD_RATE_PERCENT, SAVINGS_RATE_PERCENT

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
)


def _split_origins(raw: str) -> Tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@dataclass(frozen=True)
class AppConfig:
    """
    Settings for one Flask app instance.
    """
    database_path: str = "fintechora.db"
    secret_key: str = "dev-secret-change-me"
    cors_origins: Tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    savings_rate: float = SAVINGS_RATE_PERCENT
    rd_rate: float = RD_RATE_PERCENT
    log_level: str = "INFO"
    testing: bool = False

    @staticmethod
    def load() -> "AppConfig":
        origins = os.getenv("FINTECHORA_CORS_ORIGINS")
        return AppConfig(
            database_path=os.getenv("FINTECHORA_DATABASE", "fintechora.db"),
            secret_key=os.getenv("FINTECHORA_SECRET_KEY", "dev-secret-change-me"),
            cors_origins=_split_origins(origins) if origins else DEFAULT_CORS_ORIGINS,
            savings_rate=float(os.getenv("FINTECHORA_SAVINGS_RATE", SAVINGS_RATE_PERCENT)),
            rd_rate=float(os.getenv("FINTECHORA_RD_RATE", RD_RATE_PERCENT)),
            log_level=os.getenv("FINTECHORA_LOG_LEVEL", "INFO"),
        )
