import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

CWA_API_BASE_URL = "https://opendata.cwa.gov.tw/api"


def _log_level(value: str) -> str:
    level = value.strip().upper()
    # getLevelName maps known names to ints
    return level if isinstance(logging.getLevelName(level), int) else "INFO"


@dataclass(frozen=True)
class Settings:
    cwa_api_key: str
    cwa_api_base_url: str = CWA_API_BASE_URL
    cwa_timeout: float = 20.0
    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "development"
    log_level: str = "INFO"

    @classmethod
    def load(cls):
        return cls(
            cwa_api_key=os.getenv("CWA_API_KEY", ""),
            cwa_api_base_url=os.getenv("CWA_API_BASE_URL", CWA_API_BASE_URL).rstrip("/"),
            cwa_timeout=float(os.getenv("CWA_TIMEOUT", "20")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            environment=os.getenv("ENVIRONMENT", "development"),
            log_level=_log_level(os.getenv("LOG_LEVEL", "INFO")),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.load()
