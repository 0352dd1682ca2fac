from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


DEFAULT_LOOKUP_URL = "https://gisapps.chicago.gov/WardGeocode/"
DEFAULT_OPEN_DATA_URL = "https://data.cityofchicago.org/resource/htai-wnw4.json"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(slots=True)
class Settings:
    """Application configuration loaded from environment variables."""

    lookup_url: str = DEFAULT_LOOKUP_URL
    navigation_timeout_s: int = 30
    input_timeout_s: int = 10
    results_timeout_s: int = 15
    headless: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    open_data_url: str = DEFAULT_OPEN_DATA_URL
    open_data_timeout_s: int = 10
    log_level: str = "INFO"
    log_dir: Path = Path("logs")
    host: str = "0.0.0.0"
    port: int = 3000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            lookup_url=os.getenv("LOOKUP_URL", DEFAULT_LOOKUP_URL),
            navigation_timeout_s=int(os.getenv("NAVIGATION_TIMEOUT_S", "30")),
            input_timeout_s=int(os.getenv("INPUT_TIMEOUT_S", "10")),
            results_timeout_s=int(os.getenv("RESULTS_TIMEOUT_S", "15")),
            headless=_bool_env("HEADLESS", True),
            user_agent=os.getenv("USER_AGENT", DEFAULT_USER_AGENT),
            open_data_url=os.getenv("OPEN_DATA_URL", DEFAULT_OPEN_DATA_URL),
            open_data_timeout_s=int(os.getenv("OPEN_DATA_TIMEOUT_S", "10")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=Path(os.getenv("LOG_DIR", "logs")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
        )

    @property
    def navigation_timeout_ms(self) -> int:
        return self.navigation_timeout_s * 1000

    @property
    def input_timeout_ms(self) -> int:
        return self.input_timeout_s * 1000

    @property
    def results_timeout_ms(self) -> int:
        return self.results_timeout_s * 1000

    def ensure_directories(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)
