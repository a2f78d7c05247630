"""Runtime configuration read from the environment."""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

STORAGE_BACKENDS = ("file", "redis")


@dataclass(frozen=True)
class Settings:
    """Service settings."""

    storage_backend: str = "file"
    data_path: Path = Path("cf-notes.json")
    redis_url: str = "redis://localhost:6379/0"
    codeforces_api_url: str = "https://codeforces.com/api"
    codeforces_timeout: float = 10.0
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (and a .env file, if any)."""
        load_dotenv()

        storage_backend = os.getenv("CF_NOTES_STORAGE", cls.storage_backend).lower()
        if storage_backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"CF_NOTES_STORAGE must be one of {', '.join(STORAGE_BACKENDS)}, "
                f"got {storage_backend!r}"
            )

        return cls(
            storage_backend=storage_backend,
            data_path=Path(os.getenv("CF_NOTES_DATA_PATH", str(cls.data_path))),
            redis_url=os.getenv("REDIS_URL", cls.redis_url),
            codeforces_api_url=os.getenv("CODEFORCES_API_URL", cls.codeforces_api_url).rstrip("/"),
            codeforces_timeout=float(os.getenv("CODEFORCES_TIMEOUT", cls.codeforces_timeout)),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            host=os.getenv("API_HOST", cls.host),
            port=int(os.getenv("API_PORT", cls.port)),
        )


@lru_cache
def get_settings() -> Settings:
    """Settings for the running process."""
    return Settings.from_env()
