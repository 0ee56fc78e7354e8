"""Centralised settings for tarsier.

Values can be overridden via environment variables or a `.env` file in the
project root (loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("TARSIER_REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "TARSIER_USER_AGENT",
            "Mozilla/5.0 (compatible; tarsier/0.1; terminal article reader)",
        )
    )
    follow_redirects: bool = field(
        default_factory=lambda: _env_bool("TARSIER_FOLLOW_REDIRECTS", "true")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("TARSIER_LOG_LEVEL", "WARNING")
    )


# Module-level singleton, import this everywhere:
#   from tarsier.config import settings
settings = Settings()
