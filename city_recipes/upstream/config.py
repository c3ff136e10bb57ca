from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


def _timeout_from_env() -> float | None:
    raw = os.getenv("UPSTREAM_TIMEOUT", "")
    return float(raw) if raw else None


@dataclass(frozen=True)
class UpstreamConfig:
    api_key: str = os.getenv("API_KEY", "")
    base_url: str = os.getenv("UPSTREAM_BASE_URL", "https://api-ugi2pflmha-ew.a.run.app")
    # None disables the timeout, upstream calls may wait indefinitely
    timeout: float | None = _timeout_from_env()


DEFAULT_UPSTREAM_CONFIG = UpstreamConfig()
