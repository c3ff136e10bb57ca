from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _host_from_env() -> str:
    # Hosted deployments must listen on every interface
    if os.getenv("RENDER_EXTERNAL_URL"):
        return "0.0.0.0"
    return os.getenv("HOST") or "localhost"


@dataclass(frozen=True)
class ServerConfig:
    host: str = _host_from_env()
    port: int = int(os.getenv("PORT") or 3000)
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


DEFAULT_SERVER_CONFIG = ServerConfig()
