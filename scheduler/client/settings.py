from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

# Importing config loads the project .env
from ..config import DEFAULT_SESSION_HEADER


@dataclass(frozen=True)
class ClientSettings:
    api_url: str = "http://localhost:8001"
    session_id: Optional[str] = None
    timeout: float = 10.0
    session_header: str = DEFAULT_SESSION_HEADER

    @classmethod
    def from_env(cls) -> "ClientSettings":
        return cls(
            api_url=os.getenv("SCHEDULER_API_URL", "http://localhost:8001").rstrip("/"),
            session_id=os.getenv("SCHEDULER_SESSION_ID") or None,
            timeout=float(os.getenv("SCHEDULER_TIMEOUT", "10")),
            session_header=os.getenv("SESSION_HEADER", DEFAULT_SESSION_HEADER).strip().lower(),
        )
