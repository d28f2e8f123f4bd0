"""
Lightweight structured debug logging.

Enabled when DEBUG_LOG_PATH env var is set. Intended for tracing team
generations (inputs, strategy, outcome) without polluting normal logs.
"""

from __future__ import annotations

import json
import os
import time
from typing import Any


def debug_log(
    location: str,
    message: str,
    data: dict[str, Any] | None = None,
    *,
    session_id: str = "default",
) -> None:
    """
    Append a JSONL debug entry to DEBUG_LOG_PATH if configured.
    """
    path = os.getenv("DEBUG_LOG_PATH")
    if not path:
        return

    payload = {
        "sessionId": session_id,
        "timestamp": int(time.time() * 1000),
        "location": location,
        "message": message,
        "data": data or {},
    }

    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(payload) + "\n")
    except OSError:
        # Tracing must never break team generation
        return
