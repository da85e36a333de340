"""
Shared UI event builders.
Works for both CLI and Web providers by probing for a session.emit hook.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


def emit_event(ui, payload: Dict[str, Any]) -> None:
    """
    Best-effort emit of structured events for non-blocking UIs.
    Falls back silently for CLI.
    """
    try:
        provider = getattr(ui, "provider", None) or ui
        session = getattr(provider, "session", None)
        if session and hasattr(session, "emit"):
            session.emit(payload)
    except Exception:
        # Emitting should never break the game loop.
        logger.debug("emit_event failed for type=%s", payload.get("type"), exc_info=True)


def build_stats_update(stats: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "type": "stats_update",
        "stats": {s["key"]: s["value"] for s in stats},
        "labels": {s["key"]: s["label"] for s in stats},
    }


def build_choices(options: List[str]) -> Dict[str, Any]:
    return {
        "type": "choices",
        "options": [{"index": i, "text": text} for i, text in enumerate(options)],
    }


def build_status(status: str, reason: Optional[str] = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"type": "status", "status": status}
    if reason:
        payload["reason"] = reason
    return payload


def build_state_snapshot(state) -> Dict[str, Any]:
    return {"type": "state", **state.snapshot()}


def emit_state(ui, state) -> None:
    emit_event(ui, build_state_snapshot(state))
