"""Deterministic sanitizers applied to submitted review fields."""

from __future__ import annotations


def sanitize_text(value: object | None, max_len: int = 20000) -> str:
    """Sanitize free-form content before persistence/display."""
    if value is None:
        return ""
    cleaned = str(value).replace("\x00", "").strip()
    cleaned = cleaned[:max_len]
    return cleaned
