"""
Small helpers for turning console text into metric-friendly values.
"""

from __future__ import annotations

from typing import Optional

# Binary units as printed by the i2pd web console
_UNIT_BYTES = {
    "KiB": 1 << 10,
    "MiB": 1 << 20,
    "GiB": 1 << 30,
    "TiB": 1 << 40,
}


def unit_bytes(unit: Optional[str]) -> float:
    """Multiplier that converts a value in `unit` to bytes.

    Rate units ("KiB/s") map to the same factor as their totals. Anything
    unrecognised is treated as plain bytes.
    """
    if not unit:
        return 1.0
    unit = unit.strip()
    if unit.endswith("/s"):
        unit = unit[:-2]
    return float(_UNIT_BYTES.get(unit, 1))


def sanitize_label(text: str) -> str:
    """Turn a display name like "HTTP Proxy" into "http_proxy"."""
    text = text.strip().lower().replace(" ", "_")
    return "".join(c for c in text if c.isascii() and (c.isalnum() or c == "_"))
