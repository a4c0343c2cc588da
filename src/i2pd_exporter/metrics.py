"""
What we can read off one i2pd status page.

Every field is optional: the console layout varies between versions and
configurations, and a field that isn't on the page is simply not exported.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class TrafficReading:
    direction: str            # "received", "sent" or "transit"
    total_bytes: float
    rate_bytes_per_second: float


@dataclass
class StatusSnapshot:
    """A single parse of the console's main page."""

    uptime_seconds: Optional[float] = None

    # Network reachability (True when the console says "OK")
    network_ok_v4: Optional[bool] = None
    network_ok_v6: Optional[bool] = None

    tunnel_success_rate_percent: Optional[float] = None
    traffic: List[TrafficReading] = field(default_factory=list)

    # NetDb
    routers: Optional[float] = None
    floodfills: Optional[float] = None
    leasesets: Optional[float] = None

    # Tunnels
    client_tunnels: Optional[float] = None
    transit_tunnels: Optional[float] = None

    version: Optional[str] = None
    router_caps: Optional[str] = None

    # (sanitized service name, enabled) per table row, duplicates kept
    services: List[Tuple[str, bool]] = field(default_factory=list)
