"""
Field extractors for the i2pd web console's main page.

The page isn't guaranteed to be well-formed HTML, so each field is pulled
out with its own regex over the raw text. A field whose pattern doesn't
match comes back as None (or an empty list) rather than raising.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from i2pd_exporter.metrics import StatusSnapshot, TrafficReading
from i2pd_exporter.units import sanitize_label, unit_bytes

_UPTIME_RE = re.compile(r"<b>Uptime:</b>\s*(.+?)<br", re.IGNORECASE | re.ASCII)
# e.g. "1 day", "12 hours" -- matched by prefix so singular and plural both work
_UPTIME_PART_RE = re.compile(r"(\d+)\s+(day|hour|minute|second)", re.IGNORECASE | re.ASCII)
_NET_STATUS_RE = re.compile(r"<b>Network status:</b>\s*(\w+)", re.IGNORECASE | re.ASCII)
_NET_STATUS_V6_RE = re.compile(r"<b>Network status v6:</b>\s*(\w+)", re.IGNORECASE | re.ASCII)
_TUNNEL_RATE_RE = re.compile(
    r"<b>Tunnel creation success rate:</b>\s*([\d.]+)\s*%", re.IGNORECASE | re.ASCII
)
# "<b>Received:</b> 100.1 GiB (3301.31 KiB/s)"
_TRAFFIC_RE = re.compile(
    r"<b>(Received|Sent|Transit):</b>\s*([\d.]+)\s*(\w+)\s*\(([\d.]+)\s*(\w+/s)\)",
    re.IGNORECASE | re.ASCII,
)
_ROUTERS_RE = re.compile(r"<b>Routers:</b>\s*(\d+)", re.IGNORECASE | re.ASCII)
_FLOODFILLS_RE = re.compile(r"<b>Floodfills:</b>\s*(\d+)", re.IGNORECASE | re.ASCII)
_LEASESETS_RE = re.compile(r"<b>LeaseSets:</b>\s*(\d+)", re.IGNORECASE | re.ASCII)
_CLIENT_TUNNELS_RE = re.compile(r"<b>Client Tunnels:</b>\s*(\d+)", re.IGNORECASE | re.ASCII)
_TRANSIT_TUNNELS_RE = re.compile(r"<b>Transit Tunnels:</b>\s*(\d+)", re.IGNORECASE | re.ASCII)
_VERSION_RE = re.compile(r"<b>Version:</b>\s*([\d.]+)", re.IGNORECASE | re.ASCII)
_CAPS_RE = re.compile(r"<b>Router Caps:</b>\s*(\w+)", re.IGNORECASE | re.ASCII)
_SERVICE_RE = re.compile(r"<tr><td>([^<]+)</td><td\s+class='(enabled|disabled)'", re.ASCII)

_SECONDS_PER_UNIT = {
    "day": 86400,
    "hour": 3600,
    "minute": 60,
    "second": 1,
}


def _to_float(text: str) -> float:
    # The patterns only capture digit/dot runs, but "1.2.3" is still possible
    try:
        return float(text)
    except ValueError:
        return 0.0


def _search_number(pattern: re.Pattern, html: str) -> Optional[float]:
    match = pattern.search(html)
    if match is None:
        return None
    return _to_float(match.group(1))


def extract_uptime(html: str) -> Optional[float]:
    """Uptime in seconds, e.g. "1 day, 2 hours, 3 minutes, 4 seconds" -> 93784."""
    match = _UPTIME_RE.search(html)
    if match is None:
        return None

    seconds = 0.0
    for amount, unit in _UPTIME_PART_RE.findall(match.group(1)):
        seconds += _to_float(amount) * _SECONDS_PER_UNIT[unit.lower()]
    return seconds


def extract_network_status(html: str, ipv6: bool = False) -> Optional[bool]:
    pattern = _NET_STATUS_V6_RE if ipv6 else _NET_STATUS_RE
    match = pattern.search(html)
    if match is None:
        return None
    return match.group(1) == "OK"


def extract_tunnel_success_rate(html: str) -> Optional[float]:
    return _search_number(_TUNNEL_RATE_RE, html)


def extract_traffic(html: str) -> List[TrafficReading]:
    readings = []
    for direction, total, total_unit, rate, rate_unit in _TRAFFIC_RE.findall(html):
        readings.append(TrafficReading(
            direction=direction.lower(),
            total_bytes=_to_float(total) * unit_bytes(total_unit),
            rate_bytes_per_second=_to_float(rate) * unit_bytes(rate_unit),
        ))
    return readings


def extract_routers(html: str) -> Optional[float]:
    return _search_number(_ROUTERS_RE, html)


def extract_floodfills(html: str) -> Optional[float]:
    return _search_number(_FLOODFILLS_RE, html)


def extract_leasesets(html: str) -> Optional[float]:
    return _search_number(_LEASESETS_RE, html)


def extract_client_tunnels(html: str) -> Optional[float]:
    return _search_number(_CLIENT_TUNNELS_RE, html)


def extract_transit_tunnels(html: str) -> Optional[float]:
    return _search_number(_TRANSIT_TUNNELS_RE, html)


def extract_version(html: str) -> Optional[str]:
    match = _VERSION_RE.search(html)
    return match.group(1) if match else None


def extract_router_caps(html: str) -> Optional[str]:
    match = _CAPS_RE.search(html)
    return match.group(1) if match else None


def extract_services(html: str) -> List[Tuple[str, bool]]:
    """One (name, enabled) pair per row of the services table."""
    return [
        (sanitize_label(name), state == "enabled")
        for name, state in _SERVICE_RE.findall(html)
    ]


def parse_status_page(html: str) -> StatusSnapshot:
    """Run every extractor over one page."""
    return StatusSnapshot(
        uptime_seconds=extract_uptime(html),
        network_ok_v4=extract_network_status(html),
        network_ok_v6=extract_network_status(html, ipv6=True),
        tunnel_success_rate_percent=extract_tunnel_success_rate(html),
        traffic=extract_traffic(html),
        routers=extract_routers(html),
        floodfills=extract_floodfills(html),
        leasesets=extract_leasesets(html),
        client_tunnels=extract_client_tunnels(html),
        transit_tunnels=extract_transit_tunnels(html),
        version=extract_version(html),
        router_caps=extract_router_caps(html),
        services=extract_services(html),
    )
