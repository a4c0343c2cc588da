"""
Turns one status page into a Prometheus exposition document.

Every call builds its own PromWriter, so concurrent scrapes never share
state. A page that matches nothing still yields the two baseline metrics.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from i2pd_exporter.collector.base import ScrapeError, StatusPageSource
from i2pd_exporter.collector.status_parser import parse_status_page
from i2pd_exporter.exposition import PromWriter

log = logging.getLogger(__name__)

UP_HELP = "Whether the i2pd console is reachable"
DURATION_HELP = "Time spent scraping i2pd console"


@dataclass
class ScrapeResult:
    body: str
    up: bool
    duration_seconds: float


def _flag(value: bool) -> float:
    return 1.0 if value else 0.0


def down_metrics(scrape_duration: float) -> str:
    """The document served when the console can't be scraped."""
    w = PromWriter()
    w.gauge("i2pd_up", UP_HELP, 0)
    w.gauge("i2pd_scrape_duration_seconds", DURATION_HELP, scrape_duration)
    return w.render()


def collect_metrics(html: str, scrape_duration: float) -> str:
    """Extract every known field from `html` and render the document.

    Header order follows first appearance: up, duration, uptime, network
    status, tunnel rate, traffic, netdb counts, tunnel counts, version,
    caps, services.
    """
    snap = parse_status_page(html)
    w = PromWriter()

    w.gauge("i2pd_up", UP_HELP, 1)
    w.gauge("i2pd_scrape_duration_seconds", DURATION_HELP, scrape_duration)

    if snap.uptime_seconds is not None:
        w.gauge("i2pd_uptime_seconds", "Router uptime in seconds", snap.uptime_seconds)

    if snap.network_ok_v4 is not None:
        w.gauge("i2pd_network_status", "Network status (1=OK, 0=other)",
                _flag(snap.network_ok_v4), ("protocol", "v4"))
    if snap.network_ok_v6 is not None:
        w.gauge("i2pd_network_status", "",
                _flag(snap.network_ok_v6), ("protocol", "v6"))

    if snap.tunnel_success_rate_percent is not None:
        w.gauge("i2pd_tunnel_creation_success_rate_percent", "Tunnel creation success rate",
                snap.tunnel_success_rate_percent)

    # Totals are the daemon's own lifetime counters, passed through as-is
    for reading in snap.traffic:
        w.counter("i2pd_traffic_bytes_total", "Total traffic in bytes",
                  reading.total_bytes, ("direction", reading.direction))
        w.gauge("i2pd_traffic_bytes_per_second", "Traffic rate in bytes per second",
                reading.rate_bytes_per_second, ("direction", reading.direction))

    if snap.routers is not None:
        w.gauge("i2pd_routers", "Number of known routers", snap.routers)
    if snap.floodfills is not None:
        w.gauge("i2pd_floodfills", "Number of known floodfills", snap.floodfills)
    if snap.leasesets is not None:
        w.gauge("i2pd_leasesets", "Number of known lease sets", snap.leasesets)

    if snap.client_tunnels is not None:
        w.gauge("i2pd_client_tunnels", "Number of client tunnels", snap.client_tunnels)
    if snap.transit_tunnels is not None:
        w.gauge("i2pd_transit_tunnels", "Number of transit tunnels", snap.transit_tunnels)

    if snap.version is not None:
        w.gauge("i2pd_version_info", "i2pd version", 1, ("version", snap.version))
    if snap.router_caps is not None:
        w.gauge("i2pd_router_caps_info", "Router capability flags", 1, ("caps", snap.router_caps))

    for service, enabled in snap.services:
        w.gauge("i2pd_service_enabled", "Whether a service is enabled (1=yes, 0=no)",
                _flag(enabled), ("service", service))

    return w.render()


def scrape(source: StatusPageSource) -> ScrapeResult:
    """Fetch once from `source` and render the matching document."""
    start = time.monotonic()
    try:
        html = source.fetch()
    except ScrapeError as e:
        duration = time.monotonic() - start
        log.warning("Scrape of %s failed after %.3fs: %s", source.name(), duration, e)
        return ScrapeResult(body=down_metrics(duration), up=False, duration_seconds=duration)

    duration = time.monotonic() - start
    log.debug("Scraped %s in %.3fs", source.name(), duration)
    return ScrapeResult(body=collect_metrics(html, duration), up=True, duration_seconds=duration)
