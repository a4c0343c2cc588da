"""
Mock i2pd web console.

Renders fake but realistic status pages so we can develop and test without
a router. Numbers are loosely based on a mid-sized floodfill router that
has been up for about a day.
"""

import math
import random

SERVICES = [
    ("HTTP Proxy", True),
    ("SOCKS Proxy", True),
    ("BOB", False),
    ("SAM", True),
    ("I2CP", False),
    ("I2PControl", False),
]

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head><title>Purple I2P Webconsole</title></head>
<body>
<div class="content">

<b>Uptime:</b> {uptime}<br>
<b>Network status:</b> {status_v4}<br>
<b>Network status v6:</b> {status_v6}<br>
<b>Tunnel creation success rate:</b> {success_rate}%<br>
<b>Received:</b> {received}<br>
<b>Sent:</b> {sent}<br>
<b>Transit:</b> {transit}<br>
<b>Data path:</b> /home/i2pd/data<br>
<b>Router Ident:</b>mock<br>
<b>Router Caps:</b> {caps}<br>
<b>Version:</b>{version}<br>
<b>Routers:</b> {routers}&nbsp;&nbsp;&nbsp;<b>Floodfills:</b> {floodfills}&nbsp;&nbsp;&nbsp;<b>LeaseSets:</b> {leasesets}<br>
<b>Client Tunnels:</b> {client_tunnels}&nbsp;&nbsp;&nbsp;<b>Transit Tunnels:</b> {transit_tunnels}<br>

<table class="services">
<caption>Services</caption>
<tbody>
{service_rows}
</tbody>
</table>

</div>
</body>
</html>
"""


def format_uptime(seconds: int) -> str:
    """Same shape the console prints: "1 day, 2 hours, 3 minutes, 4 seconds"."""
    days, rest = divmod(seconds, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, secs = divmod(rest, 60)
    return (
        f"{days} {'day' if days == 1 else 'days'}, {hours} hours, "
        f"{minutes} minutes, {secs} seconds"
    )


def format_bytes(value: float) -> str:
    for unit, factor in (("TiB", 1 << 40), ("GiB", 1 << 30), ("MiB", 1 << 20), ("KiB", 1 << 10)):
        if value >= factor:
            return f"{value / factor:.2f} {unit}"
    return f"{value:.0f} B"


def format_traffic(total: float, rate: float) -> str:
    return f"{format_bytes(total)} ({rate / 1024:.2f} KiB/s)"


class MockConsole:

    def __init__(self, seed: int = 42, version: str = "2.59.0", caps: str = "PR"):
        self._rng = random.Random(seed)
        self._tick = 0
        self.version = version
        self.caps = caps
        self.uptime_seconds = 86400 + 3600 + 61
        self.received_bytes = 100.1 * (1 << 30)
        self.sent_bytes = 100.2 * (1 << 30)
        self.transit_bytes = 98.0 * (1 << 30)
        self.step_seconds = 10

    def render_page(self) -> str:
        """Render one page, advancing the simulation clock."""
        self._tick += 1
        t = self._tick
        self.uptime_seconds += self.step_seconds

        # Sinusoidal bandwidth with some jitter, around 3 MiB/s
        base_rate = 3.2 * (1 << 20) * (1 + 0.2 * math.sin(t * 0.1))
        received_rate = max(0.0, base_rate + self._rng.gauss(0, 50_000))
        sent_rate = max(0.0, base_rate * 0.98 + self._rng.gauss(0, 50_000))
        transit_rate = max(0.0, base_rate * 0.9 + self._rng.gauss(0, 50_000))

        self.received_bytes += received_rate * self.step_seconds
        self.sent_bytes += sent_rate * self.step_seconds
        self.transit_bytes += transit_rate * self.step_seconds

        rows = "\n".join(
            f"<tr><td>{name}</td><td class='{'enabled' if on else 'disabled'}'>"
            f"{'Enabled' if on else 'Disabled'}</td></tr>"
            for name, on in SERVICES
        )

        return _PAGE_TEMPLATE.format(
            uptime=format_uptime(self.uptime_seconds),
            status_v4="OK",
            status_v6="Firewalled" if self._rng.random() > 0.9 else "OK",
            success_rate=self._rng.randint(2, 40),
            received=format_traffic(self.received_bytes, received_rate),
            sent=format_traffic(self.sent_bytes, sent_rate),
            transit=format_traffic(self.transit_bytes, transit_rate),
            caps=self.caps,
            version=self.version,
            routers=10000 + self._rng.randint(0, 500),
            floodfills=3500 + self._rng.randint(0, 200),
            leasesets=self._rng.randint(0, 20),
            client_tunnels=8 + self._rng.randint(0, 6),
            transit_tunnels=1000 + self._rng.randint(0, 500),
            service_rows=rows,
        )
