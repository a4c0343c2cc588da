"""
HTTP endpoint Prometheus scrapes. Every request to /metrics triggers one
fresh fetch of the console page; nothing is cached between requests.
"""

from __future__ import annotations

import logging
import socket
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Tuple

from i2pd_exporter.collector.base import StatusPageSource
from i2pd_exporter.exporter import scrape
from i2pd_exporter.exposition import CONTENT_TYPE

log = logging.getLogger(__name__)

LANDING_PAGE = (
    '<html><body><h1>i2pd Exporter</h1>'
    '<p><a href="/metrics">Metrics</a></p></body></html>'
)


def parse_listen_address(address: str) -> Tuple[str, int]:
    """Split ":9101" or "0.0.0.0:9101" into (host, port)."""
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid listen address {address!r}, expected [host]:port")
    port_num = int(port)
    if port_num > 65535:
        raise ValueError(f"port out of range in {address!r}")
    return host.strip("[]"), port_num


class _ExporterHandler(BaseHTTPRequestHandler):
    server: "ExporterServer"

    def do_GET(self):
        self._route(include_body=True)

    def do_HEAD(self):
        self._route(include_body=False)

    def _route(self, include_body: bool):
        path = self.path.split("?", 1)[0]
        if path == "/metrics":
            result = scrape(self.server.source)
            self._send(200, CONTENT_TYPE, result.body, include_body)
        else:
            self._send(200, "text/html", LANDING_PAGE, include_body)

    def _send(self, status: int, content_type: str, text: str, include_body: bool = True):
        body = text.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if include_body:
            self.wfile.write(body)

    def log_message(self, format, *args):
        log.debug("%s - %s", self.address_string(), format % args)


class ExporterServer(ThreadingHTTPServer):
    """One thread per request; the source is the only shared object."""

    daemon_threads = True

    def __init__(self, address: Tuple[str, int], source: StatusPageSource):
        # "::1", "::" and friends need an IPv6 socket
        if ":" in address[0]:
            self.address_family = socket.AF_INET6
        super().__init__(address, _ExporterHandler)
        self.source = source


def run_server(source: StatusPageSource, listen: str = ":9101"):
    host, port = parse_listen_address(listen)
    server = ExporterServer((host, port), source)
    log.info("i2pd exporter listening on %s, scraping %s", listen, source.name())
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
        log.info("Server stopped")
