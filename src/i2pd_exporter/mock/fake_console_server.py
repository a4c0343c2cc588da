"""
Fake i2pd web console for testing without a router.

    python -m i2pd_exporter.mock.fake_console_server
    i2pd-exporter --url http://localhost:7070
"""

from __future__ import annotations

import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

from i2pd_exporter.mock.generator import MockConsole

_console = MockConsole(seed=42)
_console_lock = threading.Lock()


class _ConsoleHandler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/":
            with _console_lock:
                body = _console.render_page().encode()
            self.send_response(200)
            self.send_header("Content-Type", "text/html; charset=utf-8")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)
        else:
            self.send_response(404)
            self.end_headers()

    def log_message(self, format, *args):
        pass  # Suppress request logging noise


def run_fake_server(host: str = "127.0.0.1", port: int = 7070):
    server = HTTPServer((host, port), _ConsoleHandler)
    print(f"Fake i2pd console running at http://{host}:{port}/")
    print("Press Ctrl+C to stop.\n")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    server.server_close()
    print("\nServer stopped.")


if __name__ == "__main__":
    run_fake_server()
