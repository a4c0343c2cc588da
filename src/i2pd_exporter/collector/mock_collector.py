"""
Source that reads from the mock console generator.
Used for local development on machines without a running router.
"""

import threading

from i2pd_exporter.collector.base import StatusPageSource
from i2pd_exporter.mock.generator import MockConsole


class MockSource(StatusPageSource):
    """Wraps the mock console as a standard source."""

    def __init__(self, seed: int = 42):
        self._console = MockConsole(seed=seed)
        # the server fetches from several threads at once
        self._lock = threading.Lock()

    def fetch(self) -> str:
        with self._lock:
            return self._console.render_page()

    def name(self) -> str:
        return "Mock i2pd console"
