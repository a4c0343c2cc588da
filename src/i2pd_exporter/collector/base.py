"""
Base status page source interface.

A source is anything that can hand back the raw HTML of the i2pd
console's main page. This keeps the exporter and server decoupled from
where the page actually comes from (a live router, the mock console, etc).
"""

from abc import ABC, abstractmethod


class ScrapeError(Exception):
    """The console could not be reached or didn't answer with 200."""


class StatusPageSource(ABC):
    """Interface for all status page sources."""

    @abstractmethod
    def fetch(self) -> str:
        """Fetch the page body. Raises ScrapeError on failure."""
        ...

    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this source."""
        ...

    def close(self):
        pass
