"""Prometheus exporter for the i2pd web console."""

__version__ = "0.1.0"
