"""Terminal report using Rich. Shows what one scrape would export."""

from __future__ import annotations

from typing import Dict

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from i2pd_exporter import __version__
from i2pd_exporter.exporter import ScrapeResult
from i2pd_exporter.exposition import MetricFamily, format_value, parse_exposition

_TYPE_STYLE = {
    "counter": "magenta",
    "gauge": "cyan",
}


def _format_labels(labels: Dict[str, str]) -> str:
    return ", ".join(f"{k}={v}" for k, v in labels.items())


def build_table(families: Dict[str, MetricFamily]) -> Table:
    table = Table(show_header=True, header_style="bold cyan", expand=True)
    table.add_column("Metric")
    table.add_column("Type", width=8)
    table.add_column("Labels", style="dim")
    table.add_column("Value", justify="right")

    for family in families.values():
        style = _TYPE_STYLE.get(family.metric_type, "white")
        for sample in family.samples:
            value = sample.value
            # booleans read better coloured
            if sample.name in ("i2pd_up", "i2pd_network_status", "i2pd_service_enabled"):
                shown = f"[{'green' if value == 1 else 'red'}]{format_value(value)}[/]"
            else:
                shown = format_value(value)
            table.add_row(
                sample.name,
                f"[{style}]{family.metric_type}[/{style}]",
                _format_labels(sample.labels),
                shown,
            )
    return table


def print_report(console: Console, result: ScrapeResult, source_name: str):
    families = parse_exposition(result.body)

    header = Text(f"  i2pd-exporter v{__version__}  |  {source_name}", style="bold white on blue")
    if result.up:
        header.append("\n  STATUS: UP", style="bold green")
    else:
        header.append("\n  STATUS: DOWN", style="bold red")
    header.append(f"  ({result.duration_seconds * 1000:.1f}ms)", style="dim")

    console.print(Panel(header, border_style="blue" if result.up else "red"))
    console.print(Panel(build_table(families), title=f"Metrics ({len(families)})", border_style="cyan"))
