"""
i2pd-exporter entry point.

Usage:
    i2pd-exporter                                   Serve /metrics on :9101
    i2pd-exporter --url http://10.0.0.2:7070        Scrape a remote console
    i2pd-exporter --mock                            Serve metrics from a fake console
    i2pd-exporter check                             One scrape, printed as a table
"""

from __future__ import annotations

import logging

import click

from i2pd_exporter import __version__
from i2pd_exporter.collector.base import StatusPageSource
from i2pd_exporter.collector.console_collector import DEFAULT_CONSOLE_URL, WebConsoleSource
from i2pd_exporter.collector.mock_collector import MockSource
from i2pd_exporter.server import parse_listen_address, run_server


log = logging.getLogger("i2pd_exporter")


def _validate_listen(ctx, param, value: str) -> str:
    try:
        parse_listen_address(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    return value


def _make_source(ctx) -> StatusPageSource:
    if ctx.obj["mock"]:
        return MockSource()
    return WebConsoleSource(url=ctx.obj["url"], timeout_seconds=ctx.obj["timeout"])


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="i2pd-exporter")
@click.option("--listen", default=":9101", envvar="I2PD_EXPORTER_LISTEN", show_default=True,
              callback=_validate_listen, help="Address to listen on for metrics")
@click.option("--url", default=DEFAULT_CONSOLE_URL, envvar="I2PD_EXPORTER_URL", show_default=True,
              help="i2pd web console URL")
@click.option("--timeout", default=5.0, envvar="I2PD_EXPORTER_TIMEOUT", show_default=True,
              type=click.FloatRange(min=0, min_open=True),
              help="HTTP client timeout in seconds")
@click.option("--mock", is_flag=True, default=False, envvar="I2PD_EXPORTER_MOCK",
              help="Use a simulated i2pd console")
@click.option("--verbose", is_flag=True, default=False, envvar="I2PD_EXPORTER_VERBOSE",
              help="Enable debug logging")
@click.pass_context
def cli(ctx, listen: str, url: str, timeout: float, mock: bool, verbose: bool):
    """i2pd-exporter - Prometheus metrics for the i2pd web console."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    ctx.ensure_object(dict)
    ctx.obj["listen"] = listen
    ctx.obj["url"] = url
    ctx.obj["timeout"] = timeout
    ctx.obj["mock"] = mock

    # No subcommand: run the exporter
    if ctx.invoked_subcommand is None:
        source = _make_source(ctx)
        log.debug("Serving metrics for %s", source.name())
        try:
            run_server(source, listen=listen)
        finally:
            source.close()


@cli.command()
@click.option("--raw", is_flag=True, default=False, help="Print the exposition text as served")
@click.pass_context
def check(ctx, raw: bool):
    """Scrape the console once and show what would be exported."""
    from rich.console import Console

    from i2pd_exporter.dashboard.terminal import print_report
    from i2pd_exporter.exporter import scrape

    source = _make_source(ctx)
    try:
        result = scrape(source)
        source_name = source.name()
    finally:
        source.close()

    if raw:
        click.echo(result.body, nl=False)
    else:
        print_report(Console(), result, source_name)

    if not result.up:
        ctx.exit(1)


if __name__ == "__main__":
    cli()
