"""``mcpfs serve`` — run the stdio server over a directory."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.markup import escape

from mcpfs.utils.log import stderr_console


@click.command()
@click.argument("root", required=False, type=click.Path(path_type=Path))
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML settings file; ROOT and flags override its values.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Diagnostic log level (stderr). Default: INFO.",
)
@click.option("--telemetry", is_flag=True, help="Export dispatch spans to stderr.")
def serve(
    root: Path | None,
    config_path: Path | None,
    log_level: str | None,
    telemetry: bool,
) -> None:
    """Serve ROOT (default: current directory) over stdin/stdout."""
    from mcpfs.config import ConfigLoader
    from mcpfs.errors import ConfigError
    from mcpfs.server import FileServer
    from mcpfs.utils.log import configure_logging

    try:
        config = ConfigLoader(config_path).load(
            root=root,
            log_level=log_level,
            telemetry=telemetry or None,
        )
    except ConfigError as exc:
        stderr_console.print(f"[red]Configuration error:[/red] {escape(str(exc))}", soft_wrap=True)
        sys.exit(1)

    configure_logging(config.log_level)

    if config.telemetry:
        from mcpfs.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(service_name=config.server_name)
        except ImportError as exc:
            stderr_console.print(f"[red]Telemetry error:[/red] {escape(str(exc))}", soft_wrap=True)
            sys.exit(1)

    FileServer(config).serve()
