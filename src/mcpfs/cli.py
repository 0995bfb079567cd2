"""mcpfs CLI entrypoint."""

from __future__ import annotations

import click

from mcpfs import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mcpfs")
def main() -> None:
    """mcpfs — serve a directory read-only over MCP stdio."""


# Register subcommands
from mcpfs.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
