"""``mcpfs probe`` — exercise a running server end to end."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click
from rich.markup import escape

from mcpfs.cli_commands._output import (
    console,
    print_content,
    print_resources_table,
    print_server_info,
    print_tools_table,
)


@click.command()
@click.argument("root", required=False, default=".", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--command",
    "server_command",
    default=None,
    help="Server command line to launch instead of this mcpfs.",
)
@click.option("--read", "read_name", default=None, help="Resource name to read after listing.")
@click.option("--show-server-logs", is_flag=True, help="Pass the server's stderr through.")
def probe(
    root: str,
    server_command: str | None,
    read_name: str | None,
    show_server_logs: bool,
) -> None:
    """Launch a server over ROOT and run initialize, list, and read against it."""
    from mcpfs.client.client import FileServerClient
    from mcpfs.client.transport import StdioTransport

    command: str | list[str] = server_command or [
        sys.executable,
        "-m",
        "mcpfs",
        "serve",
        str(Path(root).resolve()),
    ]
    transport = StdioTransport(command, show_stderr=show_server_logs)

    async def _probe() -> None:
        async with FileServerClient(transport) as client:
            assert client.server is not None
            print_server_info(client.server)

            resources = await client.list_resources()
            if resources:
                print_resources_table(resources)
            else:
                console.print("[yellow]No resources found.[/yellow]")

            print_tools_table(await client.list_tools())

            target = next((r for r in resources if r.name == read_name), None)
            if read_name is not None and target is None:
                console.print(f"[yellow]No resource named {read_name}[/yellow]")
            elif target is None and resources:
                target = resources[0]
            if target is not None:
                for content in await client.read_resource(target.uri):
                    print_content(content)

    try:
        asyncio.run(_probe())
    except Exception as exc:
        console.print(f"[red]Probe error:[/red] {escape(str(exc))}", soft_wrap=True)
        sys.exit(1)
