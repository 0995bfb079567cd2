"""Shared CLI output formatters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from mcpfs.fs.models import Resource, ResourceContent
    from mcpfs.protocol.models import InitializeResult
    from mcpfs.tools.models import Tool

console = Console()


def print_server_info(info: InitializeResult) -> None:
    console.print(
        f"[bold]{info.server_info.name}[/bold] {info.server_info.version} "
        f"(protocol {info.protocol_version})"
    )


def print_resources_table(resources: list[Resource]) -> None:
    """Pretty-print a resource listing as a table."""
    table = Table(title="Resources")
    table.add_column("Name", style="cyan")
    table.add_column("MIME type")
    table.add_column("URI")

    for resource in resources:
        table.add_row(resource.name, resource.mime_type, _truncate(resource.uri))

    console.print(table)


def print_tools_table(tools: list[Tool]) -> None:
    """Pretty-print tool definitions as a table."""
    table = Table(title="Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")

    for tool in tools:
        table.add_row(tool.name, _truncate(tool.description))

    console.print(table)


def print_content(content: ResourceContent) -> None:
    console.print(f"\n[bold]{content.uri}[/bold] ({content.mime_type})")
    if content.text is not None:
        console.print(content.text, markup=False, highlight=False)
    else:
        console.print(f"<binary, {len(content.blob or '')} base64 chars>")


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
