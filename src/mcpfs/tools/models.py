"""Tool definitions, typed argument records, and tool results."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr

# ---------------------------------------------------------------------------
# Definitions and results
# ---------------------------------------------------------------------------


class Tool(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")


class TextContent(BaseModel):
    """Plain text content part."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Outcome of ``tools/call``.

    ``is_error`` flags a caller-facing failure that is still delivered as a
    successful response.
    """

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent] = Field(default_factory=list)
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def from_text(cls, text: str, *, is_error: bool = False) -> ToolResult:
        return cls(content=[TextContent(text=text)], is_error=is_error)

    @classmethod
    def error(cls, text: str) -> ToolResult:
        return cls.from_text(text, is_error=True)

    @property
    def text(self) -> str:
        return "\n".join(part.text for part in self.content)


# ---------------------------------------------------------------------------
# Argument records — one per tool
# ---------------------------------------------------------------------------


class ReadFileArgs(BaseModel):
    path: StrictStr = Field(..., description="The path to the file to read")


class ListDirectoryArgs(BaseModel):
    path: StrictStr | None = Field(
        default=None,
        description="The path to the directory to list (optional, defaults to base directory)",
    )


class SearchFilesArgs(BaseModel):
    pattern: StrictStr = Field(
        ...,
        description="The filename pattern to search for (supports wildcards)",
    )
