"""Server configuration — a pydantic model plus an optional YAML loader.

The configuration is built once at startup and passed explicitly to every
component that needs the sandbox root.  It is never mutated afterwards.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mcpfs.errors import ConfigError

DEFAULT_PROTOCOL_VERSION = "2024-11-05"


class ServerConfig(BaseModel):
    """Immutable settings for one server process."""

    model_config = ConfigDict(frozen=True)

    root: Path = Field(default=Path("."), description="Directory exposed to the caller.")
    server_name: str = Field(default="file-server", description="Reported in serverInfo.")
    server_version: str = Field(default="1.0.0", description="Reported in serverInfo.")
    protocol_version: str = Field(
        default=DEFAULT_PROTOCOL_VERSION,
        description="Protocol version echoed by initialize.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    telemetry: bool = Field(default=False, description="Export dispatch spans to stderr.")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("root")
    @classmethod
    def _canonical_root(cls, value: Path) -> Path:
        resolved = value.expanduser().resolve()
        if not resolved.exists():
            msg = f"Directory does not exist: {value}"
            raise ValueError(msg)
        if not resolved.is_dir():
            msg = f"Not a directory: {value}"
            raise ValueError(msg)
        return resolved


class ConfigLoader:
    """Load a YAML settings file, with CLI overrides applied on top."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path

    def load(self, **overrides: Any) -> ServerConfig:
        """Read YAML (if any), interpolate env vars, merge overrides, validate.

        Overrides whose value is ``None`` are ignored so unset CLI flags do
        not clobber the file.

        Raises:
            ConfigError: On unreadable files, YAML errors, or invalid values.
        """
        data: dict[str, Any] = self._read_file() if self._path is not None else {}
        data.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return ServerConfig.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(_summarize(exc)) from exc

    def _read_file(self) -> dict[str, Any]:
        assert self._path is not None
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read {self._path}: {exc}") from exc

        try:
            data: Any = yaml.safe_load(os.path.expandvars(raw))
        except yaml.YAMLError as exc:
            raise ConfigError(f"YAML parse error: {exc}") from exc

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError("Config YAML must be a mapping")
        return data


def _summarize(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "config"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)
