"""OpenTelemetry tracing helpers for mcpfs.

Provides a thin wrapper around the OpenTelemetry API so the rest of the
codebase can call ``get_tracer()`` without caring whether the SDK is
installed.  Without a configured SDK the API hands back no-op tracers.

Usage::

    from mcpfs.utils.telemetry import get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("mcpfs.dispatch") as span:
        span.set_attribute(ATTR_METHOD, "tools/list")

To export spans, call :func:`configure_telemetry` once at startup (requires
the ``otel`` extra: ``pip install mcpfs[otel]``).  Spans go to stderr because
stdout carries the protocol stream.
"""

from __future__ import annotations

import sys
from typing import Any

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Semantic attribute keys
# ---------------------------------------------------------------------------

ATTR_METHOD = "mcpfs.rpc.method"
ATTR_OUTCOME = "mcpfs.rpc.outcome"

_INSTRUMENTATION_NAME = "mcpfs"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(*, service_name: str = "mcpfs") -> None:
    """Export spans as JSON to stderr (requires ``mcpfs[otel]``).

    Raises
    ------
    ImportError
        If the ``opentelemetry-sdk`` package is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for configure_telemetry(). "
            "Install it with: pip install mcpfs[otel]"
        )
        raise ImportError(msg) from exc

    provider: Any = TracerProvider(resource=Resource.create({"service.name": service_name}))
    provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr)))
    trace.set_tracer_provider(provider)
