"""
Confluence Bridge - OpenTelemetry Tracing Module

Patterns Applied:
- One-time configure_tracing() at startup
- Manual spans around pipeline stages (run, search, fetch_details)

Until configure_tracing() runs, get_tracer() hands out the OpenTelemetry
no-op tracer, so the pipeline can always open spans.
"""

import sys
from typing import Any, TextIO

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

from confluence_bridge import __version__

# Module-level flag for one-time configuration
_configured: bool = False

SERVICE_NAME = "confluence-bridge"


def configure_tracing(
    service_name: str = SERVICE_NAME,
    console_export: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure OpenTelemetry tracing for the application.

    This function must be called exactly ONCE at application startup.

    Args:
        service_name: Name of the service for trace attribution
        console_export: Whether to export spans to console (for development)
        stream: Console exporter output, stdout when omitted
    """
    global _configured

    if _configured:
        return

    resource = Resource.create(
        {
            "service.name": service_name,
            "service.version": __version__,
        }
    )

    provider = TracerProvider(resource=resource)

    if console_export:
        console_exporter = ConsoleSpanExporter(out=stream or sys.stdout)
        provider.add_span_processor(SimpleSpanProcessor(console_exporter))

    trace.set_tracer_provider(provider)

    _configured = True


def get_tracer(name: str) -> Any:
    """Get a tracer instance for creating spans.

    Args:
        name: Tracer name (typically module name)

    Returns:
        OpenTelemetry Tracer instance
    """
    return trace.get_tracer(name)


def reset_tracing() -> None:
    """Reset tracing configuration for testing."""
    global _configured
    _configured = False
