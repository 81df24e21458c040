"""Tracing utilities built on OpenTelemetry."""

from typing import Optional, Any
import os
from contextlib import contextmanager

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.trace import Status, StatusCode

_configured = False


def configure_tracing(
    service_name: str,
    otel_exporter: Optional[str] = None,
    enable_console: bool = False,
    app: Any = None,
) -> None:
    """Configure OpenTelemetry tracing for a service.

    The global tracer provider can only be installed once per process, so
    repeated calls only instrument the given app.
    """
    global _configured

    if not _configured:
        resource = Resource.create({
            "service.name": service_name,
            "service.version": "1.0.0",
            "service.namespace": "geocoder-cache",
            "service.instance.id": os.getenv("HOSTNAME", "unknown"),
            "deployment.environment": os.getenv("GEOCACHE_ENV", "local")
        })

        provider = TracerProvider(resource=resource)
        if otel_exporter:
            provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otel_exporter)))
        if enable_console:
            provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        trace.set_tracer_provider(provider)

        RedisInstrumentor().instrument()
        HTTPXClientInstrumentor().instrument()
        _configured = True

    if app is not None:
        FastAPIInstrumentor.instrument_app(app)


def get_tracer(name: str):
    """Get a tracer instance."""
    return trace.get_tracer(name)


@contextmanager
def trace_operation(operation_name: str, **attributes):
    """Context manager to trace an operation."""
    tracer = get_tracer(__name__)
    with tracer.start_as_current_span(operation_name) as span:
        for key, value in attributes.items():
            span.set_attribute(key, value)

        try:
            yield span
        except Exception as exc:
            span.set_status(Status(StatusCode.ERROR, str(exc)))
            span.set_attribute("error", True)
            span.set_attribute("error.message", str(exc))
            raise
