"""Observability setup for OpenTelemetry, metrics, and structured logging."""

import logging

from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest
import structlog

from .config import settings

SERVICE_NAME = "tour-catalog-api"
SERVICE_VERSION = "1.0.0"

# Prometheus metrics
REGISTRY = CollectorRegistry()

# Request metrics
REQUEST_COUNT = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code'],
    registry=REGISTRY
)

REQUEST_DURATION = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    registry=REGISTRY
)

# Business metrics
TOUR_OPERATIONS = Counter(
    'tour_operations_total',
    'Tour service operations by outcome',
    ['operation', 'outcome'],
    registry=REGISTRY
)


def add_trace_context(logger, method_name, event_dict):
    """Add trace context to log events."""
    span = trace.get_current_span()
    if span and span.is_recording():
        ctx = span.get_span_context()
        event_dict['trace_id'] = format(ctx.trace_id, '032x')
        event_dict['span_id'] = format(ctx.span_id, '016x')
    return event_dict


def _shared_processors():
    return [
        structlog.contextvars.merge_contextvars,
        add_trace_context,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def build_log_formatter(json_output: bool) -> structlog.stdlib.ProcessorFormatter:
    """
    Formatter that renders stdlib log records through the structlog chain.

    Values bound with ``structlog.contextvars`` (such as the request id) and
    the ``extra`` fields of the record both appear in the rendered line.
    """
    if json_output:
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderers = [structlog.dev.ConsoleRenderer()]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[*_shared_processors(), structlog.stdlib.ExtraAdder()],
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
    )


def setup_structured_logging():
    """Configure structured logging with structlog for structlog and stdlib loggers."""
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(build_log_formatter(json_output=not settings.debug))

    root = logging.getLogger()
    # Replace a handler left by an earlier call
    for existing in list(root.handlers):
        if isinstance(existing.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, settings.log_level))


def _resource(app_name: str) -> Resource:
    return Resource.create({
        "service.name": app_name,
        "service.version": SERVICE_VERSION,
        "environment": settings.environment,
    })


def setup_tracing(app_name: str = SERVICE_NAME):
    """Setup OpenTelemetry tracing."""
    provider = TracerProvider(resource=_resource(app_name))

    # Export only when a collector is configured
    if settings.otlp_endpoint:
        otlp_exporter = OTLPSpanExporter(endpoint=settings.otlp_endpoint)
        provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    trace.set_tracer_provider(provider)
    return trace.get_tracer(__name__)


def setup_metrics(app_name: str = SERVICE_NAME):
    """Setup OpenTelemetry metrics."""
    if settings.otlp_endpoint:
        otlp_exporter = OTLPMetricExporter(endpoint=settings.otlp_endpoint)
        reader = PeriodicExportingMetricReader(exporter=otlp_exporter, export_interval_millis=60000)
        metrics.set_meter_provider(MeterProvider(resource=_resource(app_name), metric_readers=[reader]))

    return metrics.get_meter(__name__)


def instrument_fastapi(app):
    """Instrument FastAPI with OpenTelemetry."""
    FastAPIInstrumentor.instrument_app(app)


def instrument_sqlalchemy(engine=None):
    """Instrument SQLAlchemy with OpenTelemetry."""
    if engine is not None:
        # Async engines are instrumented through their sync core
        SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
    else:
        SQLAlchemyInstrumentor().instrument()


class MetricsCollector:
    """Collector for business and request metrics."""

    @staticmethod
    def record_request(method: str, endpoint: str, status_code: int, duration: float):
        """Record an HTTP request."""
        REQUEST_COUNT.labels(method=method, endpoint=endpoint, status_code=str(status_code)).inc()
        REQUEST_DURATION.labels(method=method, endpoint=endpoint).observe(duration)

    @staticmethod
    def record_tour_operation(operation: str, outcome: str):
        """Record a tour service operation outcome (success, conflict, not_found, failed)."""
        TOUR_OPERATIONS.labels(operation=operation, outcome=outcome).inc()


def get_prometheus_metrics():
    """Get Prometheus metrics for the /metrics endpoint."""
    return generate_latest(REGISTRY)


# Global metrics collector instance
metrics_collector = MetricsCollector()
