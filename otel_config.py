"""
OpenTelemetry configuration for the Phosphor Elm generator

Spans cover the whole run and each icon; counters record generated and failed
icons. Exporting over OTLP/HTTP is enabled only when OTEL_EXPORTER_OTLP_ENDPOINT
is set, otherwise the providers record without exporting.
"""

import os
import logging
from opentelemetry import trace, metrics
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource, SERVICE_NAME, SERVICE_VERSION
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter

logger = logging.getLogger(__name__)

# Configuration from environment variables
OTEL_SERVICE_NAME = os.getenv("OTEL_SERVICE_NAME", "phosphor-elm-generator")
OTEL_SERVICE_VERSION = os.getenv("OTEL_SERVICE_VERSION", "unknown")
OTEL_EXPORTER_OTLP_ENDPOINT = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "")
OTEL_EXPORTER_OTLP_HEADERS = os.getenv("OTEL_EXPORTER_OTLP_HEADERS", "")
OTEL_RESOURCE_ATTRIBUTES = os.getenv("OTEL_RESOURCE_ATTRIBUTES", "")

# Proxies: bound to the real providers once initialize_telemetry() runs
tracer = trace.get_tracer(__name__)
meter = metrics.get_meter(__name__)

icons_generated_counter = meter.create_counter(
    "phosphor.icons.generated",
    unit="1",
    description="Icons written to the generated module",
)
icons_failed_counter = meter.create_counter(
    "phosphor.icons.failed",
    unit="1",
    description="Icons skipped because of missing weights or unparseable SVG",
)

tracer_provider = None
meter_provider = None


def parse_key_values(raw: str) -> dict:
    """Parse key1=value1,key2=value2"""
    pairs = {}
    for item in raw.split(","):
        if "=" in item:
            key, value = item.split("=", 1)
            pairs[key.strip()] = value.strip()
    return pairs


def build_resource() -> Resource:
    resource_attributes = {
        SERVICE_NAME: OTEL_SERVICE_NAME,
        SERVICE_VERSION: OTEL_SERVICE_VERSION,
    }
    resource_attributes.update(parse_key_values(OTEL_RESOURCE_ATTRIBUTES))
    return Resource.create(resource_attributes)


def initialize_telemetry():
    """Install tracer and meter providers, with OTLP exporters when an endpoint is configured"""
    global tracer_provider, meter_provider

    if tracer_provider is not None:
        return

    resource = build_resource()
    headers = parse_key_values(OTEL_EXPORTER_OTLP_HEADERS)

    tracer_provider = TracerProvider(resource=resource)
    metric_readers = []
    if OTEL_EXPORTER_OTLP_ENDPOINT:
        tracer_provider.add_span_processor(BatchSpanProcessor(
            OTLPSpanExporter(endpoint=f"{OTEL_EXPORTER_OTLP_ENDPOINT}/v1/traces", headers=headers)
        ))
        metric_readers.append(PeriodicExportingMetricReader(
            OTLPMetricExporter(endpoint=f"{OTEL_EXPORTER_OTLP_ENDPOINT}/v1/metrics", headers=headers)
        ))
    meter_provider = MeterProvider(resource=resource, metric_readers=metric_readers)

    trace.set_tracer_provider(tracer_provider)
    metrics.set_meter_provider(meter_provider)

    if OTEL_EXPORTER_OTLP_ENDPOINT:
        logger.info(f"OpenTelemetry initialized for service: {OTEL_SERVICE_NAME} (version: {OTEL_SERVICE_VERSION})")
        logger.info(f"OTLP endpoint: {OTEL_EXPORTER_OTLP_ENDPOINT}")
    else:
        logger.debug("OpenTelemetry initialized without exporters")


def shutdown():
    """Flush and shut down OpenTelemetry exporters"""
    global tracer_provider, meter_provider

    if tracer_provider is not None:
        tracer_provider.shutdown()
    if meter_provider is not None:
        meter_provider.shutdown()
    tracer_provider = None
    meter_provider = None
    logger.info("OpenTelemetry shutdown complete")
