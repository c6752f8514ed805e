"""Pydantic models for identity metadata and reported telemetry."""

from clientbench.models.identity_models import BenchmarkIdentity, ClientIdentity
from clientbench.models.report_models import (
    BenchmarkInfo,
    BulkItemResult,
    BulkResponse,
    Event,
    Labels,
    OSInfo,
    RunnerInfo,
    RuntimeInfo,
    ServiceInfo,
    TelemetryDocument,
)

__all__ = [
    "BenchmarkIdentity",
    "BenchmarkInfo",
    "BulkItemResult",
    "BulkResponse",
    "ClientIdentity",
    "Event",
    "Labels",
    "OSInfo",
    "RunnerInfo",
    "RuntimeInfo",
    "ServiceInfo",
    "TelemetryDocument",
]
