"""Reporting of benchmark samples to the telemetry store."""

from clientbench.report.reporter import (
    BENCHMARK_TAG,
    BULK_BATCH_SIZE,
    INDEX_NAME,
    BulkClient,
    ReportError,
    Reporter,
    index_name_for,
)

__all__ = [
    "BENCHMARK_TAG",
    "BULK_BATCH_SIZE",
    "INDEX_NAME",
    "BulkClient",
    "ReportError",
    "Reporter",
    "index_name_for",
]
