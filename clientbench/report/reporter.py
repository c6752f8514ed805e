"""Bulk reporting of benchmark samples to the telemetry store.

Samples are converted into one telemetry document each and submitted in
consecutive batches of at most ``BULK_BATCH_SIZE`` documents. Submission is
fail-fast: the first batch rejected by the store (or failing in transport)
stops the remaining batches.

Usage:
    from clientbench.report import Reporter
    from clientbench.transport import SearchClient

    reporter = Reporter(SearchClient("https://report.example.com:9200"))
    reporter.report(samples, action="ping", repetitions=1000, identity=identity)
"""

import logging
from collections.abc import Iterator, Sequence
from datetime import UTC, datetime
from typing import Any, Protocol

from pydantic import ValidationError

from clientbench.models.identity_models import BenchmarkIdentity, ClientIdentity
from clientbench.models.report_models import (
    BenchmarkInfo,
    BulkResponse,
    Event,
    Labels,
    OSInfo,
    RunnerInfo,
    RuntimeInfo,
    ServiceInfo,
    TelemetryDocument,
)
from clientbench.runner.sample import Sample

BULK_BATCH_SIZE = 1000

BENCHMARK_TAG = "bench"


def index_name_for(moment: datetime) -> str:
    """Return the time-partitioned index name for the month of ``moment``."""
    return f"metrics-intake-{moment.astimezone(UTC):%Y-%m}"


# Fixed at import time; a run crossing a month boundary stays in the start month.
INDEX_NAME = index_name_for(datetime.now(UTC))


class ReportError(Exception):
    """Raised when the reporting store rejects some or all of a batch."""

    def __init__(
        self,
        message: str = "Error saving benchmark results to report cluster",
        batch: int | None = None,
        failed: int = 0,
    ) -> None:
        self.batch = batch
        self.failed = failed
        super().__init__(message)


class BulkClient(Protocol):
    """Anything able to submit a bulk request and return the decoded response."""

    def bulk(
        self, index: str, operations: Sequence[tuple[dict[str, Any], dict[str, Any]]]
    ) -> Any:
        ...


class Reporter:
    """Converts samples into telemetry documents and bulk-indexes them.

    Example:
        >>> reporter = Reporter(report_client, batch_size=500)
        >>> reporter.report(samples, action="get", repetitions=1000, identity=ident)
    """

    def __init__(
        self,
        client: BulkClient,
        index_name: str = INDEX_NAME,
        batch_size: int = BULK_BATCH_SIZE,
        client_identity: ClientIdentity | None = None,
    ) -> None:
        """Initialize the reporter.

        Args:
            client: Transport used for bulk requests.
            index_name: Destination index, fixed for the reporter's lifetime.
            batch_size: Maximum number of documents per bulk request.
            client_identity: Identity of the benchmarked client and runtime.

        Raises:
            ValueError: If batch_size is not positive.
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")

        self.client = client
        self.index_name = index_name
        self.batch_size = batch_size
        self.client_identity = client_identity or ClientIdentity()

    @property
    def logger(self) -> logging.Logger:
        """Get the logger for the reporter."""
        from clientbench.utils.logger import Logger

        return Logger.component("reporter")

    def batches(self, samples: Sequence[Sample]) -> Iterator[Sequence[Sample]]:
        """Yield consecutive slices of at most ``batch_size`` samples."""
        for offset in range(0, len(samples), self.batch_size):
            yield samples[offset : offset + self.batch_size]

    def build_document(
        self,
        sample: Sample,
        *,
        action: str,
        repetitions: int,
        identity: BenchmarkIdentity,
    ) -> TelemetryDocument:
        """Build the telemetry document for one sample."""
        client = self.client_identity
        runner_service = dict(identity.runner.get("service") or {})
        runner_service.update(type="client", name=client.name, version=client.version)

        return TelemetryDocument(
            timestamp=sample.start.astimezone(UTC).isoformat(),
            labels=Labels(client=client.name, environment=identity.environment),
            tags=[BENCHMARK_TAG, client.name],
            event=Event(action=action, duration=sample.duration),
            benchmark=BenchmarkInfo(
                build_id=identity.build_id,
                environment=identity.environment,
                category=identity.category,
                repetitions=repetitions,
                runner=RunnerInfo(
                    service=ServiceInfo(**runner_service),
                    runtime=RuntimeInfo(
                        name=client.runtime_name, version=client.runtime_version
                    ),
                    os=OSInfo(family=client.os_family),
                ),
                target=identity.target,
            ),
        )

    def report(
        self,
        samples: Sequence[Sample],
        *,
        action: str,
        repetitions: int,
        identity: BenchmarkIdentity,
    ) -> int:
        """Submit all samples, one bulk request per batch.

        Args:
            samples: Samples in repetition order.
            action: Name of the measured operation.
            repetitions: Configured repetition count of the run.
            identity: Run metadata attached to every document.

        Returns:
            Number of batches submitted.

        Raises:
            ReportError: If the store flags errors, any item status exceeds 201,
                or the response is malformed or acknowledges fewer documents
                than were sent.
            TransportError: If a request cannot be completed.
        """
        submitted = 0
        for number, batch in enumerate(self.batches(samples), start=1):
            operations = [
                (
                    {"index": {}},
                    self.build_document(
                        sample, action=action, repetitions=repetitions, identity=identity
                    ).to_dict(),
                )
                for sample in batch
            ]
            self._submit(number, operations)
            submitted += 1

        self.logger.debug(
            f"Reported {len(samples)} samples for '{action}' "
            f"in {submitted} batch(es) to {self.index_name}"
        )
        return submitted

    def _submit(
        self, number: int, operations: list[tuple[dict[str, Any], dict[str, Any]]]
    ) -> None:
        """Send one batch and validate the store's response."""
        self.logger.debug(
            f"Submitting batch {number} ({len(operations)} documents) to {self.index_name}"
        )
        body = self.client.bulk(self.index_name, operations)

        try:
            response = BulkResponse.model_validate(body)
        except ValidationError as e:
            self.logger.debug(f"Batch {number} returned a malformed response: {e}")
            raise ReportError(batch=number, failed=len(operations)) from e

        results = response.results()
        if len(results) != len(operations):
            self.logger.debug(
                f"Batch {number} acknowledged {len(results)} of "
                f"{len(operations)} documents"
            )
            raise ReportError(
                batch=number, failed=max(len(operations) - len(results), 0)
            )

        if not response.succeeded:
            failed = response.failed_items()
            self.logger.debug(
                f"Batch {number} rejected: errors={response.errors}, "
                f"failed_items={len(failed)}"
            )
            raise ReportError(batch=number, failed=len(failed))
