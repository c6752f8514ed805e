"""Pydantic models for telemetry documents and bulk ingest responses."""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

# ============================================================================
# Telemetry document
# ============================================================================


class Labels(BaseModel):
    """Low-cardinality labels used for filtering in the reporting store."""

    client: str
    environment: str


class Event(BaseModel):
    """The measured event of a single repetition."""

    action: str = Field(..., description="Human-readable operation name")
    duration: int = Field(..., ge=0, description="Elapsed time in nanoseconds")


class ServiceInfo(BaseModel):
    """Runner service identity.

    Extra keys from the runner descriptor (e.g. ``git``) are kept alongside
    the fixed type/name/version fields.
    """

    model_config = ConfigDict(extra="allow")

    type: str
    name: str
    version: str


class RuntimeInfo(BaseModel):
    """Language runtime of the runner."""

    name: str
    version: str


class OSInfo(BaseModel):
    """Operating system of the runner."""

    family: str


class RunnerInfo(BaseModel):
    """Everything known about the process producing the samples."""

    service: ServiceInfo
    runtime: RuntimeInfo
    os: OSInfo


class BenchmarkInfo(BaseModel):
    """Run-level metadata repeated on every document."""

    build_id: str
    environment: str
    category: str
    repetitions: int = Field(..., ge=0)
    runner: RunnerInfo
    target: dict[str, Any] = Field(default_factory=dict)


class TelemetryDocument(BaseModel):
    """One document per measured repetition."""

    model_config = ConfigDict(populate_by_name=True)

    timestamp: str = Field(..., alias="@timestamp", description="ISO-8601, UTC")
    labels: Labels
    tags: list[str]
    event: Event
    benchmark: BenchmarkInfo

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON-serializable wire shape."""
        return self.model_dump(by_alias=True)


# ============================================================================
# Bulk response
# ============================================================================


class BulkItemResult(BaseModel):
    """Per-document result of a bulk request."""

    model_config = ConfigDict(extra="allow")

    status: int
    error: dict[str, Any] | None = None


class BulkResponse(BaseModel):
    """Response of a bulk request.

    Each entry of ``items`` maps the action name (``index``) to its result.
    Both ``errors`` and ``items`` must be present; a reply missing either is
    rejected at validation time.
    """

    model_config = ConfigDict(extra="allow")

    errors: bool
    items: list[Annotated[dict[str, BulkItemResult], Field(min_length=1)]]

    def results(self) -> list[BulkItemResult]:
        """Return the per-item results in request order."""
        return [next(iter(item.values())) for item in self.items]

    def failed_items(self) -> list[BulkItemResult]:
        """Return item results whose status is above 201."""
        return [result for result in self.results() if result.status > 201]

    @property
    def succeeded(self) -> bool:
        """True when neither the error flag nor any item status signals failure."""
        return not self.errors and not self.failed_items()
