"""Models describing who ran a benchmark and against what."""

import platform
from typing import Any

from pydantic import BaseModel, Field

from clientbench import __version__


def _os_family() -> str:
    """Return the lower-cased operating system family (e.g. 'linux')."""
    return platform.system().lower() or "unknown"


class BenchmarkIdentity(BaseModel):
    """Metadata attached verbatim to every reported document of a run."""

    build_id: str = Field(..., description="CI build identifier")
    environment: str = Field(..., description="Benchmark environment name")
    category: str = Field("", description="Benchmark category")
    target: dict[str, Any] = Field(
        default_factory=dict,
        description="Opaque descriptor of the service under measurement",
    )
    runner: dict[str, Any] = Field(
        default_factory=dict,
        description="Descriptor of the benchmark runner (e.g. service.git)",
    )


class ClientIdentity(BaseModel):
    """Identity of the client, runtime and OS producing the samples."""

    name: str = Field("clientbench", description="Client name used in labels/tags")
    version: str = Field(__version__, description="Client version")
    runtime_name: str = Field("python", description="Language runtime name")
    runtime_version: str = Field(
        default_factory=platform.python_version, description="Runtime version"
    )
    os_family: str = Field(default_factory=_os_family, description="OS family")
