"""clientbench - Micro-benchmark harness for search clients."""

from clientbench.version.clientbench_version import CLIENTBENCH_VERSION, Version

__version__ = str(CLIENTBENCH_VERSION)
__version_info__ = CLIENTBENCH_VERSION

__all__ = [
    "CLIENTBENCH_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
