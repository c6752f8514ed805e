"""Version information for clientbench."""

from clientbench.version.clientbench_version import CLIENTBENCH_VERSION, Version

__all__ = ["CLIENTBENCH_VERSION", "Version"]
