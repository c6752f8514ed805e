import platform
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Version:
    """
    Semantic version information for clientbench.

    The version string is reported with every telemetry document as the
    runner service version and sent as part of the HTTP User-Agent.
    """
    major: int
    minor: int
    patch: int
    date: datetime

    def __str__(self) -> str:
        """Return the semantic version string (e.g., '0.1.0')."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        """Return version info including the release date."""
        return f"{self} (date: {self.date_string()})"

    def semver(self) -> tuple[int, int, int]:
        """Return semantic version as tuple (major, minor, patch)."""
        return (self.major, self.minor, self.patch)

    def date_string(self, fmt: str = "%Y-%m-%d") -> str:
        """Return formatted date string."""
        return self.date.strftime(fmt)

    def user_agent(self) -> str:
        """Return the User-Agent value sent by the transport client."""
        return (
            f"clientbench/{self} "
            f"({platform.python_implementation()} {platform.python_version()})"
        )


# Current version instance
CLIENTBENCH_VERSION = Version(
    major=0,
    minor=1,
    patch=0,
    date=datetime(2026, 10, 19),
)
