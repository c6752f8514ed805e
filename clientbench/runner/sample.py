"""Per-repetition measurement record."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Outcome(Enum):
    """Success/failure classification of one repetition."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class Sample:
    """Immutable record of one measured repetition.

    Attributes:
        start: UTC wall-clock time captured before the timer started.
        duration: Elapsed monotonic time in nanoseconds.
        outcome: Whether the repetition succeeded.
    """

    start: datetime
    duration: int
    outcome: Outcome

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"Sample duration must be non-negative: {self.duration}")

    @property
    def failed(self) -> bool:
        """True if the repetition failed."""
        return self.outcome is Outcome.FAILURE
