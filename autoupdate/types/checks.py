"""Check run data models."""

from dataclasses import dataclass

STATUS_COMPLETED = "completed"
CONCLUSION_FAILURE = "failure"


@dataclass
class CheckRun:
    """A single check run reported for a commit."""

    name: str
    status: str  # "queued", "in_progress", "completed", ...
    conclusion: str | None  # None while the run is not completed

    @property
    def is_completed(self) -> bool:
        return self.status == STATUS_COMPLETED

    @property
    def is_failed(self) -> bool:
        return self.conclusion == CONCLUSION_FAILURE
