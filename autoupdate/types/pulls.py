"""Pull request-related data models."""

from dataclasses import dataclass, field
from datetime import datetime

# Review states that conclude a reviewer's verdict
APPROVED = "APPROVED"
CHANGES_REQUESTED = "CHANGES_REQUESTED"
CONCLUDING_REVIEW_STATES = frozenset({APPROVED, CHANGES_REQUESTED})

# mergeable_state values (https://docs.github.com/en/graphql/reference/enums#mergestatestatus)
# - behind: the head ref is out of date, the base branch needs merging in
# - dirty: the merge commit cannot be cleanly created, usually conflicts
# - unknown: not computed yet, the fetch itself starts a background job
MERGEABLE_STATE_BEHIND = "behind"
MERGEABLE_STATE_UNKNOWN = "unknown"


@dataclass
class PullRequest:
    """Pull request snapshot as returned by GitHub."""

    number: int
    head_sha: str
    title: str = ""
    html_url: str = ""
    head_ref: str = ""
    base_ref: str = ""
    labels: list[str] = field(default_factory=list)
    auto_merge: bool = False
    draft: bool = False
    mergeable: bool | None = None  # None until GitHub has computed it
    mergeable_state: str = MERGEABLE_STATE_UNKNOWN


@dataclass
class Review:
    """Pull request review."""

    review_id: int
    reviewer: str
    state: str  # "APPROVED", "CHANGES_REQUESTED", "COMMENTED", "DISMISSED", ...
    submitted_at: datetime | None = None


@dataclass
class MergeableStatus:
    """Conflict and up-to-date status of a pull request."""

    mergeable: bool | None
    mergeable_state: str

    @property
    def needs_update(self) -> bool:
        """True when the PR has no conflicts and is behind its base branch."""
        return self.mergeable is True and self.mergeable_state == MERGEABLE_STATE_BEHIND


@dataclass
class ApprovalStatus:
    """Deduplicated review counts against the required approval count."""

    approval_count: int
    changes_requested_count: int
    required_approval_count: int

    @property
    def is_approved(self) -> bool:
        return (
            self.changes_requested_count == 0
            and self.approval_count >= self.required_approval_count
        )


@dataclass
class UpdateBranchResult:
    """Result of asking GitHub to update a pull request branch."""

    message: str
    url: str
