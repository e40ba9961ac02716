"""Review deduplication and the approval rule."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from autoupdate.types.pulls import (
    APPROVED,
    CHANGES_REQUESTED,
    CONCLUDING_REVIEW_STATES,
    ApprovalStatus,
    Review,
)

if TYPE_CHECKING:
    from autoupdate.client import GitHubClient


def dedupe_reviews(reviews: Sequence[Review]) -> tuple[int, int]:
    """
    Count the latest concluding review of each reviewer.

    Reviews are walked newest first. A reviewer is resolved by the first
    APPROVED or CHANGES_REQUESTED review found for them; COMMENTED and
    other states are skipped without resolving the reviewer.

    Args:
        reviews: Reviews in submission order, oldest first

    Returns:
        ``(changes_requested_count, approval_count)``
    """
    resolved: set[str] = set()
    changes_requested_count = 0
    approval_count = 0

    for review in reversed(reviews):
        if review.reviewer in resolved:
            continue
        if review.state not in CONCLUDING_REVIEW_STATES:
            continue

        if review.state == CHANGES_REQUESTED:
            changes_requested_count += 1
        elif review.state == APPROVED:
            approval_count += 1
        resolved.add(review.reviewer)

    return changes_requested_count, approval_count


class ApprovalEvaluator:
    """Fetches a PR's reviews and measures them against the required count."""

    def __init__(self, client: "GitHubClient", required_approval_count: int) -> None:
        self.client = client
        self.required_approval_count = required_approval_count

    def evaluate(self, pull_number: int) -> ApprovalStatus:
        reviews = self.client.reviews.list(pull_number)
        changes_requested_count, approval_count = dedupe_reviews(reviews)
        return ApprovalStatus(
            approval_count=approval_count,
            changes_requested_count=changes_requested_count,
            required_approval_count=self.required_approval_count,
        )


def approval_fail_reason(status: ApprovalStatus) -> str | None:
    """Explain why a PR is not approved, or None when it is."""
    if status.is_approved:
        return None
    return (
        f"approvalsCount: {status.approval_count}, "
        f"requiredApprovalCount: {status.required_approval_count}, "
        f"changesRequestedReviews: {status.changes_requested_count}"
    )
