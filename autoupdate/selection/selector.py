"""
Candidate selection.

Walks the filtered open pull requests in order and returns the first one
whose branch should be updated. Each PR goes through three gates:

1. enough approvals and no outstanding change requests
2. mergeable and behind the base branch
3. passing checks (only when ``require_passed_checks`` is set)

A PR that fails a gate is skipped without calling the later gates, so no
merge status or check runs are fetched for a PR that is not approved.
"""

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from autoupdate.config import Policy
from autoupdate.logging import get_logger, log_fail_reason
from autoupdate.selection.approvals import ApprovalEvaluator, approval_fail_reason
from autoupdate.selection.checks import CheckAggregator, checks_fail_reason
from autoupdate.selection.filters import filter_applicable_prs
from autoupdate.selection.mergeable import MergeStatusResolver, mergeable_fail_reason
from autoupdate.types.pulls import PullRequest

if TYPE_CHECKING:
    from autoupdate.client import GitHubClient

logger = get_logger("selection")

STAGE_APPROVAL = "approval"
STAGE_MERGEABLE = "mergeable"
STAGE_CHECKS = "checks"


@dataclass
class Exclusion:
    """Why a pull request was passed over."""

    pull_number: int
    stage: str  # "approval", "mergeable", "checks"
    reason: str


class CandidateSelector:
    """
    Picks the pull request whose branch should be updated.

    Example:
        ```python
        selector = CandidateSelector(client, Policy(required_approval_count=2))
        pr = selector.select(client.pulls.list(base="main"))
        if pr is not None:
            client.pulls.update_branch(pr.number)
        ```
    """

    def __init__(
        self,
        client: "GitHubClient",
        policy: Policy,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Args:
            client: GitHub client (or a test double with the same resources)
            policy: Selection rules for this run
            sleep: Used for the single mergeable-status retry wait
        """
        self.client = client
        self.policy = policy
        self.approvals = ApprovalEvaluator(client, policy.required_approval_count)
        self.merge_status = MergeStatusResolver(client, sleep=sleep)
        self.checks = CheckAggregator(client)
        self.exclusions: list[Exclusion] = []

    def select(self, open_prs: Sequence[PullRequest] | None) -> PullRequest | None:
        """
        Return the first eligible pull request, or None.

        Errors from the client propagate; no partial result is returned.
        """
        self.exclusions = []
        if not open_prs:
            return None

        logger.info(f"requirePassedChecks {self.policy.require_passed_checks}")
        logger.info(f"allowOngoingChecks {self.policy.allow_ongoing_checks}")

        for pr in filter_applicable_prs(open_prs, self.policy):
            logger.info(f"Checking applicable status of #{pr.number}")
            if self._is_eligible(pr):
                return pr

        return None

    def _is_eligible(self, pr: PullRequest) -> bool:
        reason = approval_fail_reason(self.approvals.evaluate(pr.number))
        if reason:
            return self._exclude(pr, STAGE_APPROVAL, reason)

        reason = mergeable_fail_reason(self.merge_status.resolve(pr.number))
        if reason:
            return self._exclude(pr, STAGE_MERGEABLE, reason)

        # mergeable/mergeable_state don't reflect check status
        if self.policy.require_passed_checks:
            allow_ongoing = self.policy.allow_ongoing_checks
            if not self.checks.passed(pr.head_sha, allow_ongoing):
                return self._exclude(pr, STAGE_CHECKS, checks_fail_reason(allow_ongoing))

        return True

    def _exclude(self, pr: PullRequest, stage: str, reason: str) -> bool:
        self.exclusions.append(Exclusion(pull_number=pr.number, stage=stage, reason=reason))
        log_fail_reason(pr.number, reason)
        return False


def get_auto_update_candidate(
    client: "GitHubClient",
    open_prs: Sequence[PullRequest] | None,
    policy: Policy,
    sleep: Callable[[float], None] = time.sleep,
) -> PullRequest | None:
    """Convenience wrapper around :class:`CandidateSelector`."""
    return CandidateSelector(client, policy, sleep=sleep).select(open_prs)
