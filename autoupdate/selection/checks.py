"""Check-run aggregation."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from autoupdate.types.checks import CheckRun

if TYPE_CHECKING:
    from autoupdate.client import GitHubClient


def checks_passed(check_runs: Iterable[CheckRun], allow_ongoing: bool = False) -> bool:
    """
    Aggregate check runs into a single verdict.

    Strict mode fails on any run that is not completed or that failed.
    With ``allow_ongoing`` only failed runs count against the commit.
    """
    if allow_ongoing:
        return not any(run.is_failed for run in check_runs)
    return not any(not run.is_completed or run.is_failed for run in check_runs)


class CheckAggregator:
    """Fetches the check runs of a commit and aggregates them."""

    def __init__(self, client: "GitHubClient") -> None:
        self.client = client

    def passed(self, head_sha: str, allow_ongoing: bool = False) -> bool:
        return checks_passed(self.client.checks.list_for_ref(head_sha), allow_ongoing)


def checks_fail_reason(allow_ongoing: bool) -> str:
    reason_type = "failed check(s)" if allow_ongoing else "failed or ongoing check(s)"
    return f"The PR has {reason_type}"
