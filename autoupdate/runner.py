"""
One auto-update run: list open PRs, pick a candidate, update its branch.

Used as the GitHub Action entry point (``python -m autoupdate`` or the
``pr-autoupdate`` console script).
"""

import sys
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from autoupdate.client import GitHubClient
from autoupdate.config import ActionInputs
from autoupdate.exceptions import AutoUpdateError, ConfigurationError
from autoupdate.logging import configure_logging, get_logger
from autoupdate.selection.selector import CandidateSelector

if TYPE_CHECKING:
    from autoupdate.types.pulls import PullRequest

logger = get_logger()

OUTCOME_UPDATED = "updated"
OUTCOME_NO_CANDIDATE = "no_candidate"
OUTCOME_FAILED = "failed"

# KeyError and ValueError cover malformed API payloads
RUN_ERRORS = (AutoUpdateError, httpx.HTTPError, KeyError, ValueError)


@dataclass
class RunResult:
    """Outcome of one run."""

    outcome: str  # "updated", "no_candidate", "failed"
    pull_number: int | None = None
    message: str = ""

    @property
    def failed(self) -> bool:
        return self.outcome == OUTCOME_FAILED


def set_failed(message: str) -> None:
    """Log the failure and emit a workflow error annotation."""
    logger.error(message)
    sys.stdout.write(f"::error::{message}\n")
    sys.stdout.flush()


def run(
    client: GitHubClient,
    inputs: ActionInputs,
    sleep: Callable[[float], None] = time.sleep,
) -> RunResult:
    """
    Execute one run against ``client``.

    Args:
        client: GitHub client for the target repository
        inputs: Base branch, sort options and policy
        sleep: Used for the single mergeable-status retry wait

    Returns:
        RunResult describing what happened
    """
    try:
        open_prs = client.pulls.list(
            base=inputs.base,
            state="open",
            sort=inputs.sort,
            direction=inputs.direction,
        )
        pr: PullRequest | None = CandidateSelector(
            client, inputs.policy, sleep=sleep
        ).select(open_prs)
    except RUN_ERRORS as err:
        message = f"Action failed with error {err}"
        set_failed(message)
        return RunResult(outcome=OUTCOME_FAILED, message=message)

    if pr is None:
        message = "No applicable PR to update."
        logger.info(message)
        return RunResult(outcome=OUTCOME_NO_CANDIDATE, message=message)

    pull_number = pr.number
    logger.info(f"Trying to update the branch of PR #{pull_number}")

    # TODO: fall back to the next eligible PR when the update call fails
    try:
        client.pulls.update_branch(pull_number)
    except RUN_ERRORS as err:
        message = f"Fail to update PR with error: {err}"
        set_failed(message)
        return RunResult(outcome=OUTCOME_FAILED, pull_number=pull_number, message=message)

    message = "Successfully updated. Cheers 🎉!"
    logger.info(message)
    return RunResult(outcome=OUTCOME_UPDATED, pull_number=pull_number, message=message)


def main(env: Mapping[str, str] | None = None) -> int:
    """
    Action entry point.

    Returns:
        Process exit code: 0 when a branch was updated or there was nothing
        to update, 1 on failure
    """
    configure_logging()

    try:
        inputs = ActionInputs.from_env(env)
        client = GitHubClient.from_env(env)
    except ConfigurationError as err:
        set_failed(f"Action failed with error {err}")
        return 1

    with client:
        result = run(client, inputs)

    return 1 if result.failed else 0
