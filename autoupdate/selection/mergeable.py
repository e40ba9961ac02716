"""Merge-status resolution.

GitHub computes ``mergeable`` lazily: the first read of a PR whose merge
status is stale answers ``mergeable_state == "unknown"`` and starts a
background job that creates a test merge commit. GitHub recommends polling
until the state settles; to stay within the API rate limit we wait once for
a fixed delay and read again, using whatever comes back. This is a
best-effort accommodation, a PR still "unknown" after the retry is simply
not updated on this run.
"""

import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from autoupdate.logging import get_logger
from autoupdate.types.pulls import (
    MERGEABLE_STATE_BEHIND,
    MERGEABLE_STATE_UNKNOWN,
    MergeableStatus,
)

if TYPE_CHECKING:
    from autoupdate.client import GitHubClient

# seconds; fixed, not an input
MERGEABLE_RETRY_DELAY = 3.0

logger = get_logger("selection")


class MergeStatusResolver:
    """Reads a PR's mergeable status, re-reading once if it is unknown."""

    def __init__(
        self,
        client: "GitHubClient",
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.client = client
        self._sleep = sleep

    def resolve(self, pull_number: int) -> MergeableStatus:
        pr = self.client.pulls.get(pull_number)
        status = MergeableStatus(mergeable=pr.mergeable, mergeable_state=pr.mergeable_state)

        if status.mergeable_state == MERGEABLE_STATE_UNKNOWN:
            logger.debug(
                f"Mergeable state of #{pull_number} is unknown, "
                f"retrying in {MERGEABLE_RETRY_DELAY:g}s"
            )
            self._sleep(MERGEABLE_RETRY_DELAY)
            pr = self.client.pulls.get(pull_number)
            status = MergeableStatus(mergeable=pr.mergeable, mergeable_state=pr.mergeable_state)

        return status


def _json_value(value: bool | None) -> str:
    if value is None:
        return "null"
    return "true" if value else "false"


def mergeable_fail_reason(status: MergeableStatus) -> str | None:
    """
    Explain why a PR does not need an update, or None when it does.

    Only one reason is reported; a falsy ``mergeable`` takes precedence
    over the state.
    """
    if status.needs_update:
        return None
    if not status.mergeable:
        return f"The 'mergeable' value is: {_json_value(status.mergeable)}"
    return (
        f"The 'mergeable_state' value is: '{status.mergeable_state}'. "
        f"The branch is not '{MERGEABLE_STATE_BEHIND}' the base branch"
    )
