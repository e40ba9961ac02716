"""Static pre-filters applied before any per-PR API call."""

from collections.abc import Sequence

from autoupdate.config import Policy
from autoupdate.logging import get_logger
from autoupdate.types.pulls import PullRequest

logger = get_logger("selection")


def filter_by_labels(
    prs: Sequence[PullRequest], included_labels: Sequence[str]
) -> list[PullRequest]:
    """Keep PRs carrying at least one of ``included_labels``; no-op when empty."""
    wanted = {name.strip() for name in included_labels if name.strip()}
    if not wanted:
        return list(prs)

    labeled = [pr for pr in prs if wanted.intersection(pr.labels)]
    logger.info(f"Count of PRs with included labels: {len(labeled)}")
    return labeled


def filter_by_auto_merge(
    prs: Sequence[PullRequest], require_auto_merge_enabled: bool
) -> list[PullRequest]:
    """Keep PRs with auto-merge enabled, unless the requirement is off."""
    if not require_auto_merge_enabled:
        return list(prs)

    auto_merge_enabled = [pr for pr in prs if pr.auto_merge]
    logger.info(f"Count of auto-merge enabled PRs: {len(auto_merge_enabled)}")
    return auto_merge_enabled


def filter_applicable_prs(prs: Sequence[PullRequest], policy: Policy) -> list[PullRequest]:
    """Apply the label filter, then the auto-merge filter, preserving order."""
    labeled = filter_by_labels(prs, policy.included_labels)
    return filter_by_auto_merge(labeled, policy.require_auto_merge_enabled)
