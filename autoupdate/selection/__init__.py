"""Candidate-selection pipeline."""

from autoupdate.selection.approvals import (
    ApprovalEvaluator,
    approval_fail_reason,
    dedupe_reviews,
)
from autoupdate.selection.checks import CheckAggregator, checks_fail_reason, checks_passed
from autoupdate.selection.filters import (
    filter_applicable_prs,
    filter_by_auto_merge,
    filter_by_labels,
)
from autoupdate.selection.mergeable import (
    MERGEABLE_RETRY_DELAY,
    MergeStatusResolver,
    mergeable_fail_reason,
)
from autoupdate.selection.selector import (
    CandidateSelector,
    Exclusion,
    get_auto_update_candidate,
)

__all__ = [
    "dedupe_reviews",
    "ApprovalEvaluator",
    "approval_fail_reason",
    "MERGEABLE_RETRY_DELAY",
    "MergeStatusResolver",
    "mergeable_fail_reason",
    "checks_passed",
    "CheckAggregator",
    "checks_fail_reason",
    "filter_by_labels",
    "filter_by_auto_merge",
    "filter_applicable_prs",
    "CandidateSelector",
    "Exclusion",
    "get_auto_update_candidate",
]
