"""pr-autoupdate type definitions.

This module exports all data model types used by the package.
"""

from autoupdate.types.checks import CheckRun
from autoupdate.types.pulls import (
    ApprovalStatus,
    MergeableStatus,
    PullRequest,
    Review,
    UpdateBranchResult,
)

__all__ = [
    # Pull request types
    "PullRequest",
    "Review",
    "MergeableStatus",
    "ApprovalStatus",
    "UpdateBranchResult",
    # Check types
    "CheckRun",
]
