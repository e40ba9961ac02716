"""
Pytest fixtures for pr-autoupdate testing.

Provides builders and common fixtures for tests that drive the selection
pipeline against a MockGitHubClient.
"""

from datetime import datetime
from typing import Any, Generator

import pytest

from autoupdate.config import Policy
from autoupdate.testing.mock import MockGitHubClient
from autoupdate.types.checks import CheckRun
from autoupdate.types.pulls import PullRequest, Review


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """
    Provide a MockGitHubClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.pulls.configure_list(response=[create_mock_pull_request()])
            result = run(mock_client, inputs)
            assert mock_client.was_called("pulls.update_branch")
        ```
    """
    client = MockGitHubClient(owner="test-owner", repo="test-repo")
    yield client
    client.reset()


@pytest.fixture
def no_sleep() -> list[float]:
    """
    Provide a list to pass as ``sleep=no_sleep.append``.

    Records the requested delays instead of waiting.
    """
    return []


# ============================================================================
# Policy Fixtures
# ============================================================================


@pytest.fixture
def default_policy() -> Policy:
    """Provide the policy an action run gets with only required_approval_count set."""
    return Policy(required_approval_count=2)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_pull_request() -> PullRequest:
    """Provide a sample PullRequest that is behind its base branch."""
    return PullRequest(
        number=1111,
        head_sha="6dcb09b5b57875f334f61aebed695e2e4193db5e",
        title="Add new feature",
        html_url="https://github.com/test-owner/test-repo/pull/1111",
        head_ref="feature/new-feature",
        base_ref="main",
        labels=["autoupdate"],
        auto_merge=True,
        draft=False,
        mergeable=True,
        mergeable_state="behind",
    )


@pytest.fixture
def sample_review() -> Review:
    """Provide a sample Review object."""
    return Review(
        review_id=80,
        reviewer="octocat",
        state="APPROVED",
        submitted_at=datetime(2024, 1, 15, 15, 0, 0),
    )


@pytest.fixture
def sample_check_run() -> CheckRun:
    """Provide a sample successful CheckRun object."""
    return CheckRun(name="build", status="completed", conclusion="success")


@pytest.fixture
def mock_client_with_candidate(
    mock_client: MockGitHubClient,
    sample_pull_request: PullRequest,
) -> MockGitHubClient:
    """
    Provide a mock client whose only open PR passes every default gate.

    The PR has two approvals, is mergeable and behind, and its checks passed.
    """
    number = sample_pull_request.number
    mock_client.pulls.configure_list(response=[sample_pull_request])
    mock_client.pulls.configure_get(response=sample_pull_request, pull_number=number)
    mock_client.reviews.configure_list(
        response=[
            create_mock_review("alice", "APPROVED", review_id=1),
            create_mock_review("bob", "APPROVED", review_id=2),
        ],
        pull_number=number,
    )
    mock_client.checks.configure_list_for_ref(
        response=[create_mock_check_run("build"), create_mock_check_run("lint")],
        ref=sample_pull_request.head_sha,
    )
    return mock_client


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_pull_request(
    number: int = 1,
    head_sha: str | None = None,
    **kwargs: Any,
) -> PullRequest:
    """
    Create a PullRequest with customizable fields.

    Defaults describe an auto-merge PR that is mergeable and behind.

    Args:
        number: Pull request number
        head_sha: Head commit SHA (default: derived from the number)
        **kwargs: Additional fields to override

    Returns:
        PullRequest object
    """
    defaults: dict[str, Any] = {
        "title": f"Test PR #{number}",
        "html_url": f"https://github.com/test-owner/test-repo/pull/{number}",
        "head_ref": f"feature-{number}",
        "base_ref": "main",
        "labels": [],
        "auto_merge": True,
        "draft": False,
        "mergeable": True,
        "mergeable_state": "behind",
    }
    defaults.update(kwargs)
    return PullRequest(
        number=number,
        head_sha=head_sha or f"sha-{number}",
        **defaults,
    )


def create_mock_review(
    reviewer: str = "reviewer",
    state: str = "APPROVED",
    **kwargs: Any,
) -> Review:
    """
    Create a Review with customizable fields.

    Args:
        reviewer: Reviewer login
        state: Review state
        **kwargs: Additional fields to override

    Returns:
        Review object
    """
    defaults: dict[str, Any] = {
        "review_id": 1,
        "submitted_at": datetime(2024, 1, 15, 15, 0, 0),
    }
    defaults.update(kwargs)
    return Review(reviewer=reviewer, state=state, **defaults)


def create_mock_check_run(
    name: str = "build",
    status: str = "completed",
    conclusion: str | None = "success",
) -> CheckRun:
    """Create a CheckRun, successful and completed by default."""
    return CheckRun(name=name, status=status, conclusion=conclusion)


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "mock_client",
    "no_sleep",
    "default_policy",
    "sample_pull_request",
    "sample_review",
    "sample_check_run",
    "mock_client_with_candidate",
    # Helper functions
    "create_mock_pull_request",
    "create_mock_review",
    "create_mock_check_run",
]
