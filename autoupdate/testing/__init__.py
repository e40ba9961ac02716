"""pr-autoupdate testing utilities.

Provides a mock client and fixtures for testing code that drives the
selection pipeline.
"""

from autoupdate.testing.fixtures import (
    create_mock_check_run,
    create_mock_pull_request,
    create_mock_review,
)
from autoupdate.testing.mock import MockCall, MockGitHubClient, MockResponse

__all__ = [
    # Mock client
    "MockGitHubClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_pull_request",
    "create_mock_review",
    "create_mock_check_run",
]
