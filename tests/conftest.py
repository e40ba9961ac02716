"""Shared fixtures for the test suite."""

from autoupdate.testing.conftest import (  # noqa: F401
    default_policy,
    mock_client,
    mock_client_with_candidate,
    no_sleep,
    sample_check_run,
    sample_pull_request,
    sample_review,
)
