"""pr-autoupdate - keep the next mergeable pull request up to date with its base branch."""

from autoupdate.client import GitHubClient
from autoupdate.config import ActionInputs, Policy
from autoupdate.exceptions import (
    AuthenticationError,
    AuthorizationError,
    AutoUpdateError,
    ConfigurationError,
    ConflictError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from autoupdate.logging import configure_logging, get_logger
from autoupdate.runner import RunResult, run
from autoupdate.selection import CandidateSelector, Exclusion, get_auto_update_candidate
from autoupdate.transport import HTTPTransport, RetryConfig

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Client
    "GitHubClient",
    # Configuration
    "Policy",
    "ActionInputs",
    # Selection
    "CandidateSelector",
    "Exclusion",
    "get_auto_update_candidate",
    # Runner
    "run",
    "RunResult",
    # Exceptions
    "AutoUpdateError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "ConfigurationError",
    # Transport
    "HTTPTransport",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
