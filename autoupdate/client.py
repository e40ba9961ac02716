"""
pr-autoupdate GitHub client.

Provides the interface the candidate-selection pipeline uses to talk to the
GitHub REST API.
"""

import os
from collections.abc import Mapping
from typing import Any

from autoupdate.clients import ChecksClient, PullsClient, ReviewsClient
from autoupdate.exceptions import ConfigurationError
from autoupdate.transport import HTTPTransport, RetryConfig


class GitHubClient:
    """
    Client for one GitHub repository.

    Aggregates the resource clients and handles authentication.

    Example:
        ```python
        from autoupdate import GitHubClient

        client = GitHubClient(token="ghp_...", owner="octo", repo="hello")

        # Or create from the GitHub Actions environment
        client = GitHubClient.from_env()

        for pr in client.pulls.list(base="main"):
            print(pr.number, pr.mergeable_state)
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            token: GitHub token with pull request and checks read access
            owner: Repository owner
            repo: Repository name
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
        """
        self.owner = owner
        self.repo = repo
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            retry_config=retry_config,
        )

        self.pulls = PullsClient(self._transport, owner, repo)
        self.reviews = ReviewsClient(self._transport, owner, repo)
        self.checks = ChecksClient(self._transport, owner, repo)

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "GitHubClient":
        """
        Create a client from GitHub Actions environment variables.

        Environment variables:
            INPUT_TOKEN: The action's ``token`` input (preferred)
            GITHUB_TOKEN: Fallback token
            GITHUB_REPOSITORY: ``owner/repo`` (required)
            GITHUB_API_URL: Base URL for API (optional, default: https://api.github.com)

        Args:
            env: Mapping to read instead of ``os.environ``
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)

        Returns:
            Configured GitHubClient instance

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        if env is None:
            env = os.environ

        token = env.get("INPUT_TOKEN", "").strip() or env.get("GITHUB_TOKEN", "").strip()
        repository = env.get("GITHUB_REPOSITORY", "").strip()
        base_url = env.get("GITHUB_API_URL") or cls.DEFAULT_BASE_URL

        if not token:
            raise ConfigurationError("Input required and not supplied: token")

        if not repository:
            raise ConfigurationError("GITHUB_REPOSITORY environment variable not set")

        owner, _, repo = repository.partition("/")
        if not owner or not repo:
            raise ConfigurationError(
                f"Invalid GITHUB_REPOSITORY: {repository}. Must be 'owner/repo'"
            )

        return cls(
            token=token,
            owner=owner,
            repo=repo,
            base_url=base_url,
            timeout=timeout,
            retry_config=retry_config,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
