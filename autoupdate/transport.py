"""
HTTP Transport for pr-autoupdate.

Handles HTTP communication with the GitHub REST API: token authentication,
automatic retry for rate limiting and transient server errors, and error
handling.
"""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from autoupdate.exceptions import (
    AuthenticationError,
    AuthorizationError,
    AutoUpdateError,
    ConflictError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from autoupdate.logging import log_http_request, log_http_response

GITHUB_API_VERSION = "2022-11-28"


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior."""

    max_retries: int = 3
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 502, 503])
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


class HTTPTransport:
    """
    HTTP transport layer for the GitHub REST API.

    Handles:
    - Token authentication and GitHub media-type headers
    - Exponential backoff with jitter for retries
    - Retry-After header respect for rate limiting
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: GitHub token used for the Authorization header
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make an authenticated request with automatic retry.

        Args:
            method: HTTP method
            path: API path (e.g., "/repos/octo/hello/pulls")
            params: Query parameters
            body: Request body (for POST/PUT)

        Returns:
            Parsed JSON response (a dict or a list, depending on the endpoint)

        Raises:
            AutoUpdateError: On API errors
        """
        def make_request() -> httpx.Response:
            log_http_request(method, path, params=params)
            started = time.monotonic()
            response = self._client.request(method, path, params=params, json=body)
            log_http_response(
                response.status_code,
                path,
                elapsed_ms=(time.monotonic() - started) * 1000,
            )
            return response

        return self._execute_with_retry(make_request)

    def paginate(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        items_key: str | None = None,
        per_page: int = 100,
    ) -> list[Any]:
        """
        Collect every item of a paginated list endpoint.

        Requests ``page=1, 2, ...`` until a page comes back short or empty.
        Endpoints that wrap their items in an object (e.g. check runs) name
        the list with ``items_key`` and also stop once ``total_count``
        items have been collected.

        Args:
            path: API path of the list endpoint
            params: Query parameters sent with every page
            items_key: Key of the item list in a wrapped response
            per_page: Page size (GitHub caps it at 100)

        Returns:
            All items, in the order GitHub returns them

        Raises:
            AutoUpdateError: On API errors
        """
        items: list[Any] = []
        page = 1
        while True:
            data = self.request(
                "GET",
                path,
                params={**(params or {}), "per_page": per_page, "page": page},
            )
            total_count = None
            if items_key is not None:
                total_count = data.get("total_count")
                data = data.get(items_key) or []

            items.extend(data)
            if len(data) < per_page:
                break
            if total_count is not None and len(items) >= total_count:
                break
            page += 1

        return items

    def _execute_with_retry(
        self, request_fn: Callable[[], httpx.Response]
    ) -> Any:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Function that makes the HTTP request

        Returns:
            Parsed JSON response

        Raises:
            AutoUpdateError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                response = request_fn()

                if response.status_code < 400:
                    if not response.content:
                        return {}
                    try:
                        return response.json()
                    except ValueError as e:
                        raise ServerError(
                            "INVALID_RESPONSE",
                            f"Response body is not valid JSON: {e}",
                            response.headers.get("X-GitHub-Request-Id"),
                        ) from e

                error = self._parse_error_response(response)

                if not self._should_retry(response.status_code, attempt):
                    raise error

                last_error = error

                retry_after = response.headers.get("Retry-After")
                wait_time = self._get_backoff_time(attempt, retry_after)
                time.sleep(wait_time)

            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                wait_time = self._get_backoff_time(attempt, None)
                time.sleep(wait_time)

        if last_error:
            if isinstance(last_error, AutoUpdateError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        """
        Determine if a request should be retried.

        Args:
            status_code: HTTP status code
            attempt: Current attempt number (0-indexed)

        Returns:
            True if the request should be retried
        """
        if attempt >= self.retry_config.max_retries:
            return False

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(
        self, attempt: int, retry_after: str | None
    ) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, respecting Retry-After header
        if present.

        Args:
            attempt: Current attempt number (0-indexed)
            retry_after: Value of Retry-After header (if present)

        Returns:
            Time to wait in seconds
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass  # Fall through to exponential backoff

        # Exponential backoff: backoff_factor ^ attempt
        base_wait = self.retry_config.backoff_factor ** attempt

        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)

    def _parse_error_response(self, response: httpx.Response) -> AutoUpdateError:
        """
        Parse a GitHub error response into a typed exception.

        GitHub error bodies look like
        ``{"message": "...", "documentation_url": "..."}``.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate AutoUpdateError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        code = f"HTTP_{status_code}"
        message = data.get("message") or f"HTTP {status_code}"
        request_id = response.headers.get("X-GitHub-Request-Id")

        if status_code == 401:
            return AuthenticationError(code, message, request_id)
        elif status_code == 403:
            return AuthorizationError(code, message, request_id)
        elif status_code == 404:
            return NotFoundError(code, message, request_id)
        elif status_code == 409:
            return ConflictError(code, message, request_id)
        elif status_code == 429:
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError(code, message, retry_after, request_id)
        elif status_code >= 500:
            return ServerError(code, message, request_id)
        else:
            return ValidationError(code, message, request_id)
