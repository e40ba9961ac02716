"""pr-autoupdate exception classes."""



class AutoUpdateError(Exception):
    """Base exception for all pr-autoupdate errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(AutoUpdateError):
    """Raised when action inputs or client configuration are invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class AuthenticationError(AutoUpdateError):
    """Raised when the token is missing, expired or rejected."""

    pass


class AuthorizationError(AutoUpdateError):
    """Raised when the token lacks permission for the resource."""

    pass


class NotFoundError(AutoUpdateError):
    """Raised when a repository, pull request or commit is not found."""

    pass


class ConflictError(AutoUpdateError):
    """Raised on conflicts reported by GitHub."""

    pass


class RateLimitedError(AutoUpdateError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class ValidationError(AutoUpdateError):
    """Raised on validation errors (e.g. 422 from update-branch)."""

    pass


class ServerError(AutoUpdateError):
    """Raised on server errors (5xx) and connection failures."""

    pass
