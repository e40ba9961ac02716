"""
pr-autoupdate logging utilities.

Provides configurable logging for HTTP requests/responses and for the
candidate-selection pipeline. Ensures tokens and authorization headers
are never logged.
"""

import logging
import re
from typing import Any

# Create package-specific loggers
_root_logger = logging.getLogger("autoupdate")
_http_logger = logging.getLogger("autoupdate.http")
_selection_logger = logging.getLogger("autoupdate.selection")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Authorization header values
    (re.compile(r"(Bearer|token)\s+[A-Za-z0-9_\-\.]{8,}", re.IGNORECASE), r"\1 [REDACTED]"),
    # GitHub token formats (classic, fine-grained, app installation)
    (re.compile(r"\b(ghp|gho|ghu|ghs|ghr)_[A-Za-z0-9]{20,}\b"), "[TOKEN_REDACTED]"),
    (re.compile(r"\bgithub_pat_[A-Za-z0-9_]{20,}\b"), "[TOKEN_REDACTED]"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_FORMAT = "LOG > %(message)s"


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure pr-autoupdate logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: ``"LOG > %(message)s"``)

    Example:
        ```python
        import logging
        from autoupdate.logging import configure_logging

        # Enable debug logging for HTTP requests
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = _DEFAULT_FORMAT

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _root_logger.setLevel(level)
    _root_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _selection_logger.setLevel(level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a pr-autoupdate logger.

    Args:
        name: Logger name suffix (e.g., "http", "selection"). If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _root_logger
    return logging.getLogger(f"autoupdate.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Replaces bearer tokens, GitHub tokens and other secret-looking
    assignments with redacted placeholders.

    Args:
        text: Text that may contain sensitive data

    Returns:
        Text with sensitive data masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of keys to mask (default: authorization, token, secret, password)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = {"authorization", "token", "secret", "password", "api_key"}

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if key_lower in sensitive_keys or any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """
    Log an HTTP request at DEBUG level with sensitive data masked.

    Args:
        method: HTTP method (GET, PUT, etc.)
        url: Request path or URL
        params: Query parameters (optional)
        headers: Request headers (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {url}"]

    if params:
        log_parts.append(f"params={safe_log_dict(params)}")

    if headers:
        log_parts.append(f"headers={safe_log_dict(headers)}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    elapsed_ms: float | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level.

    Args:
        status_code: HTTP status code
        url: Request path or URL
        elapsed_ms: Request duration in milliseconds (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    _http_logger.debug(" | ".join(log_parts))


def log_fail_reason(pull_number: int, reason: str) -> None:
    """
    Log why a pull request will not be updated.

    Args:
        pull_number: Pull request number
        reason: Human-readable reason
    """
    _selection_logger.info(f"Won't update #{pull_number}, the reason:\n      > {reason}")


# Export public API
__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
    "log_fail_reason",
]
