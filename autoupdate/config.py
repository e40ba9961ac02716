"""
Action inputs and the selection policy.

All inputs are read from the environment once, here, and handed to the
selection pipeline as immutable values.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from autoupdate.exceptions import ConfigurationError


def is_string_true(value: str | None) -> bool:
    """Return True only for a case-insensitive ``"true"``."""
    return value is not None and value.strip().lower() == "true"


def is_string_false(value: str | None) -> bool:
    """Return True only for a case-insensitive ``"false"``."""
    return value is not None and value.strip().lower() == "false"


def parse_labels(value: str | None) -> tuple[str, ...]:
    """Split a comma-separated label list, trimming names and dropping blanks."""
    if not value:
        return ()
    return tuple(name.strip() for name in value.split(",") if name.strip())


def get_input(name: str, env: Mapping[str, str] | None = None) -> str:
    """
    Read a GitHub Actions input.

    Inputs reach the process as ``INPUT_<NAME>`` environment variables,
    upper-cased with spaces replaced by underscores.

    Args:
        name: Input name as declared in action.yml
        env: Mapping to read instead of ``os.environ``

    Returns:
        The trimmed value, or ``""`` when the input is not set
    """
    if env is None:
        env = os.environ
    return env.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()


@dataclass(frozen=True)
class Policy:
    """Rules a pull request must satisfy to have its branch updated."""

    required_approval_count: int = 0
    included_labels: tuple[str, ...] = ()
    require_auto_merge_enabled: bool = True
    require_passed_checks: bool = True
    allow_ongoing_checks: bool = False

    def __post_init__(self) -> None:
        if self.required_approval_count < 0:
            raise ConfigurationError(
                f"required_approval_count must be >= 0, got {self.required_approval_count}"
            )
        # Labels may be passed untrimmed by callers building a Policy directly
        object.__setattr__(
            self,
            "included_labels",
            tuple(name.strip() for name in self.included_labels if name.strip()),
        )

    @classmethod
    def from_inputs(cls, env: Mapping[str, str] | None = None) -> "Policy":
        """
        Build the policy from action inputs.

        Inputs:
            required_approval_count: Integer >= 0 (default: 0)
            included_labels: Comma-separated label names (default: no filter)
            require_auto_merge_enabled: Disabled only by an explicit "false"
            require_passed_checks: Disabled only by an explicit "false"
            allow_ongoing_checks: Enabled only by an explicit "true"

        Raises:
            ConfigurationError: If required_approval_count is not a non-negative integer
        """
        raw_count = get_input("required_approval_count", env)
        try:
            required_approval_count = int(raw_count) if raw_count else 0
        except ValueError:
            raise ConfigurationError(
                f"Invalid required_approval_count: {raw_count!r}. Must be an integer"
            ) from None

        return cls(
            required_approval_count=required_approval_count,
            included_labels=parse_labels(get_input("included_labels", env)),
            require_auto_merge_enabled=not is_string_false(
                get_input("require_auto_merge_enabled", env)
            ),
            require_passed_checks=not is_string_false(
                get_input("require_passed_checks", env)
            ),
            allow_ongoing_checks=is_string_true(get_input("allow_ongoing_checks", env)),
        )


@dataclass(frozen=True)
class ActionInputs:
    """Everything one run needs besides the API client."""

    base: str
    policy: Policy
    sort: str | None = None
    direction: str | None = None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "ActionInputs":
        """
        Read all action inputs.

        ``sort`` and ``direction`` are lower-cased and passed through to the
        pull request list call; ``direction`` is ignored without ``sort``.

        Raises:
            ConfigurationError: If ``base`` is missing or the policy is invalid
        """
        base = get_input("base", env)
        if not base:
            raise ConfigurationError("Input required and not supplied: base")

        sort = get_input("sort", env).lower() or None
        direction = get_input("direction", env).lower() or None
        if sort is None:
            direction = None

        return cls(
            base=base,
            policy=Policy.from_inputs(env),
            sort=sort,
            direction=direction,
        )
