"""Error hierarchy for the wildcard package.

Matching and parsing never raise; these errors come from loading
configuration and pattern rule sets.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "WildcardError",
    "ConfigNotFoundError",
    "ConfigError",
    "PatternRuleError",
    "ErrorCodes",
]


class WildcardError(Exception):
    """Base error for all wildcard package errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(WildcardError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        return self.details["config_path"]


class ConfigError(WildcardError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class PatternRuleError(WildcardError):
    """Raised when a pattern rule or rule set is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="PATTERN_RULE_ERROR", message=message, **kwargs)


class ErrorCodes:
    """All error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_NOT_FOUND:
            use_defaults()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    PATTERN_RULE_ERROR = "PATTERN_RULE_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
