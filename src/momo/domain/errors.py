"""Domain-specific exceptions."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a configuration or payment request breaks a validation rule.

    Carries only the message of the first rule that failed.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(ValueError):
    """Raised when required environment variables are missing."""
