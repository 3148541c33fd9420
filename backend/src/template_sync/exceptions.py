"""Custom exception classes for the template sync tool.

This module provides domain-specific exception classes that carry
a human-readable message and optional structured context. Every error
is fatal to the run; the CLI reports it as the failure reason.
"""

from __future__ import annotations

from typing import Any
from typing import Optional


class AppError(Exception):
    """Base exception for template sync errors.

    All tool-specific exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message.
        detail: Optional additional context.
    """

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a log-friendly dictionary."""
        result: dict[str, Any] = {"error": self.message}
        if self.detail:
            result["detail"] = self.detail
        return result


class ValidationError(AppError):
    """Raised when a local value fails validation.

    Use for malformed template names or other invalid input values.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        detail = f"Field: {field}" if field else None
        super().__init__(message, detail=detail)
        self.field = field


class ConfigurationError(AppError):
    """Raised when required configuration is missing.

    Use when an action input or local setting is absent or blank.
    """

    def __init__(self, config_name: str):
        super().__init__(f"Missing required configuration: {config_name}")
        self.config_name = config_name


class FileReadError(AppError):
    """Raised when a template source file cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to read {path}: {reason}")
        self.path = path
        self.reason = reason


class StoreError(AppError):
    """Raised when a remote template store call fails.

    Use for transport failures, authorization errors, throttling,
    or malformed responses.
    """

    def __init__(
        self,
        message: str,
        detail: Optional[str] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message, detail=detail)
        self.code = code


class NotFoundError(StoreError):
    """Raised when a template is absent but the operation needs it."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(
            f"{resource} not found: {identifier}",
            code="TemplateDoesNotExist",
        )
        self.resource = resource
        self.identifier = identifier


class AlreadyExistsError(StoreError):
    """Raised when a create collides with an existing template name.

    Only happens when another writer created the name between the
    listing and the create call.
    """

    def __init__(self, resource: str, identifier: str):
        super().__init__(
            f"{resource} already exists: {identifier}",
            code="AlreadyExists",
        )
        self.resource = resource
        self.identifier = identifier
