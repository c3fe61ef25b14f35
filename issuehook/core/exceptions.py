"""
Exceptions module.

Contains the exception hierarchy for the IssueHook application.
All custom exceptions inherit from IssueHookError for consistent handling.

Delivery failures are deliberately absent from this hierarchy: a failed
webhook post is reported through WebhookResponse and logged, never raised.
"""

from typing import Any, Dict, Optional


class IssueHookError(Exception):
    """
    Base exception for all IssueHook errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code.
        context: Additional context information for debugging.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or 'UNKNOWN_ERROR'
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.context:
            return f'[{self.code}] {self.message} - Context: {self.context}'
        return f'[{self.code}] {self.message}'


# Configuration exceptions

class ConfigError(IssueHookError):
    """
    Exception raised when the configuration file cannot be loaded.

    Attributes:
        config_path: Path of the offending configuration file.
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if config_path:
            ctx['config_path'] = config_path
        super().__init__(message, 'CONFIG_ERROR', ctx)
        self.config_path = config_path


# Notification exceptions

class NotificationError(IssueHookError):
    """Base exception for notification composition errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code or 'NOTIFICATION_ERROR', context)


class EventValidationError(NotificationError):
    """
    Exception raised when an inbound issue event is malformed.

    Attributes:
        field_name: Name of the missing or invalid field.
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if field_name:
            ctx['field_name'] = field_name
        super().__init__(message, 'EVENT_VALIDATION_ERROR', ctx)
        self.field_name = field_name
