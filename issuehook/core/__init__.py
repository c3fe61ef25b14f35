"""
Core layer module.

Contains configuration, notification interfaces, and exception definitions.
"""

from issuehook.core.exceptions import (
    ConfigError,
    EventValidationError,
    IssueHookError,
    NotificationError,
)

__all__ = [
    # Exceptions
    'IssueHookError',
    'ConfigError',
    'NotificationError',
    'EventValidationError',
]
