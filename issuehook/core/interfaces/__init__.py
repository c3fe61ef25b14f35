"""
Interfaces module.

Contains the notifier contract plus notification data classes.
"""

from issuehook.core.interfaces.notifications import (
    IIssueNotifier,
    IssueActor,
    IssueChange,
    IssueNotification,
)

__all__ = [
    'IIssueNotifier',
    'IssueActor',
    'IssueChange',
    'IssueNotification',
]
