"""
Notification interfaces module.

Contains the data classes describing an issue event, already reduced to
primitive values by the tracker integration, and the abstract notifier
contract that consumes them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class IssueActor:
    """
    The user who triggered an issue event.

    Attributes:
        name: Display name of the user.
        profile_url: Link to the user's profile on the tracker.
        avatar_url: Link to the user's avatar image.
    """
    name: str
    profile_url: str | None = None
    avatar_url: str | None = None


@dataclass
class IssueChange:
    """
    A single field change on an issue.

    Attributes:
        kind: Change kind ('stage', 'assignee', 'priority', 'comment', or
            any other field label).
        title: Optional explicit title overriding the kind's default.
        old_value: Display value before the change (None if newly set).
        new_value: Display value after the change.
    """
    kind: str
    title: str | None = None
    old_value: str | None = None
    new_value: str | None = None

    @property
    def is_new(self) -> bool:
        """Check whether the field had no previous value."""
        return not self.old_value


@dataclass
class IssueNotification:
    """
    Issue event notification data.

    Attributes:
        issue_id: Human-readable issue identifier (e.g. 'ABC-1').
        summary: Issue summary line.
        description: Issue description text.
        url: Link to the issue.
        project: Project name shown in the footer.
        actor: User who triggered the event.
        changes: Field changes, in the order they should be displayed.
        timestamp: ISO-8601 event time; defaults to the send time.
    """
    issue_id: str
    summary: str | None = None
    description: str | None = None
    url: str | None = None
    project: str | None = None
    actor: IssueActor | None = None
    changes: list[IssueChange] = field(default_factory=list)
    timestamp: str | None = None

    @property
    def change_count(self) -> int:
        """Return number of field changes."""
        return len(self.changes)


class IIssueNotifier(ABC):
    """Issue event notifier contract."""

    @abstractmethod
    def notify_created(self, notification: IssueNotification) -> Any:
        """Notify that an issue was reported."""

    @abstractmethod
    def notify_resolved(self, notification: IssueNotification) -> Any:
        """Notify that an issue was resolved."""

    @abstractmethod
    def notify_changed(self, notification: IssueNotification) -> Any:
        """Notify that one or more fields of an issue changed."""
