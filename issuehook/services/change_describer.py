"""
Change describer module.

Renders human-readable titles and descriptions for issue field changes.
"""

import logging
from dataclasses import dataclass

from issuehook.core.interfaces.notifications import IssueChange

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeTemplate:
    """
    Description templates for one change kind.

    ``{old}`` and ``{new}`` are replaced with the change's display values.

    Attributes:
        title: Title used for the change.
        new_description: Template used when there was no previous value.
        change_description: Template used when a previous value exists.
    """
    title: str
    new_description: str
    change_description: str


CHANGE_TEMPLATES: dict[str, ChangeTemplate] = {
    'stage': ChangeTemplate(
        title='Stage Changed',
        new_description='Stage set to {new}.',
        change_description='Stage changed from {old} to {new}.'
    ),
    'assignee': ChangeTemplate(
        title='Assignee Changed',
        new_description='Assignee set to {new}.',
        change_description='Assignee changed from {old} to {new}.'
    ),
    'priority': ChangeTemplate(
        title='Priority Changed',
        new_description='The issue priority was set to {new}.',
        change_description='The issue priority was changed from {old} to {new}.'
    ),
    'comment': ChangeTemplate(
        title='Comment Added',
        new_description='{new}',
        change_description='{new}'
    ),
}


class ChangeDescriber:
    """
    Turns IssueChange records into (title, description) pairs.

    Known kinds use the built-in templates; any other kind gets a generic
    "<Kind> changed from ... to ..." wording.

    Example:
        >>> describer = ChangeDescriber()
        >>> describer.describe(IssueChange('stage', old_value='Open', new_value='Done'))
        ('Stage Changed', 'Stage changed from Open to Done.')
    """

    def __init__(self, templates: dict[str, ChangeTemplate] | None = None):
        """
        Initialize the describer.

        Args:
            templates: Template overrides keyed by lower-case change kind.
        """
        self._templates = dict(CHANGE_TEMPLATES)
        if templates:
            self._templates.update(templates)

    def template_for(self, kind: str) -> ChangeTemplate:
        """Return the template for a change kind, building a generic one if needed."""
        template = self._templates.get(kind.lower())
        if template:
            return template

        label = kind.replace('_', ' ').strip().capitalize() or 'Field'
        escaped = label.replace('{', '{{').replace('}', '}}')
        return ChangeTemplate(
            title=f'{label} Changed',
            new_description=f'{escaped} set to {{new}}.',
            change_description=f'{escaped} changed from {{old}} to {{new}}.'
        )

    def describe(self, change: IssueChange) -> tuple[str, str]:
        """
        Describe a single change.

        Args:
            change: The field change.

        Returns:
            Tuple of (title, description).
        """
        template = self.template_for(change.kind)
        pattern = (
            template.new_description if change.is_new
            else template.change_description
        )
        description = pattern.format(
            old=change.old_value,
            new=change.new_value
        )
        title = change.title or template.title

        logger.debug(f'📝 Change described: {title} -> {description[:50]}')
        return title, description
