"""
Services module.

Contains tracker-neutral helpers used to compose notifications.
"""

from issuehook.services.change_describer import (
    CHANGE_TEMPLATES,
    ChangeDescriber,
    ChangeTemplate,
)

__all__ = [
    'CHANGE_TEMPLATES',
    'ChangeDescriber',
    'ChangeTemplate',
]
