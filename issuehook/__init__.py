"""
IssueHook.

Renders issue-tracker events as Discord webhook embeds and delivers them.
"""

__version__ = '1.0.0'
