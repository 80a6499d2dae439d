# jira_timelogger/__init__.py
"""
View controller for the JIRA time logger.

Debounced validation of the time-phrase and issue-key fields, asynchronous
issue summary lookups, and the activity log feed.
"""

__version__ = "0.4.0"
