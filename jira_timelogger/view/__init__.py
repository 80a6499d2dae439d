# jira_timelogger/view/__init__.py
"""View controller: debounced validators, issue resolver, activity log, form."""

from .activity_log import ActivityLogPresenter, render_entry
from .debounce import DebounceTimer, PendingTimer
from .form import FormReconciler
from .index import IndexView
from .issue_key import IssueKeyResolver, IssueKeyState
from .surface import InMemorySurface, PresentationSurface
from .time_phrase import TimePhraseValidator

__all__ = [
    "IndexView",
    "PresentationSurface",
    "InMemorySurface",
    "DebounceTimer",
    "PendingTimer",
    "TimePhraseValidator",
    "IssueKeyResolver",
    "IssueKeyState",
    "ActivityLogPresenter",
    "render_entry",
    "FormReconciler",
]
