# jira_timelogger/__main__.py
"""Entry point for `python -m jira_timelogger`."""

from jira_timelogger.cli import app

if __name__ == "__main__":
    app()
