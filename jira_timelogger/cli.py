# jira_timelogger/cli.py
"""
CLI interface for jira-timelogger.

Runs the view controller headlessly against an InMemorySurface, so the
checks behave exactly like the form fields do.
"""

import asyncio
import logging
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError

from jira_timelogger.app.jira import JiraClient
from jira_timelogger.app.service import TimeLoggerApp
from jira_timelogger.config.loader import get_config_path, load_config
from jira_timelogger.config.schema import TimeLoggerConfig
from jira_timelogger.logging_config import configure_logging
from jira_timelogger.view.constants import ISSUE_FIELD, SUMMARY, TIME_MANUAL_FIELD
from jira_timelogger.view.debounce import DebounceTimer
from jira_timelogger.view.index import IndexView
from jira_timelogger.view.issue_key import IssueKeyState
from jira_timelogger.view.surface import InMemorySurface

app = typer.Typer(
    name="jira-timelogger",
    help="Check JIRA time phrases and issue keys the way the time logger form does.",
    no_args_is_help=True,
)


def _run(coro):
    """Run async function from sync CLI context."""
    return asyncio.run(coro)


def _load(config_path: Path | None) -> TimeLoggerConfig:
    """Load config, exiting with code 2 if it doesn't validate."""
    try:
        return load_config(config_path)
    except ValidationError as e:
        typer.secho(f"Invalid configuration: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)


def _headless_view(config: TimeLoggerConfig, app_service: TimeLoggerApp) -> IndexView:
    """Build a view on an in-memory surface with no debounce delay."""
    # Nobody is typing, so there is nothing to wait for
    view_config = config.view.model_copy(update={"debounce_ms": 0})
    config = config.model_copy(update={"view": view_config})
    return IndexView(
        InMemorySurface(), app_service, config=config, config_loader=lambda: config
    )


async def _wait_settled(timer: DebounceTimer) -> None:
    while timer.pending:
        await asyncio.sleep(0.005)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """Check JIRA time phrases and issue keys the way the time logger form does."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@app.command("check-time")
def check_time(
    phrase: str = typer.Argument(..., help="Time phrase, e.g. '1h 30m'"),
    config_path: Path = typer.Option(None, "--config", help="Config file to use"),
):
    """Validate a manual time phrase."""
    config = _load(config_path)

    async def _check() -> bool:
        view = _headless_view(config, TimeLoggerApp())
        view.surface.set_value(TIME_MANUAL_FIELD, phrase)
        view.manual_time_entered()
        await _wait_settled(view.time_phrase.timer)
        return bool(view.time_phrase.last_valid)

    if _run(_check()):
        typer.secho(f"'{phrase}' is a valid JIRA time phrase", fg=typer.colors.GREEN)
        return

    typer.secho(
        f"'{phrase}' does not appear to be a valid JIRA time phrase",
        fg=typer.colors.RED,
    )
    raise typer.Exit(code=1)


@app.command("check-issue")
def check_issue(
    key: str = typer.Argument(..., help="Issue key or bare issue number"),
    project: str = typer.Option(
        None, "--project", "-p", help="Default project key for bare numbers"
    ),
    offline: bool = typer.Option(False, "--offline", help="Skip the JIRA summary lookup"),
    config_path: Path = typer.Option(None, "--config", help="Config file to use"),
):
    """Resolve an issue key and look up its summary."""
    config = _load(config_path)
    if project is not None:
        config = config.model_copy(update={"default_project_key": project})

    async def _check() -> tuple[IssueKeyState, str, str]:
        client = None if offline else JiraClient.from_config(config.jira)
        view = _headless_view(config, TimeLoggerApp(jira_client=client))
        try:
            view.enter_issue_key(key)
            await _wait_settled(view.issue_key.timer)
            lookup = view.issue_key.pending_lookup
            if lookup is not None:
                await lookup
        finally:
            if client is not None:
                await client.close()

        surface = view.surface
        return view.issue_key.state, surface.get_value(ISSUE_FIELD), surface.get_text(SUMMARY)

    state, resolved, summary = _run(_check())

    if state is IssueKeyState.INVALID:
        typer.secho(
            f"'{key}' does not appear to be a valid JIRA issue key",
            fg=typer.colors.RED,
        )
        raise typer.Exit(code=1)

    typer.echo(f"{typer.style(resolved, bold=True)}  {summary}")


@app.command("config")
def show_config(
    config_path: Path = typer.Option(None, "--config", help="Config file to use"),
):
    """Show the config file location and effective settings."""
    path = config_path or get_config_path()
    config = _load(path)
    typer.echo(f"# {path}")
    typer.echo(
        yaml.safe_dump(
            config.model_dump(mode="json", by_alias=True),
            default_flow_style=False,
            sort_keys=False,
        ).rstrip()
    )
