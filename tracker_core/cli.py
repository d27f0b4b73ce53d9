"""CLI module for Tracker - typer app and all commands."""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from tracker_core.config import configure_logging, get_lock_path, get_source_path, get_store_path
from tracker_core.exceptions import TitleValidationError
from tracker_core.models import IssueDraft
from tracker_core.session import IssueSession
from tracker_core.storage import JsonSlotStore
from tracker_core.url_state import UrlStateSync

__all__ = ["app", "main"]

# Create Typer app
app = typer.Typer(help="Tracker - flat-file issue tracker with local edits")

STATUS_MARKERS = {
    "open": "○",
    "in_progress": "◐",
    "closed": "●",
}


@app.callback()
def callback(
    ctx: typer.Context,
    source: Annotated[Optional[Path], typer.Option(help="Flat-file issue source (default: ./issues.dat)")] = None,
    store: Annotated[Optional[Path], typer.Option(help="Local store file (default: ~/.tracker/store.json)")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
):
    """Search, filter, sort, view, edit and create issues."""
    configure_logging(verbose)

    if store is None:
        store_path = get_store_path()
        lock_path = get_lock_path()
    else:
        store_path = store
        lock_path = store.parent / ".lock"

    ctx.obj = {
        "source": source if source is not None else get_source_path(),
        "store": store_path,
        "lock": lock_path,
    }


def _open_session(ctx: typer.Context) -> IssueSession:
    store = JsonSlotStore(ctx.obj["store"], lock_path=ctx.obj["lock"])
    return IssueSession.open(ctx.obj["source"], store)


def _resolve_state(
    location: str,
    search: Optional[str],
    status: Optional[str],
    sort: Optional[str],
) -> UrlStateSync:
    """Seed state from a location, then apply explicit options on top."""
    sync = UrlStateSync(location)

    try:
        sync.update(search=search, status=status, sort=sort)
    except ValueError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=1)

    return sync


def _format_timestamp(value: Optional[str]) -> str:
    if value is None:
        return "-"
    return value[:19].replace("T", " ")


@app.command(name="list")
def list_cmd(
    ctx: typer.Context,
    search: Annotated[Optional[str], typer.Option("--search", "-q", help="Case-insensitive title search")] = None,
    status: Annotated[Optional[str], typer.Option(help="Filter by status (open, in_progress, closed, all)")] = None,
    sort: Annotated[Optional[str], typer.Option(help="Sort by last update (asc, desc)")] = None,
    location: Annotated[str, typer.Option(help="Shareable location to read q/status/sort from")] = "/",
):
    """List issues."""
    sync = _resolve_state(location, search, status, sort)
    session = _open_session(ctx)

    issues = session.view(sync.state)

    if not issues:
        print("No issues found")
    else:
        for issue in issues:
            status_marker = STATUS_MARKERS.get(issue.status, "?")
            print(f"{status_marker} {issue.id} [{_format_timestamp(issue.updated_at)}] {issue.title}")

    print(f"\nLocation: {sync.location}")


@app.command()
def show(
    ctx: typer.Context,
    issue_id: Annotated[str, typer.Argument(help="Issue ID")],
):
    """Show issue details."""
    session = _open_session(ctx)

    issue = session.get(issue_id)
    if issue is None:
        print(f"Error: Issue {issue_id} not found")
        raise typer.Exit(code=1)

    print(f"ID:          {issue.id}")
    print(f"Title:       {issue.title}")
    print(f"Status:      {issue.status}")
    print(f"Updated:     {issue.updated_at or '-'}")

    if issue.description:
        print(f"\nDescription:\n{issue.description}")


@app.command()
def create(
    ctx: typer.Context,
    title: Annotated[str, typer.Argument(help="Issue title (at least 3 characters)")],
    description: Annotated[str, typer.Option(help="Detailed description")] = "",
):
    """Create a new issue."""
    session = _open_session(ctx)

    try:
        issue = session.create(IssueDraft(title=title, description=description))
    except TitleValidationError as e:
        print(f"Error: {e.message}")
        raise typer.Exit(code=1)

    print(f"Created {issue.id}: {issue.title}")


@app.command()
def update(
    ctx: typer.Context,
    issue_id: Annotated[str, typer.Argument(help="Issue ID")],
    title: Annotated[Optional[str], typer.Option(help="New title")] = None,
    status: Annotated[Optional[str], typer.Option(help="New status (open, in_progress, closed)")] = None,
    description: Annotated[Optional[str], typer.Option(help="New description")] = None,
):
    """Edit an issue."""
    session = _open_session(ctx)

    issue = session.get(issue_id)
    if issue is None:
        print(f"Error: Issue {issue_id} not found")
        raise typer.Exit(code=1)

    edited = issue.with_changes(
        title=title if title is not None else issue.title,
        status=status if status is not None else issue.status,
        description=description if description is not None else issue.description,
    )

    try:
        updated = session.update(edited)
    except ValueError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=1)

    print(f"Updated {updated.id}: {updated.title} [{updated.status}]")


@app.command()
def link(
    search: Annotated[Optional[str], typer.Option("--search", "-q", help="Case-insensitive title search")] = None,
    status: Annotated[Optional[str], typer.Option(help="Filter by status (open, in_progress, closed, all)")] = None,
    sort: Annotated[Optional[str], typer.Option(help="Sort by last update (asc, desc)")] = None,
    location: Annotated[str, typer.Option(help="Location to start from")] = "/",
):
    """Print the shareable location for a search/filter/sort."""
    sync = _resolve_state(location, search, status, sort)
    print(sync.location)


def main():
    """Main CLI entry point."""
    app()
