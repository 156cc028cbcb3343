"""Command line interface for fsinspect."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import typer
from rich.console import Console

from fsinspect.cancellation import CancellationToken
from fsinspect.config import AppConfig
from fsinspect.errors import InspectError
from fsinspect.inspector import Inspector
from fsinspect.output.presenter import present_ids, present_records
from fsinspect.store.firestore import FirestoreStore

APP_NAME = "fsinspect"
__version__ = "0.1.0"

err_console = Console(stderr=True)
app = typer.Typer(
    help="fsinspect - Google Cloud Firestore command-line inspector",
    no_args_is_help=True,
    add_completion=False,
)

LOGGER = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()


@contextmanager
def _open_store(config: AppConfig) -> Iterator[FirestoreStore]:
    """Open one client for the whole command and always close it."""
    store = FirestoreStore(config.require_project(), database=config.database)
    try:
        yield store
    finally:
        store.close()


@contextmanager
def _report_errors() -> Iterator[None]:
    try:
        yield
    except InspectError as exc:
        LOGGER.debug("Command failed", exc_info=True)
        err_console.print(f"{APP_NAME}: {exc}", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1) from exc
    except KeyboardInterrupt:
        err_console.print(f"{APP_NAME}: interrupted", markup=False, highlight=False)
        raise typer.Exit(code=130)


@app.callback()
def main(
    ctx: typer.Context,
    project: Optional[str] = typer.Option(
        None, "--project", help="Google Cloud Firestore project ID"
    ),
    database: Optional[str] = typer.Option(None, "--database", help="Firestore database ID"),
    color: bool = typer.Option(True, "--color/--no-color", help="Colorize output"),
    debug: bool = typer.Option(
        False, "--debug", "--verbose", "-v", help="Use debug output"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Deadline in seconds for the whole command"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Inspect collections and documents of a Firestore database."""
    _setup_logging(debug)
    ctx.obj = AppConfig(
        project=project, database=database, color=color, debug=debug, timeout=timeout
    )


@app.command("collection")
def collection(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Collection path"),
    search: Optional[str] = typer.Option(
        None, "--search", help="Keep documents whose field contains text (field:substring)"
    ),
) -> None:
    """Describe the collection."""
    config: AppConfig = ctx.obj
    token = CancellationToken(timeout=config.timeout)
    with _report_errors(), _open_store(config) as store:
        records = Inspector(store).describe_collection(path, token, search=search)
        present_records(records, color=config.color)


@app.command("collections")
def collections(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help="Document path (collection/doc)"),
) -> None:
    """List the collections."""
    config: AppConfig = ctx.obj
    token = CancellationToken(timeout=config.timeout)
    with _report_errors(), _open_store(config) as store:
        present_ids(Inspector(store).list_collections(path, token))


@app.command("doc")
def doc(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Document path, or sub-collection path ending in /"),
) -> None:
    """Describe the document."""
    config: AppConfig = ctx.obj
    token = CancellationToken(timeout=config.timeout)
    with _report_errors(), _open_store(config) as store:
        records = Inspector(store).describe_document(path, token)
        present_records(records, color=config.color)


@app.command("docs")
def docs(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Collection path"),
) -> None:
    """List the documents."""
    config: AppConfig = ctx.obj
    token = CancellationToken(timeout=config.timeout)
    with _report_errors(), _open_store(config) as store:
        present_ids(Inspector(store).list_documents(path, token))


app.command("c", hidden=True)(collection)
app.command("cs", hidden=True)(collections)
app.command("d", hidden=True)(doc)
app.command("ds", hidden=True)(docs)
