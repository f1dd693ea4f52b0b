"""CLI de Taskie (Typer + Rich).

Por qué la CLI es fina:
- Toda la lógica de red vive en `core.services.remote_api`; aquí solo se
  construye la sesión, se llama a la fachada y se pinta el `Result`.
- El token se pasa con `--token` o `TASKIE_TOKEN`; no se guarda en disco.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Awaitable, Callable, Optional, TypeVar, assert_never

import typer
from rich.console import Console

from adapters.http_client import build_async_client
from adapters.json_exporter import export_tasks_json
from adapters.remote_api_service import RemoteApiService
from cli import doctor
from cli.ui_components import build_profile_panel, build_tasks_table
from core.config import AppSettings
from core.domain.models import AddTaskRequest, UserDataRequest
from core.domain.result import Failure, Result, Success
from core.domain.session import Session
from core.logger import setup_logger
from core.services.remote_api import RemoteApi

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Taskie client: tasks, profile and session.")
tasks_app = typer.Typer(no_args_is_help=True, help="List, add, complete and delete tasks.")
app.add_typer(tasks_app, name="tasks")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _settings(ctx: typer.Context) -> AppSettings:
    if isinstance(ctx.obj, AppSettings):
        return ctx.obj
    return AppSettings()


def _execute(
    settings: AppSettings,
    operation: Callable[[RemoteApi], Awaitable[Result[T]]],
) -> Result[T]:
    async def _go() -> Result[T]:
        session = Session(token=settings.token)
        async with build_async_client(settings, session=session) as client:
            api = RemoteApi(RemoteApiService(client), session=session)
            return await operation(api)

    return asyncio.run(_go())


def _unwrap(result: Result[T]) -> T:
    match result:
        case Success(value=value):
            return value
        case Failure():
            _console.print(f"[red]Error:[/red] {result}")
            raise typer.Exit(code=1)
        case _:
            assert_never(result)


@app.callback()
def main(
    ctx: typer.Context,
    token: Optional[str] = typer.Option(None, "--token", help="Session token (defaults to TASKIE_TOKEN)."),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Backend origin (defaults to TASKIE_BASE_URL)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP traffic, bodies included."),
) -> None:
    settings = AppSettings()
    updates: dict[str, object] = {}
    if token is not None:
        updates["token"] = token
    if base_url is not None:
        updates["base_url"] = base_url
    if verbose:
        updates["log_level"] = "DEBUG"
        updates["log_http_bodies"] = True
    if updates:
        settings = settings.model_copy(update=updates)

    setup_logger("taskie", level=settings.log_level)
    ctx.obj = settings


@app.command()
def login(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Account email."),
    password: str = typer.Option(..., prompt=True, hide_input=True),
) -> None:
    """Log in and print the session token."""

    credentials = UserDataRequest(email=email, password=password)
    token = _unwrap(_execute(_settings(ctx), lambda api: api.login(credentials)))
    _console.print("[green]Logged in.[/green]")
    _console.print(f"export TASKIE_TOKEN={token}")


@app.command()
def register(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Account email."),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Display name."),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True),
) -> None:
    """Create a new account."""

    credentials = UserDataRequest(email=email, password=password, name=name)
    message = _unwrap(_execute(_settings(ctx), lambda api: api.register(credentials)))
    _console.print(f"[green]{message}[/green]")


@app.command()
def profile(ctx: typer.Context) -> None:
    """Show the profile of the logged-in user."""

    user = _unwrap(_execute(_settings(ctx), lambda api: api.get_user_profile()))
    _console.print(build_profile_panel(user))


@tasks_app.command("list")
def list_tasks(
    ctx: typer.Context,
    json_output: Optional[Path] = typer.Option(None, "--json", help="Also write the tasks to this JSON file."),
) -> None:
    """List open (not completed) tasks."""

    tasks = _unwrap(_execute(_settings(ctx), lambda api: api.list_tasks()))
    if json_output is not None:
        path = export_tasks_json(tasks=tasks, output_path=json_output)
        _console.print(f"[green]Saved JSON:[/green] {path}")
    if not tasks:
        _console.print("[dim]No open tasks.[/dim]")
        return
    _console.print(build_tasks_table(tasks))


@tasks_app.command("add")
def add_task(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Task title."),
    content: str = typer.Option("", "--content", "-c", help="Task description."),
    priority: int = typer.Option(1, "--priority", "-p", min=1, max=3, help="1 = low, 3 = high."),
) -> None:
    """Create a task."""

    request = AddTaskRequest(title=title, content=content, task_priority=priority)
    task = _unwrap(_execute(_settings(ctx), lambda api: api.add_task(request)))
    _console.print(f"[green]Created task[/green] {task.id}: {task.title}")


@tasks_app.command("complete")
def complete_task(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task identifier."),
) -> None:
    """Mark a task as completed."""

    message = _unwrap(_execute(_settings(ctx), lambda api: api.complete_task(task_id)))
    _console.print(f"[green]{message}[/green]")


@tasks_app.command("delete")
def delete_task(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task identifier."),
) -> None:
    """Delete a task."""

    message = _unwrap(_execute(_settings(ctx), lambda api: api.delete_task(task_id)))
    _console.print(f"[green]{message}[/green]")


def run() -> None:
    app()
