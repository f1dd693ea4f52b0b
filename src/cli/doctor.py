"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, write_user_env_vars
from core.domain.endpoints import ENDPOINTS
from core.domain.session import Session

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings, session=Session()) as client:
            response = await client.get("/")
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def build_endpoints_table() -> Table:
    table = Table(title="Endpoints")
    table.add_column("Operation", style="cyan", no_wrap=True)
    table.add_column("Method", style="white")
    table.add_column("Path", style="magenta")
    table.add_column("Auth", style="dim")
    for endpoint in ENDPOINTS.values():
        path = endpoint.path
        if endpoint.query_param:
            path = f"{path}?{endpoint.query_param}="
        table.add_row(endpoint.name, endpoint.method, path, "yes" if endpoint.requires_auth else "no")
    return table


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()

    table = Table(title="Taskie Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    if settings.token.strip():
        table.add_row("Token", "OK", "Authenticated requests enabled")
    else:
        table.add_row("Token", "OPTIONAL", "No token set -> run `login` and export TASKIE_TOKEN")
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)
    _console.print(build_endpoints_table())

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Check TASKIE_BASE_URL or run `doctor setup-server`."
        )


@app.command(name="setup-server")
def setup_server() -> None:
    """Interactive backend setup (stores config in the user config .env)."""

    settings = AppSettings()
    base_url = typer.prompt("Backend base URL", default=settings.base_url, show_default=True).strip()
    if not base_url.startswith(("http://", "https://")):
        raise typer.BadParameter("base URL must start with http:// or https://")

    env_path = write_user_env_vars({"TASKIE_BASE_URL": base_url.rstrip("/")})
    _console.print(f"[green]Saved backend config to:[/green] {env_path}")
