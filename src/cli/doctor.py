"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(
                settings.api_url,
                params={"action": "query", "meta": "siteinfo", "format": "json"},
            )
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Show effective configuration and check API connectivity."""

    settings = AppSettings()

    table = Table(title="word-service Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API URL", "OK", settings.api_url)
    table.add_row("Template language", "OK", settings.language_code)
    table.add_row("Section title", "OK", settings.section_title)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("API connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Check WORD_SERVICE_API_URL and network/proxy settings."
        )
        raise typer.Exit(code=1)
