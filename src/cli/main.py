"""CLI de desarrollo (Typer).

No forma parte del contrato de entrada del servicio: es un envoltorio fino
sobre `handle_word_request` para probar búsquedas en local.
"""

from __future__ import annotations

import asyncio
import json
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from cli import doctor
from cli.ui_components import build_error_panel, build_pronunciation_table
from core.config import AppSettings
from core.domain.models import PronunciationResult
from core.services.pronunciation_pipeline import handle_word_request

app = typer.Typer(no_args_is_help=True, help="Wiktionary pronunciation lookups.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


@app.command()
def lookup(
    word: str = typer.Argument(..., help="Word to resolve."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON envelope."),
) -> None:
    """Resolve IPA and audio URL for WORD."""

    settings = AppSettings()
    configure_logging(settings.log_level)

    response = asyncio.run(handle_word_request(word, settings=settings))

    if as_json:
        payload = {"statusCode": response.status_code, "body": response.body_json()}
        _console.print_json(json.dumps(payload, ensure_ascii=False))
    elif isinstance(response.body, PronunciationResult):
        _console.print(build_pronunciation_table(word, response.body))
    else:
        _console.print(build_error_panel(response))

    if not response.ok:
        raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
