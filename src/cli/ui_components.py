"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ErrorBody, PronunciationResult, WordResponse


def build_pronunciation_table(word: str, result: PronunciationResult) -> Table:
    """Tabla Rich con IPA y URL de audio (o '-' si faltan)."""

    table = Table(title=f"Pronunciation: {word}")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("IPA", result.ipa or Text("-", style="dim"))
    table.add_row("Audio URL", result.audio_url or Text("-", style="dim"))
    return table


def build_error_panel(response: WordResponse) -> Panel:
    message = response.body.message if isinstance(response.body, ErrorBody) else ""
    title = Text(f"HTTP {response.status_code}", style="bold red")
    return Panel(Text(message), title=title, border_style="red")
