"""Contrato de la fuente de diccionario.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el adaptador de Wiktionary por un fake en tests sin
  acoplar el Core a httpx.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DictionarySource(Protocol):
    """Las tres lecturas que necesita el pipeline de pronunciación.

    Reglas de diseño:
    - Todas son asíncronas porque hacen I/O (HTTP).
    - Un status no exitoso se señala con `UpstreamError`.
    """

    async def find_section_index(self, word: str, title: str) -> str | None:
        """Índice de la sección cuyo título coincide exactamente con `title`."""

        ...

    async def fetch_section_markup(self, word: str, section_index: str) -> str:
        """Wikitext del slot principal de la última revisión, limitado a la sección."""

        ...

    async def resolve_file_url(self, filename: str) -> str:
        """URL directa del primer `imageinfo` del fichero."""

        ...
