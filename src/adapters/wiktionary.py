"""Fuente de diccionario: API MediaWiki de Wiktionary.

Implementa `core.interfaces.dictionary.DictionarySource` con tres lecturas:
- `action=parse&prop=sections` para localizar la sección.
- `action=query&prop=revisions` para el wikitext de esa sección.
- `action=query&prop=imageinfo` para la URL directa del audio.

Estas consultas están en adapters porque son I/O puro (HTTP). Un status no
exitoso se propaga como `UpstreamError` con status y cuerpo verbatim, sin
reintentos.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import AppSettings
from core.domain.errors import DictionaryApiError, UpstreamError
from core.domain.models import ImageInfoResponse, RevisionsResponse, SectionsResponse
from core.interfaces.dictionary import DictionarySource

logger = logging.getLogger(__name__)


class WiktionaryClient(DictionarySource):
    """Cliente de lectura sobre un `httpx.AsyncClient` ya abierto."""

    def __init__(self, client: httpx.AsyncClient, settings: AppSettings | None = None) -> None:
        self._client = client
        self._settings = settings or AppSettings()

    async def _get_json(self, params: dict[str, str]) -> dict[str, Any]:
        # httpx codifica los parámetros (la palabra puede traer espacios o no-ASCII).
        response = await self._client.get(self._settings.api_url, params=params)
        if not response.is_success:
            raise UpstreamError(response.status_code, response.text)

        data = response.json()
        if isinstance(data, dict) and isinstance(data.get("error"), dict):
            error = data["error"]
            raise DictionaryApiError(str(error.get("code", "unknown")), str(error.get("info", "")))
        return data

    async def find_section_index(self, word: str, title: str) -> str | None:
        logger.debug("Locating section %r for %r", title, word)
        data = await self._get_json(
            {
                "action": "parse",
                "page": word,
                "prop": "sections",
                "format": "json",
            }
        )
        sections = SectionsResponse.model_validate(data).parse.sections
        for section in sections:
            if section.line == title:
                return section.index
        return None

    async def fetch_section_markup(self, word: str, section_index: str) -> str:
        logger.debug("Fetching section %s of %r", section_index, word)
        data = await self._get_json(
            {
                "action": "query",
                "format": "json",
                "titles": word,
                "prop": "revisions",
                "rvprop": "content",
                "rvslots": "main",
                "rvsection": section_index,
            }
        )
        return RevisionsResponse.model_validate(data).first_markup()

    async def resolve_file_url(self, filename: str) -> str:
        title = f"{self._settings.file_namespace}:{filename}"
        logger.debug("Resolving file URL for %r", title)
        data = await self._get_json(
            {
                "action": "query",
                "format": "json",
                "titles": title,
                "prop": "imageinfo",
                "iiprop": "url",
            }
        )
        return ImageInfoResponse.model_validate(data).first_url()
