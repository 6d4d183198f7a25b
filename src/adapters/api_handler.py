"""Handler de entrada estilo API Gateway (proxy).

Contrato:
- Entrada: evento con `pathParameters.word` (ruta `GET /words/{word}`).
- Salida: `{"statusCode", "headers", "body"}` con el cuerpo serializado a JSON.

El hosting concreto (Lambda, ASGI, etc.) queda fuera; aquí solo se traduce
el evento al Core y el `WordResponse` al formato de proxy.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Mapping

import httpx

from core.config import AppSettings
from core.domain.models import WordResponse
from core.interfaces.dictionary import DictionarySource
from core.services.pronunciation_pipeline import handle_word_request


def _word_from_event(event: Mapping[str, Any] | None) -> str | None:
    params = (event or {}).get("pathParameters") or {}
    word = params.get("word")
    return word if isinstance(word, str) else None


def to_proxy_response(response: WordResponse) -> dict[str, Any]:
    return {
        "statusCode": response.status_code,
        "headers": {"Content-Type": "application/json"},
        # IPA con caracteres no-ASCII: se conservan tal cual.
        "body": json.dumps(response.body_json(), ensure_ascii=False),
    }


async def handle_event(
    event: Mapping[str, Any] | None,
    *,
    settings: AppSettings | None = None,
    source: DictionarySource | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any]:
    response = await handle_word_request(
        _word_from_event(event),
        settings=settings,
        source=source,
        transport=transport,
    )
    return to_proxy_response(response)


def handler(event: Mapping[str, Any] | None, context: Any = None) -> dict[str, Any]:
    """Entrypoint síncrono para runtimes que no esperan corutinas."""

    return asyncio.run(handle_event(event))
