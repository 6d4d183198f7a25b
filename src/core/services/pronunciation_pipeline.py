"""Pronunciation lookup orchestration.

The pipeline is strictly linear::

    START -> section locator -> section fetch + extraction
          -> (audio resolver | skip) -> DONE

Every stage may jump straight to a failure. ``resolve_pronunciation`` only
knows the stages and lets ``UpstreamError`` travel unchanged;
``handle_word_request`` is the single place that turns the outcome (or the
failure) into a ``WordResponse``. Keeping both apart lets the CLI, the
gateway handler and tests share the exact same envelope.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from adapters.wiktionary import WiktionaryClient
from core.config import AppSettings
from core.domain.errors import MissingWordError, UpstreamError
from core.domain.models import (
    ErrorBody,
    PronunciationFields,
    PronunciationResult,
    WordQuery,
    WordResponse,
)
from core.interfaces.dictionary import DictionarySource
from core.services.markup_extractor import extract_pronunciation

logger = logging.getLogger(__name__)


async def fetch_pronunciation_fields(
    source: DictionarySource,
    word: str,
    section_index: str | None,
    *,
    language: str,
) -> PronunciationFields:
    """Fetch the section markup and extract IPA/audio filename from it.

    Without a section index there is nothing scoped to fetch, so no request is
    made and both fields stay empty.
    """

    if section_index is None:
        logger.info("No pronunciation section for %r", word)
        return PronunciationFields()

    markup = await source.fetch_section_markup(word, section_index)
    return extract_pronunciation(markup, language)


async def resolve_pronunciation(
    word: str,
    source: DictionarySource,
    *,
    settings: AppSettings | None = None,
) -> PronunciationResult:
    settings = settings or AppSettings()

    section_index = await source.find_section_index(word, settings.section_title)
    fields = await fetch_pronunciation_fields(
        source,
        word,
        section_index,
        language=settings.language_code,
    )

    audio_url = None
    if fields.audio_filename:
        audio_url = await source.resolve_file_url(fields.audio_filename)

    return PronunciationResult(ipa=fields.ipa, audio_url=audio_url)


def _parse_word(word: str | None) -> WordQuery:
    try:
        return WordQuery(word=(word or "").strip())
    except ValidationError as exc:
        raise MissingWordError() from exc


async def handle_word_request(
    word: str | None,
    *,
    settings: AppSettings | None = None,
    source: DictionarySource | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WordResponse:
    """Run the pipeline for ``word`` and build the final response.

    - missing word -> 400, no outbound calls
    - upstream non-2xx -> that status, upstream body text as message
    - anything else -> 500 with a generic message naming the word
    """

    settings = settings or AppSettings()

    try:
        query = _parse_word(word)
    except MissingWordError as exc:
        return WordResponse(status_code=400, body=ErrorBody(message=exc.message))

    try:
        if source is not None:
            result = await resolve_pronunciation(query.word, source, settings=settings)
        else:
            async with build_async_client(settings, transport=transport) as client:
                result = await resolve_pronunciation(
                    query.word,
                    WiktionaryClient(client, settings),
                    settings=settings,
                )
    except UpstreamError as exc:
        logger.warning("Upstream HTTP %s for word %r", exc.status_code, query.word)
        return WordResponse(status_code=exc.status_code, body=ErrorBody(message=exc.body))
    except Exception:
        logger.exception("Error fetching pronunciation for word %s", query.word)
        return WordResponse(
            status_code=500,
            body=ErrorBody(message=f"Error fetching data for word {query.word}"),
        )

    return WordResponse(status_code=200, body=result)
