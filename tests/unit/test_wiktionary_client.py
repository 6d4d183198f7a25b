"""Unit tests for the MediaWiki adapter over a mocked transport."""

from __future__ import annotations

import asyncio

import httpx
import pytest
from pydantic import ValidationError

from adapters.http_client import build_async_client
from adapters.wiktionary import WiktionaryClient
from core.config import AppSettings
from core.domain.errors import DictionaryApiError, UpstreamError


def _run(coro_factory, settings: AppSettings, transport: httpx.MockTransport):
    """Open a client on `transport` and await `coro_factory(wiktionary)`."""

    async def _go():
        async with build_async_client(settings, transport=transport) as client:
            return await coro_factory(WiktionaryClient(client, settings))

    return asyncio.run(_go())


def test_find_section_index_matches_title_exactly(settings, wiki) -> None:
    wiki.sections = [
        {"line": "Etymology", "index": "1"},
        {"line": "Pronunciation 1", "index": "2"},
        {"line": "Pronunciation", "index": "3"},
        {"line": "Pronunciation", "index": "7"},
    ]

    index = _run(lambda w: w.find_section_index("lead", "Pronunciation"), settings, wiki.transport)

    assert index == "3"
    params = wiki.requests[0].url.params
    assert params["action"] == "parse"
    assert params["page"] == "lead"
    assert params["prop"] == "sections"
    assert params["format"] == "json"


def test_find_section_index_absent(settings, wiki) -> None:
    wiki.sections = [{"line": "Etymology", "index": "1"}, {"line": "Noun", "index": "2"}]

    index = _run(lambda w: w.find_section_index("xyzzy", "Pronunciation"), settings, wiki.transport)

    assert index is None


def test_word_is_url_encoded(settings, wiki) -> None:
    _run(lambda w: w.find_section_index("ice cream", "Pronunciation"), settings, wiki.transport)

    request = wiki.requests[0]
    assert "ice+cream" in str(request.url) or "ice%20cream" in str(request.url)
    assert request.url.params["page"] == "ice cream"


def test_user_agent_header_is_sent(settings, wiki) -> None:
    _run(lambda w: w.find_section_index("potato", "Pronunciation"), settings, wiki.transport)

    assert wiki.requests[0].headers["User-Agent"] == settings.user_agent


def test_fetch_section_markup_returns_main_slot(settings, wiki) -> None:
    wiki.markup = "* {{IPA|en|/ˈkʊki/}}"

    markup = _run(lambda w: w.fetch_section_markup("cookie", "3"), settings, wiki.transport)

    assert markup == "* {{IPA|en|/ˈkʊki/}}"
    params = wiki.requests[0].url.params
    assert params["titles"] == "cookie"
    assert params["prop"] == "revisions"
    assert params["rvprop"] == "content"
    assert params["rvslots"] == "main"
    assert params["rvsection"] == "3"


def test_fetch_section_markup_uses_first_page_entry(settings, wiki) -> None:
    def _revs(text: str) -> dict:
        return {"revisions": [{"slots": {"main": {"*": text}}}]}

    wiki.payloads["revisions"] = {"query": {"pages": {"9": _revs("first"), "1": _revs("second")}}}

    markup = _run(lambda w: w.fetch_section_markup("cookie", "3"), settings, wiki.transport)

    assert markup == "first"


def test_resolve_file_url_prefixes_namespace(settings, wiki) -> None:
    wiki.file_url = "https://upload.example/en-us-cookie.ogg"

    url = _run(lambda w: w.resolve_file_url("en-us-cookie.ogg"), settings, wiki.transport)

    assert url == "https://upload.example/en-us-cookie.ogg"
    params = wiki.requests[0].url.params
    assert params["titles"] == "File:en-us-cookie.ogg"
    assert params["prop"] == "imageinfo"
    assert params["iiprop"] == "url"


@pytest.mark.parametrize("stage", ["parse", "revisions", "imageinfo"])
def test_non_success_status_raises_upstream_error_verbatim(settings, wiki, stage: str) -> None:
    wiki.failures[stage] = httpx.Response(503, text="Service Unavailable: maxlag")
    calls = {
        "parse": lambda w: w.find_section_index("potato", "Pronunciation"),
        "revisions": lambda w: w.fetch_section_markup("potato", "2"),
        "imageinfo": lambda w: w.resolve_file_url("x.wav"),
    }

    with pytest.raises(UpstreamError) as excinfo:
        _run(calls[stage], settings, wiki.transport)

    assert excinfo.value.status_code == 503
    assert excinfo.value.body == "Service Unavailable: maxlag"


def test_api_error_payload_raises_dictionary_api_error(settings, wiki) -> None:
    wiki.payloads["parse"] = {
        "error": {"code": "missingtitle", "info": "The page you specified doesn't exist."}
    }

    with pytest.raises(DictionaryApiError) as excinfo:
        _run(lambda w: w.find_section_index("qwrtzp", "Pronunciation"), settings, wiki.transport)

    assert excinfo.value.code == "missingtitle"


def test_malformed_revisions_payload_raises_validation_error(settings, wiki) -> None:
    wiki.payloads["revisions"] = {"query": {"pages": {"-1": {"ns": 0, "missing": ""}}}}

    with pytest.raises(ValidationError):
        _run(lambda w: w.fetch_section_markup("qwrtzp", "2"), settings, wiki.transport)
