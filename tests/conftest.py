"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import httpx
import pytest

from core.config import AppSettings

TEST_API_URL = "https://wiki.test/w/api.php"


class FakeWiki:
    """Programmable stand-in for the MediaWiki API behind an `httpx.MockTransport`.

    Each request is classified by stage (`parse`, `revisions`, `imageinfo`) and
    recorded, so tests can assert which calls were made and in what order.
    """

    def __init__(self) -> None:
        self.sections: list[dict[str, str]] = [{"line": "Pronunciation", "index": "2"}]
        self.markup = ""
        self.file_url = "https://upload.example/x.wav"
        self.failures: dict[str, httpx.Response] = {}
        self.payloads: dict[str, object] = {}
        self.requests: list[httpx.Request] = []

    @staticmethod
    def stage_of(request: httpx.Request) -> str:
        params = request.url.params
        if params.get("action") == "parse":
            return "parse"
        return params.get("prop", "unknown")

    @property
    def stages(self) -> list[str]:
        return [self.stage_of(r) for r in self.requests]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        stage = self.stage_of(request)
        if stage in self.failures:
            return self.failures[stage]
        if stage in self.payloads:
            return httpx.Response(200, json=self.payloads[stage])

        params = request.url.params
        if stage == "parse":
            return httpx.Response(
                200,
                json={
                    "parse": {
                        "title": params.get("page"),
                        "pageid": 4321,
                        "sections": [
                            {"toclevel": 2, "level": "3", "number": f"1.{i}", **s}
                            for i, s in enumerate(self.sections, start=1)
                        ],
                    }
                },
            )
        if stage == "revisions":
            return httpx.Response(
                200,
                json={
                    "batchcomplete": "",
                    "query": {
                        "pages": {
                            "4321": {
                                "pageid": 4321,
                                "ns": 0,
                                "title": params.get("titles"),
                                "revisions": [
                                    {
                                        "slots": {
                                            "main": {
                                                "contentmodel": "wikitext",
                                                "contentformat": "text/x-wiki",
                                                "*": self.markup,
                                            }
                                        }
                                    }
                                ],
                            }
                        }
                    },
                },
            )
        if stage == "imageinfo":
            return httpx.Response(
                200,
                json={
                    "batchcomplete": "",
                    "query": {
                        "pages": {
                            "-1": {
                                "ns": 6,
                                "title": params.get("titles"),
                                "missing": "",
                                "known": "",
                                "imagerepository": "shared",
                                "imageinfo": [{"url": self.file_url}],
                            }
                        }
                    },
                },
            )
        return httpx.Response(400, text=f"unexpected request {request.url}")


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(api_url=TEST_API_URL, http_timeout_seconds=5.0)


@pytest.fixture
def wiki() -> FakeWiki:
    return FakeWiki()
