"""Pure extraction of pronunciation fields from raw wikitext.

Only two template shapes are recognised:

- ``{{IPA|<lang>|/…/|...}}``: the first slash-delimited transcription right
  after the language code. Alternates (``[…]``) and named parameters such as
  ``a=RP`` are never captured.
- ``{{audio|<lang>|<filename>|...}}``: the filename runs up to the next ``|``
  or ``}``.

In both cases the first matching template in the markup wins. A miss is not
an error: the field is simply ``None``.
"""

from __future__ import annotations

import re
from functools import lru_cache

from core.domain.models import PronunciationFields

DEFAULT_LANGUAGE = "en"


@lru_cache(maxsize=16)
def _ipa_pattern(language: str) -> re.Pattern[str]:
    return re.compile(r"\{\{IPA\|" + re.escape(language) + r"\|(/[^/]+/)")


@lru_cache(maxsize=16)
def _audio_pattern(language: str) -> re.Pattern[str]:
    return re.compile(r"\{\{audio\|" + re.escape(language) + r"\|([^|}]+)")


def extract_ipa(markup: str, language: str = DEFAULT_LANGUAGE) -> str | None:
    """Return the first IPA transcription (slashes included) or ``None``."""

    match = _ipa_pattern(language).search(markup or "")
    return match.group(1) if match else None


def extract_audio_filename(markup: str, language: str = DEFAULT_LANGUAGE) -> str | None:
    """Return the first audio filename referenced for ``language`` or ``None``."""

    match = _audio_pattern(language).search(markup or "")
    return match.group(1) if match else None


def extract_pronunciation(markup: str, language: str = DEFAULT_LANGUAGE) -> PronunciationFields:
    return PronunciationFields(
        ipa=extract_ipa(markup, language),
        audio_filename=extract_audio_filename(markup, language),
    )
