"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Las respuestas de la API MediaWiki se validan con `model_validate`: una forma
  inesperada falla en el borde en lugar de propagarse como `KeyError`.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class WordQuery(BaseModel):
    """Palabra consultada (entrada del servicio)."""

    word: str = Field(
        ...,
        min_length=1,
        description="Palabra a resolver (título de la página en el diccionario).",
    )


class PronunciationFields(BaseModel):
    """Resultado de la extracción pura sobre el wikitext de una sección."""

    ipa: str | None = Field(
        default=None,
        description="Primera transcripción IPA (con las barras, p.ej. '/ˈkʊki/').",
    )
    audio_filename: str | None = Field(
        default=None,
        description="Nombre del fichero de audio en el namespace File (no es URL).",
    )


class PronunciationResult(BaseModel):
    """Salida del pipeline: ambos campos son opcionales e independientes."""

    ipa: str | None = Field(
        default=None,
        description="Transcripción IPA si se encontró.",
    )
    audio_url: str | None = Field(
        default=None,
        description="URL directa del audio si se resolvió.",
    )


class ErrorBody(BaseModel):
    message: str = Field(..., description="Mensaje de error para el cliente.")


class WordResponse(BaseModel):
    """Sobre de respuesta: código de estado + cuerpo JSON.

    Por qué un modelo separado:
    - El pipeline produce datos; el sobre decide la forma final de la respuesta.
    """

    status_code: int = Field(..., ge=100, le=599)
    body: PronunciationResult | ErrorBody

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def body_json(self) -> dict[str, Any]:
        # Los campos ausentes no se serializan (equivale a `undefined` en JSON).
        return self.body.model_dump(mode="json", exclude_none=True)


# --- Payloads de la API MediaWiki -------------------------------------------


class WikiSection(BaseModel):
    model_config = ConfigDict(extra="ignore")

    line: str = Field(..., description="Título visible de la sección.")
    index: str = Field(..., description="Índice opaco de la sección.")


class ParsedSections(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sections: list[WikiSection] = Field(default_factory=list)


class SectionsResponse(BaseModel):
    """`action=parse&prop=sections`."""

    model_config = ConfigDict(extra="ignore")

    parse: ParsedSections


class MainSlot(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    content: str = Field(..., alias="*", description="Wikitext crudo del slot principal.")


class RevisionSlots(BaseModel):
    model_config = ConfigDict(extra="ignore")

    main: MainSlot


class Revision(BaseModel):
    model_config = ConfigDict(extra="ignore")

    slots: RevisionSlots


class RevisionPage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    revisions: list[Revision] = Field(..., min_length=1)


class RevisionsQuery(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pages: dict[str, RevisionPage] = Field(..., min_length=1)


class RevisionsResponse(BaseModel):
    """`action=query&prop=revisions`; las páginas van indexadas por id opaco."""

    model_config = ConfigDict(extra="ignore")

    query: RevisionsQuery

    def first_markup(self) -> str:
        page = next(iter(self.query.pages.values()))
        return page.revisions[0].slots.main.content


class ImageInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str


class ImageInfoPage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    imageinfo: list[ImageInfo] = Field(..., min_length=1)


class ImageInfoQuery(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pages: dict[str, ImageInfoPage] = Field(..., min_length=1)


class ImageInfoResponse(BaseModel):
    """`action=query&prop=imageinfo&iiprop=url`."""

    model_config = ConfigDict(extra="ignore")

    query: ImageInfoQuery

    def first_url(self) -> str:
        page = next(iter(self.query.pages.values()))
        return page.imageinfo[0].url
