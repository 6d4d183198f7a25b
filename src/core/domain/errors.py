"""Errores del dominio.

Taxonomía:
- `MissingWordError`: error del cliente (400), no se hace ninguna llamada.
- `UpstreamError`: la API respondió con un status no exitoso; se propaga tal cual.
- `DictionaryApiError`: la API respondió 200 pero con un payload `error`.

Cualquier otra excepción se trata como error inesperado en el sobre de respuesta.
"""

from __future__ import annotations


class WordServiceError(Exception):
    """Base de los errores propios del servicio."""


class MissingWordError(WordServiceError):
    message = "Word parameter is required"

    def __init__(self) -> None:
        super().__init__(self.message)


class UpstreamError(WordServiceError):
    """Respuesta no exitosa de la fuente; conserva status y cuerpo verbatim."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"upstream returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class DictionaryApiError(WordServiceError):
    def __init__(self, code: str, info: str = "") -> None:
        super().__init__(f"{code}: {info}" if info else code)
        self.code = code
        self.info = info
