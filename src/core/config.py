"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/Wiktionary) lean config de forma consistente.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central del servicio.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para handler/CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="WORD_SERVICE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_url: str = Field(
        default="https://en.wiktionary.org/w/api.php",
        min_length=8,
        description="Endpoint de la API MediaWiki del diccionario.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="word-service/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para peticiones a la API.",
    )

    language_code: str = Field(
        default="en",
        min_length=1,
        max_length=16,
        description="Código de idioma buscado dentro de las plantillas IPA/audio.",
    )
    section_title: str = Field(
        default="Pronunciation",
        min_length=1,
        description="Título exacto de la sección a localizar.",
    )
    file_namespace: str = Field(
        default="File",
        min_length=1,
        description="Prefijo de namespace para consultar ficheros multimedia.",
    )

    log_level: str = Field(
        default="INFO",
        description="Nivel de logging para la CLI (DEBUG, INFO, WARNING...).",
    )
