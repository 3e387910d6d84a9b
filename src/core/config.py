"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Sin ninguna variable definida, el juego usa el rango [1, 100] en inglés.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language
from core.domain.models import GUESS_MAX


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "guessing-game"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "guessing-game"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "guessing-game"
    return Path.home() / ".config" / "guessing-game"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="GUESSING_GAME_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    secret_min: int = Field(
        default=1,
        ge=0,
        le=GUESS_MAX,
        description="Límite inferior (inclusive) del número secreto.",
    )
    secret_max: int = Field(
        default=100,
        ge=0,
        le=GUESS_MAX,
        description="Límite superior (inclusive) del número secreto.",
    )
    default_language: Language = Field(
        default_factory=Language.default,
        description="Idioma por defecto para los mensajes (en/es).",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner de bienvenida antes de la partida.",
    )

    @model_validator(mode="after")
    def _check_range(self) -> "AppSettings":
        if self.secret_min > self.secret_max:
            raise ValueError(
                f"secret_min ({self.secret_min}) must not exceed secret_max ({self.secret_max})"
            )
        return self
