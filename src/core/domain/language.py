"""Language utilities for the guessing game.

This module centralizes the language options supported across the
application together with the user-facing message catalog. Keeping it in
the domain layer allows both CLI and adapters to share a single source of
truth without creating circular imports.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.ENGLISH

    def label(self) -> str:
        """Human readable label for prompts and tables."""

        return "Spanish" if self is Language.SPANISH else "English"

    def text(self, key: str, **values: object) -> str:
        """Look up a message in the catalog and format it with `values`."""

        template = _MESSAGES[self][key]
        return template.format(**values) if values else template


_MESSAGES: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "title": "Guess the number!",
        "subtitle": "Pick a number between {low} and {high}",
        "prompt": "Please input your guess.",
        "echo": "You guessed: {guess}",
        "too_small": "Too small!",
        "too_big": "Too big!",
        "win": "You win!",
        "summary": "The number was {secret}. Guesses: {accepted}.",
        "read_failure": "Could not read your guess: {reason}",
    },
    Language.SPANISH: {
        "title": "¡Adivina el número!",
        "subtitle": "Elige un número entre {low} y {high}",
        "prompt": "Introduce tu intento.",
        "echo": "Has dicho: {guess}",
        "too_small": "¡Demasiado pequeño!",
        "too_big": "¡Demasiado grande!",
        "win": "¡Has ganado!",
        "summary": "El número era {secret}. Intentos: {accepted}.",
        "read_failure": "No se pudo leer tu intento: {reason}",
    },
}
