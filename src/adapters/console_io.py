"""Entrada/salida de consola para el bucle de juego.

Por qué separar lectura y escritura:
- La lectura es un stream de texto plano (stdin o un `StringIO` en tests).
- La escritura pasa por `rich.console.Console`, igual que el resto de la CLI,
  y se localiza con `Language`.
"""

from __future__ import annotations

import sys
from typing import TextIO

from rich.console import Console

from core.domain.errors import InputReadFailure
from core.domain.language import Language
from core.domain.models import Feedback, GameSummary

_FEEDBACK_STYLE: dict[Feedback, str] = {
    Feedback.TOO_SMALL: "yellow",
    Feedback.TOO_BIG: "magenta",
    Feedback.WIN: "bold green",
}


class StreamGuessReader:
    """Lee una línea por intento desde un stream de texto.

    EOF (cadena vacía de `readline`) o un error de lectura/decodificación
    se convierten en `InputReadFailure`; nunca se reintenta.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def read_line(self) -> str:
        stream = self._stream if self._stream is not None else sys.stdin
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            raise InputReadFailure(str(exc) or type(exc).__name__) from exc
        if line == "":
            raise InputReadFailure("input stream closed")
        return line


class RichFeedbackWriter:
    """`FeedbackWriter` que imprime mensajes localizados con Rich."""

    def __init__(self, console: Console, language: Language | None = None) -> None:
        self._console = console
        self._language = language or Language.default()

    def prompt(self) -> None:
        self._console.print(self._language.text("prompt"))

    def echo(self, guess: int) -> None:
        self._console.print(self._language.text("echo", guess=guess), style="cyan")

    def feedback(self, category: Feedback, summary: GameSummary | None = None) -> None:
        self._console.print(self._language.text(category.value), style=_FEEDBACK_STYLE[category])
        if summary is not None:
            self._console.print(
                self._language.text("summary", secret=summary.secret, accepted=summary.accepted),
                style="dim",
            )
