"""Contratos de entrada/salida del bucle de juego.

Reglas de diseño:
- `read_line` es bloqueante y es el único punto de espera del programa.
- Si la entrada está agotada o rota, `read_line` lanza `InputReadFailure`
  en vez de devolver una cadena vacía.
- El escritor nunca recibe las líneas descartadas: la política de reintento
  es silenciosa.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Feedback, GameSummary


@runtime_checkable
class GuessReader(Protocol):
    def read_line(self) -> str:
        """Lee una línea de texto (con o sin salto de línea final)."""

        ...


@runtime_checkable
class FeedbackWriter(Protocol):
    def prompt(self) -> None:
        """Pide un nuevo intento."""

        ...

    def echo(self, guess: int) -> None:
        """Repite el intento aceptado."""

        ...

    def feedback(self, category: Feedback, summary: GameSummary | None = None) -> None:
        """Informa la categoría; `summary` solo acompaña a `Feedback.WIN`."""

        ...
