"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI traduce estos errores a códigos de salida en un único punto.
- Los fallos de parseo NO son excepciones: se modelan como `ParseOutcome`
  y el bucle los descarta sin avisar.
"""

from __future__ import annotations


class GuessingGameError(Exception):
    """Base de todos los errores del juego."""


class InputReadFailure(GuessingGameError):
    """La fuente de entrada no se puede leer (EOF, stream cerrado, bytes inválidos).

    Es fatal: el bucle no intenta recuperarse.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InvalidTransitionError(GuessingGameError):
    """Transición no definida en la máquina de estados del juego."""

    def __init__(self, state: object, event: object) -> None:
        super().__init__(f"no transition from {state} on {event}")
        self.state = state
        self.event = event
