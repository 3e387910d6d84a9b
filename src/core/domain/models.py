"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a stdin/stdout ni a la fuente de aleatoriedad.
- Los modelos son inmutables (`frozen`): el secreto no cambia durante la partida
  y cada intento se descarta tras su iteración.

Nota:
- Estos modelos describen *qué* es la partida, no *cómo* se juega; el bucle
  vive en `core.services.guessing_loop`.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

# Rango de un entero sin signo de 32 bits.
GUESS_MAX = 4_294_967_295


class SecretNumber(BaseModel):
    """El número a adivinar, elegido una sola vez por ejecución."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., description="Valor secreto.")
    low: int = Field(default=1, ge=0, le=GUESS_MAX, description="Límite inferior (inclusive).")
    high: int = Field(default=100, ge=0, le=GUESS_MAX, description="Límite superior (inclusive).")

    @model_validator(mode="after")
    def _check_in_range(self) -> "SecretNumber":
        if self.low > self.high:
            raise ValueError(f"empty range [{self.low}, {self.high}]")
        if not self.low <= self.value <= self.high:
            raise ValueError(f"secret {self.value} outside [{self.low}, {self.high}]")
        return self


class ParseRejection(str, Enum):
    """Motivo por el que una línea no es un intento válido."""

    EMPTY = "empty"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"


class ParseOutcome(BaseModel):
    """Resultado (tipo `Result`) de parsear una línea.

    Exactamente uno de `value` / `rejection` está presente.
    """

    model_config = ConfigDict(frozen=True)

    value: int | None = Field(default=None, ge=0, le=GUESS_MAX)
    rejection: ParseRejection | None = None

    @model_validator(mode="after")
    def _check_exclusive(self) -> "ParseOutcome":
        if (self.value is None) == (self.rejection is None):
            raise ValueError("exactly one of value/rejection must be set")
        return self

    @classmethod
    def ok(cls, value: int) -> "ParseOutcome":
        return cls(value=value)

    @classmethod
    def rejected(cls, rejection: ParseRejection) -> "ParseOutcome":
        return cls(rejection=rejection)

    @property
    def accepted(self) -> bool:
        return self.value is not None


class GuessAttempt(BaseModel):
    """Una línea de entrada y su parseo. Efímero: no se guarda historial."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field(..., description="Texto leído tal cual (sin recortar).")
    outcome: ParseOutcome


class Feedback(str, Enum):
    """Categoría de respuesta tras un intento bien formado."""

    TOO_SMALL = "too_small"
    TOO_BIG = "too_big"
    WIN = "win"


class GameState(str, Enum):
    AWAITING_INPUT = "awaiting_input"
    COMPARING = "comparing"
    WON = "won"


class GameEvent(str, Enum):
    """Eventos que disparan transiciones de `GameState`."""

    REJECTED = "rejected"
    ACCEPTED = "accepted"
    TOO_SMALL = "too_small"
    TOO_BIG = "too_big"
    WIN = "win"

    @classmethod
    def from_feedback(cls, feedback: Feedback) -> "GameEvent":
        return cls(feedback.value)


class GameSummary(BaseModel):
    """Resumen devuelto al terminar la partida."""

    secret: int = Field(..., ge=0, le=GUESS_MAX)
    accepted: int = Field(..., ge=0, description="Intentos bien formados (incluye el ganador).")
    discarded: int = Field(default=0, ge=0, description="Líneas descartadas por no ser un número.")
