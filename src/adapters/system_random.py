"""Fuente de aleatoriedad del sistema.

Por qué `SystemRandom`:
- Usa la entropía del sistema operativo: no hay semilla que fijar ni estado
  compartido entre ejecuciones, así que el secreto no es predecible.
- Los tests no tocan este módulo; inyectan su propio `RandomSource`.
"""

from __future__ import annotations

import random


class SystemRandomSource:
    """`RandomSource` respaldado por `random.SystemRandom`."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.SystemRandom()

    def next_in_range(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)
