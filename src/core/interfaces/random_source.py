"""Contrato de la fuente de aleatoriedad.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- En producción se usa entropía del sistema; en tests se inyecta un valor fijo.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Capacidad mínima: un entero uniforme en un rango cerrado."""

    def next_in_range(self, low: int, high: int) -> int:
        """Devuelve un entero `n` con `low <= n <= high`."""

        ...
