"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el bucle del juego depende de abstracciones
  (aleatoriedad, lectura, escritura) y los tests inyectan dobles.
"""

from core.interfaces.console import FeedbackWriter, GuessReader
from core.interfaces.random_source import RandomSource

__all__ = ["FeedbackWriter", "GuessReader", "RandomSource"]
