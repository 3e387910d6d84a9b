"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce stdin/stdout, CLI ni fuentes de aleatoriedad: solo
  conceptos del juego (secreto, intento, feedback, estado).
"""
