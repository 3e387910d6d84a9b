"""Script de ejecución dentro de `src/`.

Mantiene un entrypoint simple además del script `guessing-game`.
"""

from __future__ import annotations

import sys

# Los mensajes en español llevan "¡"/"ñ"; cp1252 en consolas Windows no siempre los codifica.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


if __name__ == "__main__":
    run()
