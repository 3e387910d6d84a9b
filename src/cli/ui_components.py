"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar el banner y las tablas en varios comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.language import Language


def print_banner(console: Console, *, language: Language, low: int, high: int) -> None:
    """Imprime el banner de bienvenida.

    Se puede desactivar (`--no-banner`) cuando la entrada viene de un pipe.
    """

    title = Text(language.text("title"), style="bold cyan")
    subtitle = Text(language.text("subtitle", low=low, high=high), style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_settings_table(settings: AppSettings) -> Table:
    """Tabla con la configuración efectiva."""

    table = Table(title="Guessing Game Settings")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_column("Details", style="dim")

    table.add_row("secret range", f"{settings.secret_min}..{settings.secret_max}", "inclusive")
    table.add_row("language", settings.default_language.value, settings.default_language.label())
    table.add_row("banner", "on" if settings.show_banner else "off", "")
    return table
