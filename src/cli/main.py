"""CLI del juego (Typer).

Comandos:
- `play`: una partida completa contra stdin/stdout.
- `config`: muestra la configuración efectiva.

Los errores del dominio se traducen a códigos de salida solo aquí.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.console_io import RichFeedbackWriter, StreamGuessReader
from adapters.system_random import SystemRandomSource
from cli.ui_components import build_settings_table, print_banner
from core.config import AppSettings
from core.domain.errors import InputReadFailure
from core.domain.language import Language
from core.domain.models import GameSummary
from core.interfaces import GuessReader, RandomSource
from core.services.guessing_loop import GuessingGame, draw_secret

app = typer.Typer(no_args_is_help=True, help="Guess the secret number.")

_console = Console()
_err_console = Console(stderr=True)


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="GUESSING_GAME_*") from exc


def run_game(
    *,
    settings: AppSettings,
    language: Language,
    random_source: RandomSource,
    reader: GuessReader,
    console: Console,
    show_banner: bool,
) -> GameSummary:
    """Arma la partida con sus adaptadores y la juega hasta ganar."""

    if show_banner:
        print_banner(console, language=language, low=settings.secret_min, high=settings.secret_max)

    secret = draw_secret(random_source, settings.secret_min, settings.secret_max)
    game = GuessingGame(
        secret=secret,
        reader=reader,
        writer=RichFeedbackWriter(console, language),
    )
    return game.play()


@app.command()
def play(
    lang: Language | None = typer.Option(
        None,
        "--lang",
        "-l",
        help="Language for messages (en/es). Defaults to GUESSING_GAME_DEFAULT_LANGUAGE.",
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
) -> None:
    """Play one round: guess until you hit the secret number."""

    settings = _load_settings()
    language = lang or settings.default_language

    try:
        run_game(
            settings=settings,
            language=language,
            random_source=SystemRandomSource(),
            reader=StreamGuessReader(),
            console=_console,
            show_banner=settings.show_banner and not no_banner,
        )
    except InputReadFailure as exc:
        _err_console.print(
            language.text("read_failure", reason=exc.reason), style="red", markup=False
        )
        raise typer.Exit(code=1) from exc


@app.command()
def config() -> None:
    """Show the effective settings."""

    _console.print(build_settings_table(_load_settings()))


def run() -> None:
    app()
