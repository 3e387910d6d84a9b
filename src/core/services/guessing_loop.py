"""Number-guessing loop.

This module holds the whole game: drawing the secret, parsing raw input,
comparing guesses and the explicit state machine that drives the loop.
Side effects (prompting, printing, reading stdin) are delegated to the
`GuessReader` / `FeedbackWriter` protocols so the CLI, tests and any
future entry-point can plug in their own I/O.

Parse failures are not errors here: they come back as a rejected
`ParseOutcome` and the controller silently returns to `AWAITING_INPUT`.
The only fatal condition is `InputReadFailure`, raised by the reader and
propagated untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from core.domain.errors import InvalidTransitionError
from core.domain.models import (
    GUESS_MAX,
    Feedback,
    GameEvent,
    GameState,
    GameSummary,
    GuessAttempt,
    ParseOutcome,
    ParseRejection,
    SecretNumber,
)
from core.interfaces import FeedbackWriter, GuessReader, RandomSource

DEFAULT_LOW = 1
DEFAULT_HIGH = 100

# Optional "+" then ASCII digits; `int()` alone would accept "1_0", "٣" and "-5".
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")

TRANSITIONS: dict[tuple[GameState, GameEvent], GameState] = {
    (GameState.AWAITING_INPUT, GameEvent.REJECTED): GameState.AWAITING_INPUT,
    (GameState.AWAITING_INPUT, GameEvent.ACCEPTED): GameState.COMPARING,
    (GameState.COMPARING, GameEvent.TOO_SMALL): GameState.AWAITING_INPUT,
    (GameState.COMPARING, GameEvent.TOO_BIG): GameState.AWAITING_INPUT,
    (GameState.COMPARING, GameEvent.WIN): GameState.WON,
}


def draw_secret(
    random_source: RandomSource,
    low: int = DEFAULT_LOW,
    high: int = DEFAULT_HIGH,
) -> SecretNumber:
    """Draw the secret for one run from the inclusive range [low, high]."""

    if low > high:
        raise ValueError(f"empty range [{low}, {high}]")
    return SecretNumber(value=random_source.next_in_range(low, high), low=low, high=high)


def parse_guess(text: str) -> ParseOutcome:
    """Parse one line of input as an unsigned 32-bit integer."""

    candidate = text.strip()
    if not candidate:
        return ParseOutcome.rejected(ParseRejection.EMPTY)
    if not _UNSIGNED_RE.fullmatch(candidate):
        return ParseOutcome.rejected(ParseRejection.NOT_A_NUMBER)
    value = int(candidate)
    if value > GUESS_MAX:
        return ParseOutcome.rejected(ParseRejection.OUT_OF_RANGE)
    return ParseOutcome.ok(value)


def compare_guess(guess: int, secret: SecretNumber) -> Feedback:
    """Classify a parsed guess against the secret."""

    if guess < secret.value:
        return Feedback.TOO_SMALL
    if guess > secret.value:
        return Feedback.TOO_BIG
    return Feedback.WIN


def next_state(state: GameState, event: GameEvent) -> GameState:
    """Apply one transition; `WON` has no outgoing edges."""

    try:
        return TRANSITIONS[(state, event)]
    except KeyError:
        raise InvalidTransitionError(state, event) from None


@dataclass
class GuessingGame:
    """Loop controller for a single game.

    `step()` runs one iteration and `play()` repeats it until the
    termination predicate `is_finished` holds. No input is read after
    the game is won.
    """

    secret: SecretNumber
    reader: GuessReader
    writer: FeedbackWriter
    state: GameState = GameState.AWAITING_INPUT
    accepted: int = field(default=0, init=False)
    discarded: int = field(default=0, init=False)

    @property
    def is_finished(self) -> bool:
        return self.state is GameState.WON

    def step(self) -> GameState:
        if self.is_finished:
            raise InvalidTransitionError(self.state, "step")

        self.writer.prompt()
        raw = self.reader.read_line()
        attempt = GuessAttempt(raw=raw, outcome=parse_guess(raw))

        if not attempt.outcome.accepted:
            self.discarded += 1
            self.state = next_state(self.state, GameEvent.REJECTED)
            return self.state

        guess = attempt.outcome.value
        self.accepted += 1
        self.state = next_state(self.state, GameEvent.ACCEPTED)
        self.writer.echo(guess)

        category = compare_guess(guess, self.secret)
        self.state = next_state(self.state, GameEvent.from_feedback(category))
        self.writer.feedback(category, self.summary() if self.is_finished else None)
        return self.state

    def play(self) -> GameSummary:
        while not self.is_finished:
            self.step()
        return self.summary()

    def summary(self) -> GameSummary:
        return GameSummary(
            secret=self.secret.value,
            accepted=self.accepted,
            discarded=self.discarded,
        )
