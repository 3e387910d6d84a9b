"""Tests for the guessing loop controller and its state machine."""

from __future__ import annotations

import pytest

from conftest import FixedRandomSource, ScriptedReader
from core.domain.errors import InputReadFailure, InvalidTransitionError
from core.domain.models import Feedback, GameEvent, GameState, SecretNumber
from core.services.guessing_loop import (
    GuessingGame,
    compare_guess,
    draw_secret,
    next_state,
)


def _game(secret: int, lines: list[str], writer) -> GuessingGame:
    return GuessingGame(
        secret=SecretNumber(value=secret),
        reader=ScriptedReader(lines),
        writer=writer,
    )


class TestDrawSecret:
    def test_uses_random_source_once(self):
        source = FixedRandomSource(37)

        secret = draw_secret(source)

        assert secret.value == 37
        assert (secret.low, secret.high) == (1, 100)
        assert source.calls == [(1, 100)]

    def test_custom_range(self):
        source = FixedRandomSource(5)

        secret = draw_secret(source, 5, 5)

        assert secret.value == 5
        assert source.calls == [(5, 5)]

    def test_rejects_empty_range(self):
        with pytest.raises(ValueError):
            draw_secret(FixedRandomSource(1), 10, 1)

    def test_rejects_value_outside_range(self):
        with pytest.raises(ValueError):
            draw_secret(FixedRandomSource(101))


class TestCompareGuess:
    def test_categories(self):
        secret = SecretNumber(value=50)

        assert compare_guess(10, secret) is Feedback.TOO_SMALL
        assert compare_guess(90, secret) is Feedback.TOO_BIG
        assert compare_guess(50, secret) is Feedback.WIN


class TestStateMachine:
    @pytest.mark.parametrize(
        ("state", "event", "expected"),
        [
            (GameState.AWAITING_INPUT, GameEvent.REJECTED, GameState.AWAITING_INPUT),
            (GameState.AWAITING_INPUT, GameEvent.ACCEPTED, GameState.COMPARING),
            (GameState.COMPARING, GameEvent.TOO_SMALL, GameState.AWAITING_INPUT),
            (GameState.COMPARING, GameEvent.TOO_BIG, GameState.AWAITING_INPUT),
            (GameState.COMPARING, GameEvent.WIN, GameState.WON),
        ],
    )
    def test_defined_transitions(self, state, event, expected):
        assert next_state(state, event) is expected

    @pytest.mark.parametrize("event", list(GameEvent))
    def test_won_is_terminal(self, event):
        with pytest.raises(InvalidTransitionError):
            next_state(GameState.WON, event)

    def test_undefined_transition(self):
        with pytest.raises(InvalidTransitionError):
            next_state(GameState.AWAITING_INPUT, GameEvent.WIN)


class TestGuessingGame:
    @pytest.mark.parametrize("n", range(1, 101))
    def test_exact_guess_wins_first_try(self, n, writer):
        game = _game(n, [str(n)], writer)

        summary = game.play()

        assert game.state is GameState.WON
        assert summary.accepted == 1
        assert summary.secret == n
        assert writer.feedbacks() == [Feedback.WIN]
        assert writer.summary == summary

    @pytest.mark.parametrize("text", ["abc\n", "\n", "-5\n", "12abc\n"])
    def test_invalid_input_only_reprompts(self, text, writer):
        game = _game(50, [text], writer)

        state = game.step()

        assert state is GameState.AWAITING_INPUT
        assert writer.kinds() == ["prompt"]
        assert game.discarded == 1
        assert game.accepted == 0

    def test_too_small_then_continues(self, writer):
        game = _game(50, ["10\n", "50\n"], writer)

        assert game.step() is GameState.AWAITING_INPUT
        assert writer.events == [
            ("prompt", None),
            ("echo", 10),
            ("feedback", Feedback.TOO_SMALL),
        ]

        game.play()
        assert writer.feedbacks().count(Feedback.TOO_SMALL) == 1
        assert writer.kinds().count("prompt") == 2

    def test_too_big_then_continues(self, writer):
        game = _game(50, ["90\n", "50\n"], writer)

        summary = game.play()

        assert writer.feedbacks() == [Feedback.TOO_BIG, Feedback.WIN]
        assert writer.kinds().count("prompt") == 2
        assert summary.accepted == 2

    def test_repeated_invalid_input_never_ends_game(self, writer):
        game = _game(50, ["nope\n"] * 25, writer)
        secret_before = game.secret

        for _ in range(25):
            game.step()

        assert not game.is_finished
        assert game.secret == secret_before
        assert game.discarded == 25
        assert writer.feedbacks() == []

    def test_boundaries_are_valid_guesses(self, writer):
        game = _game(50, ["1\n", "100\n", "50\n"], writer)

        summary = game.play()

        assert writer.feedbacks() == [Feedback.TOO_SMALL, Feedback.TOO_BIG, Feedback.WIN]
        assert summary.discarded == 0

    def test_mixed_session_summary(self, writer):
        game = _game(42, ["hello\n", "  \n", "30\n", "60\n", " 42 \n"], writer)

        summary = game.play()

        assert summary.accepted == 3
        assert summary.discarded == 2
        assert [p for k, p in writer.events if k == "echo"] == [30, 60, 42]

    def test_exhausted_input_is_fatal(self, writer):
        game = _game(50, ["10\n"], writer)

        with pytest.raises(InputReadFailure):
            game.play()
        assert game.state is GameState.AWAITING_INPUT

    def test_no_read_after_win(self, writer):
        reader = ScriptedReader(["50\n", "unused\n"])
        game = GuessingGame(secret=SecretNumber(value=50), reader=reader, writer=writer)

        game.play()

        assert reader.reads == 1
        with pytest.raises(InvalidTransitionError):
            game.step()
        assert reader.reads == 1
