import random
import threading

import pytest

from conftest import StubPuzzleSource
from infinite_wordle.config.game_settings import word_predicate_for
from infinite_wordle.models.errors import RoundOverError, ValidationError
from infinite_wordle.models.game import LetterState, OutcomeKind, RoundOutcome, RoundStatus
from infinite_wordle.services.round_service import (
    RoundService, advance_round, new_round, get_round_service, initialize_round_service
)


def test_new_round():
    state = new_round("CRANE", max_attempts=6)
    assert state.solution == "crane"
    assert state.attempt == 1
    assert state.status == RoundStatus.AWAITING_GUESS
    assert set(state.keyboard.values()) == {LetterState.UNKNOWN}

    with pytest.raises(ValueError):
        new_round("crane", max_attempts=0)


def test_winning_guess(accept_all):
    state = new_round("crane", max_attempts=6)
    state, classification, outcome = advance_round(state, "  CRANE\n", accept_all)

    assert outcome.kind == OutcomeKind.WON
    assert outcome.attempts == 1
    assert classification == (LetterState.CORRECT,) * 5
    assert state.status == RoundStatus.WON
    assert state.terminal


def test_win_reports_attempt_that_won(accept_all):
    state = new_round("smell", max_attempts=6)
    state, _, _ = advance_round(state, "spell", accept_all)
    state, _, _ = advance_round(state, "shell", accept_all)
    state, _, outcome = advance_round(state, "smell", accept_all)

    assert outcome == RoundOutcome.won(3)
    assert state.guesses == ("spell", "shell", "smell")


def test_non_winning_guess(accept_all):
    state = new_round("smell", max_attempts=6)
    new_state, classification, outcome = advance_round(state, "spell", accept_all)

    assert outcome.kind == OutcomeKind.CONTINUE
    assert classification == (
        LetterState.CORRECT, LetterState.INCORRECT, LetterState.CORRECT,
        LetterState.CORRECT, LetterState.CORRECT,
    )
    assert new_state.attempt == 2
    assert new_state.keyboard["p"] == LetterState.INCORRECT
    assert new_state.keyboard["s"] == LetterState.CORRECT
    # the previous state is untouched
    assert state.attempt == 1
    assert state.keyboard["p"] == LetterState.UNKNOWN


def test_loss_after_max_attempts(accept_all):
    state = new_round("crane", max_attempts=2)
    statuses = [state.status]

    state, _, outcome = advance_round(state, "spell", accept_all)
    statuses.append(state.status)
    assert outcome.kind == OutcomeKind.CONTINUE

    state, classification, outcome = advance_round(state, "dumpy", accept_all)
    statuses.append(state.status)
    assert outcome.kind == OutcomeKind.LOST
    assert outcome.solution == "crane"
    assert classification is not None

    assert statuses == [RoundStatus.AWAITING_GUESS, RoundStatus.AWAITING_GUESS, RoundStatus.LOST]


def test_winning_on_last_attempt_is_a_win(accept_all):
    state = new_round("crane", max_attempts=1)
    state, _, outcome = advance_round(state, "crane", accept_all)
    assert outcome.kind == OutcomeKind.WON
    assert state.status == RoundStatus.WON


@pytest.mark.parametrize("guess, message", [
    ("ab", "Too short!"),
    ("", "Too short!"),
    ("cranes", "Too long!"),
    ("xxxxx", "Not a word!"),
])
def test_invalid_guess_is_retried(guess, message):
    state = new_round("crane", max_attempts=6)
    new_state, classification, outcome = advance_round(state, guess, word_predicate_for("crane"))

    assert outcome.kind == OutcomeKind.RETRY
    assert isinstance(outcome.error, ValidationError)
    assert str(outcome.error) == message
    assert classification is None
    assert new_state is state
    assert new_state.attempt == 1
    assert new_state.status == RoundStatus.AWAITING_GUESS


def test_invalid_guesses_do_not_consume_attempts():
    is_valid_word = word_predicate_for("crane")
    state = new_round("crane", max_attempts=6)

    for guess in ["ab", "spell", "qqqqq", "toolong", "dumpy", "x", "arose"]:
        state, _, _ = advance_round(state, guess, is_valid_word)

    assert state.attempt == 1 + 3
    assert state.guesses == ("spell", "dumpy", "arose")


def test_correct_letter_survives_later_guesses(accept_all):
    state = new_round("crane", max_attempts=6)
    state, _, _ = advance_round(state, "cigar", accept_all)
    assert state.keyboard["c"] == LetterState.CORRECT
    state, _, _ = advance_round(state, "epoch", accept_all)
    assert state.keyboard["c"] == LetterState.CORRECT


def test_advancing_a_finished_round(accept_all):
    state = new_round("crane", max_attempts=6)
    state, _, _ = advance_round(state, "crane", accept_all)
    with pytest.raises(RoundOverError):
        advance_round(state, "crane", accept_all)


def test_round_service_hides_answer_until_over():
    service = RoundService(StubPuzzleSource("smell"), 2, word_predicate_for, random.Random(0))
    game_id = service.create_new_game()

    state = service.get_game_state(game_id)
    assert state.answer is None
    assert state.attempt == 1
    assert state.puzzle_id == 500
    assert state.letter_status["a"] == "UNKNOWN"

    state = service.make_guess(game_id, "spell")
    assert state.guess_results == [[("s", "CORRECT"), ("p", "INCORRECT"), ("e", "CORRECT"),
                                    ("l", "CORRECT"), ("l", "CORRECT")]]
    assert state.outcome == {"kind": "CONTINUE"}
    assert state.answer is None

    state = service.make_guess(game_id, "shell")
    assert state.game_over
    assert not state.won
    assert state.answer == "smell"
    assert state.outcome == {"kind": "LOST", "solution": "smell"}


def test_round_service_errors():
    service = RoundService(StubPuzzleSource("crane"), 6, word_predicate_for, random.Random(0))
    game_id = service.create_new_game(max_attempts=3)
    assert service.get_game_state(game_id).max_attempts == 3

    with pytest.raises(ValidationError):
        service.make_guess(game_id, "ab")
    assert service.get_game_state(game_id).attempt == 1

    state = service.make_guess(game_id, "crane")
    assert state.won
    assert state.outcome == {"kind": "WON", "attempts": 1}
    with pytest.raises(RoundOverError):
        service.make_guess(game_id, "crane")

    assert service.make_guess("missing", "crane") is None
    assert service.delete_game(game_id)
    assert not service.delete_game(game_id)


def test_concurrent_guesses_are_all_recorded():
    service = RoundService(StubPuzzleSource("crane"), 6, word_predicate_for, random.Random(0))
    game_id = service.create_new_game()
    guesses = ["spell", "dumpy", "arose", "cigar"]
    barrier = threading.Barrier(len(guesses))
    errors = []

    def submit(guess):
        barrier.wait()
        try:
            service.make_guess(game_id, guess)
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=submit, args=(guess,)) for guess in guesses]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    state = service.get_game_state(game_id)
    assert errors == []
    assert state.attempt == 1 + len(guesses)
    assert sorted(state.guesses) == sorted(guesses)
    assert len(state.guess_results) == len(guesses)


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_finished_games_are_evicted_after_ttl():
    clock = FakeClock()
    service = RoundService(StubPuzzleSource("crane"), 6, word_predicate_for,
                           random.Random(0), finished_ttl=60, clock=clock)
    finished = service.create_new_game()
    service.make_guess(finished, "crane")
    in_progress = service.create_new_game()
    service.make_guess(in_progress, "spell")

    clock.now += 59
    assert service.evict_finished_games() == 0
    assert service.get_game_state(finished).won

    clock.now += 1
    assert service.evict_finished_games() == 1
    assert service.get_game_state(finished) is None
    assert service.get_game_state(in_progress).attempt == 2
    assert service.active_game_count() == 1


def test_new_game_evicts_expired_rounds():
    clock = FakeClock()
    service = RoundService(StubPuzzleSource("smell"), 1, word_predicate_for,
                           random.Random(0), finished_ttl=10, clock=clock)
    lost = service.create_new_game()
    assert service.make_guess(lost, "spell").game_over

    clock.now += 11
    fresh = service.create_new_game()
    assert service.get_game_state(lost) is None
    assert service.get_game_state(fresh) is not None
    assert service.active_game_count() == 1


def test_initialize_round_service():
    service = initialize_round_service(StubPuzzleSource("crane"), 6, word_predicate_for)
    assert get_round_service() is service
