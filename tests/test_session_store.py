"""Tests for the mini-game session store."""

import itertools
import threading

import pytest

from game.scoring import fold_outcomes
from game.session import CompletionStats, SessionEvent
from game.session_store import MiniGameStore
from game.telemetry import Telemetry


@pytest.fixture
def store():
    return MiniGameStore(telemetry=Telemetry(enabled=True))


def test_idle_store_reads_zero(store):
    assert store.is_active is False
    assert store.active_game is None
    assert store.options is None
    assert store.score == 0
    assert store.attempts == 0
    assert store.current_streak == 0
    assert store.best_streak == 0


def test_match_scenario_completion_stats(store):
    received = []
    store.start_game("match", {"rounds": 10}, on_complete=received.append)
    for _ in range(3):
        store.report_success()
    store.report_fail()
    for _ in range(2):
        store.report_success()

    stats = store.end_game()

    assert stats == CompletionStats(correct=5, total_rounds=6, best_streak=3)
    assert received == [stats]
    assert stats.as_dict() == {'correct': 5, 'totalRounds': 6, 'bestStreak': 3}


def test_counters_track_reports(store):
    store.start_game("sound-match")
    outcomes = [True, False, False, True, True, False, True]
    for ok in outcomes:
        if ok:
            store.report_success()
        else:
            store.report_fail()

    assert store.attempts == len(outcomes)
    assert store.score == sum(outcomes)
    assert store.current_streak == 1
    assert store.best_streak == 2
    assert store.attempts >= store.score >= 0
    assert store.best_streak >= store.current_streak >= 0


def test_failure_resets_current_streak_only(store):
    store.start_game("sound-match")
    store.report_success()
    store.report_success()
    store.report_fail()

    assert store.current_streak == 0
    assert store.best_streak == 2
    assert store.score == 2


def test_end_game_when_idle_is_noop(store):
    assert store.end_game() is None


def test_end_game_twice_fires_callback_once(store):
    calls = []
    store.start_game("sound-match", on_complete=calls.append)
    store.report_success()

    first = store.end_game()
    second = store.end_game()

    assert first is not None
    assert second is None
    assert len(calls) == 1


def test_reports_after_end_are_ignored(store):
    store.start_game("sound-match")
    store.report_success()
    stats = store.end_game()

    store.report_success()
    store.report_fail()

    assert stats == CompletionStats(correct=1, total_rounds=1, best_streak=1)
    assert store.score == 0
    assert store.attempts == 0
    assert store.is_active is False


def test_reports_before_any_start_are_ignored(store):
    store.report_success()
    store.report_fail()
    assert store.attempts == 0


def test_start_while_active_supersedes_without_callback(store):
    abandoned_calls = []
    store.start_game("sound-match", on_complete=abandoned_calls.append)
    store.report_success()
    store.report_success()

    new_calls = []
    store.start_game("letter-hunt", on_complete=new_calls.append)

    assert abandoned_calls == []
    assert store.active_game == "letter-hunt"
    assert store.score == 0
    assert store.attempts == 0
    assert store.best_streak == 0

    store.report_fail()
    stats = store.end_game()
    assert stats == CompletionStats(correct=0, total_rounds=1, best_streak=0)
    assert new_calls == [stats]
    assert abandoned_calls == []


def test_options_are_copied_at_start(store):
    options = {"rounds": 3, "word": {"word": "dog", "emoji": "🐶"}}
    store.start_game("sound-match", options)

    options["rounds"] = 99
    options["word"]["word"] = "cat"

    assert store.options["rounds"] == 3
    assert store.options["word"]["word"] == "dog"


def test_observers_notified_synchronously_in_order(store):
    seen = []
    store.subscribe(lambda event, s: seen.append(("a", event, s.attempts)))
    store.subscribe(lambda event, s: seen.append(("b", event, s.attempts)))

    store.start_game("sound-match")
    store.report_success()
    store.report_fail()
    store.end_game()

    assert seen == [
        ("a", SessionEvent.STARTED, 0), ("b", SessionEvent.STARTED, 0),
        ("a", SessionEvent.ROUND_SUCCESS, 1), ("b", SessionEvent.ROUND_SUCCESS, 1),
        ("a", SessionEvent.ROUND_FAIL, 2), ("b", SessionEvent.ROUND_FAIL, 2),
        ("a", SessionEvent.ENDED, 0), ("b", SessionEvent.ENDED, 0),
    ]


def test_supersede_notifies_abandoned_before_started(store):
    seen = []
    store.start_game("sound-match")
    store.subscribe(lambda event, s: seen.append(event))

    store.start_game("letter-hunt")

    assert seen == [SessionEvent.ABANDONED, SessionEvent.STARTED]


def test_unsubscribe_stops_delivery(store):
    seen = []
    unsubscribe = store.subscribe(lambda event, s: seen.append(event))
    unsubscribe()
    unsubscribe()

    store.start_game("sound-match")
    assert seen == []


def test_failing_observer_does_not_block_counters(store):
    seen = []

    def broken(event, s):
        raise RuntimeError("boom")

    store.subscribe(broken)
    store.subscribe(lambda event, s: seen.append(event))

    store.start_game("sound-match")
    store.report_success()

    assert store.score == 1
    assert seen == [SessionEvent.STARTED, SessionEvent.ROUND_SUCCESS]


def test_telemetry_records_lifecycle(store):
    store.start_game("sound-match")
    store.report_success({"word": "dog"})
    store.report_fail()
    store.end_game()

    assert store.telemetry.actions() == ["game_start", "game_success", "game_fail", "game_complete"]
    success = store.telemetry.events("feature_usage")[1]
    assert success.data["meta"] == {"word": "dog"}


def test_last_outcome_tracks_latest_report(store):
    store.start_game("sound-match")
    store.report_fail({"message": "Nope"})
    assert store.last_outcome.correct is False
    assert store.last_outcome.meta == {"message": "Nope"}


def test_uncopyable_option_keeps_supersede_working(store):
    store.start_game("sound-match")
    store.report_success()

    lock = threading.Lock()
    store.start_game("letter-hunt", {"rounds": 3, "lock": lock})

    assert store.is_active is True
    assert store.active_game == "letter-hunt"
    assert store.options["rounds"] == 3
    assert store.options["lock"] is lock
    assert store.score == 0


def test_uncopyable_option_on_idle_store(store):
    store.start_game("sound-match", {"lock": threading.Lock()})
    store.report_fail()
    assert store.end_game() == CompletionStats(correct=0, total_rounds=1, best_streak=0)


@pytest.mark.parametrize("length", range(7))
def test_every_outcome_sequence_matches_fold(length):
    for sequence in itertools.product([True, False], repeat=length):
        store = MiniGameStore(telemetry=Telemetry(enabled=False))
        store.start_game("sound-match")
        for ok in sequence:
            if ok:
                store.report_success()
            else:
                store.report_fail()

            assert store.attempts >= store.score >= 0
            assert store.best_streak >= store.current_streak >= 0
            assert store.best_streak <= store.attempts

        expected = fold_outcomes(sequence)
        assert store.score == expected.correct
        assert store.attempts == expected.total_rounds == len(sequence)
        assert store.best_streak == expected.best_streak
        assert store.end_game() == expected
