"""Tests for the game shell."""

from game.accessor import InertMiniGames
from game.session import CompletionStats
from game.session_store import MiniGameStore
from game.shell import GameShell
from game.telemetry import Telemetry


def test_shell_open_only_while_game_active():
    store = MiniGameStore(telemetry=Telemetry(enabled=False))
    shell = GameShell(store)

    assert shell.is_open is False
    store.start_game("sound-match")
    assert shell.is_open is True
    store.end_game()
    assert shell.is_open is False


def test_close_ends_session_before_hiding():
    store = MiniGameStore(telemetry=Telemetry(enabled=False))
    shell = GameShell(store, title="Sound Match")
    active_when_hidden = []
    shell.on_hide(lambda: active_when_hidden.append(store.is_active))

    store.start_game("sound-match")
    store.report_success()
    stats = shell.close()

    assert stats == CompletionStats(correct=1, total_rounds=1, best_streak=1)
    assert active_when_hidden == [False]
    assert shell.is_open is False


def test_close_when_idle_returns_none():
    shell = GameShell(MiniGameStore(telemetry=Telemetry(enabled=False)))
    assert shell.close() is None


def test_shell_over_inert_fallback_stays_closed():
    shell = GameShell(InertMiniGames())
    assert shell.is_open is False
    assert shell.close() is None
