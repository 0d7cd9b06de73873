"""Access to the mini-game store, with an inert stand-in when none is mounted."""

import contextvars
import logging
from typing import Any, Callable, Dict, Optional, Protocol

from game.errors import ProviderConflict
from game.session import CompletionStats, GameSession, SessionEvent
from game.session_store import CompletionCallback, MiniGameStore, Observer

logger = logging.getLogger(__name__)


class MiniGames(Protocol):
    """Operations the rest of the bot may use on mini-game state."""

    @property
    def is_active(self) -> bool: ...

    @property
    def active_game(self) -> Optional[str]: ...

    @property
    def options(self) -> Optional[Dict[str, Any]]: ...

    @property
    def score(self) -> int: ...

    @property
    def attempts(self) -> int: ...

    @property
    def current_streak(self) -> int: ...

    @property
    def best_streak(self) -> int: ...

    def subscribe(self, observer: Observer) -> Callable[[], None]: ...

    def start_game(
        self,
        kind: str,
        options: Optional[Dict[str, Any]] = None,
        on_complete: Optional[CompletionCallback] = None
    ) -> Optional[GameSession]: ...

    def end_game(self) -> Optional[CompletionStats]: ...

    def report_success(self, meta: Optional[Dict[str, Any]] = None) -> None: ...

    def report_fail(self, meta: Optional[Dict[str, Any]] = None) -> None: ...


class InertMiniGames:
    """Same shape as MiniGameStore; every operation does nothing."""

    is_active: bool = False
    active_game: Optional[str] = None
    options: Optional[Dict[str, Any]] = None
    score: int = 0
    attempts: int = 0
    current_streak: int = 0
    best_streak: int = 0
    last_outcome = None

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        return lambda: None

    def start_game(
        self,
        kind: str,
        options: Optional[Dict[str, Any]] = None,
        on_complete: Optional[CompletionCallback] = None
    ) -> Optional[GameSession]:
        logger.debug("No mini-game store mounted; %s not started", kind)
        return None

    def end_game(self) -> Optional[CompletionStats]:
        return None

    def report_success(self, meta: Optional[Dict[str, Any]] = None) -> None:
        pass

    def report_fail(self, meta: Optional[Dict[str, Any]] = None) -> None:
        pass


_INERT = InertMiniGames()
_mounted: contextvars.ContextVar[Optional[MiniGameStore]] = contextvars.ContextVar(
    'mounted_minigame_store', default=None
)


class MiniGamesProvider:
    """
    Mounts a store for the current context.

    Usage::

        with MiniGamesProvider() as store:
            use_minigames().start_game('sound-match', {'rounds': 5})

    Only one store may be mounted per context at a time; leaving the
    block ends any game still running so no session outlives its scope.
    """

    def __init__(self, store: Optional[MiniGameStore] = None):
        self.store = store or MiniGameStore()
        self._token = None

    def __enter__(self) -> MiniGameStore:
        current = _mounted.get()
        if current is not None:
            raise ProviderConflict("A mini-game store is already mounted in this context")
        self._token = _mounted.set(self.store)
        return self.store

    def __exit__(self, exc_type, exc, tb):
        self.store.end_game()
        _mounted.reset(self._token)
        self._token = None
        return False


def use_minigames() -> MiniGames:
    """Return the mounted store, or the inert stand-in when none is mounted."""
    store = _mounted.get()
    if store is None:
        return _INERT
    return store


__all__ = [
    'InertMiniGames',
    'MiniGames',
    'MiniGamesProvider',
    'SessionEvent',
    'use_minigames',
]
