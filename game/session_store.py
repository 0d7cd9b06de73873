"""Single source of truth for the active mini-game."""

import copy
import logging
from typing import Any, Callable, Dict, List, Optional

from game.scoring import summarize
from game.session import CompletionStats, GameSession, RoundOutcome, SessionEvent
from game.telemetry import Telemetry

logger = logging.getLogger(__name__)

Observer = Callable[[SessionEvent, 'MiniGameStore'], None]
CompletionCallback = Callable[[CompletionStats], None]


def _copy_options(options: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Deep copy of the caller's options; shallow if some value can't be copied."""
    bag = dict(options or {})
    try:
        return copy.deepcopy(bag)
    except (TypeError, copy.Error) as e:
        logger.warning("Options could not be deep-copied (%s); keeping a shallow copy", e)
        return bag


class MiniGameStore:
    """
    Holds at most one GameSession and exposes its state transitions.

    Starting a game while another one is active abandons the older one:
    its completion callback never fires and observers see ABANDONED.
    Round reports and end_game on an idle store are no-ops.

    Observers are called synchronously, in subscription order, before
    the mutating call returns.
    """

    def __init__(self, telemetry: Optional[Telemetry] = None):
        self._session: Optional[GameSession] = None
        self._on_complete: Optional[CompletionCallback] = None
        self._observers: List[Observer] = []
        self.last_outcome: Optional[RoundOutcome] = None
        self.telemetry = telemetry or Telemetry()

    # Read access
    @property
    def session(self) -> Optional[GameSession]:
        return self._session

    @property
    def is_active(self) -> bool:
        return self._session is not None

    @property
    def active_game(self) -> Optional[str]:
        return self._session.kind if self._session else None

    @property
    def options(self) -> Optional[Dict[str, Any]]:
        return self._session.options if self._session else None

    @property
    def score(self) -> int:
        return self._session.score if self._session else 0

    @property
    def attempts(self) -> int:
        return self._session.attempts if self._session else 0

    @property
    def current_streak(self) -> int:
        return self._session.current_streak if self._session else 0

    @property
    def best_streak(self) -> int:
        return self._session.best_streak if self._session else 0

    # Subscription
    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer; returns a callable that removes it."""
        self._observers.append(observer)

        def unsubscribe():
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self, event: SessionEvent):
        for observer in list(self._observers):
            try:
                observer(event, self)
            except Exception:
                logger.exception("Observer %r failed on %s", observer, event.value)

    # Transitions
    def start_game(
        self,
        kind: str,
        options: Optional[Dict[str, Any]] = None,
        on_complete: Optional[CompletionCallback] = None
    ) -> GameSession:
        """Start a new session, abandoning any session still active."""
        session = GameSession(kind=kind, options=_copy_options(options))

        if self._session is not None:
            abandoned = self._session
            self._session = None
            self._on_complete = None
            logger.info("Abandoning %s session %s for %s", abandoned.kind, abandoned.session_id, kind)
            self.telemetry.log("feature_usage", {
                'action': 'game_abandon',
                'game': abandoned.kind,
                'score': abandoned.score,
                'attempts': abandoned.attempts,
            })
            self._notify(SessionEvent.ABANDONED)

        self._session = session
        self._on_complete = on_complete
        self.last_outcome = None

        logger.info("Started %s session %s", kind, session.session_id)
        self.telemetry.log("feature_usage", {'action': 'game_start', 'game': kind, 'opts': session.options})
        self._notify(SessionEvent.STARTED)
        return session

    def end_game(self) -> Optional[CompletionStats]:
        """Close the active session and return its statistics."""
        session = self._session
        if session is None:
            return None

        on_complete = self._on_complete
        self._session = None
        self._on_complete = None

        stats = summarize(session.score, session.attempts, session.best_streak)
        logger.info(
            "Completed %s session %s: %d/%d, best streak %d",
            session.kind, session.session_id, stats.correct, stats.total_rounds, stats.best_streak
        )
        self.telemetry.log("feature_usage", {
            'action': 'game_complete',
            'game': session.kind,
            'score': stats.correct,
            'attempts': stats.total_rounds,
        })
        self._notify(SessionEvent.ENDED)

        if on_complete is not None:
            on_complete(stats)
        return stats

    def report_success(self, meta: Optional[Dict[str, Any]] = None):
        self._report(RoundOutcome(correct=True, meta=meta))

    def report_fail(self, meta: Optional[Dict[str, Any]] = None):
        self._report(RoundOutcome(correct=False, meta=meta))

    def _report(self, outcome: RoundOutcome):
        session = self._session
        if session is None:
            # Late round callback after teardown
            logger.debug("Ignoring round report with no active session")
            return

        session.record(outcome.correct)
        self.last_outcome = outcome

        action = 'game_success' if outcome.correct else 'game_fail'
        self.telemetry.log("feature_usage", {'action': action, 'game': session.kind, 'meta': outcome.meta})
        self._notify(SessionEvent.ROUND_SUCCESS if outcome.correct else SessionEvent.ROUND_FAIL)
