"""Transient success/failure feedback driven by round reports."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

import config
from game.scoring import gems_for_success
from game.session import SessionEvent

logger = logging.getLogger(__name__)

# scheduler(delay, callback) -> handle with cancel()
Scheduler = Callable[[float, Callable[[], None]], Any]


@dataclass(frozen=True)
class RewardPulse:
    correct: bool
    message: Optional[str] = None
    title: Optional[str] = None
    gems: int = 0


def asyncio_scheduler(delay: float, callback: Callable[[], None]):
    """Schedule on the running event loop; without one the pulse stays until replaced."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return None
    return loop.call_later(delay, callback)


class RewardSignal:
    """
    Shows at most one pulse at a time.

    A pulse is shown on every round report and hidden after the
    presentation duration or when the next pulse replaces it. The
    signal only reads from the store; it never changes counters.
    """

    def __init__(
        self,
        duration: float = config.REWARD_DURATION_SECONDS,
        scheduler: Optional[Scheduler] = None
    ):
        self.duration = duration
        self._scheduler = scheduler or asyncio_scheduler
        self._pulse: Optional[RewardPulse] = None
        self._handle = None
        self._listeners: List[Callable[[Optional[RewardPulse]], None]] = []

    @property
    def showing(self) -> bool:
        return self._pulse is not None

    @property
    def pulse(self) -> Optional[RewardPulse]:
        return self._pulse

    def add_listener(self, listener: Callable[[Optional[RewardPulse]], None]):
        """Listener receives the new pulse, or None when hidden."""
        self._listeners.append(listener)

    def attach(self, store) -> Callable[[], None]:
        """Follow a store's round reports; returns the unsubscribe callable."""
        return store.subscribe(self._on_session_event)

    def show(self, pulse: RewardPulse):
        self._cancel_timer()
        self._pulse = pulse
        self._handle = self._scheduler(self.duration, self.hide)
        self._emit()

    def hide(self):
        self._cancel_timer()
        if self._pulse is None:
            return
        self._pulse = None
        self._emit()

    def _cancel_timer(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _emit(self):
        for listener in list(self._listeners):
            listener(self._pulse)

    def _on_session_event(self, event: SessionEvent, store):
        if event == SessionEvent.ROUND_SUCCESS:
            multiplier = (store.options or {}).get('reward_multiplier')
            self.show(RewardPulse(
                correct=True,
                title=config.REWARD_SUCCESS_TITLE,
                message=self._message(store, config.REWARD_SUCCESS_MESSAGE),
                gems=gems_for_success(multiplier)
            ))
        elif event == SessionEvent.ROUND_FAIL:
            self.show(RewardPulse(
                correct=False,
                message=self._message(store, config.REWARD_FAIL_MESSAGE)
            ))

    @staticmethod
    def _message(store, default: str) -> str:
        outcome = getattr(store, 'last_outcome', None)
        if outcome is not None and outcome.meta and outcome.meta.get('message'):
            return outcome.meta['message']
        return default
