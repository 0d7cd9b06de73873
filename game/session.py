"""Mini-game session data structures."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional
import uuid


class SessionEvent(str, Enum):
    """Transitions a store announces to its observers."""
    STARTED = 'started'
    ROUND_SUCCESS = 'round_success'
    ROUND_FAIL = 'round_fail'
    ENDED = 'ended'
    ABANDONED = 'abandoned'  # superseded by a newer start_game


@dataclass
class GameSession:
    """Represents the one active mini-game run of a store."""
    kind: str
    options: Dict[str, Any] = field(default_factory=dict)

    # Round counters
    score: int = 0
    attempts: int = 0
    current_streak: int = 0
    best_streak: int = 0

    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    started_at: datetime = field(default_factory=datetime.utcnow)

    def record(self, correct: bool):
        """Apply one round outcome to the counters."""
        self.attempts += 1
        if correct:
            self.score += 1
            self.current_streak += 1
            self.best_streak = max(self.best_streak, self.current_streak)
        else:
            self.current_streak = 0


@dataclass(frozen=True)
class CompletionStats:
    """Final statistics handed to a completion callback."""
    correct: int
    total_rounds: int
    best_streak: int

    @property
    def accuracy(self) -> float:
        """Percentage of rounds answered correctly."""
        if self.total_rounds == 0:
            return 0.0
        return self.correct / self.total_rounds * 100

    def as_dict(self) -> Dict[str, int]:
        return {
            'correct': self.correct,
            'totalRounds': self.total_rounds,
            'bestStreak': self.best_streak,
        }


@dataclass(frozen=True)
class RoundOutcome:
    """A single reported round, consumed immediately."""
    correct: bool
    meta: Optional[Dict[str, Any]] = None
