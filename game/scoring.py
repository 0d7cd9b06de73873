"""Round outcome aggregation for mini-game sessions."""

from typing import Iterable, Union

import config
from game.session import CompletionStats, RoundOutcome


def summarize(score: int, attempts: int, best_streak: int) -> CompletionStats:
    """
    Build the completion statistics from a session's final counters.

    Args:
        score: Rounds reported successful
        attempts: All rounds reported
        best_streak: Longest run of consecutive successes

    Returns:
        Frozen CompletionStats snapshot
    """
    return CompletionStats(
        correct=score,
        total_rounds=attempts,
        best_streak=best_streak
    )


def _is_correct(outcome: Union[bool, RoundOutcome]) -> bool:
    if isinstance(outcome, RoundOutcome):
        return outcome.correct
    return bool(outcome)


def longest_streak(outcomes: Iterable[Union[bool, RoundOutcome]]) -> int:
    """Length of the longest run of consecutive successes."""
    best = 0
    current = 0
    for outcome in outcomes:
        if _is_correct(outcome):
            current += 1
            best = max(best, current)
        else:
            current = 0
    return best


def fold_outcomes(outcomes: Iterable[Union[bool, RoundOutcome]]) -> CompletionStats:
    """Fold a full sequence of round outcomes into completion statistics."""
    results = [_is_correct(o) for o in outcomes]
    return summarize(
        score=sum(1 for r in results if r),
        attempts=len(results),
        best_streak=longest_streak(results)
    )


def gems_for_success(reward_multiplier) -> int:
    """Gems earned for one correct round."""
    try:
        multiplier = int(reward_multiplier or 1)
    except (TypeError, ValueError):
        multiplier = 1
    return max(1, min(multiplier, config.MAX_REWARD_MULTIPLIER))


def accuracy(correct: int, total: int) -> float:
    """Accuracy percentage (0-100); 0 when no rounds were played."""
    if total <= 0:
        return 0.0
    return correct / total * 100
