"""Shared round logic for hosted mini-games."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import random

import config
from data.word_bank import get_random_word


@dataclass
class Round:
    """One question shown to the player."""
    prompt: str
    choices: List[str]
    answer: str
    word: Dict[str, Any] = field(default_factory=dict)


def resolve_difficulty(options: Dict[str, Any]) -> str:
    difficulty = str(options.get('difficulty') or config.DEFAULT_DIFFICULTY).lower()
    if difficulty not in config.DIFFICULTIES:
        return config.DEFAULT_DIFFICULTY
    return difficulty


def resolve_age_group(options: Dict[str, Any]) -> str:
    age_group = str(options.get('age_group') or config.DEFAULT_AGE_GROUP)
    if age_group not in config.AGE_GROUPS:
        return config.DEFAULT_AGE_GROUP
    return age_group


def choice_count(options: Dict[str, Any]) -> int:
    """Choices per round: youngest players always get the small grid."""
    if resolve_age_group(options) == config.YOUNGEST_AGE_GROUP:
        return config.YOUNGEST_CHOICE_COUNT
    return config.CHOICES_PER_ROUND[resolve_difficulty(options)]


def resolve_rounds(options: Dict[str, Any]) -> int:
    try:
        rounds = int(options.get('rounds') or config.DEFAULT_ROUNDS)
    except (TypeError, ValueError):
        return config.DEFAULT_ROUNDS
    return max(1, min(rounds, config.MAX_ROUNDS))


class MiniGame:
    """Base for hosted games; subclasses build rounds."""

    kind = ''
    instructions = ''

    def __init__(self, options: Optional[Dict[str, Any]] = None, rng: Optional[random.Random] = None):
        self.options = dict(options or {})
        self.rng = rng or random.Random()
        self.total_rounds = resolve_rounds(self.options)

    def pick_word(self) -> Dict[str, Any]:
        """The word given in options, else a random one."""
        word = self.options.get('word')
        if isinstance(word, dict) and word.get('word'):
            return word
        return get_random_word(self.options.get('category'), rng=self.rng)

    def next_round(self) -> Round:
        raise NotImplementedError

    def answer(self, game_round: Round, pick: str, minigames) -> bool:
        """Check a pick and report the outcome through the accessor."""
        correct = pick == game_round.answer
        meta = {'word': game_round.word.get('word'), 'pick': pick}
        if correct:
            minigames.report_success(meta)
        else:
            minigames.report_fail(meta)
        return correct

    def is_finished(self, minigames) -> bool:
        return minigames.attempts >= self.total_rounds
