"""Lookup of hosted mini-games by kind."""

from typing import Any, Dict, Optional
import random

from games.base import MiniGame
from games.letter_hunt import LetterHuntGame
from games.sound_match import SoundMatchGame

GAMES = {
    SoundMatchGame.kind: SoundMatchGame,
    LetterHuntGame.kind: LetterHuntGame,
}


def create_game(kind: str, options: Optional[Dict[str, Any]] = None, rng: Optional[random.Random] = None) -> Optional[MiniGame]:
    """Build the hosted game for a kind, or None if the kind is unknown."""
    game_cls = GAMES.get(kind)
    if game_cls is None:
        return None
    return game_cls(options, rng=rng)
