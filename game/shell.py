"""Container contract for whichever mini-game is being hosted."""

from typing import Callable, List, Optional

from game.accessor import MiniGames
from game.session import CompletionStats


class GameShell:
    """Open exactly while the accessor reports an active game."""

    def __init__(self, minigames: MiniGames, title: str = "Mini Game", reduced_motion: bool = False):
        self.minigames = minigames
        self.title = title
        self.reduced_motion = reduced_motion
        self._on_hide: List[Callable[[], None]] = []

    @property
    def is_open(self) -> bool:
        return self.minigames.active_game is not None

    def on_hide(self, callback: Callable[[], None]):
        self._on_hide.append(callback)

    def close(self) -> Optional[CompletionStats]:
        """End the hosted session, then hide."""
        stats = self.minigames.end_game()
        for callback in list(self._on_hide):
            callback()
        return stats
