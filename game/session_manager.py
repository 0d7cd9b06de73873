"""Manages one mini-game store per player and channel."""

import logging
from typing import Dict, Optional, Tuple

from game.accessor import InertMiniGames, MiniGames
from game.session_store import MiniGameStore
from game.telemetry import Telemetry

logger = logging.getLogger(__name__)

ScopeKey = Tuple[str, str]


class SessionManager:
    """Maps (player_id, channel_id) scopes to their mini-game stores."""

    def __init__(self, telemetry: Optional[Telemetry] = None):
        self.telemetry = telemetry or Telemetry()
        self._stores: Dict[ScopeKey, MiniGameStore] = {}
        self._inert = InertMiniGames()

    def open_scope(self, player_id: str, channel_id: str) -> MiniGameStore:
        """Return the scope's store, creating it on first use."""
        key = (player_id, channel_id)
        store = self._stores.get(key)
        if store is None:
            store = MiniGameStore(telemetry=self.telemetry)
            self._stores[key] = store
            logger.debug("Opened mini-game scope %s", key)
        return store

    def get_minigames(self, player_id: str, channel_id: str) -> MiniGames:
        """Return the scope's store, or an inert stand-in if it was never opened."""
        store = self._stores.get((player_id, channel_id))
        if store is None:
            return self._inert
        return store

    def close_scope(self, player_id: str, channel_id: str):
        """End any running game in the scope and forget its store."""
        store = self._stores.pop((player_id, channel_id), None)
        if store is None:
            return None
        return store.end_game()

    def is_active(self, player_id: str, channel_id: str) -> bool:
        return self.get_minigames(player_id, channel_id).is_active

    def get_active_scopes(self) -> list[ScopeKey]:
        return [key for key, store in self._stores.items() if store.is_active]
