"""Exceptions raised by the mini-game core."""


class MiniGameError(Exception):
    """Base class for mini-game errors."""


class ProviderConflict(MiniGameError):
    """Raised when a second store is mounted over one that is still mounted."""
