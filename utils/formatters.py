"""Text formatting helpers."""


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format percentage."""
    return f"{value:.{decimals}f}%"


def format_streak(streak: int) -> str:
    """Format a streak with a flame per correct answer, capped at five."""
    if streak <= 0:
        return "0"
    return f"{streak} " + "🔥" * min(streak, 5)


def format_gems(gems: int) -> str:
    return f"+{gems} 💎"


def format_game_name(kind: str) -> str:
    """Turn 'sound-match' into 'Sound Match'."""
    return " ".join(part.capitalize() for part in kind.split("-") if part)
