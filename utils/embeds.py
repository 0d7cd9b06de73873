"""Discord embed builders for bot responses."""

import discord
from typing import Optional

import config
from game.reward import RewardPulse
from game.session import CompletionStats
from utils.formatters import format_game_name, format_gems, format_percentage, format_streak


def create_game_started_embed(
    kind: str,
    player_name: str,
    rounds: int,
    instructions: str
) -> discord.Embed:
    """Create embed for game started message."""
    embed = discord.Embed(
        title=f"🌴 {format_game_name(kind)} Started!",
        description=instructions,
        color=discord.Color.green()
    )
    embed.add_field(name="Player", value=player_name, inline=True)
    embed.add_field(name="Rounds", value=str(rounds), inline=True)
    embed.set_footer(text="Use /minigame_close to stop at any time.")
    return embed


def create_round_embed(
    kind: str,
    prompt: str,
    round_number: int,
    total_rounds: int,
    score: int,
    streak: int,
    pulse: Optional[RewardPulse] = None
) -> discord.Embed:
    """Create embed for a single round."""
    embed = discord.Embed(
        title=f"{format_game_name(kind)} · Round {round_number}/{total_rounds}",
        description=prompt,
        color=discord.Color.blue()
    )
    embed.add_field(name="Score", value=str(score), inline=True)
    embed.add_field(name="Streak", value=format_streak(streak), inline=True)

    if pulse is not None:
        add_reward_field(embed, pulse)

    return embed


def add_reward_field(embed: discord.Embed, pulse: RewardPulse) -> discord.Embed:
    """Show the current reward pulse on an embed."""
    if pulse.correct:
        name = f"✨ {pulse.title or config.REWARD_SUCCESS_TITLE}"
        value = f"{pulse.message} {format_gems(pulse.gems)}" if pulse.gems else pulse.message
    else:
        name = "🙈 Oops"
        value = pulse.message or config.REWARD_FAIL_MESSAGE
    embed.add_field(name=name, value=value, inline=False)
    return embed


def create_game_complete_embed(
    kind: str,
    stats: CompletionStats,
    gems: int = 0
) -> discord.Embed:
    """Create embed for a finished game."""
    embed = discord.Embed(
        title=f"🏆 {format_game_name(kind)} Complete!",
        color=discord.Color.gold()
    )
    embed.add_field(name="Correct", value=f"{stats.correct}/{stats.total_rounds}", inline=True)
    embed.add_field(name="Accuracy", value=format_percentage(stats.accuracy), inline=True)
    embed.add_field(name="Best Streak", value=format_streak(stats.best_streak), inline=True)
    if gems:
        embed.add_field(name="Gems", value=format_gems(gems), inline=False)

    if stats.total_rounds and stats.correct == stats.total_rounds:
        embed.set_footer(text="Perfect game! 🌟")
    return embed


def create_status_embed(kind: Optional[str], score: int, attempts: int, streak: int) -> discord.Embed:
    """Create embed describing the current game, if any."""
    if kind is None:
        return discord.Embed(
            title="No mini-game running",
            description="Start one with `/minigame_start`.",
            color=discord.Color.light_grey()
        )

    embed = discord.Embed(title=f"🎮 {format_game_name(kind)}", color=discord.Color.blue())
    embed.add_field(name="Score", value=f"{score}/{attempts}", inline=True)
    embed.add_field(name="Streak", value=format_streak(streak), inline=True)
    return embed


def create_game_list_embed() -> discord.Embed:
    """Create embed listing available mini-games."""
    embed = discord.Embed(title="🌴 Mini-Games", color=discord.Color.green())
    for kind, name in config.GAME_KINDS.items():
        embed.add_field(name=name, value=f"`{kind}`", inline=False)
    return embed
