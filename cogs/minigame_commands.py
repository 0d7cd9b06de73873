"""Slash commands that host mini-games inside Discord."""

import discord
from discord import app_commands
from discord.ext import commands
import logging
from typing import Dict, Optional

from game.reward import RewardPulse, RewardSignal
from game.session import CompletionStats
from game.session_manager import ScopeKey, SessionManager
from game.session_store import MiniGameStore
from game.shell import GameShell
from games.base import MiniGame, Round
from games.registry import create_game
from utils.embeds import (
    create_game_complete_embed,
    create_game_list_embed,
    create_game_started_embed,
    create_round_embed,
    create_status_embed
)
import config

logger = logging.getLogger(__name__)


class HostedGame:
    """Wires one hosted game to its store, shell and reward signal."""

    def __init__(self, store: MiniGameStore, game: MiniGame, player_id: int):
        self.store = store
        self.game = game
        self.player_id = player_id
        self.shell = GameShell(store, title=config.GAME_KINDS.get(game.kind, "Mini Game"))
        self.reward = RewardSignal()
        self.gems = 0
        self.stats: Optional[CompletionStats] = None
        self.session_id: Optional[str] = None
        self.current_round: Optional[Round] = None
        self.view: Optional["RoundView"] = None

        self.reward.add_listener(self._on_pulse)
        self._unsubscribe = self.reward.attach(store)

    def start(self) -> None:
        session = self.store.start_game(self.game.kind, self.game.options, on_complete=self._on_complete)
        self.session_id = session.session_id

    @property
    def is_current(self) -> bool:
        """True while this host's session is the store's active one."""
        session = self.store.session
        return session is not None and session.session_id == self.session_id

    def next_round(self) -> Round:
        self.current_round = self.game.next_round()
        self.store.telemetry.log("feature_usage", {
            'action': 'game_round',
            'game': self.game.kind,
            'word': self.current_round.word.get('word'),
        })
        return self.current_round

    def round_embed(self, pulse: Optional[RewardPulse] = None) -> discord.Embed:
        return create_round_embed(
            self.game.kind,
            self.current_round.prompt,
            min(self.store.attempts + 1, self.game.total_rounds),
            self.game.total_rounds,
            self.store.score,
            self.store.current_streak,
            pulse
        )

    def detach(self):
        self._unsubscribe()
        self.reward.hide()
        if self.view is not None:
            self.view.stop()

    def _on_pulse(self, pulse: Optional[RewardPulse]):
        if pulse is not None and pulse.correct:
            self.gems += pulse.gems

    def _on_complete(self, stats: CompletionStats):
        self.stats = stats


class ChoiceButton(discord.ui.Button):
    def __init__(self, choice: str):
        super().__init__(label=choice, style=discord.ButtonStyle.secondary)
        self.choice = choice

    async def callback(self, interaction: discord.Interaction):
        await self.view.handle_pick(interaction, self.choice)


class RoundView(discord.ui.View):
    """Buttons for the choices of the current round."""

    def __init__(self, cog: "MiniGameCommands", key: ScopeKey, host: HostedGame):
        super().__init__(timeout=config.ROUND_VIEW_TIMEOUT)
        self.cog = cog
        self.key = key
        self.host = host
        host.view = self
        for choice in host.current_round.choices:
            self.add_item(ChoiceButton(choice))

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        if interaction.user.id != self.host.player_id:
            await interaction.response.send_message("❌ This isn't your game! Start your own with `/minigame_start`.", ephemeral=True)
            return False
        return True

    async def handle_pick(self, interaction: discord.Interaction, choice: str):
        host = self.host
        if not host.is_current:
            await interaction.response.send_message("❌ This game has already ended.", ephemeral=True)
            self.stop()
            return

        host.game.answer(host.current_round, choice, host.store)
        pulse = host.reward.pulse

        if host.game.is_finished(host.store):
            stats = self.cog.finish(self.key)
            embed = create_game_complete_embed(host.game.kind, stats, host.gems)
            await interaction.response.edit_message(embed=embed, view=None)
            return

        host.next_round()
        view = RoundView(self.cog, self.key, host)
        self.stop()
        await interaction.response.edit_message(embed=host.round_embed(pulse), view=view)

    async def on_timeout(self):
        if self.host.view is self and self.host.is_current:
            logger.info("Round timed out for scope %s", self.key)
            self.cog.finish(self.key)


class MiniGameCommands(commands.Cog):
    """Mini-game commands for vocabulary practice."""

    def __init__(self, bot: commands.Bot, manager: Optional[SessionManager] = None):
        self.bot = bot
        self.session_manager = manager or SessionManager()
        self.hosts: Dict[ScopeKey, HostedGame] = {}

    def start(self, key: ScopeKey, player_id: int, kind: str, options: dict) -> Optional[HostedGame]:
        """Start a hosted game in a scope, replacing any game running there."""
        game = create_game(kind, options)
        if game is None:
            return None

        # The store abandons the old session; its buttons go dead here
        previous = self.hosts.pop(key, None)
        if previous is not None:
            previous.detach()

        store = self.session_manager.open_scope(*key)
        host = HostedGame(store, game, player_id)
        host.start()
        self.hosts[key] = host
        host.next_round()
        return host

    def finish(self, key: ScopeKey) -> Optional[CompletionStats]:
        """Close the scope's shell; the session ends before it hides."""
        host = self.hosts.pop(key, None)
        if host is None:
            return self.session_manager.close_scope(*key)

        host.shell.on_hide(host.detach)
        stats = host.shell.close()
        # Idle stores are not kept around between games
        self.session_manager.close_scope(*key)
        return stats or host.stats

    @app_commands.command(name="minigame_start", description="Start a vocabulary mini-game")
    @app_commands.describe(
        game="Which mini-game to play",
        rounds="Number of rounds",
        difficulty="Difficulty level",
        age_group="Player age group",
        reward_multiplier="Gems per correct answer"
    )
    @app_commands.choices(
        game=[app_commands.Choice(name=name, value=kind) for kind, name in config.GAME_KINDS.items()],
        difficulty=[app_commands.Choice(name=d.capitalize(), value=d) for d in config.DIFFICULTIES],
        age_group=[app_commands.Choice(name=a, value=a) for a in config.AGE_GROUPS]
    )
    async def start_command(
        self,
        interaction: discord.Interaction,
        game: str,
        rounds: Optional[app_commands.Range[int, 1, config.MAX_ROUNDS]] = None,
        difficulty: Optional[str] = None,
        age_group: Optional[str] = None,
        reward_multiplier: Optional[app_commands.Range[int, 1, config.MAX_REWARD_MULTIPLIER]] = None
    ):
        """Start a vocabulary mini-game."""
        key = (str(interaction.user.id), str(interaction.channel_id))
        options = {
            'rounds': rounds or config.DEFAULT_ROUNDS,
            'difficulty': difficulty or config.DEFAULT_DIFFICULTY,
            'age_group': age_group or config.DEFAULT_AGE_GROUP,
            'reward_multiplier': reward_multiplier or 1,
        }

        host = self.start(key, interaction.user.id, game, options)
        if host is None:
            await interaction.response.send_message(f"❌ Unknown mini-game `{game}`.", ephemeral=True)
            return

        await interaction.response.send_message(embed=create_game_started_embed(
            game,
            interaction.user.display_name,
            host.game.total_rounds,
            host.game.instructions
        ))
        await interaction.followup.send(embed=host.round_embed(), view=RoundView(self, key, host))

    @app_commands.command(name="minigame_close", description="Stop your current mini-game")
    async def close_command(self, interaction: discord.Interaction):
        """Stop your current mini-game."""
        key = (str(interaction.user.id), str(interaction.channel_id))
        host = self.hosts.get(key)
        kind = host.game.kind if host else None
        gems = host.gems if host else 0

        stats = self.finish(key)
        if stats is None or kind is None:
            await interaction.response.send_message("❌ You don't have a mini-game running!", ephemeral=True)
            return

        await interaction.response.send_message(embed=create_game_complete_embed(kind, stats, gems))

    @app_commands.command(name="minigame_status", description="Show your current mini-game")
    async def status_command(self, interaction: discord.Interaction):
        """Show your current mini-game."""
        minigames = self.session_manager.get_minigames(str(interaction.user.id), str(interaction.channel_id))
        embed = create_status_embed(
            minigames.active_game,
            minigames.score,
            minigames.attempts,
            minigames.current_streak
        )
        await interaction.response.send_message(embed=embed, ephemeral=True)

    @app_commands.command(name="minigame_list", description="List available mini-games")
    async def list_command(self, interaction: discord.Interaction):
        """List available mini-games."""
        await interaction.response.send_message(embed=create_game_list_embed(), ephemeral=True)


async def setup(bot: commands.Bot):
    """Load the cog."""
    await bot.add_cog(MiniGameCommands(bot))
