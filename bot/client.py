"""Discord bot client setup."""

import discord
from discord.ext import commands


def create_bot() -> commands.Bot:
    """Create and configure Discord bot."""
    # Slash commands and button interactions only need guild events
    intents = discord.Intents.default()
    intents.guilds = True

    # command_prefix is required even if we only use slash commands
    bot = commands.Bot(command_prefix='!', intents=intents)

    return bot
