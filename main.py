"""Main entry point for the Word Jungle mini-games bot."""

import asyncio
import logging
import os
from dotenv import load_dotenv
from bot.client import create_bot
from bot.events import setup_events
import config

# Load environment variables
load_dotenv()


async def main():
    """Main function to start the bot."""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Get token
    token = os.getenv("DISCORD_TOKEN")
    if not token:
        print("ERROR: DISCORD_TOKEN not found in environment variables!")
        print("Please create a .env file with your Discord bot token.")
        return

    # Create bot
    bot = create_bot()

    async with bot:
        await setup_events(bot)
        await bot.load_extension('cogs.minigame_commands')

        print("Starting bot...")
        await bot.start(token)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nBot stopped by user.")
