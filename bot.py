import discord
import logging
import asyncio

from dotenv import load_dotenv

from config import get_config
from multibot.client import WrappedClient
from multibot.exceptions import BotFrameworkException

load_dotenv()
config = get_config()

# Setup logging
logging.basicConfig(
    level=getattr(logging, config.log_level.upper(), logging.INFO),
    format='[{asctime}] [{levelname:<8}] {name}: {message}',
    datefmt='%Y-%m-%d %H:%M:%S',
    style='{',
    handlers=[
        logging.FileHandler(config.log_file, encoding='utf-8', mode='a'),
        logging.StreamHandler()
    ]
)
logger = logging.getLogger('discord')

# Reduce gateway verbosity
logging.getLogger('discord.gateway').setLevel(logging.WARNING)


async def main():
    """Main function with reconnection handling"""
    max_retries = 5
    retry_count = 0

    while retry_count < max_retries:
        bot = WrappedClient(config, max_messages=1000, heartbeat_timeout=60)
        try:
            logger.info("Starting bot...")
            async with bot:
                await bot.start(config.token)
            retry_count = 0  # Reset on successful connection
        except discord.LoginFailure:
            logger.error("Invalid token - cannot reconnect")
            break
        except BotFrameworkException:
            # A half-loaded bot is not started
            logger.exception("Failed to load modules or settings")
            raise
        except (discord.DiscordException, OSError) as e:
            retry_count += 1
            logger.error(f"Error (attempt {retry_count}/{max_retries}): {e}")
            if retry_count < max_retries:
                wait_time = min(5 * retry_count, 30)
                logger.info(f"Reconnecting in {wait_time}s...")
                await asyncio.sleep(wait_time)
            else:
                logger.error("Max retries reached. Exiting.")
                break


if __name__ == '__main__':
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Bot stopped by keyboard interrupt")
