import logging

import discord

from ..event import Event

logger = logging.getLogger(__name__)


class ReadyAnnouncer(Event):
    """Logs the connection summary and sets the presence once after login."""

    event = "ready"
    type = "once"

    async def listener(self, client) -> None:
        logger.info(f'{client.user} is online!')
        logger.info(f'Connected to {len(client.guilds)} guilds')
        logger.info(f'Loaded modules: {", ".join(client.modules)}')

        status = client.module_settings.get("core", "status", "{prefix}help")
        activity = discord.Game(name=status.format(prefix=client.config.prefix))
        await client.change_presence(activity=activity)
