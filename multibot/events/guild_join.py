import logging

import discord

from ..event import Event

logger = logging.getLogger(__name__)


class GuildJoin(Event):
    """Creates the settings record as soon as the bot joins a server."""

    event = "guild_join"
    type = "on"

    async def listener(self, client, guild: discord.Guild) -> None:
        await client.get_guild_record(guild.id)
        logger.info(f"Joined guild {guild.name} (ID: {guild.id})")
