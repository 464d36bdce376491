import logging

import discord

from multibot import Command, TextArgument
from multibot.permissions import MANAGER

logger = logging.getLogger(__name__)


class Say(Command):
    label = "say"
    aliases = ["echo"]
    description = "Make the bot repeat a message"
    category = "Utility"
    default_level = MANAGER
    arguments = [TextArgument("message")]

    async def run(self, client, info, args, mapped_args):
        if client.resolve_setting(self.module, "say_delete_invocation", info.settings):
            try:
                await info.message.delete()
            except discord.Forbidden:
                logger.warning(f"Missing permission to delete messages in {info.channel}")
        await info.send(mapped_args["message"], allowed_mentions=discord.AllowedMentions.none())
