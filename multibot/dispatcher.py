"""
Message Dispatch
================

Routes an incoming message to a command. Each message runs through the
steps below in order and stops at the first one that does not pass:

1. ignore messages written by bots
2. fetch (or create) the guild settings
3. match the guild prefix or a leading mention of the bot
4. split off the command token and raw arguments
5. resolve the command by label or alias
6. refuse commands that are not allowed in direct messages
7. compare the required level with the user level
8. parse declared arguments
9. run the command
"""

import enum
import logging
import re
from typing import List, Optional, Tuple

import discord

from .arguments import parse_arguments
from .command import Command, CommandInfo
from .embeds import get_no_permission_embed, send_missing_argument, send_notice
from .permissions import get_user_level

logger = logging.getLogger(__name__)

class DispatchResult(enum.Enum):
    IGNORED = "ignored"
    NOT_COMMAND = "not_command"
    UNKNOWN_COMMAND = "unknown_command"
    DM_BLOCKED = "dm_blocked"
    NO_PERMISSION = "no_permission"
    MISSING_ARGUMENT = "missing_argument"
    INVOKED = "invoked"


def split_invocation(content: str, prefix: str, bot_id: int) -> Optional[Tuple[str, List[str]]]:
    """
    Command token and raw arguments of a message, or None when the message
    neither starts with ``prefix`` nor with a mention of the bot.
    """
    if prefix and content.startswith(prefix):
        remainder = content[len(prefix):]
    else:
        match = re.match(rf"<@!?{bot_id}>", content)
        if match is None:
            return None
        remainder = content[match.end():]

    args = remainder.strip().split(" ")
    return args.pop(0), args


def required_level(command: Command, guild_settings) -> int:
    override = guild_settings.cmd_levels.get(command.label)
    return override if override is not None else command.default_level


class Dispatcher:
    def __init__(self, client):
        self.client = client

    async def dispatch(self, message: discord.Message) -> DispatchResult:
        client = self.client

        if message.author.bot or message.author.id == client.user.id:
            return DispatchResult.IGNORED

        guild_id = message.guild.id if message.guild else None
        guild_settings = (await client.get_guild_record(guild_id)).settings
        info = CommandInfo(message, guild_settings, client)

        invocation = split_invocation(message.content, guild_settings.prefix, client.user.id)
        if invocation is None:
            return DispatchResult.NOT_COMMAND
        token, args = invocation

        command = client.command_index.resolve(token)
        if command is None:
            return DispatchResult.UNKNOWN_COMMAND

        if info.is_dm and not command.allow_in_dm:
            return DispatchResult.DM_BLOCKED

        level = get_user_level(info, client.owner_id)
        if required_level(command, guild_settings) > level:
            await send_notice(
                message.channel,
                get_no_permission_embed()
                .set_title("Could not execute command")
                .set_description("You do not have enough permissions to execute this command"),
            )
            return DispatchResult.NO_PERMISSION

        mapped_args = {}
        if command.arguments:
            mapped_args, missing = parse_arguments(command.arguments, " ".join(args))
            if missing is not None:
                await send_missing_argument(message.channel, missing, f"{guild_settings.prefix}{command.usage}")
                return DispatchResult.MISSING_ARGUMENT

        if client.module_settings.get("core", "log_commands", True):
            logger.info(f"{message.author} ran '{command.label}' in {message.guild or 'DM'}")
        await command.run(client, info, args, mapped_args)
        return DispatchResult.INVOKED
