"""Command contract and the per-invocation context."""

from typing import Any, Dict, List, Optional, Sequence, Type

import discord

from .arguments import Argument, format_usage, parse_arguments
from .embeds import send_missing_argument


class CommandInfo:
    """Context of a single command invocation, built from the incoming message."""

    def __init__(self, message: discord.Message, settings=None, client=None):
        self.message = message
        self.settings = settings
        self.client = client
        self.guild: Optional[discord.Guild] = message.guild
        self.channel = message.channel
        self.author = message.author
        self.is_dm: bool = message.guild is None

    @property
    def member(self) -> Optional[discord.Member]:
        return self.author if isinstance(self.author, discord.Member) else None

    @property
    def guild_id(self) -> Optional[int]:
        return self.guild.id if self.guild else None

    async def send(self, content: str = None, **kwargs) -> discord.Message:
        return await self.channel.send(content, **kwargs)

    def __repr__(self):
        return f"<CommandInfo guild={self.guild_id} author={self.author} dm={self.is_dm}>"


class Command:
    """
    Base class for commands.

    Subclasses set the metadata attributes and implement ``run``. The loader
    fills in ``module`` with the identifier of the owning module.
    """

    label: str = ""
    aliases: Sequence[str] = ()
    description: str = ""
    category: str = "General"
    default_level: int = 0
    allow_in_dm: bool = False
    arguments: Sequence[Argument] = ()

    def __init__(self):
        self.module: Optional[str] = None

    @property
    def usage(self) -> str:
        return format_usage(self.label, self.arguments)

    async def run(self, client, info: CommandInfo, args: List[str], mapped_args: Dict[str, Any]) -> None:
        raise NotImplementedError

    def __repr__(self):
        return f"<Command {self.label} module={self.module}>"


class CommandGroup(Command):
    """
    Command that hands off to a subcommand named by its first argument.

    Unknown or missing subcommand names fall back to ``default_subcommand``.
    Subcommand classes live under ``commands/subcommands/`` so the loader
    does not register them on their own.
    """

    subcommands: Sequence[Type[Command]] = ()
    default_subcommand: str = "help"

    def __init__(self):
        super().__init__()
        self.children: Dict[str, Command] = {}
        for cls in self.subcommands:
            child = cls()
            self.children[child.label] = child

    @property
    def usage(self) -> str:
        return f"{self.label} <{'|'.join(self.children)}>"

    async def run(self, client, info: CommandInfo, args: List[str], mapped_args: Dict[str, Any]) -> None:
        name = args[0].lower() if args and args[0] else ""
        if name in self.children:
            child, rest = self.children[name], args[1:]
        else:
            child, rest = self.children[self.default_subcommand], []
        child.module = self.module

        mapped: Dict[str, Any] = {}
        if child.arguments:
            mapped, missing = parse_arguments(child.arguments, " ".join(rest))
            if missing is not None:
                await send_missing_argument(
                    info.channel, missing, f"{info.settings.prefix}{self.label} {child.usage}"
                )
                return
        await child.run(client, info, rest, mapped)
