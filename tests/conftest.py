import uuid
from pathlib import Path
from textwrap import dedent
from unittest.mock import AsyncMock, MagicMock

import pytest

from multibot.index import CommandIndex
from multibot.settings import ModuleSettings
from multibot.storage import GuildSettings, GuildWrapper

BOT_ID = 111111111111111111
GUILD_ID = 222222222222222222
USER_ID = 333333333333333333


@pytest.fixture
def guild_settings() -> GuildSettings:
    return GuildSettings(prefix="!")


@pytest.fixture
def mock_client(guild_settings) -> MagicMock:
    """Client double with a real command index and guild settings."""
    client = MagicMock()
    client.user.id = BOT_ID
    client.owner_id = None
    client.command_index = CommandIndex()
    client.module_settings = ModuleSettings()
    client.get_guild_record = AsyncMock(return_value=GuildWrapper(GUILD_ID, guild_settings))
    client.update_guild_record = AsyncMock()
    return client


@pytest.fixture
def make_message():
    """Creates a mock discord.Message in a guild (or a DM with ``dm=True``)."""

    def _factory(content: str, dm: bool = False, bot: bool = False, author_id: int = USER_ID) -> MagicMock:
        message = MagicMock()
        message.content = content
        message.author.bot = bot
        message.author.id = author_id
        message.channel.send = AsyncMock()
        if dm:
            message.guild = None
        else:
            message.guild.id = GUILD_ID
            message.guild.owner_id = 1
        return message

    return _factory


class ModuleTree:
    """Writes module folders into a uniquely named, importable package."""

    def __init__(self, root: Path):
        self.package = f"testmods_{uuid.uuid4().hex[:10]}"
        self.path = root / self.package
        self.path.mkdir()
        (self.path / "__init__.py").write_text("")

    def write(self, relative: str, source: str) -> Path:
        file = self.path / relative
        file.parent.mkdir(parents=True, exist_ok=True)
        for parent in file.relative_to(self.path).parents:
            init = self.path / parent / "__init__.py"
            if not init.exists():
                init.write_text("")
        file.write_text(dedent(source))
        return file

    def module(self, folder: str, identifier: str, name: str = None, body=()) -> Path:
        lines = [
            "from multibot import Configuration, Module",
            "",
            "",
            "class Descriptor(Module):",
            f"    name = {(name or identifier.title())!r}",
            f"    identifier = {identifier!r}",
        ]
        lines += [f"    {line}" for line in body]
        return self.write(f"{folder}/module.py", "\n".join(lines) + "\n")

    def command(self, folder: str, filename: str, label: str, aliases=()) -> Path:
        return self.write(f"{folder}/commands/{filename}", f"""
            from multibot import Command


            class Generated(Command):
                label = {label!r}
                aliases = {list(aliases)!r}

                async def run(self, client, info, args, mapped_args):
                    pass
        """)

    def event(self, folder: str, filename: str, event: str, type: str = "on") -> Path:
        return self.write(f"{folder}/events/{filename}", f"""
            from multibot import Event


            class Generated(Event):
                event = {event!r}
                type = {type!r}

                async def listener(self, client, *args):
                    pass
        """)


@pytest.fixture
def module_tree(tmp_path) -> ModuleTree:
    return ModuleTree(tmp_path)
