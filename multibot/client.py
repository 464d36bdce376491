import logging
from typing import Any, Dict, Optional, Tuple

import discord
from discord.ext import commands

from config import Config, get_config

from .dispatcher import Dispatcher
from .event import EventRegistry
from .index import CommandIndex
from .registry import ModuleRegistry
from .settings import ModuleSettings, SettingsStore, resolve
from .storage import GuildSettings, GuildStorage, GuildWrapper, create_storage

logger = logging.getLogger(__name__)


def default_intents() -> discord.Intents:
    intents = discord.Intents.default()
    intents.message_content = True
    intents.guilds = True
    intents.guild_messages = True
    intents.members = True
    return intents


class WrappedClient(commands.Bot):
    """Discord client that loads modules and routes messages to their commands."""

    instance: Optional["WrappedClient"] = None

    def __init__(self, config: Optional[Config] = None, **options):
        self.config = config or get_config()
        options.setdefault('intents', default_intents())
        super().__init__(
            command_prefix=commands.when_mentioned,
            help_command=None,
            owner_id=self.config.owner_id or None,
            **options,
        )

        # Module loading
        self.command_index = CommandIndex()
        self.event_registry = EventRegistry(self)
        self.registry = ModuleRegistry(self.command_index, self.event_registry, self.config.modules_dir)
        self.dispatcher = Dispatcher(self)

        # Settings
        self.settings_store = SettingsStore(self.config.settings_file)
        self.module_settings = ModuleSettings()
        self.storage: Optional[GuildStorage] = None

        # Miscellaneous
        self.variables: Dict[str, Any] = {}

        WrappedClient.instance = self

    @property
    def modules(self):
        return self.registry.modules

    @property
    def event_count(self) -> int:
        return self.event_registry.count()

    async def setup_hook(self):
        """Called after the bot is initialized but before login"""
        logger.info("Setting up bot...")
        await self.initialize()

    async def initialize(self) -> None:
        await self.load_all_modules(True, True)
        self.create_settings()
        self.load_settings()
        self.load_database()

    async def load_all_modules(self, load_commands: bool = True, load_events: bool = True) -> Tuple[Optional[int], Optional[int]]:
        """Clear and (re)load every module; returns (commands, events) totals."""
        return self.registry.load(load_commands, load_events)

    async def reload_modules(self) -> Tuple[Optional[int], Optional[int]]:
        logger.info("Reloading all modules...")
        totals = await self.load_all_modules(True, True)
        self.create_settings()
        self.load_settings()
        return totals

    def create_settings(self) -> None:
        self.settings_store.ensure_defaults(self.registry)

    def load_settings(self) -> None:
        self.module_settings = self.settings_store.load_effective(self.registry)

    def save_settings(self) -> None:
        self.settings_store.save(self.module_settings)

    def guild_defaults(self) -> Dict[str, Any]:
        defaults: Dict[str, Any] = {}
        for module in self.registry:
            defaults.update(module.get_guild_settings())
        return defaults

    def load_database(self) -> None:
        self.storage = create_storage(
            self.config.storage_backend,
            self.config.storage_path,
            default_prefix=self.config.prefix,
            defaults=self.guild_defaults,
        )
        logger.info(f"✅ Using {self.storage.name} guild storage at {self.config.storage_path}")

    # Guild settings

    async def get_guild_record(self, guild_id: Optional[int]) -> GuildWrapper:
        return await self.storage.get_or_create(guild_id)

    async def get_guild_settings(self, guild_id: Optional[int]) -> GuildSettings:
        return (await self.get_guild_record(guild_id)).settings

    async def update_guild_record(self, wrapper: GuildWrapper) -> None:
        await self.storage.update(wrapper)

    async def update_guild_settings(self, guild_id: int, settings: GuildSettings) -> None:
        wrapper = await self.get_guild_record(guild_id)
        wrapper.settings = settings
        await self.update_guild_record(wrapper)

    def resolve_setting(self, module_id: str, key: str, guild_settings: Optional[GuildSettings] = None) -> Any:
        module = self.registry.get(module_id)
        if module is None:
            return None
        return resolve(module, key, self.module_settings, guild_settings)

    # Shared variables

    def set_variable(self, module: str, name: str, variable: Any) -> None:
        self.variables[f"{module}_{name}"] = variable

    def get_variable(self, module: str, name: str) -> Any:
        return self.variables.get(f"{module}_{name}")

    # Events

    async def on_message(self, message: discord.Message) -> None:
        """Routing is done by the core module's message listener."""

    async def on_error(self, event_method: str, *args, **kwargs) -> None:
        """Catch errors raised by listeners and commands"""
        logger.exception(f"Error in event {event_method}")

    async def close(self) -> None:
        if self.storage is not None:
            await self.storage.close()
        await super().close()
