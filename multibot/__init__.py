"""
MultiBot - Modular Discord Command Framework
============================================

Modules are folders with a ``module.py`` descriptor plus ``commands/`` and
``events/`` packages. The client discovers them at startup, indexes their
commands, attaches their events and routes messages to commands.
"""

from .arguments import (
    Argument,
    ChoiceArgument,
    IntegerArgument,
    MentionArgument,
    ParseState,
    TextArgument,
    WordArgument,
    parse_arguments,
)
from .base import Configuration, Module
from .command import Command, CommandGroup, CommandInfo
from .dispatcher import Dispatcher, DispatchResult
from .event import Event, EventRegistry
from .exceptions import BotFrameworkException, ModuleLoadError, SettingsError, StorageError
from .index import CommandIndex
from .registry import ModuleRegistry
from .settings import ModuleSettings, SettingsStore, resolve
from .storage import GuildSettings, GuildStorage, GuildWrapper, JsonGuildStorage, SqliteGuildStorage

__all__ = [
    'Argument',
    'ChoiceArgument',
    'IntegerArgument',
    'MentionArgument',
    'ParseState',
    'TextArgument',
    'WordArgument',
    'parse_arguments',
    'Configuration',
    'Module',
    'Command',
    'CommandGroup',
    'CommandInfo',
    'Dispatcher',
    'DispatchResult',
    'Event',
    'EventRegistry',
    'BotFrameworkException',
    'ModuleLoadError',
    'SettingsError',
    'StorageError',
    'CommandIndex',
    'ModuleRegistry',
    'ModuleSettings',
    'SettingsStore',
    'resolve',
    'GuildSettings',
    'GuildStorage',
    'GuildWrapper',
    'JsonGuildStorage',
    'SqliteGuildStorage',
]

__version__ = '2.0.0'
