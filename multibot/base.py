"""
Module Contract
===============

A module bundles commands, events and a settings schema. Every module
directory carries a ``module.py`` descriptor defining one ``Module``
subclass.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Set, Tuple


@dataclass
class Configuration:
    """Settings schema of a module: setting key -> default value."""

    global_settings: Dict[str, Any] = field(default_factory=dict)
    guild_settings: Dict[str, Any] = field(default_factory=dict)


class Module:
    """Base class for module descriptors."""

    # Info about the module
    name: str = ""
    identifier: str = ""
    version: str = "1.0.0"

    # Additional info
    description: str = ""
    dependencies: Tuple[str, ...] = ()
    configuration: Optional[Configuration] = None

    # Setups
    bot_setup_enabled: bool = False
    guild_setup_enabled: bool = False

    def __init__(self):
        self.was_setup: bool = not self.bot_setup_enabled
        self.guild_setups: Set[int] = set()

        # Information about loading
        self.was_loaded: bool = False
        self.command_count: int = 0
        self.event_count: int = 0
        self.path: Optional[Path] = None

    def execute_bot_setup(self, info) -> None:
        self.was_setup = True

    def execute_guild_setup(self, info) -> None:
        self.guild_setups.add(info.guild.id)

    def needs_guild_setup(self, guild_id: int) -> bool:
        return self.guild_setup_enabled and guild_id not in self.guild_setups

    def get_global_settings(self, prefixed: bool = False) -> Dict[str, Any]:
        if self.configuration is None:
            return {}
        if prefixed:
            return {f"{self.identifier}_{key}": value
                    for key, value in self.configuration.global_settings.items()}
        return dict(self.configuration.global_settings)

    def get_guild_settings(self) -> Dict[str, Any]:
        if self.configuration is None:
            return {}
        return {f"{self.identifier}_{key}": value
                for key, value in self.configuration.guild_settings.items()}

    def __repr__(self):
        return f"<Module {self.identifier} v{self.version}>"
