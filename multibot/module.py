"""Core module - command handling, configuration and module management."""

from .base import Configuration, Module


class CoreModule(Module):
    name = "Core"
    identifier = "core"
    version = "2.0.0"
    description = "Command handling, configuration and module management"
    configuration = Configuration(
        global_settings={
            "status": "{prefix}help",
            "log_commands": True,
        },
        guild_settings={
            "setup_complete": False,
        },
    )
    guild_setup_enabled = True

    def execute_guild_setup(self, info) -> None:
        info.settings.values[f"{self.identifier}_setup_complete"] = True
        super().execute_guild_setup(info)
