from ..command import CommandGroup
from ..permissions import GUILD_OWNER
from .subcommands.config.globals import ConfigGlobal
from .subcommands.config.help import ConfigHelp
from .subcommands.config.info import ConfigInfo
from .subcommands.config.list import ConfigList
from .subcommands.config.reset import ConfigReset
from .subcommands.config.set import ConfigSet


class Config(CommandGroup):
    label = "config"
    aliases = ["cfg", "settings"]
    description = "Used to configure settings for your modules"
    category = "Server Owner"
    default_level = GUILD_OWNER
    subcommands = [ConfigHelp, ConfigList, ConfigInfo, ConfigSet, ConfigReset, ConfigGlobal]
