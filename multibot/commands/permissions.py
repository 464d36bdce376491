from ..command import CommandGroup
from ..permissions import GUILD_OWNER
from .subcommands.permissions.help import PermissionsHelp
from .subcommands.permissions.list import PermissionsList
from .subcommands.permissions.reset import PermissionsReset
from .subcommands.permissions.set import PermissionsSet


class Permissions(CommandGroup):
    label = "permissions"
    aliases = ["perms"]
    description = "Change which level a command requires on this server"
    category = "Server Owner"
    default_level = GUILD_OWNER
    subcommands = [PermissionsHelp, PermissionsList, PermissionsSet, PermissionsReset]
