from ....command import Command
from ....embeds import get_info_embed
from ....permissions import LEVEL_NAMES


class PermissionsHelp(Command):
    label = "help"
    description = "Used to change the level a command requires"

    async def run(self, client, info, args, mapped_args):
        levels = "\n".join(f"`{level}` {name}" for level, name in sorted(LEVEL_NAMES.items()))
        style = (
            get_info_embed()
            .set_title("Help for command permissions")
            .add_field("help", "Gives you a list of all subcommands")
            .add_field("list", "Shows every command whose level was changed")
            .add_field("set <command> <level>", "Sets the level a command requires")
            .add_field("reset <command>", "Resets a command to its default level")
            .add_field("Levels", levels)
        )
        await info.send(embed=style.get_as_embed())
