from ....command import Command
from ....embeds import get_info_embed


class ConfigHelp(Command):
    label = "help"
    description = "Used to configure settings for your modules"

    async def run(self, client, info, args, mapped_args):
        style = (
            get_info_embed()
            .set_title("Help for command config")
            .add_field("help", "Gives you a list of all subcommands")
            .add_field("list", "Gives you a list of all modules that can be configured")
            .add_field("info <module>", "Gives you info about a modules configuration")
            .add_field("set <module> <setting> <value>", "Sets a value in config")
            .add_field("reset <module> [setting]", "Resets a value or module to default")
            .add_field("global <module> <setting> <value>", "Sets a bot-wide value (bot owner only)")
        )
        await info.send(embed=style.get_as_embed())
