from ....arguments import WordArgument
from ....command import Command
from ....embeds import get_error_embed, get_success_embed


class PermissionsReset(Command):
    label = "reset"
    description = "Reset a command to its default level"
    arguments = [WordArgument("command")]

    async def run(self, client, info, args, mapped_args):
        command = client.command_index.resolve(mapped_args["command"])
        if command is None:
            style = get_error_embed().set_title(f"Unknown command {mapped_args['command']}")
            return await info.send(embed=style.get_as_embed())

        wrapper = await client.get_guild_record(info.guild_id)
        wrapper.settings.cmd_levels.pop(command.label, None)
        await client.update_guild_record(wrapper)

        style = get_success_embed().set_title("Level reset").set_description(
            f"`{command.label}` requires level `{command.default_level}` again"
        )
        await info.send(embed=style.get_as_embed())
