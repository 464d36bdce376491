from ....arguments import IntegerArgument, WordArgument
from ....command import Command
from ....embeds import get_error_embed, get_success_embed
from ....permissions import get_user_level


class PermissionsSet(Command):
    label = "set"
    description = "Set the level a command requires"
    arguments = [
        WordArgument("command"),
        IntegerArgument("level", minimum=0),
    ]

    async def run(self, client, info, args, mapped_args):
        command = client.command_index.resolve(mapped_args["command"])
        if command is None:
            style = get_error_embed().set_title(f"Unknown command {mapped_args['command']}")
            return await info.send(embed=style.get_as_embed())

        level = mapped_args["level"]
        if level > get_user_level(info, client.owner_id):
            style = get_error_embed().set_title("Could not change level").set_description(
                "You can not require a level higher than your own"
            )
            return await info.send(embed=style.get_as_embed())

        wrapper = await client.get_guild_record(info.guild_id)
        wrapper.settings.cmd_levels[command.label] = level
        await client.update_guild_record(wrapper)

        style = get_success_embed().set_title("Level changed").set_description(
            f"`{command.label}` now requires level `{level}`"
        )
        await info.send(embed=style.get_as_embed())
