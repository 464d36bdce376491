from ..arguments import WordArgument
from ..command import Command
from ..embeds import get_success_embed
from ..permissions import ADMINISTRATOR


class Prefix(Command):
    label = "prefix"
    description = "Change the command prefix of this server"
    category = "Server Owner"
    default_level = ADMINISTRATOR
    arguments = [WordArgument("prefix")]

    async def run(self, client, info, args, mapped_args):
        wrapper = await client.get_guild_record(info.guild_id)
        wrapper.settings.prefix = mapped_args["prefix"]
        await client.update_guild_record(wrapper)

        style = get_success_embed().set_title("Prefix changed").set_description(
            f"Commands now start with `{wrapper.settings.prefix}`"
        )
        await info.send(embed=style.get_as_embed())
