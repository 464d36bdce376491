from ..command import Command
from ..embeds import get_success_embed
from ..permissions import BOT_OWNER


class Reload(Command):
    label = "reload"
    description = "Reload every module, its commands and its events"
    category = "Bot Owner"
    default_level = BOT_OWNER
    allow_in_dm = True

    async def run(self, client, info, args, mapped_args):
        commands, events = await client.reload_modules()
        style = (
            get_success_embed()
            .set_title("Reloaded all modules")
            .add_field("Modules", str(len(client.modules)), inline=True)
            .add_field("Commands", str(commands), inline=True)
            .add_field("Events", str(events), inline=True)
        )
        await info.send(embed=style.get_as_embed())
