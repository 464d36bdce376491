import logging

from ..command import Command
from ..embeds import get_info_embed, get_success_embed
from ..permissions import BOT_OWNER, GUILD_OWNER, get_user_level

logger = logging.getLogger(__name__)


class Setup(Command):
    label = "setup"
    description = "Run the setup of every module that needs one"
    category = "Server Owner"
    default_level = GUILD_OWNER

    async def run(self, client, info, args, mapped_args):
        is_owner = get_user_level(info, client.owner_id) >= BOT_OWNER
        wrapper = await client.get_guild_record(info.guild_id)
        info.settings = wrapper.settings
        done = []

        for module in client.modules.values():
            if not module.was_setup and is_owner:
                module.execute_bot_setup(info)
                done.append(f"{module.name} (bot)")
            if module.needs_guild_setup(info.guild_id):
                module.execute_guild_setup(info)
                done.append(module.name)

        if not done:
            style = get_info_embed().set_title("Nothing to set up")
            return await info.send(embed=style.get_as_embed())

        await client.update_guild_record(wrapper)
        logger.info(f"Ran setup for {', '.join(done)} in {info.guild}")
        style = get_success_embed().set_title("Setup complete").set_description(
            "\n".join(f"• {name}" for name in done)
        )
        await info.send(embed=style.get_as_embed())
