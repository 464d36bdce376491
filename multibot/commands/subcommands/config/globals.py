from ....arguments import TextArgument, WordArgument
from ....command import Command
from ....embeds import get_error_embed, get_no_permission_embed, get_success_embed
from ....permissions import BOT_OWNER, get_user_level
from ....settings import coerce_value


class ConfigGlobal(Command):
    label = "global"
    description = "Set a bot-wide module setting"
    default_level = BOT_OWNER
    arguments = [
        WordArgument("module"),
        WordArgument("setting"),
        TextArgument("value"),
    ]

    async def run(self, client, info, args, mapped_args):
        if get_user_level(info, client.owner_id) < self.default_level:
            style = get_no_permission_embed().set_title("Only the bot owner can change global settings")
            return await info.send(embed=style.get_as_embed())

        module = client.registry.get(mapped_args["module"])
        key = mapped_args["setting"]
        schema = module.get_global_settings() if module else {}
        if key not in schema:
            style = get_error_embed().set_title("Unknown setting").set_description(
                f"`{mapped_args['module']}` has no global setting `{key}`"
            )
            return await info.send(embed=style.get_as_embed())

        try:
            value = coerce_value(mapped_args["value"], schema[key])
        except ValueError as e:
            style = get_error_embed().set_title("Invalid value").set_description(str(e))
            return await info.send(embed=style.get_as_embed())

        client.module_settings.set(module.identifier, key, value)
        client.save_settings()
        style = get_success_embed().set_title("Global setting updated").set_description(
            f"`{module.identifier}.{key}` is now `{value}`"
        )
        await info.send(embed=style.get_as_embed())
