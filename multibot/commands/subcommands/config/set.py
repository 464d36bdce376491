from ....arguments import TextArgument, WordArgument
from ....command import Command
from ....embeds import get_error_embed, get_success_embed
from ....settings import coerce_value, declared_settings


class ConfigSet(Command):
    label = "set"
    description = "Set a module setting for this server"
    arguments = [
        WordArgument("module"),
        WordArgument("setting"),
        TextArgument("value"),
    ]

    async def run(self, client, info, args, mapped_args):
        module = client.registry.get(mapped_args["module"])
        key = mapped_args["setting"]
        schema = declared_settings(module) if module else {}
        if key not in schema:
            style = get_error_embed().set_title("Unknown setting").set_description(
                f"`{mapped_args['module']}` has no setting `{key}`"
            )
            return await info.send(embed=style.get_as_embed())

        try:
            value = coerce_value(mapped_args["value"], schema[key])
        except ValueError as e:
            style = get_error_embed().set_title("Invalid value").set_description(str(e))
            return await info.send(embed=style.get_as_embed())

        wrapper = await client.get_guild_record(info.guild_id)
        wrapper.settings.values[f"{module.identifier}_{key}"] = value
        await client.update_guild_record(wrapper)

        style = get_success_embed().set_title("Setting updated").set_description(
            f"`{module.identifier}.{key}` is now `{value}`"
        )
        await info.send(embed=style.get_as_embed())
