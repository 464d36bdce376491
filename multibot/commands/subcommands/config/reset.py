from ....arguments import WordArgument
from ....command import Command
from ....embeds import get_error_embed, get_success_embed


class ConfigReset(Command):
    label = "reset"
    description = "Reset a setting or a whole module to its default"
    arguments = [
        WordArgument("module"),
        WordArgument("setting", required=False),
    ]

    async def run(self, client, info, args, mapped_args):
        module = client.registry.get(mapped_args["module"])
        if module is None:
            style = get_error_embed().set_title(f"Unknown module {mapped_args['module']}")
            return await info.send(embed=style.get_as_embed())

        wrapper = await client.get_guild_record(info.guild_id)
        values = wrapper.settings.values
        prefix = f"{module.identifier}_"
        if mapped_args.get("setting"):
            keys = [prefix + mapped_args["setting"]]
        else:
            keys = [key for key in values if key.startswith(prefix)]

        for key in keys:
            values.pop(key, None)
        # Guild-level defaults come back as stored values
        for key, default in module.get_guild_settings().items():
            if key in keys or not mapped_args.get("setting"):
                values[key] = default
        await client.update_guild_record(wrapper)

        target = f"`{module.identifier}.{mapped_args['setting']}`" if mapped_args.get("setting") else module.name
        style = get_success_embed().set_title("Settings reset").set_description(f"{target} is back to default")
        await info.send(embed=style.get_as_embed())
