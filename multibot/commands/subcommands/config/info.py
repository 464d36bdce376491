from ....arguments import WordArgument
from ....command import Command
from ....embeds import get_error_embed, get_info_embed
from ....settings import declared_settings


class ConfigInfo(Command):
    label = "info"
    description = "Show the configuration of a module"
    arguments = [WordArgument("module")]

    async def run(self, client, info, args, mapped_args):
        module = client.registry.get(mapped_args["module"])
        if module is None:
            style = get_error_embed().set_title(f"Unknown module {mapped_args['module']}")
            return await info.send(embed=style.get_as_embed())

        style = get_info_embed().set_title(f"Configuration of {module.name}")
        schema = declared_settings(module)
        if not schema:
            style.set_description("This module has no settings")
        for key, default in schema.items():
            value = client.resolve_setting(module.identifier, key, info.settings)
            overridden = f"{module.identifier}_{key}" in info.settings.values
            style.add_field(key, f"`{value}`" + (" (server)" if overridden else f" (default `{default}`)"), inline=True)
        await info.send(embed=style.get_as_embed())
