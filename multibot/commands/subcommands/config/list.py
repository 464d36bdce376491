from ....command import Command
from ....embeds import get_info_embed
from ....settings import declared_settings


class ConfigList(Command):
    label = "list"
    description = "List all modules that can be configured"

    async def run(self, client, info, args, mapped_args):
        style = get_info_embed().set_title("Configurable modules")
        modules = [module for module in client.modules.values() if declared_settings(module)]
        if not modules:
            style.set_description("No module declares any settings")
        for module in modules:
            style.add_field(f"{module.name} ({module.identifier})", ", ".join(
                f"`{key}`" for key in declared_settings(module)
            ))
        await info.send(embed=style.get_as_embed())
