from ....command import Command
from ....embeds import get_info_embed


class PermissionsList(Command):
    label = "list"
    description = "Show commands with a changed level"

    async def run(self, client, info, args, mapped_args):
        style = get_info_embed().set_title("Changed command levels")
        if not info.settings.cmd_levels:
            style.set_description("Every command uses its default level")
        for label, level in sorted(info.settings.cmd_levels.items()):
            command = client.command_index.resolve(label)
            default = command.default_level if command else "?"
            style.add_field(label, f"`{level}` (default `{default}`)", inline=True)
        await info.send(embed=style.get_as_embed())
