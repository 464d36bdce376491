import discord

from ..command import Command


class Modules(Command):
    label = "modules"
    description = "List all loaded modules"
    category = "Information"
    default_level = 0
    allow_in_dm = True

    async def run(self, client, info, args, mapped_args):
        embed = discord.Embed(
            title="Loaded Modules",
            color=discord.Color.blue()
        )
        for module in client.modules.values():
            value = (
                f"{module.description or 'No description'}\n"
                f"`{module.command_count}` commands • `{module.event_count}` events"
            )
            if module.dependencies:
                value += f"\nDepends on: {', '.join(module.dependencies)}"
            embed.add_field(name=f"{module.name} ({module.identifier} v{module.version})", value=value, inline=False)
        await info.send(embed=embed)
