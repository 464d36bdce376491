from collections import defaultdict

import discord

from ..arguments import WordArgument
from ..command import Command
from ..permissions import level_name


class Help(Command):
    label = "help"
    aliases = ["commands", "h"]
    description = "Show all commands or details about one command"
    category = "Information"
    default_level = 0
    allow_in_dm = True
    arguments = [WordArgument("command", required=False)]

    async def run(self, client, info, args, mapped_args):
        prefix = info.settings.prefix
        name = mapped_args.get("command")

        if name:
            command = client.command_index.resolve(name)
            if command is None:
                return await info.send(f"❌ Command `{name}` not found!")

            level = info.settings.cmd_levels.get(command.label, command.default_level)
            embed = discord.Embed(
                title=f"📖 Help: {command.label}",
                description=command.description or "No description available",
                color=discord.Color.green()
            )
            embed.add_field(name="Usage", value=f"`{prefix}{command.usage}`", inline=False)
            if command.aliases:
                embed.add_field(name="Aliases", value=", ".join(f"`{a}`" for a in command.aliases), inline=False)
            embed.add_field(name="Module", value=command.module, inline=True)
            embed.add_field(name="Level", value=f"{level} ({level_name(level)})", inline=True)
            return await info.send(embed=embed)

        # Group commands by category
        categories = defaultdict(list)
        for command in client.command_index.commands():
            categories[command.category].append(command)

        embed = discord.Embed(
            title="🤖 MultiBot Help",
            description="Here are all available commands:",
            color=discord.Color.blue()
        )
        for category in sorted(categories):
            command_names = " ".join(f"`{command.label}`" for command in categories[category])
            embed.add_field(name=f"📂 {category}", value=command_names, inline=False)

        embed.set_footer(text=f"Use {prefix}help <command> for more info • Prefix: {prefix}")
        await info.send(embed=embed)
