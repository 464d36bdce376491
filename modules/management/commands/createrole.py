import discord

from multibot import Command, TextArgument
from multibot.permissions import MANAGER


class CreateRole(Command):
    label = "createrole"
    description = "Create a new role"
    category = "Management"
    default_level = MANAGER
    arguments = [TextArgument("name")]

    async def run(self, client, info, args, mapped_args):
        guild = info.guild
        role_name = mapped_args["name"]
        existing_role = discord.utils.get(guild.roles, name=role_name)
        if existing_role:
            return await info.send(f"❌ Role `{role_name}` already exists!")

        new_role = await guild.create_role(name=role_name, mentionable=True)
        await info.send(f"✅ Created role {new_role.mention}")
