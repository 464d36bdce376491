from multibot import Command, MentionArgument
from multibot.permissions import MANAGER


class AddRole(Command):
    label = "addrole"
    description = "Add a role to a member"
    category = "Management"
    default_level = MANAGER
    arguments = [
        MentionArgument("member"),
        MentionArgument("role"),
    ]

    async def run(self, client, info, args, mapped_args):
        guild = info.guild
        member = guild.get_member(mapped_args["member"])
        role = guild.get_role(mapped_args["role"])
        if member is None:
            return await info.send(f"❌ Member not found: **{mapped_args['member']}**")
        if role is None:
            return await info.send(f"❌ Role not found: **{mapped_args['role']}**")

        if info.member is not None and role >= info.member.top_role and info.guild.owner_id != info.author.id:
            return await info.send("❌ Cannot assign a role higher than yours!")
        if role in member.roles:
            return await info.send(f"❌ {member.mention} already has {role.mention}!")

        await member.add_roles(role)
        await info.send(f"✅ Added {role.mention} to {member.mention}")
