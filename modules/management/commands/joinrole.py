from multibot import Command, MentionArgument
from multibot.permissions import ADMINISTRATOR


class JoinRole(Command):
    label = "joinrole"
    description = "Set the role given to new members, without a role to disable it"
    category = "Management"
    default_level = ADMINISTRATOR
    arguments = [MentionArgument("role", required=False)]

    async def run(self, client, info, args, mapped_args):
        role_id = mapped_args.get("role") or 0
        if role_id and info.guild.get_role(role_id) is None:
            return await info.send(f"❌ Role not found: **{role_id}**")

        wrapper = await client.get_guild_record(info.guild_id)
        wrapper.settings.values[f"{self.module}_join_role"] = role_id
        await client.update_guild_record(wrapper)

        if role_id:
            await info.send(f"✅ New members will get <@&{role_id}>")
        else:
            await info.send("✅ New members will not get a role")
