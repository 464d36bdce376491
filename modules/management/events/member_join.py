import logging

import discord

from multibot import Event

logger = logging.getLogger(__name__)


class MemberJoin(Event):
    """Gives the configured join role to new members."""

    event = "member_join"
    type = "on"

    async def listener(self, client, member: discord.Member) -> None:
        settings = await client.get_guild_settings(member.guild.id)
        role_id = client.resolve_setting(self.module, "join_role", settings)
        if not role_id:
            return

        role = member.guild.get_role(role_id)
        if role is None:
            logger.warning(f"Join role {role_id} no longer exists in {member.guild.name}")
            return
        await member.add_roles(role, reason="Join role")
