"""Permission levels derived from ownership and guild permissions."""

from typing import Optional

import discord

BOT_OWNER = 1000
GUILD_OWNER = 100
ADMINISTRATOR = 50
MANAGER = 25
EVERYONE = 0

LEVEL_NAMES = {
    BOT_OWNER: "Bot Owner",
    GUILD_OWNER: "Server Owner",
    ADMINISTRATOR: "Administrator",
    MANAGER: "Manager",
    EVERYONE: "Everyone",
}


def get_user_level(info, owner_id: Optional[int] = None) -> int:
    """Highest level the invoking user holds."""
    author = info.author
    if owner_id and author.id == owner_id:
        return BOT_OWNER
    if info.guild is None:
        return EVERYONE
    if info.guild.owner_id == author.id:
        return GUILD_OWNER
    if isinstance(author, discord.Member):
        permissions = author.guild_permissions
        if permissions.administrator:
            return ADMINISTRATOR
        if permissions.manage_guild:
            return MANAGER
    return EVERYONE


def level_name(level: int) -> str:
    for threshold in sorted(LEVEL_NAMES, reverse=True):
        if level >= threshold:
            return LEVEL_NAMES[threshold]
    return LEVEL_NAMES[EVERYONE]
