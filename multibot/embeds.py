"""Embed helpers used for command replies and notices."""

import discord


class EmbedStyle:
    """Small builder around ``discord.Embed`` with a fixed colour per style."""

    def __init__(self, color: int, icon: str = ""):
        self.icon = icon
        self.embed = discord.Embed(color=color)

    def set_title(self, title: str) -> "EmbedStyle":
        self.embed.title = f"{self.icon} {title}".strip()
        return self

    def set_description(self, description: str) -> "EmbedStyle":
        self.embed.description = description
        return self

    def add_field(self, name: str, value: str, inline: bool = False) -> "EmbedStyle":
        self.embed.add_field(name=name, value=value, inline=inline)
        return self

    def set_footer(self, text: str) -> "EmbedStyle":
        self.embed.set_footer(text=text)
        return self

    def get_as_embed(self) -> discord.Embed:
        return self.embed


def get_info_embed() -> EmbedStyle:
    return EmbedStyle(0x5865f2, "ℹ️")  # Discord blurple


def get_success_embed() -> EmbedStyle:
    return EmbedStyle(0x57f287, "✅")  # Discord green


def get_error_embed() -> EmbedStyle:
    return EmbedStyle(0xed4245, "❌")  # Discord red


def get_no_permission_embed() -> EmbedStyle:
    return EmbedStyle(0xfaa61a, "⛔")  # Discord orange


NOTICE_TIMEOUT = 5.0


async def send_notice(channel, style: EmbedStyle) -> None:
    """Send a notice that deletes itself after ``NOTICE_TIMEOUT`` seconds."""
    await channel.send(embed=style.get_as_embed(), delete_after=NOTICE_TIMEOUT)


async def send_missing_argument(channel, argument, usage: str) -> None:
    await send_notice(
        channel,
        get_error_embed()
        .set_title("Could not execute command")
        .set_description(f"Missing argument **{argument.name}**")
        .set_footer(f"Usage: {usage}"),
    )
