import time
from datetime import datetime

import discord

from multibot import Command


class PingEmbeds:
    """Discord-style ping embed"""

    @staticmethod
    def pong(client_latency: int, api_latency: int, thresholds=(100, 200, 300)) -> discord.Embed:
        """Ping embed with timestamp in the title"""
        excellent, good, fair = thresholds

        # Dynamic color based on latency
        if client_latency < excellent:
            color = 0x57f287  # Discord green
            status = "🟢 Excellent"
        elif client_latency < good:
            color = 0xfee75c  # Discord yellow
            status = "🟡 Good"
        elif client_latency < fair:
            color = 0xfaa61a  # Discord orange
            status = "🟠 Fair"
        else:
            color = 0xed4245  # Discord red
            status = "🔴 Poor"

        current_time = datetime.now().strftime("%I:%M %p")

        embed = discord.Embed(
            title=f"🏓 PONG / LATENCY 🏓 • {current_time}",
            description=f"**Status:** {status}",
            color=color
        )
        embed.add_field(
            name="🌐 Gateway Latency",
            value=f"```yaml\n{client_latency} MS\n```",
            inline=True
        )
        embed.add_field(
            name="⚡ API Latency",
            value=f"```yaml\n{api_latency} MS\n```",
            inline=True
        )
        embed.add_field(
            name="",
            value="> ⚠️ Issues on Discord's side could create weird or high latency.",
            inline=False
        )
        return embed


class Ping(Command):
    label = "ping"
    aliases = ["latency"]
    description = "Check bot latency"
    category = "Information"
    allow_in_dm = True

    async def run(self, client, info, args, mapped_args):
        client_latency = round(client.latency * 1000)
        thresholds = tuple(
            client.resolve_setting(self.module, key, info.settings)
            for key in ("excellent_latency", "good_latency", "fair_latency")
        )

        # Time a typing trigger to measure the API round trip
        start = time.perf_counter()
        await info.channel.typing()
        api_latency = round((time.perf_counter() - start) * 1000)

        await info.send(embed=PingEmbeds.pong(client_latency, api_latency, thresholds))
