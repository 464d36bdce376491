"""Routes every incoming message through the dispatcher."""

import discord

from ..event import Event


class CommandHandler(Event):
    event = "message"
    type = "on"

    async def listener(self, client, message: discord.Message) -> None:
        await client.dispatcher.dispatch(message)
