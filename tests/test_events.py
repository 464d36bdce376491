import discord
import pytest
from discord.ext import commands

from multibot.event import Event, EventRegistry
from multibot.exceptions import ModuleLoadError


class Recorder(Event):
    event = "ready"

    def __init__(self, type="on"):
        super().__init__()
        self.type = type
        self.calls = []

    async def listener(self, client, *args):
        self.calls.append(args)


@pytest.fixture
def bot():
    return commands.Bot(command_prefix="!", intents=discord.Intents.none())


def test_register_attaches_listener(bot):
    registry = EventRegistry(bot)
    registry.register(Recorder())

    assert len(bot.extra_events["on_ready"]) == 1
    assert registry.count() == 1


@pytest.mark.asyncio
async def test_on_listener_runs_every_time(bot):
    registry = EventRegistry(bot)
    event = Recorder()
    registry.register(event)

    listener = bot.extra_events["on_ready"][0]
    await listener()
    await listener("again")

    assert event.calls == [(), ("again",)]
    assert registry.count() == 1


@pytest.mark.asyncio
async def test_once_listener_detaches_itself(bot):
    registry = EventRegistry(bot)
    event = Recorder(type="once")
    registry.register(event)

    await bot.extra_events["on_ready"][0]()

    assert event.calls == [()]
    assert bot.extra_events.get("on_ready", []) == []
    assert registry.count() == 0


def test_detach_all_keeps_foreign_listeners(bot):
    async def on_ready():
        pass

    bot.add_listener(on_ready)
    registry = EventRegistry(bot)
    registry.register(Recorder())
    registry.register(Recorder(type="once"))

    assert registry.detach_all() == 2
    assert bot.extra_events["on_ready"] == [on_ready]
    assert registry.count() == 0


def test_count_by_module(bot):
    registry = EventRegistry(bot)
    first, second = Recorder(), Recorder()
    first.module, second.module = "core", "utility"
    registry.register(first)
    registry.register(second)

    assert registry.count("core") == 1
    assert registry.count("missing") == 0
    assert registry.events() == [first, second]


def test_rejects_unknown_type(bot):
    with pytest.raises(ModuleLoadError):
        EventRegistry(bot).register(Recorder(type="sometimes"))


def test_rejects_missing_event_name(bot):
    event = Recorder()
    event.event = ""

    with pytest.raises(ModuleLoadError):
        EventRegistry(bot).register(event)


def test_validate_does_not_attach(bot):
    registry = EventRegistry(bot)

    registry.validate(Recorder())
    with pytest.raises(ModuleLoadError):
        registry.validate(Recorder(type="sometimes"))

    assert bot.extra_events.get("on_ready", []) == []
    assert registry.count() == 0
