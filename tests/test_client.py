import json
from pathlib import Path

import discord
import pytest

from config import Config
from multibot.client import WrappedClient

MODULES_DIR = Path(__file__).resolve().parent.parent / "modules"


@pytest.fixture
def config(tmp_path) -> Config:
    ini = tmp_path / "settings.ini"
    ini.write_text(
        "[discord]\n"
        "prefix = ?\n"
        "owner_id = 99\n"
        "\n"
        "[modules]\n"
        f"directory = {MODULES_DIR}\n"
        f"settings_file = {tmp_path / 'settings.json'}\n"
        "\n"
        "[storage]\n"
        "backend = sqlite\n"
        f"path = {tmp_path / 'guilds.db'}\n"
    )
    return Config(ini)


@pytest.fixture
def client(config) -> WrappedClient:
    return WrappedClient(config, intents=discord.Intents.none())


def test_client_uses_config(client):
    assert client.owner_id == 99
    assert WrappedClient.instance is client
    assert client.storage is None


@pytest.mark.asyncio
async def test_initialize_loads_bundled_modules(client, config):
    await client.initialize()

    assert list(client.modules) == ["core", "management", "utility"]
    assert client.command_index.resolve("ping").module == "utility"
    assert client.command_index.resolve("cfg").label == "config"
    assert client.event_count == sum(module.event_count for module in client.modules.values())

    snapshot = json.loads(Path(config.settings_file).read_text())
    assert snapshot["utility"]["good_latency"] == 200
    assert snapshot["core"]["log_commands"] is True
    assert "management" not in snapshot


@pytest.mark.asyncio
async def test_new_guild_gets_defaults(client):
    await client.initialize()

    settings = await client.get_guild_settings(5)

    assert settings.prefix == "?"
    assert settings.values == {
        "core_setup_complete": False,
        "management_join_role": 0,
        "utility_say_delete_invocation": True,
    }


@pytest.mark.asyncio
async def test_resolve_setting_uses_guild_override(client):
    await client.initialize()
    settings = await client.get_guild_settings(5)
    settings.values["utility_say_delete_invocation"] = False
    await client.update_guild_settings(5, settings)

    stored = await client.get_guild_settings(5)

    assert client.resolve_setting("utility", "say_delete_invocation", stored) is False
    assert client.resolve_setting("utility", "good_latency") == 200
    assert client.resolve_setting("missing", "anything") is None


@pytest.mark.asyncio
async def test_saved_global_settings_survive_reload(client, config):
    await client.initialize()
    client.module_settings.set("utility", "good_latency", 250)
    client.save_settings()

    commands, events = await client.reload_modules()

    assert client.resolve_setting("utility", "good_latency") == 250
    assert commands == len(client.command_index)
    assert events == client.event_count


@pytest.mark.asyncio
async def test_reload_does_not_duplicate_listeners(client):
    await client.initialize()
    before = {name: len(listeners) for name, listeners in client.extra_events.items()}

    await client.reload_modules()

    assert {name: len(listeners) for name, listeners in client.extra_events.items()} == before


def test_shared_variables(client):
    client.set_variable("utility", "counter", 3)

    assert client.get_variable("utility", "counter") == 3
    assert client.get_variable("utility", "missing") is None
