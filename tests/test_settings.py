import json

import pytest

from multibot.base import Configuration, Module
from multibot.exceptions import SettingsError
from multibot.settings import ModuleSettings, SettingsStore, coerce_value, declared_settings, resolve
from multibot.storage import GuildSettings


class Greeter(Module):
    name = "Greeter"
    identifier = "greeter"
    configuration = Configuration(
        global_settings={"greeting": "Hello", "volume": 5},
        guild_settings={"channel": 0},
    )


class Plain(Module):
    name = "Plain"
    identifier = "plain"


@pytest.fixture
def store(tmp_path) -> SettingsStore:
    return SettingsStore(tmp_path / "settings.json")


def test_ensure_defaults_creates_snapshot(store):
    store.ensure_defaults([Greeter(), Plain()])

    data = json.loads(store.path.read_text())
    assert data == {"greeter": {"greeting": "Hello", "volume": 5}}


def test_ensure_defaults_is_idempotent(store):
    modules = [Greeter(), Plain()]
    store.ensure_defaults(modules)
    first = store.path.read_bytes()

    store.ensure_defaults(modules)

    assert store.path.read_bytes() == first


def test_ensure_defaults_never_overwrites(store):
    store.path.write_text(json.dumps({"greeter": {"greeting": "Hi"}, "other": {"x": 1}}))

    store.ensure_defaults([Greeter()])

    data = json.loads(store.path.read_text())
    assert data["greeter"] == {"greeting": "Hi", "volume": 5}
    assert data["other"] == {"x": 1}


def test_ensure_defaults_rejects_corrupt_snapshot(store):
    store.path.write_text("{not json")

    with pytest.raises(SettingsError):
        store.ensure_defaults([Greeter()])


def test_load_effective_prefers_snapshot(store):
    store.path.write_text(json.dumps({"greeter": {"greeting": "Hi"}}))

    settings = store.load_effective([Greeter()])

    assert settings.get("greeter", "greeting") == "Hi"
    assert settings.get("greeter", "volume") == 5


def test_load_effective_missing_snapshot_is_soft(store, caplog):
    settings = store.load_effective([Greeter()])

    assert len(settings) == 0
    assert "Could not load settings file" in caplog.text


def test_save_writes_effective_values(store):
    store.ensure_defaults([Greeter()])
    settings = store.load_effective([Greeter()])
    settings.set("greeter", "volume", 9)

    store.save(settings)

    assert json.loads(store.path.read_text())["greeter"]["volume"] == 9


def test_resolve_precedence():
    module = Greeter()
    settings = ModuleSettings({"greeter": {"greeting": "Persisted"}})
    guild = GuildSettings(values={"greeter_greeting": "Guild"})

    assert resolve(module, "greeting") == "Hello"
    assert resolve(module, "greeting", settings) == "Persisted"
    assert resolve(module, "greeting", settings, guild) == "Guild"
    assert resolve(module, "volume", settings, guild) == 5


def test_resolve_guild_schema_and_unknown_keys():
    module = Greeter()

    assert resolve(module, "channel") == 0
    assert resolve(module, "channel", guild_settings=GuildSettings(values={"greeter_channel": 42})) == 42
    assert resolve(module, "missing") is None


def test_module_settings_map():
    settings = ModuleSettings()
    settings.set("core", "status", "hi")

    assert settings.has("core", "status")
    assert not settings.has("core", "other")
    assert settings.get("unknown", "key", "fallback") == "fallback"


def test_declared_settings_merges_schemas():
    assert declared_settings(Greeter()) == {"greeting": "Hello", "volume": 5, "channel": 0}
    assert declared_settings(Plain()) == {}


@pytest.mark.parametrize("raw, default, expected", [
    ("yes", False, True),
    ("off", True, False),
    ("12", 0, 12),
    ("1.5", 0.0, 1.5),
    ("[1, 2]", [], [1, 2]),
    ("text", "", "text"),
])
def test_coerce_value(raw, default, expected):
    assert coerce_value(raw, default) == expected


def test_coerce_value_rejects_bad_input():
    with pytest.raises(ValueError):
        coerce_value("maybe", False)
    with pytest.raises(ValueError):
        coerce_value("abc", 3)


@pytest.mark.parametrize("content", [
    '["greeter"]',
    '{"greeter": null}',
    '{"greeter": [1, 2]}',
])
def test_wrongly_shaped_snapshot_is_rejected(store, content):
    store.path.write_text(content)

    with pytest.raises(SettingsError):
        store.ensure_defaults([Greeter()])
    with pytest.raises(SettingsError):
        store.load_effective([Greeter()])


def test_default_dependencies_are_immutable():
    assert Plain().dependencies == ()
    with pytest.raises(AttributeError):
        Plain().dependencies.append("core")
