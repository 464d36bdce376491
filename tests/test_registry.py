from unittest.mock import MagicMock

import pytest

from multibot.event import EventRegistry
from multibot.exceptions import ModuleLoadError
from multibot.index import CommandIndex
from multibot.registry import ModuleRegistry


@pytest.fixture
def client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def registry(module_tree, client) -> ModuleRegistry:
    return ModuleRegistry(CommandIndex(), EventRegistry(client), module_tree.path)


def test_core_is_discovered_first(module_tree, registry):
    module_tree.module("beta", "beta")
    module_tree.module("alpha", "alpha")

    order = [identifier for identifier, _ in registry.discover()]

    assert order == ["core", "alpha", "beta"]


def test_folders_without_descriptor_are_skipped(module_tree, registry):
    module_tree.module("alpha", "alpha")
    module_tree.write("notes/readme.py", "VALUE = 1\n")

    assert [identifier for identifier, _ in registry.discover()] == ["core", "alpha"]


def test_duplicate_identifier_last_wins(module_tree, registry, caplog):
    module_tree.module("alpha", "shared", name="First")
    module_tree.module("beta", "shared", name="Second")

    discovered = dict(registry.discover())

    assert registry.get("shared").name == "Second"
    assert discovered["shared"] == module_tree.path / "beta"
    assert "replaces" in caplog.text


def test_malformed_descriptor_is_fatal(module_tree, registry):
    module_tree.write("broken/module.py", "class Broken(:\n")

    with pytest.raises(ModuleLoadError):
        registry.discover()


def test_descriptor_without_module_class_is_fatal(module_tree, registry):
    module_tree.write("empty/module.py", "VALUE = 1\n")

    with pytest.raises(ModuleLoadError):
        registry.discover()


def test_load_indexes_commands_and_events(module_tree, registry, client):
    module_tree.module("alpha", "alpha")
    module_tree.command("alpha", "ping.py", "ping", aliases=["latency"])
    module_tree.command("alpha", "nested/pong.py", "pong")
    module_tree.event("alpha", "ready.py", "ready", type="once")

    commands, events = registry.load()

    alpha = registry.get("alpha")
    assert alpha.was_loaded
    assert alpha.command_count == 2
    assert alpha.event_count == 1
    assert registry.index.resolve("latency").module == "alpha"
    assert registry.index.resolve("pong") is not None
    assert commands == len(registry.index)
    assert events == registry.events.count()
    assert registry.events.count("alpha") == 1


def test_core_commands_are_loaded(registry):
    registry.load()

    core = registry.get("core")
    assert core.command_count == len(registry.index.by_module("core"))
    assert registry.index.resolve("help") is not None
    assert registry.index.resolve("cfg").label == "config"
    # Subcommands are reached through their group only
    assert registry.index.resolve("set") is None
    assert registry.events.count("core") == core.event_count


def test_subcommand_files_are_skipped(module_tree, registry):
    module_tree.module("alpha", "alpha")
    module_tree.command("alpha", "tool.py", "tool")
    module_tree.command("alpha", "subcommands/child.py", "child")

    registry.load()

    assert registry.index.resolve("tool") is not None
    assert registry.index.resolve("child") is None
    assert registry.get("alpha").command_count == 1


def test_command_file_without_command_is_fatal(module_tree, registry):
    module_tree.module("alpha", "alpha")
    module_tree.write("alpha/commands/nothing.py", "VALUE = 1\n")

    with pytest.raises(ModuleLoadError):
        registry.load()


def test_partial_load(module_tree, registry, client):
    module_tree.module("alpha", "alpha")
    module_tree.command("alpha", "tool.py", "tool")
    module_tree.event("alpha", "ready.py", "ready")

    commands, events = registry.load(load_commands=True, load_events=False)

    assert commands == len(registry.index)
    assert events is None
    assert registry.get("alpha").event_count == 0
    client.add_listener.assert_not_called()


def test_reload_drops_stale_commands_and_events(module_tree, registry, client):
    module_tree.module("alpha", "alpha")
    old_command = module_tree.command("alpha", "old.py", "old", aliases=["o"])
    old_event = module_tree.event("alpha", "old_ready.py", "ready")
    registry.load()
    attached = client.add_listener.call_count

    old_command.unlink()
    old_event.unlink()
    module_tree.command("alpha", "new.py", "new", aliases=["n"])
    module_tree.event("alpha", "new_join.py", "guild_join")
    registry.load()

    assert registry.index.resolve("old") is None
    assert registry.index.resolve("o") is None
    assert registry.index.resolve("n").label == "new"
    assert registry.events.count("alpha") == 1
    assert client.remove_listener.call_count == attached
    assert [event.event for event in registry.events.events() if event.module == "alpha"] == ["guild_join"]


def test_missing_modules_directory(tmp_path, client):
    registry = ModuleRegistry(CommandIndex(), EventRegistry(client), tmp_path / "missing")

    assert [identifier for identifier, _ in registry.discover()] == ["core"]


def test_failed_reload_keeps_previous_state(module_tree, registry, client):
    module_tree.module("alpha", "alpha")
    module_tree.command("alpha", "tool.py", "tool", aliases=["t"])
    module_tree.event("alpha", "ready.py", "ready")
    commands, events = registry.load()

    module_tree.write("beta/module.py", "class Broken(:\n")
    with pytest.raises(ModuleLoadError):
        registry.load()

    assert len(registry.index) == commands
    assert registry.events.count() == events
    assert registry.index.resolve("help") is not None
    assert registry.index.resolve("t").label == "tool"
    assert "message" in [event.event for event in registry.events.events()]
    assert list(registry.modules) == ["core", "alpha"]
    client.remove_listener.assert_not_called()


def test_bad_event_in_reload_keeps_previous_state(module_tree, registry, client):
    module_tree.module("alpha", "alpha")
    module_tree.command("alpha", "tool.py", "tool")
    commands, events = registry.load()

    module_tree.command("alpha", "extra.py", "extra")
    module_tree.event("alpha", "odd.py", "ready", type="sometimes")
    with pytest.raises(ModuleLoadError):
        registry.load()

    assert len(registry.index) == commands
    assert registry.index.resolve("extra") is None
    assert registry.events.count() == events
    client.remove_listener.assert_not_called()
