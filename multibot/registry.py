"""
Module Registry
===============

Discovers module directories, instantiates their descriptors and loads
their commands and events.

Layout of a module directory::

    <module>/
        module.py          descriptor, defines one Module subclass
        commands/          one Command subclass per file
            subcommands/   skipped by the loader, imported by commands
        events/            one Event subclass per file

The top-level ``multibot`` package is itself a module and is always loaded
first; the remaining modules follow in alphabetical order.
"""

import importlib
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Type

from .base import Module
from .command import Command
from .event import Event, EventRegistry
from .exceptions import ModuleLoadError
from .index import CommandIndex

logger = logging.getLogger(__name__)

DESCRIPTOR = "module.py"
CORE_PATH = Path(__file__).parent


def _import(name: str):
    """Import a module, re-executing it if it was imported before."""
    if name in sys.modules:
        return importlib.reload(sys.modules[name])
    return importlib.import_module(name)


def _first_subclass(module, base: type) -> Optional[Type]:
    """First subclass of ``base`` defined in ``module`` itself (not imported into it)."""
    for obj in vars(module).values():
        if (isinstance(obj, type) and issubclass(obj, base) and obj is not base
                and obj.__module__ == module.__name__):
            return obj
    return None


class ModuleRegistry:
    """
    Keeps the loaded modules keyed by identifier.

    When two directories declare the same identifier the one discovered last
    replaces the first; the replacement is logged.
    """

    def __init__(self, index: CommandIndex, events: EventRegistry, modules_dir=None):
        self.index = index
        self.events = events
        self.modules_dir = Path(modules_dir) if modules_dir else None
        self.modules: Dict[str, Module] = {}
        self._packages: Dict[str, str] = {}

    # ------------------------------------------------------------------ discovery

    def _candidates(self) -> List[Tuple[Path, str]]:
        candidates = [(CORE_PATH, __package__)]
        if self.modules_dir is None:
            return candidates

        if not self.modules_dir.is_dir():
            logger.warning(f"Modules directory '{self.modules_dir}' not found")
            return candidates

        root = str(self.modules_dir.resolve().parent)
        if root not in sys.path:
            sys.path.insert(0, root)
        importlib.invalidate_caches()

        for item in sorted(self.modules_dir.iterdir()):
            # Skip hidden files and directories
            if item.name.startswith(("_", ".")) or not item.is_dir():
                continue
            candidates.append((item, f"{self.modules_dir.name}.{item.name}"))
        return candidates

    def _load_descriptor(self, path: Path, package: str) -> Module:
        name = f"{package}.module"
        try:
            descriptor = _import(name)
        except Exception as e:
            raise ModuleLoadError(str(path), "Failed to import module descriptor", e)

        module_cls = _first_subclass(descriptor, Module)
        if module_cls is None:
            raise ModuleLoadError(str(path), "Descriptor does not define a Module subclass")

        try:
            module = module_cls()
        except Exception as e:
            raise ModuleLoadError(str(path), f"Failed to construct {module_cls.__name__}", e)

        if not module.identifier:
            raise ModuleLoadError(str(path), f"{module_cls.__name__} has no identifier")
        module.path = path
        return module

    def _scan(self) -> Tuple[Dict[str, Module], Dict[str, str], Dict[str, Path]]:
        modules: Dict[str, Module] = {}
        packages: Dict[str, str] = {}
        discovered: Dict[str, Path] = {}

        for path, package in self._candidates():
            if not (path / DESCRIPTOR).is_file():
                continue

            module = self._load_descriptor(path, package)
            if module.identifier in modules:
                logger.warning(
                    f"⚠️ Module '{module.identifier}' at {path} replaces the one at {discovered[module.identifier]}"
                )
                del discovered[module.identifier]

            modules[module.identifier] = module
            packages[module.identifier] = package
            discovered[module.identifier] = path

        return modules, packages, discovered

    def discover(self) -> List[Tuple[str, Path]]:
        """Find and instantiate every module, in load order."""
        self.modules, self._packages, discovered = self._scan()
        return list(discovered.items())

    # ------------------------------------------------------------------ loading

    def _files(self, path: Path, package: str, folder: str) -> List[Tuple[Path, str]]:
        base = path / folder
        if not base.is_dir():
            return []

        files = []
        for file in sorted(base.rglob("*.py")):
            relative = file.relative_to(base)
            if file.name == "__init__.py" or "subcommand" in str(relative):
                continue
            dotted = ".".join(relative.with_suffix("").parts)
            files.append((file, f"{package}.{folder}.{dotted}"))
        return files

    def _instantiate(self, file: Path, name: str, base: type):
        try:
            source = _import(name)
        except Exception as e:
            raise ModuleLoadError(str(file), f"Failed to import {base.__name__.lower()}", e)

        cls = _first_subclass(source, base)
        if cls is None:
            raise ModuleLoadError(str(file), f"No {base.__name__} subclass defined")

        try:
            return cls()
        except Exception as e:
            raise ModuleLoadError(str(file), f"Failed to construct {cls.__name__}", e)

    def collect_commands(self, identifier: str, path: Path, package: str) -> List[Command]:
        commands = []
        for file, name in self._files(path, package, "commands"):
            command = self._instantiate(file, name, Command)
            command.module = identifier
            commands.append(command)
        return commands

    def collect_events(self, identifier: str, path: Path, package: str) -> List[Event]:
        events = []
        for file, name in self._files(path, package, "events"):
            event = self._instantiate(file, name, Event)
            event.module = identifier
            self.events.validate(event)
            events.append(event)
        return events

    def _register(self, module: Module, commands: List[Command], events: List[Event]) -> None:
        for command in commands:
            self.index.register(command)
        for event in events:
            self.events.register(event)
        module.command_count = len(commands)
        module.event_count = len(events)
        module.was_loaded = True

        logger.info(f"✅ Loaded module: {module.name} ({module.identifier} v{module.version})")
        logger.info(f"Loaded {module.command_count} commands (Total {len(self.index)})")
        logger.info(f"Loaded {module.event_count} events (Total {self.events.count()})")
        logger.info("-" * 20)

    def load(self, load_commands: bool = True, load_events: bool = True) -> Tuple[Optional[int], Optional[int]]:
        """
        Full (re)load: discover every module and instantiate its commands and
        events, then swap them in for the current ones.

        Nothing already loaded is touched until every file imported cleanly,
        so a ``ModuleLoadError`` leaves the previous modules, commands and
        listeners in place.

        Returns:
            (total commands, total events); None for a part that was not loaded
        """
        modules, packages, discovered = self._scan()

        staged = []
        for identifier, path in discovered.items():
            package = packages[identifier]
            commands = self.collect_commands(identifier, path, package) if load_commands else []
            events = self.collect_events(identifier, path, package) if load_events else []
            staged.append((modules[identifier], commands, events))

        self.modules, self._packages = modules, packages
        if load_commands:
            self.index.clear()
        if load_events:
            self.events.detach_all()

        for module, commands, events in staged:
            self._register(module, commands, events)

        logger.info(f"Loaded {len(self.modules)} modules successfully")
        return (
            len(self.index) if load_commands else None,
            self.events.count() if load_events else None,
        )

    def get(self, identifier: str) -> Optional[Module]:
        return self.modules.get(identifier)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self.modules

    def __iter__(self):
        return iter(list(self.modules.values()))

    def __len__(self) -> int:
        return len(self.modules)
