"""Command lookup by label or alias."""

import logging
from typing import Dict, Iterator, List, Optional

from .command import Command

logger = logging.getLogger(__name__)


class CommandIndex:
    """
    Labels and aliases share one lookup space.

    A key that is registered twice points at the command registered last;
    the collision is logged.
    """

    def __init__(self):
        self._lookup: Dict[str, Command] = {}
        self._commands: Dict[str, Command] = {}

    def register(self, command: Command) -> bool:
        if not command.label:
            logger.warning(f"Skipping command without label: {type(command).__name__}")
            return False

        previous = self._commands.get(command.label)
        if previous is not None and previous is not command:
            logger.warning(
                f"Command '{command.label}' from {command.module} replaces the one from {previous.module}"
            )
            self._drop(previous)
        self._commands[command.label] = command

        for key in [command.label, *(command.aliases or [])]:
            existing = self._lookup.get(key)
            if existing is not None and existing is not command:
                logger.warning(f"'{key}' of {command.label} shadows {existing.label}")
            self._lookup[key] = command
        return True

    def _drop(self, command: Command) -> None:
        for key in [key for key, value in self._lookup.items() if value is command]:
            del self._lookup[key]

    def resolve(self, token: str) -> Optional[Command]:
        return self._lookup.get(token)

    def clear(self) -> None:
        self._lookup.clear()
        self._commands.clear()

    def commands(self) -> List[Command]:
        return list(self._commands.values())

    def by_module(self, identifier: str) -> List[Command]:
        return [command for command in self._commands.values() if command.module == identifier]

    def keys(self) -> List[str]:
        return list(self._lookup)

    def __contains__(self, token: str) -> bool:
        return token in self._lookup

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands())
