"""Event handler contract and listener registration."""

import logging
from typing import Callable, List, Optional, Tuple

from .exceptions import ModuleLoadError

logger = logging.getLogger(__name__)

EVENT_TYPES = ("on", "once")


class Event:
    """
    Base class for event handlers.

    ``event`` is the discord.py event name without the ``on_`` prefix.
    ``type`` is ``"on"`` (every occurrence) or ``"once"`` (first occurrence only).
    """

    event: str = ""
    type: str = "on"

    def __init__(self):
        self.module: Optional[str] = None

    async def listener(self, client, *args, **kwargs) -> None:
        raise NotImplementedError

    def __repr__(self):
        return f"<Event {self.type}:{self.event} module={self.module}>"


class EventRegistry:
    """Attaches event handlers to the bot and remembers which listeners it owns."""

    def __init__(self, client):
        self.client = client
        self._owned: List[Tuple[str, Callable, Event]] = []

    def validate(self, event: Event) -> None:
        if event.type not in EVENT_TYPES:
            raise ModuleLoadError(event.module or "?", f"Unknown event type '{event.type}' for {event.event}")
        if not event.event:
            raise ModuleLoadError(event.module or "?", f"{type(event).__name__} does not name an event")

    def register(self, event: Event) -> None:
        self.validate(event)
        name = f"on_{event.event}"

        if event.type == "once":
            async def func(*args, **kwargs):
                self._detach(name, func)
                await event.listener(self.client, *args, **kwargs)
        else:
            async def func(*args, **kwargs):
                await event.listener(self.client, *args, **kwargs)

        self.client.add_listener(func, name)
        self._owned.append((name, func, event))

    def _detach(self, name: str, func: Callable) -> None:
        for entry in self._owned:
            if entry[0] == name and entry[1] is func:
                self._owned.remove(entry)
                self.client.remove_listener(func, name)
                return

    def detach_all(self) -> int:
        """Remove every listener installed by this registry."""
        count = len(self._owned)
        for name, func, _ in self._owned:
            self.client.remove_listener(func, name)
        self._owned.clear()
        return count

    def count(self, module: Optional[str] = None) -> int:
        if module is None:
            return len(self._owned)
        return sum(1 for _, _, event in self._owned if event.module == module)

    def events(self) -> List[Event]:
        return [event for _, _, event in self._owned]
