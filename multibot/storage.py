"""
Guild Storage
=============

Per-guild settings records. Each backend exposes ``get_or_create`` and
``update``; records are whole-object upserts keyed by guild id.
"""

import asyncio
import json
import logging
import sqlite3
from contextlib import closing
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from .exceptions import StorageError

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "!"


@dataclass
class GuildSettings:
    """Prefix, per-command level overrides and ``<module>_<key>`` overrides of a guild."""

    prefix: str = DEFAULT_PREFIX
    cmd_levels: Dict[str, int] = field(default_factory=dict)
    values: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prefix": self.prefix,
            "cmd_levels": dict(self.cmd_levels),
            "values": dict(self.values),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GuildSettings":
        return cls(
            prefix=data.get("prefix", DEFAULT_PREFIX),
            cmd_levels={str(k): int(v) for k, v in data.get("cmd_levels", {}).items()},
            values=dict(data.get("values", {})),
        )


@dataclass
class GuildWrapper:
    guild_id: Optional[int]
    settings: GuildSettings = field(default_factory=GuildSettings)

    @property
    def persistent(self) -> bool:
        return self.guild_id is not None


class GuildStorage:
    """
    Base class for guild storage backends.

    Args:
        default_prefix: Prefix for newly created guild records
        defaults: Callable returning the ``<module>_<key>`` guild defaults
    """

    name = "base"

    def __init__(self, default_prefix: str = DEFAULT_PREFIX,
                 defaults: Optional[Callable[[], Dict[str, Any]]] = None):
        self.default_prefix = default_prefix
        self.defaults = defaults or dict

    def new_settings(self) -> GuildSettings:
        return GuildSettings(prefix=self.default_prefix, values=dict(self.defaults()))

    async def get_or_create(self, guild_id: Optional[int]) -> GuildWrapper:
        """Fetch a guild record, creating it with defaults on first contact."""
        if guild_id is None:
            # Direct messages get a throwaway record
            return GuildWrapper(None, self.new_settings())

        stored = await self.fetch(guild_id)
        if stored is not None:
            return GuildWrapper(guild_id, GuildSettings.from_dict(stored))

        wrapper = GuildWrapper(guild_id, self.new_settings())
        await self.update(wrapper)
        logger.info(f"Created settings for guild {guild_id}")
        return wrapper

    async def update(self, wrapper: GuildWrapper) -> None:
        if not wrapper.persistent:
            return
        await self.store(wrapper.guild_id, wrapper.settings.to_dict())

    async def fetch(self, guild_id: int) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    async def store(self, guild_id: int, data: Dict[str, Any]) -> None:
        raise NotImplementedError

    async def close(self) -> None:
        pass


class JsonGuildStorage(GuildStorage):
    """All guild records in a single JSON file."""

    name = "json"

    def __init__(self, path, **kwargs):
        super().__init__(**kwargs)
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = asyncio.Lock()
        if not self.path.exists():
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({}, f)

    def _load_all(self) -> Dict[int, Dict]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
                # Convert string keys back to int
                return {int(k): v for k, v in data.items()}
        except (OSError, ValueError) as e:
            raise StorageError(self.name, f"Failed to load {self.path}", e)

    def _sync_store(self, guild_id: int, data: Dict[str, Any]) -> None:
        records = self._load_all()
        records[guild_id] = data
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({str(k): v for k, v in records.items()}, f, indent=2)
        except OSError as e:
            raise StorageError(self.name, f"Failed to save guild {guild_id}", e)

    async def fetch(self, guild_id: int) -> Optional[Dict[str, Any]]:
        async with self._lock:
            return self._load_all().get(guild_id)

    async def store(self, guild_id: int, data: Dict[str, Any]) -> None:
        async with self._lock:
            # Run file I/O in thread pool to avoid blocking
            await asyncio.get_running_loop().run_in_executor(None, self._sync_store, guild_id, data)


class SqliteGuildStorage(GuildStorage):
    """Guild records in a SQLite ``guilds`` table, settings stored as JSON text."""

    name = "sqlite"

    def __init__(self, path, **kwargs):
        super().__init__(**kwargs)
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with closing(sqlite3.connect(self.path)) as conn, conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS guilds (
                    guild_id INTEGER PRIMARY KEY,
                    settings TEXT NOT NULL
                );
                """
            )

    def _sync_fetch(self, guild_id: int) -> Optional[Dict[str, Any]]:
        with closing(sqlite3.connect(self.path)) as conn:
            row = conn.execute("SELECT settings FROM guilds WHERE guild_id=?;", (guild_id,)).fetchone()
        return json.loads(row[0]) if row else None

    def _sync_store(self, guild_id: int, data: Dict[str, Any]) -> None:
        with closing(sqlite3.connect(self.path)) as conn, conn:
            conn.execute(
                """
                INSERT INTO guilds (guild_id, settings) VALUES (?, ?)
                ON CONFLICT(guild_id) DO UPDATE SET settings=excluded.settings;
                """,
                (guild_id, json.dumps(data)),
            )

    async def fetch(self, guild_id: int) -> Optional[Dict[str, Any]]:
        try:
            return await asyncio.get_running_loop().run_in_executor(None, self._sync_fetch, guild_id)
        except sqlite3.Error as e:
            raise StorageError(self.name, f"Failed to load guild {guild_id}", e)

    async def store(self, guild_id: int, data: Dict[str, Any]) -> None:
        try:
            await asyncio.get_running_loop().run_in_executor(None, self._sync_store, guild_id, data)
        except sqlite3.Error as e:
            raise StorageError(self.name, f"Failed to save guild {guild_id}", e)


def create_storage(backend: str, path, **kwargs) -> GuildStorage:
    if backend == "json":
        return JsonGuildStorage(path, **kwargs)
    if backend == "sqlite":
        return SqliteGuildStorage(path, **kwargs)
    raise StorageError(backend, "Unknown storage backend")
