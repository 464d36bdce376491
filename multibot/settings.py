"""
Module Settings
===============

Global (bot-wide) module settings live in a JSON snapshot of the form
``{module_id: {key: value}}``. At startup missing keys are filled from the
module defaults, then the effective values are loaded into memory.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .base import Module
from .exceptions import SettingsError

logger = logging.getLogger(__name__)


class ModuleSettings:
    """Two-level map: module identifier -> setting key -> value."""

    def __init__(self, data: Optional[Dict[str, Dict[str, Any]]] = None):
        self._data: Dict[str, Dict[str, Any]] = {}
        for module_id, values in (data or {}).items():
            self._data[module_id] = dict(values)

    def get(self, module_id: str, key: str, default: Any = None) -> Any:
        return self._data.get(module_id, {}).get(key, default)

    def set(self, module_id: str, key: str, value: Any) -> None:
        self._data.setdefault(module_id, {})[key] = value

    def has(self, module_id: str, key: str) -> bool:
        return key in self._data.get(module_id, {})

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {module_id: dict(values) for module_id, values in self._data.items()}

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)


class SettingsStore:
    """Reads and writes the global settings snapshot."""

    def __init__(self, path):
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SettingsError(str(self.path), original_error=e)

        if not isinstance(data, dict):
            raise SettingsError(str(self.path), f"Settings file {self.path} must hold a JSON object")
        for module_id, values in data.items():
            if not isinstance(values, dict):
                raise SettingsError(str(self.path), f"Settings of module '{module_id}' must be a JSON object")
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
                f.write("\n")
        except OSError as e:
            raise SettingsError(str(self.path), original_error=e)

    def ensure_defaults(self, modules: Iterable[Module]) -> None:
        """Add every missing module default to the snapshot, never overwriting."""
        if not self.path.exists():
            logger.info(f"Creating settings file {self.path}")
            self._write({})

        data = self._read()
        for module in modules:
            defaults = module.get_global_settings()
            if not defaults:
                continue
            values = data.setdefault(module.identifier, {})
            for key, value in defaults.items():
                if key not in values:
                    values[key] = value
        self._write(data)

    def load_effective(self, modules: Iterable[Module]) -> ModuleSettings:
        settings = ModuleSettings()
        if not self.path.exists():
            logger.warning(f"⚠️ Could not load settings file {self.path}, using module defaults")
            return settings

        data = self._read()
        for module in modules:
            stored = data.get(module.identifier, {})
            for key, value in module.get_global_settings().items():
                settings.set(module.identifier, key, stored[key] if key in stored else value)
        return settings

    def save(self, settings: ModuleSettings) -> None:
        data = self._read() if self.path.exists() else {}
        for module_id, values in settings.to_dict().items():
            data.setdefault(module_id, {}).update(values)
        self._write(data)


def resolve(module: Module, key: str, settings: Optional[ModuleSettings] = None, guild_settings=None) -> Any:
    """
    Effective value of a module setting.

    Precedence: guild override > persisted global value > module default.
    Returns None for keys the module does not declare.
    """
    prefixed = f"{module.identifier}_{key}"
    if guild_settings is not None and prefixed in guild_settings.values:
        return guild_settings.values[prefixed]
    if settings is not None and settings.has(module.identifier, key):
        return settings.get(module.identifier, key)
    if key in module.get_global_settings():
        return module.get_global_settings()[key]
    return module.get_guild_settings().get(prefixed)


def coerce_value(raw: str, default: Any) -> Any:
    """
    Convert user input to the type of a setting's default value.

    Raises:
        ValueError: If the input cannot be converted
    """
    if isinstance(default, bool):
        lowered = raw.lower()
        if lowered in ("true", "yes", "on", "1"):
            return True
        if lowered in ("false", "no", "off", "0"):
            return False
        raise ValueError(f"'{raw}' is not a boolean")
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, float):
        return float(raw)
    if isinstance(default, (list, dict)):
        value = json.loads(raw)
        if not isinstance(value, type(default)):
            raise ValueError(f"'{raw}' is not a {type(default).__name__}")
        return value
    return raw


def declared_settings(module: Module) -> Dict[str, Any]:
    """Global and guild schema of a module, unprefixed."""
    schema = module.get_global_settings()
    if module.configuration is not None:
        schema.update(module.configuration.guild_settings)
    return schema
