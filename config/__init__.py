"""
Configuration Module
====================
Handles loading and parsing of the settings.ini file.
"""

import configparser
import os
import logging
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger('discord.config')

# Default configuration directory
CONFIG_DIR = Path(__file__).parent
CONFIG_FILE = CONFIG_DIR / 'settings.ini'


class Config:
    """Configuration manager for the bot."""

    def __init__(self, config_file: Optional[Path] = None):
        self.config = configparser.ConfigParser()
        self.config_file = Path(config_file) if config_file else CONFIG_FILE
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from INI file."""
        if not self.config_file.exists():
            logger.warning(f"Config file not found: {self.config_file}")
            logger.info("Using default configuration values")
            return

        try:
            self.config.read(self.config_file, encoding='utf-8')
            logger.info(f"✅ Loaded configuration from {self.config_file}")
        except configparser.Error as e:
            logger.error(f"❌ Failed to load config: {e}")

    def get(self, section: str, key: str, fallback: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            section: INI section name
            key: Configuration key
            fallback: Default value if key not found

        Returns:
            Configuration value or fallback
        """
        try:
            value = self.config.get(section, key)

            # Convert string booleans
            if value.lower() in ('true', 'yes'):
                return True
            elif value.lower() in ('false', 'no'):
                return False

            # Convert numeric values
            try:
                if '.' in value:
                    return float(value)
                return int(value)
            except (ValueError, TypeError):
                pass

            # Return string as-is
            return value

        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def get_str(self, section: str, key: str, fallback: str = '') -> str:
        """Get string configuration value without type conversion."""
        try:
            return self.config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def get_int(self, section: str, key: str, fallback: int = 0) -> int:
        """Get integer configuration value."""
        value = self.get(section, key, fallback)
        try:
            return int(value)
        except (ValueError, TypeError):
            return fallback

    # Convenience properties for commonly used settings

    @property
    def token(self) -> str:
        """Get Discord bot token."""
        return self.get_str('discord', 'token', os.getenv('DISCORD_TOKEN', ''))

    @property
    def prefix(self) -> str:
        """Get default command prefix for new guilds."""
        return self.get_str('discord', 'prefix', '!')

    @property
    def owner_id(self) -> int:
        """Get bot owner ID."""
        return self.get_int('discord', 'owner_id', int(os.getenv('OWNER_ID', '0') or 0))

    @property
    def modules_dir(self) -> str:
        """Get directory scanned for modules."""
        return self.get_str('modules', 'directory', 'modules')

    @property
    def settings_file(self) -> str:
        """Get path of the global module settings snapshot."""
        return self.get_str('modules', 'settings_file', 'settings.json')

    @property
    def storage_backend(self) -> str:
        """Get guild storage backend (json or sqlite)."""
        return self.get_str('storage', 'backend', 'json')

    @property
    def storage_path(self) -> str:
        """Get guild storage file path."""
        default = 'data/guilds.db' if self.storage_backend == 'sqlite' else 'data/guilds.json'
        return self.get_str('storage', 'path', default)

    @property
    def log_file(self) -> str:
        """Get log file path."""
        return self.get_str('logging', 'log_file', 'bot.log')

    @property
    def log_level(self) -> str:
        """Get log level."""
        return self.get_str('logging', 'log_level', 'INFO')


# Global config instance
_config: Optional[Config] = None


def get_config(config_file: Optional[Path] = None) -> Config:
    """
    Get the global configuration instance.

    Args:
        config_file: Optional path to config file

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        _config = Config(config_file)
    return _config

