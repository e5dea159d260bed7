"""Configuration management for minivcs.

This module provides a clean interface for reading and writing
both repository-local and global configuration files.
"""

import os
import configparser
import io
from pathlib import Path
from typing import Optional, Dict

from .errors import StorageUnavailable
from .store import atomic_write

DEFAULTS = {
    'core': {
        'encoding': 'utf-8',
    },
    'log': {
        'level': 'WARNING',
    },
}


class Config:
    """
    Manages minivcs configuration files.

    Configuration is stored in INI format:
    - Global config: ~/.minivcsconfig
    - Repository config: .vcs/config

    Repository config takes precedence over global config.
    Environment variables take highest precedence.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.minivcsconfig'

    def __init__(self, repo_config_path: Optional[Path] = None,
                 global_config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            repo_config_path: Path to repository config file, if in a repo
            global_config_path: Override for the global config location
        """
        self.repo_config_path = repo_config_path
        self.global_config_path = global_config_path or self.GLOBAL_CONFIG_PATH
        self._global_config = None
        self._repo_config = None

    @staticmethod
    def _load(path: Optional[Path]) -> configparser.ConfigParser:
        parser = configparser.ConfigParser()
        if path is None:
            return parser
        try:
            parser.read(path, encoding='utf-8')
        except configparser.Error as e:
            raise StorageUnavailable(f"Cannot parse config {path}: {e}") from e
        return parser

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = self._load(self.global_config_path)
        return self._global_config

    @property
    def repo_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return repository configuration."""
        if self._repo_config is None and self.repo_config_path:
            self._repo_config = self._load(self.repo_config_path)
        return self._repo_config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (MINIVCS_<SECTION>_<KEY>)
        2. Repository config
        3. Global config
        4. Built-in defaults
        5. Fallback value

        Args:
            section: Config section (e.g., 'core', 'log')
            key: Config key (e.g., 'encoding', 'level')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_value = os.environ.get(f"MINIVCS_{section.upper()}_{key.upper()}")
        if env_value is not None:
            return env_value

        if self.repo_config and self.repo_config.has_option(section, key):
            return self.repo_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        if fallback is not None:
            return fallback
        return DEFAULTS.get(section, {}).get(key)

    def _target(self, global_config: bool):
        if global_config:
            return self.global_config, self.global_config_path
        if not self.repo_config_path:
            raise ValueError("No repository config path available")
        return self.repo_config, self.repo_config_path

    @staticmethod
    def _save(config: configparser.ConfigParser, path: Path) -> None:
        buf = io.StringIO()
        config.write(buf)
        atomic_write(Path(path), buf.getvalue().encode('utf-8'))

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Set a configuration value.

        Args:
            section: Config section
            key: Config key
            value: Value to set
            global_config: If True, write to global config; otherwise repo config
        """
        config, config_path = self._target(global_config)

        if not config.has_section(section):
            config.add_section(section)

        config.set(section, key, value)
        self._save(config, config_path)

    def unset(self, section: str, key: str, global_config: bool = False) -> bool:
        """
        Remove a configuration value.

        Returns:
            True if value was removed, False if it didn't exist
        """
        config, config_path = self._target(global_config)

        if not config.has_option(section, key):
            return False

        config.remove_option(section, key)

        # Remove empty sections
        if not config.options(section):
            config.remove_section(section)

        self._save(config, config_path)
        return True

    def list_all(self) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values, repository values overriding global.

        Returns:
            Dict of sections to key-value dicts
        """
        result: Dict[str, Dict[str, str]] = {}

        for parser in (self.global_config, self.repo_config):
            if parser is None:
                continue
            for section in parser.sections():
                result.setdefault(section, {}).update(parser.items(section))

        return result

    @property
    def encoding(self) -> str:
        """Text encoding used to decode blobs for line diffs."""
        return self.get('core', 'encoding')


def get_config(repo=None) -> Config:
    """
    Get a Config instance.

    Args:
        repo: Repository instance, or None for global-only config

    Returns:
        Config instance
    """
    if repo:
        return Config(repo.config_file)
    return Config()
