"""Configuration management for gitsandbox.

This module provides a small interface for reading and writing the global
configuration file and an optional local one given on the command line.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict, Tuple

from gitsandbox.core.errors import InvalidConfigKeyError

DEFAULT_AUTHOR = 'Developer'
DEFAULT_UNDO_DEPTH = 10


def split_key(key: str) -> Tuple[str, str]:
    """
    Split a dotted key into (section, option).

    Raises:
        InvalidConfigKeyError: If the key is not of the form section.option
    """
    section, dot, option = key.partition('.')
    if not dot or not section or not option:
        raise InvalidConfigKeyError(f"key does not contain a section: {key}")
    return section, option


class Config:
    """
    Manages gitsandbox configuration files.

    Configuration is stored in INI format:
    - Global config: ~/.gitsandboxconfig
    - Local config: any file passed explicitly (e.g. --config PATH)

    Local config takes precedence over global config.
    Environment variables take highest precedence.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.gitsandboxconfig'

    def __init__(self, local_config_path: Optional[Path] = None, global_config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            local_config_path: Path to a local config file, if any
            global_config_path: Override for the global config location
        """
        self.local_config_path = Path(local_config_path) if local_config_path else None
        self.global_config_path = Path(global_config_path) if global_config_path else self.GLOBAL_CONFIG_PATH
        self._global_config = None
        self._local_config = None

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = configparser.ConfigParser()
            if self.global_config_path.exists():
                self._global_config.read(self.global_config_path)
        return self._global_config

    @property
    def local_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return local configuration."""
        if self._local_config is None and self.local_config_path:
            self._local_config = configparser.ConfigParser()
            if self.local_config_path.exists():
                self._local_config.read(self.local_config_path)
        return self._local_config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Look a value up: GITSANDBOX_<SECTION>_<KEY>, then the local file,
        then the global file.

        Args:
            section: Section name, e.g. 'core'
            key: Option name, e.g. 'undodepth'
            fallback: Returned when no source has the value
        """
        env_value = os.environ.get(f"GITSANDBOX_{section.upper()}_{key.upper()}")
        if env_value is not None:
            return env_value

        if self.local_config is not None and self.local_config.has_option(section, key):
            return self.local_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        return fallback

    def get_int(self, section: str, key: str, fallback: int) -> int:
        """Get an integer value, falling back when missing or malformed."""
        value = self.get(section, key)
        if value is None:
            return fallback
        try:
            return int(value)
        except ValueError:
            return fallback

    def _target(self, global_config: bool) -> Tuple[configparser.ConfigParser, Path]:
        if global_config:
            return self.global_config, self.global_config_path
        if not self.local_config_path:
            raise ValueError("No local config path available")
        return self.local_config, self.local_config_path

    @staticmethod
    def _save(parser: configparser.ConfigParser, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as fh:
            parser.write(fh)

    def set(self, section: str, key: str, value: str, global_config: bool = True) -> None:
        """
        Store a value and write the file straight away.

        Args:
            section: Section name, e.g. 'user'
            key: Option within the section, e.g. 'name'
            value: New value
            global_config: Write to ~/.gitsandboxconfig (True) or the local file
        """
        parser, path = self._target(global_config)
        if not parser.has_section(section):
            parser.add_section(section)
        parser.set(section, key, value)
        self._save(parser, path)

    def unset(self, section: str, key: str, global_config: bool = True) -> bool:
        """
        Drop a value; a section left empty is dropped too.

        Returns:
            False if the value was not set
        """
        parser, path = self._target(global_config)
        if not parser.has_option(section, key):
            return False

        parser.remove_option(section, key)
        if not parser.options(section):
            parser.remove_section(section)
        self._save(parser, path)
        return True

    def list_all(self) -> Dict[str, Dict[str, str]]:
        """Merged file values as {section: {key: value}}; local wins over global."""
        merged: Dict[str, Dict[str, str]] = {}
        for parser in (self.global_config, self.local_config):
            if parser is None:
                continue
            for section in parser.sections():
                merged.setdefault(section, {}).update(parser.items(section))
        return merged

    @property
    def author(self) -> str:
        """Author recorded on commits."""
        return self.get('user', 'name') or DEFAULT_AUTHOR

    @property
    def undo_depth(self) -> int:
        """Number of undo snapshots kept per session."""
        return max(0, self.get_int('core', 'undodepth', DEFAULT_UNDO_DEPTH))

    @property
    def log_level(self) -> Optional[str]:
        return self.get('log', 'level')


def get_config(local_config_path: Optional[Path] = None) -> Config:
    """Config over the global file plus an optional local one."""
    return Config(local_config_path)
