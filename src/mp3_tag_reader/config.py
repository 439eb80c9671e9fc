"""Configuration management for the MP3 tag reader.

Handles loading and saving user preferences: recognized audio extensions,
the copy buffer size, the text encoding used for edits and display, and
the default log level.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import tomli_w

from .constants import BUFFER_SIZE, ENCODING, SUPPORTED_EXTENSIONS

logger = logging.getLogger(__name__)

LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.mp3tag on all platforms)
    """
    return Path.home() / ".mp3tag"


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / "config.toml"


class Config:
    """Configuration manager for application settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "audio": {
            "extensions": list(SUPPORTED_EXTENSIONS),
        },
        "io": {
            # Copy buffer for the audio payload when rewriting a file
            "buffer_size": BUFFER_SIZE,
        },
        "text": {
            # Used to encode edited values and to decode fields for display
            "encoding": ENCODING,
        },
        "logging": {
            # Empty means logging stays disabled unless --log-level is given
            "level": "",
        },
    }

    MIN_BUFFER_SIZE = 512

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_path: TOML file to use. Defaults to ~/.mp3tag/config.toml.
        """
        self.config_path = Path(config_path) if config_path is not None else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
            self._merge_config(self.data, loaded_data)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Error loading config %s: %s", self.config_path, e)
            return False

        self._validate()
        self._dirty = False
        return True

    def _validate(self) -> None:
        """Run loaded values through the setters, restoring defaults for bad ones."""
        setters = {
            ("audio", "extensions"): self.set_extensions,
            ("io", "buffer_size"): self.set_buffer_size,
            ("text", "encoding"): self.set_encoding,
            ("logging", "level"): self.set_log_level,
        }
        for (section, key), setter in setters.items():
            if not isinstance(self.data.get(section), dict):
                logger.warning("Invalid [%s] section in %s, using defaults", section, self.config_path)
                self.data[section] = copy.deepcopy(self.DEFAULT_CONFIG[section])
                continue
            value = self.data[section].get(key, self.DEFAULT_CONFIG[section][key])
            try:
                setter(value)
            except ValueError as e:
                logger.warning("Invalid %s.%s in %s: %s", section, key, self.config_path, e)
                self.data[section][key] = copy.deepcopy(self.DEFAULT_CONFIG[section][key])

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
            self._dirty = False
            return True
        except OSError as e:
            logger.error("Error saving config %s: %s", self.config_path, e)
            return False

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        """Check if configuration has been modified."""
        return self._dirty

    # Audio settings
    def get_extensions(self) -> List[str]:
        """Get the recognized audio file extensions."""
        return list(self.data["audio"]["extensions"])

    def set_extensions(self, extensions: List[str]) -> None:
        """Set the recognized audio file extensions.

        Raises:
            ValueError: If extensions is not a non-empty list of names starting
                with a dot
        """
        if not isinstance(extensions, (list, tuple)):
            raise ValueError(f"Extensions must be a list, got {extensions!r}")
        if not extensions:
            raise ValueError("At least one audio extension is required")
        for ext in extensions:
            if not isinstance(ext, str) or not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"Invalid extension: {ext!r}")
        self.data["audio"]["extensions"] = list(extensions)
        self._dirty = True

    # I/O settings
    def get_buffer_size(self) -> int:
        return self.data["io"]["buffer_size"]

    def set_buffer_size(self, size: int) -> None:
        """Set the copy buffer size in bytes.

        Raises:
            ValueError: If size is smaller than MIN_BUFFER_SIZE
        """
        if not isinstance(size, int) or isinstance(size, bool):
            raise ValueError(f"Buffer size must be an integer, got {size!r}")
        if size < self.MIN_BUFFER_SIZE:
            raise ValueError(f"Buffer size must be at least {self.MIN_BUFFER_SIZE} bytes")
        self.data["io"]["buffer_size"] = size
        self._dirty = True

    # Text settings
    def get_encoding(self) -> str:
        return self.data["text"]["encoding"]

    def set_encoding(self, encoding: str) -> None:
        """Set the text encoding.

        Raises:
            ValueError: If Python does not know the encoding
        """
        if not isinstance(encoding, str):
            raise ValueError(f"Encoding must be a string, got {encoding!r}")
        try:
            "".encode(encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {encoding}") from None
        self.data["text"]["encoding"] = encoding
        self._dirty = True

    # Logging settings
    def get_log_level(self) -> Optional[str]:
        """Get the default log level, or None if logging is disabled."""
        return self.data.get("logging", {}).get("level") or None

    def set_log_level(self, level: Optional[str]) -> None:
        if level is not None and not isinstance(level, str):
            raise ValueError(f"Invalid log level: {level!r}")
        if level and level.lower() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {level}")
        self.data["logging"]["level"] = level.lower() if level else ""
        self._dirty = True
