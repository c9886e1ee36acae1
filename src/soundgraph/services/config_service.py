"""
Configuration Service Module

Reads the tuning constants of the signal graph from YAML.
"""

from typing import Any, Dict, Optional
from pathlib import Path
import copy
import yaml
import threading
import logging

logger = logging.getLogger(__name__)


class ConfigService:
    """
    Configuration Service

    Built-in defaults, overridden by an optional YAML file.

    Usage Example:
        config = ConfigService("config/soundgraph.yaml")

        step = config.get("audio.hertz_step", 23.4)
        config.set("visualization.tick_interval_ms", 33)
    """

    def __init__(self, config_path: Optional[str] = None):
        self._config_path = Path(config_path) if config_path else None
        self._config: Dict[str, Any] = {}
        self._lock = threading.Lock()

        self._load()

    @property
    def config_path(self) -> Optional[Path]:
        return self._config_path

    def _load(self) -> None:
        """Load defaults, then merge the YAML file over them"""
        config = self._get_default_config()

        if self._config_path is not None:
            if self._config_path.exists():
                try:
                    with open(self._config_path, 'r', encoding='utf-8') as f:
                        file_config = yaml.safe_load(f) or {}
                    self._deep_merge(config, file_config)
                except (OSError, yaml.YAMLError) as e:
                    logger.warning("Failed to load configuration %s: %s", self._config_path, e)
            else:
                logger.debug("Configuration file %s not found, using defaults", self._config_path)

        with self._lock:
            self._config = config

    def _deep_merge(self, base: Dict, override: Dict) -> None:
        """Deep merge dictionaries, override overwrites base"""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration"""
        return {
            'audio': {
                'fft_size': 32768,
                'hertz_step': 23.4,
            },
            'playback': {
                'default_volume': 100,
                'seek_threshold': 1.0,
            },
            'visualization': {
                'tick_interval_ms': 16,
            },
            'logging': {
                'level': 'INFO',
                'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Supports dot-separated nested keys, e.g., "audio.hertz_step".

        Args:
            key: Configuration key
            default: Default value

        Returns:
            Configuration value or the default value.
        """
        with self._lock:
            keys = key.split('.')
            value = self._config

            try:
                for k in keys:
                    value = value[k]
                return value
            except (KeyError, TypeError):
                return default

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value (in memory only).

        Args:
            key: Configuration key (dot-separated)
            value: Configuration value
        """
        with self._lock:
            keys = key.split('.')
            config = self._config

            for k in keys[:-1]:
                if k not in config:
                    config[k] = {}
                config = config[k]

            config[keys[-1]] = value

    def get_all(self) -> Dict[str, Any]:
        """Get a copy of all configuration."""
        with self._lock:
            return copy.deepcopy(self._config)

    def reload(self) -> bool:
        """
        Reload configuration from the file

        Returns:
            bool: Whether loading was successful
        """
        try:
            self._load()
            return True
        except Exception as e:
            logger.error("Failed to reload configuration: %s", e)
            return False

    def reset(self) -> None:
        """Reset to default configuration."""
        with self._lock:
            self._config = self._get_default_config()
