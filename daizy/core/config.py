import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .exceptions import ConfigError
from .utils import convert_value, merge_dicts

ENV_PREFIX = "DAIZY_"

# Identity and URL settings are taken verbatim from the environment.
STRING_KEYS = frozenset({
    "api.organisation",
    "api.token",
    "api.base_url",
    "api.base_path"
})

DEFAULT_BASE_URL = "https://api-test.daizy.io"
DEFAULT_BASE_PATH = "/api/v1"
DEFAULT_TIMEOUT = 10.0

class Config:
    """
    Layered client configuration.

    Values are resolved from built-in defaults, then ``DAIZY_*`` environment
    variables, then an optional JSON file. Keys are addressed with dot
    notation, e.g. ``api.base_url``.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self._config: Dict[str, Any] = {}
        self._load_defaults()
        self._load_environment_variables()
        if config_path:
            self.load(config_path)
        self.validate(self._config)

    def _load_defaults(self) -> None:
        """Load default configuration values"""
        self._config = {
            "api": {
                "base_url": DEFAULT_BASE_URL,
                "base_path": DEFAULT_BASE_PATH,
                "timeout": DEFAULT_TIMEOUT
            },
            "logging": {
                "level": "INFO",
                "file": None,
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "console_output": False,
                "max_size": 1024 * 1024,
                "backup_count": 3
            }
        }

    def load(self, path: Path) -> None:
        """Load configuration from JSON file"""
        try:
            with open(path, 'r') as f:
                file_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Failed to load config from {path}: {str(e)}") from e
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        self.update(file_config)

    def save(self, path: Path) -> None:
        """Save configuration to JSON file"""
        with open(path, 'w') as f:
            json.dump(self._config, f, indent=2)

    def _load_environment_variables(self) -> None:
        """Load configuration from environment variables"""
        for key, value in os.environ.items():
            if key.startswith(ENV_PREFIX):
                # DAIZY_API_BASE_URL -> api.base_url
                parts = key[len(ENV_PREFIX):].lower().split('_')

                if len(parts) > 2:
                    config_key = f"{parts[0]}.{'_'.join(parts[1:])}"
                else:
                    config_key = '.'.join(parts)

                if config_key in STRING_KEYS:
                    self.set(config_key, value)
                else:
                    self.set(config_key, convert_value(value))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation key"""
        try:
            value = self._config
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Set configuration value by dot notation key"""
        keys = key.split('.')
        d = self._config
        for k in keys[:-1]:
            if not isinstance(d.get(k), dict):
                d[k] = {}
            d = d[k]
        d[keys[-1]] = value

    def update(self, config_dict: Dict[str, Any]) -> None:
        """Update configuration with dictionary"""
        self._config = merge_dicts(self._config, config_dict)

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        if "api" in config:
            api_config = config["api"]
            timeout = api_config.get("timeout")
            if timeout is not None:
                if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                    raise ConfigError("api.timeout must be a positive number")
            if "base_path" in api_config and not isinstance(api_config["base_path"], str):
                raise ConfigError("api.base_path must be a string")
