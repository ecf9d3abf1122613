"""Connection settings for the GridFS CLI."""

import json
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Optional

from common.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / '.gridfs' / 'config.json'

# environment variable -> ClientConfig field
ENV_OVERRIDES = {
    "DFS_CONTROLLER_HOST": "controller_host",
    "DFS_CONTROLLER_PORT": "controller_port",
    "DFS_CLI_TIMEOUT": "timeout",
    "DFS_CLI_MAX_RETRIES": "max_retries",
}


@dataclass
class ClientConfig:
    """
    Where the controller lives and how patiently to talk to it.

    Values come from, in increasing priority: the defaults below, an
    optional JSON file, and DFS_* environment variables.
    """
    controller_host: str = "localhost"
    controller_port: int = 8000
    timeout: float = 30
    max_retries: int = 3
    retry_backoff_multiplier: float = 2
    config_path: Optional[Path] = field(default=None, compare=False)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'ClientConfig':
        """
        Build a config from the JSON file (if any) and the environment.

        A missing file is not an error. An unreadable file, unknown keys
        and values of the wrong type are logged and ignored.
        """
        config = cls(config_path=config_path)
        if config_path is not None and config_path.exists():
            try:
                with open(config_path, 'r') as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning(f"Ignoring unreadable config at {config_path}: {e}")
                data = {}
            if not isinstance(data, dict):
                logger.warning(f"Ignoring config at {config_path}: expected a JSON object")
                data = {}
            for key, value in data.items():
                config._apply(key, value, source=str(config_path))

        for env_name, key in ENV_OVERRIDES.items():
            if env_name in os.environ:
                config._apply(key, os.environ[env_name], source=env_name)
        return config

    def _apply(self, key: str, value, source: str) -> None:
        casters = {f.name: f.type for f in fields(self) if f.name != 'config_path'}
        if key not in casters:
            logger.warning(f"Unknown config key {key!r} in {source}")
            return
        try:
            setattr(self, key, casters[key](value))
        except (TypeError, ValueError):
            logger.warning(f"Invalid value {value!r} for {key} in {source}, keeping {getattr(self, key)!r}")

    def save(self) -> None:
        """Write the current settings to config_path."""
        if self.config_path is None:
            raise ValueError("No config path to save to")
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        data = asdict(self)
        data.pop('config_path')
        with open(self.config_path, 'w') as f:
            json.dump(data, f, indent=2)

    def get_base_url(self) -> str:
        return f"http://{self.controller_host}:{self.controller_port}"

    def get_timeout(self) -> float:
        return self.timeout

    def get_retry_config(self) -> dict:
        return {
            'max_retries': self.max_retries,
            'retry_backoff_multiplier': self.retry_backoff_multiplier,
        }
