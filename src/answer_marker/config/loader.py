"""Configuration loader for marking settings."""

from pathlib import Path
from typing import Any

import yaml

from ..utils.logging import get_logger
from .models import MarkingConfig

logger = get_logger(__name__)


class ConfigLoader:
    """Loads and validates marking configuration files."""

    def __init__(self, config_dir: Path | None = None):
        """Initialize the config loader.

        Args:
            config_dir: Directory relative config paths are resolved against.
                Defaults to the current working directory.
        """
        self.config_dir = config_dir or Path.cwd()

    def load_marking(self, config_file: str | Path) -> MarkingConfig:
        """Load a marking configuration from YAML.

        Args:
            config_file: Path to the marking config YAML file

        Returns:
            Parsed MarkingConfig object

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the document is not a mapping
        """
        path = self._resolve_path(config_file)
        data = self._load_yaml(path)
        logger.debug(f"Loaded marking config from {path}")
        return MarkingConfig.from_dict(data)

    def _resolve_path(self, file_path: str | Path) -> Path:
        """Resolve a config file path."""
        path = Path(file_path).expanduser()
        if not path.is_absolute():
            path = self.config_dir / path
        return path

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load and parse a YAML file."""
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return data
