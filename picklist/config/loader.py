"""Configuration file lookup."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .models import PicklistConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Find and read ``picklist.yaml``.

    The project directory is searched before the user directory. Any file
    that cannot be read or validated is reported and replaced by defaults.
    """

    CONFIG_FILENAME = "picklist.yaml"
    USER_CONFIG_DIR = Path.home() / ".picklist"

    def __init__(self, project_path: Path | None = None):
        self._project_path = project_path or Path.cwd()

    def candidates(self) -> list[Path]:
        return [
            self._project_path / self.CONFIG_FILENAME,
            self.USER_CONFIG_DIR / self.CONFIG_FILENAME,
        ]

    def get_config_path(self) -> Path | None:
        return next((path for path in self.candidates() if path.exists()), None)

    def load(self) -> PicklistConfig:
        config_path = self.get_config_path()
        if config_path is None:
            logger.debug("No picklist.yaml found, using defaults")
            return PicklistConfig()

        try:
            raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
            config = PicklistConfig.model_validate(raw or {})
        except (OSError, ValueError, yaml.YAMLError) as e:
            # ValidationError and UnicodeDecodeError are both ValueErrors
            logger.warning(f"Ignoring {config_path}: {e}")
            return PicklistConfig()

        logger.info(f"Loaded config from: {config_path}")
        return config


def load_config(project_path: Path | str | None = None) -> PicklistConfig:
    """Load configuration from project or user directory."""
    path = Path(project_path) if project_path else None
    return ConfigLoader(path).load()
