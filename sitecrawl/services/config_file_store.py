import logging
import os
from typing import Optional

import yaml

logger = logging.getLogger(__name__)


class ConfigFileStore:
    """Filesystem/YAML IO for crawl option files.

    Responsibility: read and parse YAML files on disk.
    """

    def __init__(self, *, configs_dir: str = "."):
        self.configs_dir = configs_dir

    def _resolve_path(self, config_path: str) -> str:
        return config_path if os.path.isabs(config_path) else os.path.join(self.configs_dir, config_path)

    def load_yaml_dict(self, config_path: str) -> Optional[dict]:
        """Return parsed YAML dict for `config_path`, or None if missing/invalid."""
        full_path = self._resolve_path(config_path)
        if not os.path.isfile(full_path):
            return None
        try:
            with open(full_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            logger.warning("Could not read crawl options from %s", full_path, exc_info=True)
            return None
        return data if isinstance(data, dict) else None
