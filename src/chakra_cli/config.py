import logging
import tomllib
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class LintConfig:
    """Handles loading and validation of .chakra-lint.toml configuration"""

    def __init__(self, config_path: Path | None = None):
        self.select: list[str] = ["C"]
        self.ignore: list[str] = []

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Ignoring config file %s: %s", path, e)
            return

        lint_data = data.get("tool", {}).get("chakra-lint", {})
        self.select = self._string_list(lint_data, "select", self.select, path)
        self.ignore = self._string_list(lint_data, "ignore", self.ignore, path)

    @staticmethod
    def _string_list(data: dict, key: str, default: list[str], path: Path) -> list[str]:
        value = data.get(key, default)
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            logger.warning("%s: '%s' must be a list of strings, using %s", path, key, default)
            return default
        return value

    def apply_to_registry(self, registry: Any) -> list[Any]:
        """Return list of enabled rules based on this config"""
        return registry.get_enabled_rules(select=self.select, ignore=self.ignore)
