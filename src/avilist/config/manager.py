"""Configuration loading."""

from typing import Any

import structlog
import yaml

from avilist.config.models import AviListConfig, LoggingConfig
from avilist.system.path_resolver import PathResolver

logger = structlog.get_logger(__name__)


class ConfigManager:
    """Loads and validates the avilist configuration file.

    Configuration is read-only: a missing file yields defaults and nothing is
    written back to disk.
    """

    def __init__(self, path_resolver: PathResolver | None = None):
        """Initialize ConfigManager.

        Args:
            path_resolver: Optional PathResolver instance. If None, creates a new one.
        """
        self.path_resolver = path_resolver or PathResolver()
        self.config_path = self.path_resolver.get_avilist_config_path()

    def load(self) -> AviListConfig:
        """Load configuration from disk, falling back to defaults.

        Returns:
            AviListConfig: Loaded and validated configuration

        Raises:
            ValueError: If the file is not a YAML mapping or fails validation
        """
        if not self.config_path.exists():
            logger.debug("No config file found, using defaults", path=str(self.config_path))
            return AviListConfig()

        raw_config = self._read_yaml()
        return self._create_config_object(raw_config)

    def _read_yaml(self) -> dict[str, Any]:
        """Read YAML config file.

        Returns:
            dict: Raw configuration dictionary
        """
        config_text = self.config_path.read_text()
        raw_config = yaml.safe_load(config_text) or {}
        if not isinstance(raw_config, dict):
            raise ValueError(f"Configuration file {self.config_path} must contain a mapping")
        return raw_config

    def _create_config_object(self, raw_config: dict[str, Any]) -> AviListConfig:
        """Create AviListConfig object from dictionary.

        Args:
            raw_config: Configuration dictionary

        Returns:
            AviListConfig: Typed configuration object
        """
        if "logging" in raw_config and isinstance(raw_config["logging"], dict):
            raw_config["logging"] = LoggingConfig(**raw_config["logging"])

        expected_fields = set(AviListConfig.model_fields.keys())
        filtered_config = {k: v for k, v in raw_config.items() if k in expected_fields}

        unexpected_fields = set(raw_config.keys()) - expected_fields
        if unexpected_fields:
            logger.warning(
                "Ignoring unknown config fields",
                fields=sorted(unexpected_fields),
                path=str(self.config_path),
            )

        return AviListConfig(**filtered_config)
