"""
Validation configuration loader.

Loads the message catalog and global options from a YAML file:

    global:
      default_date_format: "DD/MM/YYYY"

    messages:
      required: "This field cannot be empty"
      email.required: "Please enter your email address"
"""

import yaml
from typing import Dict, Any, Optional
from pathlib import Path

from modules.validation.core.exceptions import ConfigurationException
from shared.utils.config import settings
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "validation" / "messages.yaml"


class ValidationConfigLoader:
    """
    Loads validation configuration from YAML files.

    Supports message overrides keyed "rule" or "field.rule" and a global
    section with engine-wide options.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_path: Path to the YAML file. If None, uses
                         settings.VALIDATION_MESSAGES_PATH, then
                         config/validation/messages.yaml
        """
        if config_path is None:
            config_path = settings.VALIDATION_MESSAGES_PATH or DEFAULT_CONFIG_PATH

        self.config_path = Path(config_path)
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Returns:
            Configuration dictionary

        Raises:
            yaml.YAMLError: If YAML parsing fails
            ConfigurationException: If a section has the wrong shape
        """
        if not self.config_path.exists():
            logger.warning(
                f"Validation config file not found: {self.config_path}. "
                "Using default configuration."
            )
            self._config = self._get_default_config()
            return self._config

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse validation config: {e}")
            raise

        self._config = self._check_shape(loaded or {})
        logger.info(f"Loaded validation config from: {self.config_path}")
        return self._config

    def get_messages(self) -> Dict[str, str]:
        """
        Get message overrides.

        Returns:
            Mapping of override key to message template
        """
        if self._config is None:
            self.load()

        return {
            str(key): str(value)
            for key, value in (self._config.get('messages') or {}).items()
        }

    def get_global_config(self) -> Dict[str, Any]:
        """
        Get global validation options.

        Returns:
            The global section, empty if absent
        """
        if self._config is None:
            self.load()

        return dict(self._config.get('global') or {})

    def get_default_date_format(self) -> Optional[str]:
        """Default format for the date rule, or None if the catalog sets none."""
        return self.get_global_config().get('default_date_format')

    def reload(self) -> Dict[str, Any]:
        """
        Reload configuration from file.

        Returns:
            Updated configuration dictionary
        """
        self._config = None
        return self.load()

    def _check_shape(self, config: Any) -> Dict[str, Any]:
        if not isinstance(config, dict):
            raise ConfigurationException(
                f"Validation config must be a mapping: {self.config_path}"
            )

        global_config = config.get('global')
        if global_config is not None and not isinstance(global_config, dict):
            raise ConfigurationException(
                f"Section 'global' must be a mapping in {self.config_path}"
            )

        date_format = (global_config or {}).get('default_date_format')
        if date_format is not None and not (isinstance(date_format, str) and date_format):
            raise ConfigurationException(
                f"'global.default_date_format' must be a non-empty string in {self.config_path}"
            )

        messages = config.get('messages')
        if messages is not None and not isinstance(messages, dict):
            raise ConfigurationException(
                f"Section 'messages' must be a mapping in {self.config_path}"
            )

        return config

    def _get_default_config(self) -> Dict[str, Any]:
        """
        Get default configuration when file doesn't exist.

        Returns:
            Default configuration dictionary
        """
        return {'global': {}, 'messages': {}}


def load_validation_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Convenience function to load validation configuration.

    Args:
        config_path: Optional path to config file

    Returns:
        Configuration dictionary
    """
    loader = ValidationConfigLoader(config_path)
    return loader.load()
