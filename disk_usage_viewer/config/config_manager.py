"""Configuration management for the disk usage viewer."""

import copy
import os
import yaml
from typing import Dict, Any, Optional
from .config_validator import ConfigValidator


class ConfigManager:
    """Manages configuration loading and validation for disk usage analysis."""

    DEFAULT_CONFIG_LOCATIONS = [
        "disk-usage-viewer.yaml",
        "disk-usage-viewer.yml",
        os.path.expanduser("~/.disk-usage-viewer/config.yaml"),
        os.path.expanduser("~/.disk-usage-viewer/config.yml"),
        "/etc/disk-usage-viewer/config.yaml",
        "/etc/disk-usage-viewer/config.yml"
    ]

    DEFAULTS = {
        'analysis': {
            'default_depth': 1,
            'max_depth': 5,
            'max_workers': 10,
            'collect_warnings': False
        },
        'logging': {
            'level': 'INFO',
            'file': None
        }
    }

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to config file. If not provided,
                        will search in default locations.
        """
        self.config_path = config_path
        self.config_file: Optional[str] = None
        self.config_data: Dict[str, Any] = {}
        self.validator = ConfigValidator()

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file, falling back to defaults.

        Returns:
            Dictionary containing configuration data.

        Raises:
            FileNotFoundError: If an explicit config file does not exist.
            ValueError: If config file is invalid.
        """
        self.config_file = self._find_config_file()

        if self.config_file:
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    self.config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in config file {self.config_file}: {e}")
            except OSError as e:
                raise ValueError(f"Error reading config file {self.config_file}: {e}")
        else:
            self.config_data = {}

        self.validator.validate(self.config_data)
        self._set_defaults()
        # Re-check once defaults are merged in
        self.validator.validate(self.config_data)

        return self.config_data

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in default locations.

        Returns:
            Path to configuration file, or None when none exists.

        Raises:
            FileNotFoundError: If an explicitly given config file is missing.
        """
        if self.config_path:
            if os.path.exists(self.config_path):
                return self.config_path
            else:
                raise FileNotFoundError(f"Config file not found: {self.config_path}")

        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if os.path.exists(location):
                return location

        return None

    def _set_defaults(self):
        """Set default values for optional configuration parameters."""
        for section, section_defaults in copy.deepcopy(self.DEFAULTS).items():
            if self.config_data.get(section) is None:
                self.config_data[section] = {}
            for key, value in section_defaults.items():
                if key not in self.config_data[section]:
                    self.config_data[section][key] = value

    def get_analysis_config(self) -> Dict[str, Any]:
        """Get analysis configuration.

        Returns:
            Analysis configuration dictionary.
        """
        return self.config_data.get('analysis', {})

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration.

        Returns:
            Logging configuration dictionary.
        """
        return self.config_data.get('logging', {})
