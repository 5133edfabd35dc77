"""Configuration validation for disk usage viewer."""

from typing import Dict, Any


class ConfigValidator:
    """Validates disk usage viewer configuration."""

    KNOWN_SECTIONS = ['analysis', 'logging']
    LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
    MAX_DEPTH_LIMIT = 5

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration data.

        Args:
            config: Configuration dictionary to validate.

        Raises:
            ValueError: If configuration is invalid.
        """
        self._validate_structure(config)

        if config.get('analysis'):
            self._validate_analysis_config(config['analysis'])

        if config.get('logging'):
            self._validate_logging_config(config['logging'])

    def _validate_structure(self, config: Dict[str, Any]) -> None:
        """Validate basic configuration structure.

        Args:
            config: Configuration dictionary.

        Raises:
            ValueError: If the document or a section has the wrong type.
        """
        if not isinstance(config, dict):
            raise ValueError("Configuration must be a mapping")

        unknown_sections = [section for section in config if section not in self.KNOWN_SECTIONS]
        if unknown_sections:
            raise ValueError(f"Unknown configuration sections: {unknown_sections}")

        for section in self.KNOWN_SECTIONS:
            value = config.get(section)
            if value is not None and not isinstance(value, dict):
                raise ValueError(f"Configuration section '{section}' must be a dictionary")

    def _validate_analysis_config(self, analysis_config: Dict[str, Any]) -> None:
        """Validate analysis configuration.

        Args:
            analysis_config: Analysis configuration dictionary.

        Raises:
            ValueError: If analysis configuration is invalid.
        """
        for key in ['default_depth', 'max_depth', 'max_workers']:
            if key in analysis_config:
                value = analysis_config[key]
                if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                    raise ValueError(f"Analysis setting '{key}' must be a positive integer: {value!r}")

        max_depth = analysis_config.get('max_depth')
        if max_depth is not None and max_depth > self.MAX_DEPTH_LIMIT:
            raise ValueError(f"Analysis max_depth cannot exceed {self.MAX_DEPTH_LIMIT}: {max_depth}")

        default_depth = analysis_config.get('default_depth')
        if default_depth is not None and max_depth is not None and default_depth > max_depth:
            raise ValueError(
                f"Analysis default_depth ({default_depth}) cannot exceed max_depth ({max_depth})"
            )

        collect_warnings = analysis_config.get('collect_warnings')
        if collect_warnings is not None and not isinstance(collect_warnings, bool):
            raise ValueError(f"Analysis collect_warnings must be true or false: {collect_warnings!r}")

    def _validate_logging_config(self, logging_config: Dict[str, Any]) -> None:
        """Validate logging configuration.

        Args:
            logging_config: Logging configuration dictionary.

        Raises:
            ValueError: If logging configuration is invalid.
        """
        level = logging_config.get('level')
        if level is not None and str(level).upper() not in self.LOG_LEVELS:
            raise ValueError(f"Logging configuration has invalid level: {level}")
