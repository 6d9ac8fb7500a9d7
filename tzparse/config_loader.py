"""
Configuration loader for tzparse.

Supports loading configuration from:
1. config.ini file (recommended)
2. Environment variables (for automation/Docker)
"""

import configparser
import os
from dataclasses import dataclass

from tzparse.timezone_utils import DEFAULT_ZONEINFO_DIR, get_default_zone, get_zoneinfo_dir

OUTPUT_FORMATS = ('json', 'text', 'csv')


@dataclass
class Settings:
    """Settings for zone lookups and output."""

    zoneinfo_dir: str = DEFAULT_ZONEINFO_DIR
    default_zone: str = 'UTC'
    output_format: str = 'text'


class ConfigLoader:
    """Load configuration from various sources."""

    def __init__(self, config_file: str = "config.ini"):
        """
        Initialize config loader.

        Args:
            config_file: Path to config file (default: config.ini)
        """
        self.config_file = config_file
        self.config = None

    def load_from_file(self) -> bool:
        """
        Load configuration from INI file.

        Returns:
            True if file was loaded successfully, False otherwise
        """
        if not os.path.exists(self.config_file):
            return False

        self.config = configparser.ConfigParser()
        self.config.read(self.config_file)
        return True

    def get_settings(self) -> Settings:
        """
        Get settings.

        Returns:
            Settings with configured values

        Raises:
            ValueError: If the output format is not supported
        """
        settings = Settings()

        # Try config file first
        if self.config and self.config.has_section('Settings'):
            settings.zoneinfo_dir = self.config.get('Settings', 'zoneinfo_dir', fallback=get_zoneinfo_dir())
            settings.default_zone = self.config.get('Settings', 'default_zone', fallback=get_default_zone())
            settings.output_format = self.config.get('Settings', 'output_format', fallback='text')
        else:
            # Try environment variables
            settings.zoneinfo_dir = get_zoneinfo_dir()
            settings.default_zone = os.getenv('TZPARSE_DEFAULT_ZONE') or get_default_zone()
            settings.output_format = os.getenv('TZPARSE_OUTPUT_FORMAT', 'text')

        settings.output_format = settings.output_format.strip().lower()
        if settings.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output format '{settings.output_format}'. "
                f"Choose one of: {', '.join(OUTPUT_FORMATS)}"
            )

        return settings


def load_config(config_file: str = "config.ini") -> Settings:
    """
    Convenience function to load all configuration.

    Args:
        config_file: Path to config file

    Returns:
        Settings

    Raises:
        ValueError: If configuration is invalid
    """
    loader = ConfigLoader(config_file)
    loader.load_from_file()
    return loader.get_settings()
