"""Config module - SDK configuration and constants."""

from atoship.config.settings import Configuration, ConfigurationBuilder, Settings

__all__ = ["Configuration", "ConfigurationBuilder", "Settings"]
