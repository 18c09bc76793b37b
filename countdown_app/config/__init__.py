"""
Configuration module.

Typed defaults, YAML overrides and validation for the countdown app.
"""
from .defaults import AppConfig, get_default_config
from .loader import ConfigLoader, load_config

__all__ = ["AppConfig", "ConfigLoader", "get_default_config", "load_config"]
