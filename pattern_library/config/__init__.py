"""
Config Module
Configuration management.
"""

from .settings import ConfigManager, Config, get_patterns_dir

__all__ = [
    "ConfigManager",
    "Config",
    "get_patterns_dir",
]
