"""
Configuration package - unified access point.

This package provides all configuration classes and the loader used by the
webhook endpoint.
"""

from src.core.config.github_config import GitHubConfig
from src.core.config.logging_config import LoggingConfig
from src.core.config.settings import Config, load_config

__all__ = [
    "Config",
    "GitHubConfig",
    "LoggingConfig",
    "load_config",
]
