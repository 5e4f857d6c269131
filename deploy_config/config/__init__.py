"""
Configuration management module.
"""

from .settings import Settings
from .environment import EnvironmentConfig
from .loader import ConfigurationLoader

__all__ = ['Settings', 'EnvironmentConfig', 'ConfigurationLoader']
