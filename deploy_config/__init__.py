"""
Deployment configuration for the project's smart contracts.
"""

from .config.loader import ConfigurationLoader
from .errors import MissingConfiguration, MissingSecret
from .models.configuration import Configuration

__version__ = "0.1.0"

__all__ = ['ConfigurationLoader', 'Configuration', 'MissingConfiguration', 'MissingSecret']
