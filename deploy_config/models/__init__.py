"""
Data models for the deployment configuration.
"""

from .compiler import CompilerSettings, MochaOptions
from .configuration import Configuration
from .network import NetworkConfig, WalletProvider
from .secret import Secret

__all__ = [
    'CompilerSettings',
    'MochaOptions',
    'Configuration',
    'NetworkConfig',
    'WalletProvider',
    'Secret',
]
