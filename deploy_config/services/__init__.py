"""
Service layer for the external toolchain integrations.
"""

from .wallet_provider import WalletProviderService
from .compiler_service import CompilerService
from .contract_size import ContractSizeService

__all__ = [
    'WalletProviderService',
    'CompilerService',
    'ContractSizeService'
]
