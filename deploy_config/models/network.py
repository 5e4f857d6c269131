"""
Network data models.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from .secret import Secret
from .units import from_wei, to_wei


@dataclass(frozen=True)
class NetworkConfig:
    """Represents a deployable network and the variables that wire it up."""
    
    name: str
    chain_id: int
    rpc_endpoint_env_var: str
    secret_env_var: str
    timeout_blocks: int = 200
    skip_dry_run: bool = False
    gas_limit: int = 7_000_000
    gas_price_wei: int = 0
    
    @classmethod
    def declare(
        cls,
        name: str,
        chain_id: int,
        rpc_endpoint_env_var: str,
        secret_env_var: str,
        gas_price: str,
        gas_price_unit: str = 'gwei',
        **kwargs
    ) -> 'NetworkConfig':
        """Declare a network with its gas price given in a human denomination."""
        return cls(
            name=name,
            chain_id=chain_id,
            rpc_endpoint_env_var=rpc_endpoint_env_var,
            secret_env_var=secret_env_var,
            gas_price_wei=to_wei(gas_price, gas_price_unit),
            **kwargs
        )
    
    @property
    def required_env_vars(self) -> tuple:
        """Environment variables that must be set to deploy to this network."""
        return (self.secret_env_var, self.rpc_endpoint_env_var)
    
    @property
    def gas_price_gwei(self) -> Decimal:
        """Gas price in gwei."""
        return from_wei(self.gas_price_wei, 'gwei')
    
    def to_dict(self) -> dict:
        """Convert network config to dictionary."""
        return {
            'name': self.name,
            'chain_id': self.chain_id,
            'rpc_endpoint_env_var': self.rpc_endpoint_env_var,
            'secret_env_var': self.secret_env_var,
            'timeout_blocks': self.timeout_blocks,
            'skip_dry_run': self.skip_dry_run,
            'gas_limit': self.gas_limit,
            'gas_price_wei': self.gas_price_wei,
        }


@dataclass(frozen=True)
class WalletProvider:
    """
    Everything an external wallet library needs to build a signing provider.
    
    The secret stays wrapped; callers unwrap it with ``secret.reveal()`` only
    when handing it to the signer.
    """
    
    network: str
    chain_id: int
    endpoint: str
    secret: Secret = field(repr=False)
    
    def to_dict(self) -> dict:
        """Convert provider to a dictionary safe for display."""
        return {
            'network': self.network,
            'chain_id': self.chain_id,
            'endpoint': self.endpoint,
            'secret': str(self.secret),
        }
