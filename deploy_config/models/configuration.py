"""
Top-level deployment configuration record.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from ..errors import InvalidConfiguration, UnknownNetwork
from .compiler import CompilerSettings, MochaOptions
from .network import NetworkConfig


DEFAULT_BUILD_DIRECTORY = './build'
DEFAULT_PLUGINS = ('truffle-contract-size',)


def default_networks() -> List[NetworkConfig]:
    """Networks the project deploys to."""
    return [
        NetworkConfig.declare(
            name='matic',
            chain_id=137,
            rpc_endpoint_env_var='MATIC_ENDPOINT_FINAL',
            secret_env_var='MATIC_DEPLOYER_FINAL',
            timeout_blocks=200,
            skip_dry_run=False,
            gas_limit=7_000_000,
            gas_price='200',
        ),
        NetworkConfig.declare(
            name='mumbai',
            chain_id=80001,
            rpc_endpoint_env_var='MUMBAI_ENDPOINT',
            secret_env_var='MUMBAI_DEPLOYER',
            timeout_blocks=200,
            skip_dry_run=True,
            gas_limit=7_000_000,
            gas_price='100',
        ),
    ]


@dataclass(frozen=True)
class Configuration:
    """Read-only configuration consumed by the build and deploy tooling."""
    
    networks: Mapping[str, NetworkConfig]
    build_output_directory: str = DEFAULT_BUILD_DIRECTORY
    compiler: CompilerSettings = field(default_factory=CompilerSettings)
    test_runner_options: MochaOptions = field(default_factory=MochaOptions)
    plugins: Tuple[str, ...] = DEFAULT_PLUGINS
    api_keys: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    
    @classmethod
    def build(
        cls,
        networks: Iterable[NetworkConfig],
        **kwargs
    ) -> 'Configuration':
        """Create a configuration, validating network invariants."""
        by_name: Dict[str, NetworkConfig] = {}
        chain_ids: Dict[int, str] = {}
        
        for network in networks:
            if network.name in by_name:
                raise InvalidConfiguration(f"Duplicate network name '{network.name}'")
            if network.chain_id in chain_ids:
                raise InvalidConfiguration(
                    f"Chain id {network.chain_id} is used by both "
                    f"'{chain_ids[network.chain_id]}' and '{network.name}'"
                )
            if network.gas_limit <= 0:
                raise InvalidConfiguration(f"Gas limit for '{network.name}' must be positive")
            if network.timeout_blocks <= 0:
                raise InvalidConfiguration(f"Timeout blocks for '{network.name}' must be positive")
            by_name[network.name] = network
            chain_ids[network.chain_id] = network.name
        
        if 'plugins' in kwargs:
            kwargs['plugins'] = tuple(kwargs['plugins'])
        if 'api_keys' in kwargs:
            kwargs['api_keys'] = MappingProxyType(dict(kwargs['api_keys']))
        
        return cls(networks=MappingProxyType(by_name), **kwargs)
    
    @classmethod
    def default(cls, build_output_directory: str = DEFAULT_BUILD_DIRECTORY) -> 'Configuration':
        """The project's declared configuration."""
        return cls.build(default_networks(), build_output_directory=build_output_directory)
    
    @property
    def network_names(self) -> List[str]:
        return list(self.networks.keys())
    
    def get_network(self, name: str) -> NetworkConfig:
        """Get a declared network by name."""
        try:
            return self.networks[name]
        except KeyError:
            raise UnknownNetwork(name, self.network_names)
    
    def to_dict(self) -> dict:
        """Convert configuration to the dictionary shape the build tool expects."""
        return {
            'contracts_build_directory': self.build_output_directory,
            'networks': {name: n.to_dict() for name, n in self.networks.items()},
            'mocha': self.test_runner_options.to_dict(),
            'compilers': {'solc': self.compiler.to_dict()},
            'plugins': list(self.plugins),
            'api_keys': dict(self.api_keys),
        }
