"""
Configuration loader.

Builds the read-only ``Configuration`` once per invocation and resolves the
endpoint and signing secret for whichever network the run actually targets.
Networks that are not selected are never resolved, so their variables may be
absent.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional
from urllib.parse import urlsplit

from dotenv import dotenv_values

from ..errors import MissingConfiguration, MissingSecret
from ..models.configuration import Configuration
from ..models.network import NetworkConfig, WalletProvider
from ..models.secret import Secret
from .logging_config import get_redacting_filter


class ConfigurationLoader:
    """Loads the deployment configuration from the process environment."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        env_file: Optional[str] = None,
        configuration: Optional[Configuration] = None
    ):
        self.logger = logging.getLogger(__name__)
        self.env_file = env_file
        self._environ = self._merge_environment(environ, env_file)
        self._configuration = configuration

    def _merge_environment(
        self,
        environ: Optional[Mapping[str, str]],
        env_file: Optional[str]
    ) -> Dict[str, str]:
        """Layer the process environment over the .env file without mutating os.environ."""
        merged: Dict[str, str] = {}

        if env_file:
            path = Path(env_file)
            if path.exists():
                file_values = dotenv_values(path)
                merged.update({k: v for k, v in file_values.items() if v is not None})
                self.logger.debug(f"Read {len(file_values)} variables from {path}")
            else:
                self.logger.debug(f"No environment file at {path}, using process environment only")

        merged.update(os.environ if environ is None else environ)
        return merged

    def load(self, build_output_directory: Optional[str] = None) -> Configuration:
        """
        Build the configuration record.

        No secrets are read here, so loading never fails on missing
        network variables.
        """
        if self._configuration is None:
            if build_output_directory:
                self._configuration = Configuration.default(build_output_directory)
            else:
                self._configuration = Configuration.default()
            self.logger.debug(
                f"Configuration loaded with networks: {', '.join(self._configuration.network_names)}"
            )
        return self._configuration

    def _require(self, network: NetworkConfig, variable: str, error_cls=MissingConfiguration) -> str:
        value = self._environ.get(variable)
        if value is None:
            raise error_cls(network.name, variable, "not set")
        if not value.strip():
            raise error_cls(network.name, variable, "empty")
        return value.strip()

    def missing_variables(self, network_name: str) -> list:
        """Names of the variables the network requires that are absent or empty."""
        network = self.load().get_network(network_name)
        return [
            var for var in network.required_env_vars
            if not (self._environ.get(var) or '').strip()
        ]

    def provider_for(self, network_name: str) -> WalletProvider:
        """
        Resolve the wallet provider for the selected network.

        Args:
            network_name: Name of a declared network

        Returns:
            WalletProvider bound to the network's chain id

        Raises:
            UnknownNetwork: the network is not declared
            MissingSecret: the secret variable is absent or empty
            MissingConfiguration: the endpoint variable is absent or empty
        """
        network = self.load().get_network(network_name)

        secret = Secret(self._require(network, network.secret_env_var, MissingSecret))
        endpoint = self._require(network, network.rpc_endpoint_env_var)

        redactor = get_redacting_filter()
        redactor.register(secret)
        for fragment in _endpoint_fragments(endpoint):
            redactor.register(fragment)

        self.logger.info(
            f"Resolved provider for '{network.name}' (chain id {network.chain_id}) "
            f"from {network.rpc_endpoint_env_var} / {network.secret_env_var}"
        )
        return WalletProvider(
            network=network.name,
            chain_id=network.chain_id,
            endpoint=endpoint,
            secret=secret
        )

    def api_key(self, service: str) -> Optional[Secret]:
        """Resolve a verification API key by explorer service name, if configured."""
        variable = self.load().api_keys.get(service)
        if not variable:
            return None
        value = (self._environ.get(variable) or '').strip()
        if not value:
            return None
        get_redacting_filter().register(value)
        return Secret(value)


def _endpoint_fragments(endpoint: str) -> List[str]:
    """
    The endpoint and the parts of it that may carry an API key.

    HTTP client errors quote the path and query without the host, so those
    are masked on their own as well as inside the full URL.
    """
    fragments = [endpoint]
    parts = urlsplit(endpoint)
    if parts.password:
        fragments.append(parts.password)
    if parts.path and parts.path != '/':
        fragments.append(parts.path)
    if parts.query:
        fragments.append(parts.query)
    return fragments
