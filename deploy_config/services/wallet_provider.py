"""
RPC service for checking a wallet provider's endpoint.
"""

import logging
from typing import Any, Optional

import requests

from ..errors import ChainIdMismatch, DeployConfigError
from ..models.network import WalletProvider


class WalletProviderService:
    """Talks JSON-RPC to a provider's endpoint. Never signs or broadcasts."""

    def __init__(self, timeout: int = 30, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)
        self.session = session or requests.Session()
        self._request_id = 0

    def _rpc_call(self, provider: WalletProvider, method: str, params: Optional[list] = None) -> Any:
        """Make a JSON-RPC request to the provider's endpoint."""
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params or [],
            "id": self._request_id
        }

        try:
            self.logger.debug(f"RPC request to '{provider.network}': {method}")
            response = self.session.post(provider.endpoint, json=payload, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.JSONDecodeError as e:
            self.logger.error(f"Invalid JSON from '{provider.network}' endpoint ({type(e).__name__})")
            raise DeployConfigError(f"Invalid JSON-RPC response from '{provider.network}'") from e
        except requests.exceptions.RequestException as e:
            # Exception text quotes the request path, which may hold an API key
            self.logger.error(f"RPC request to '{provider.network}' failed ({type(e).__name__})")
            raise DeployConfigError(f"RPC request to '{provider.network}' failed ({type(e).__name__})") from e
        except ValueError as e:
            self.logger.error(f"Invalid JSON from '{provider.network}' endpoint ({type(e).__name__})")
            raise DeployConfigError(f"Invalid JSON-RPC response from '{provider.network}'") from e

        if not isinstance(data, dict):
            raise DeployConfigError(f"Unexpected JSON-RPC response from '{provider.network}'")
        if 'error' in data:
            error = data['error'] or {}
            message = error.get('message', 'unknown error') if isinstance(error, dict) else str(error)
            raise DeployConfigError(f"RPC error from '{provider.network}': {message}")
        if 'result' not in data:
            raise DeployConfigError(f"JSON-RPC response from '{provider.network}' has no result")

        return data['result']

    def get_chain_id(self, provider: WalletProvider) -> int:
        """Fetch the chain id reported by the endpoint."""
        result = self._rpc_call(provider, "eth_chainId")
        try:
            return int(result, 16) if isinstance(result, str) else int(result)
        except (TypeError, ValueError) as e:
            raise DeployConfigError(f"Unparseable chain id from '{provider.network}': {result!r}") from e

    def verify_chain_id(self, provider: WalletProvider) -> int:
        """
        Check the endpoint is serving the chain the provider is bound to.

        Returns:
            The chain id reported by the endpoint

        Raises:
            ChainIdMismatch: the endpoint serves another chain
            DeployConfigError: the endpoint could not be reached or parsed
        """
        self.logger.info(f"Probing endpoint for '{provider.network}'...")
        actual = self.get_chain_id(provider)

        if actual != provider.chain_id:
            self.logger.error(
                f"Chain id mismatch for '{provider.network}': expected {provider.chain_id}, got {actual}"
            )
            raise ChainIdMismatch(provider.network, provider.chain_id, actual)

        self.logger.info(f"Endpoint for '{provider.network}' serves chain id {actual}")
        return actual

    def close(self) -> None:
        """Close the session."""
        self.session.close()
        self.logger.debug("RPC session closed")
