"""
Exception types raised while loading and using the deployment configuration.
"""

from typing import Optional


class DeployConfigError(Exception):
    """Base class for all deployment configuration errors."""


class MissingConfiguration(DeployConfigError):
    """A required environment variable for the selected network is absent or empty."""

    def __init__(self, network: str, variable: str, reason: str = "not set"):
        self.network = network
        self.variable = variable
        self.reason = reason
        # Only the variable name is ever reported, never its value
        super().__init__(
            f"Network '{network}' requires environment variable {variable} ({reason})"
        )


class MissingSecret(MissingConfiguration):
    """The signing secret (mnemonic or private key) for a network is missing."""


class UnknownNetwork(DeployConfigError):
    """The requested network is not declared in the configuration."""

    def __init__(self, network: str, available: Optional[list] = None):
        self.network = network
        self.available = list(available or [])
        choices = ", ".join(self.available) if self.available else "none"
        super().__init__(f"Unknown network '{network}' (declared: {choices})")


class InvalidConfiguration(DeployConfigError):
    """The declared configuration breaks one of its invariants."""


class ChainIdMismatch(DeployConfigError):
    """The RPC endpoint reports a different chain id than the network declares."""

    def __init__(self, network: str, expected: int, actual: int):
        self.network = network
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Endpoint for '{network}' reports chain id {actual}, expected {expected}"
        )


class ArtifactError(DeployConfigError):
    """Compiled contract artifacts could not be read."""
