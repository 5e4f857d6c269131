"""
Application settings and configuration management.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass
class Settings:
    """Runtime settings for the configuration tool itself."""

    # Environment file
    env_file: str = ".env"

    # Build Configuration
    build_directory: Optional[str] = None

    # RPC Configuration
    rpc_timeout: int = 30

    # Logging Configuration
    log_level: str = "INFO"
    log_directory: str = "logs"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Create settings from environment variables."""
        if environ is None:
            environ = os.environ

        rpc_timeout_str = environ.get('RPC_TIMEOUT', '30')
        try:
            rpc_timeout = int(rpc_timeout_str)
        except ValueError:
            raise ValueError(f"RPC_TIMEOUT must be an integer, got '{rpc_timeout_str}'")

        settings = cls(
            env_file=environ.get('ENV_FILE', '.env'),
            build_directory=environ.get('BUILD_DIRECTORY') or None,
            rpc_timeout=rpc_timeout,
            log_level=environ.get('LOG_LEVEL', 'INFO'),
            log_directory=environ.get('LOG_DIRECTORY', 'logs')
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        """Validate configuration settings."""
        if self.rpc_timeout < 1:
            raise ValueError("RPC timeout must be at least 1 second")
        if self.log_level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"Unknown log level '{self.log_level}'")
