"""
Environment configuration validation and setup.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from dotenv import dotenv_values
from rich.console import Console

from .loader import ConfigurationLoader

PLACEHOLDER_PATTERNS = ('your_', 'YOUR_', 'example_', 'EXAMPLE_')


class EnvironmentConfig:
    """Checks the .env file and environment for the declared networks."""

    def __init__(
        self,
        loader: ConfigurationLoader,
        env_file: str = ".env",
        environ: Optional[Mapping[str, str]] = None,
        console: Optional[Console] = None
    ):
        self.loader = loader
        self.configuration = loader.load()
        self.env_file = Path(env_file)
        self.environ = os.environ if environ is None else environ
        self.console = console or Console()

    def required_vars(self, network_name: str) -> List[str]:
        return list(self.configuration.get_network(network_name).required_env_vars)

    def check_env_file(self, network_name: str) -> bool:
        """
        Check the .env file for placeholder values of the network's variables.

        A placeholder is ignored when the process environment supplies the
        variable, since the environment takes precedence over the file.
        """
        if not self.env_file.exists():
            self.console.print(
                f"⚠️ [bold yellow]{self.env_file} not found, using system environment variables[/bold yellow]"
            )
            return True

        file_values = dotenv_values(self.env_file)
        for var in self.required_vars(network_name):
            if (self.environ.get(var) or '').strip():
                continue
            value = file_values.get(var) or ''
            for pattern in PLACEHOLDER_PATTERNS:
                if value.startswith(pattern):
                    self.console.print(f"❌ [bold red]{var} contains placeholder value[/bold red]")
                    return False

        self.console.print(f"✅ [bold green]{self.env_file} validated successfully[/bold green]")
        return True

    def validate_network(self, network_name: str) -> bool:
        """Validate that the selected network's variables are present."""
        missing_vars = self.loader.missing_variables(network_name)

        if missing_vars:
            self.console.print(
                f"❌ [bold red]Missing environment variables for '{network_name}':[/bold red]"
            )
            for var in missing_vars:
                self.console.print(f"  • {var}")
            self.console.print(f"\n📝 Please set them in {self.env_file} or the environment")
            return False

        self.console.print(f"✅ [bold green]Environment variables for '{network_name}' are set[/bold green]")
        return True

    def get_environment_info(self) -> Dict[str, Any]:
        """Get current environment information. Values are reported as set/unset only."""
        variables = {}
        for name, network in self.configuration.networks.items():
            missing = self.loader.missing_variables(name)
            for var in network.required_env_vars:
                variables[var] = var not in missing

        return {
            'python_version': sys.version,
            'platform': sys.platform,
            'working_directory': os.getcwd(),
            'env_file': str(self.env_file),
            'env_file_exists': self.env_file.exists(),
            'variables': variables,
        }

    def print_environment_summary(self) -> None:
        """Print environment configuration summary."""
        info = self.get_environment_info()

        self.console.print("\n📊 [bold blue]Environment Summary[/bold blue]")
        self.console.print(f"• Python Version: {info['python_version'].split()[0]}")
        self.console.print(f"• Platform: {info['platform']}")
        self.console.print(f"• Working Directory: {info['working_directory']}")
        self.console.print(
            f"• Environment File: {'✅ Found' if info['env_file_exists'] else '❌ Missing'} ({info['env_file']})"
        )
        for var, is_set in info['variables'].items():
            self.console.print(f"• {var}: {'set' if is_set else 'unset'}")

    def validate_all(self, network_name: str, show_summary: bool = False) -> bool:
        """Validate environment setup for one network."""
        self.console.print(f"🔍 [bold cyan]Validating environment for '{network_name}'[/bold cyan]")

        if not self.check_env_file(network_name):
            return False

        if not self.validate_network(network_name):
            return False

        if show_summary:
            self.print_environment_summary()
        return True
