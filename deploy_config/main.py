"""
Main application entry point for the deployment configuration tool.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Mapping, Optional

from rich.console import Console

from .config.environment import EnvironmentConfig
from .config.loader import ConfigurationLoader
from .config.logging_config import setup_logging
from .config.settings import Settings
from .errors import ArtifactError, DeployConfigError, MissingConfiguration
from .formatters.console_formatter import ConsoleFormatter
from .models.configuration import Configuration
from .services.compiler_service import CompilerService
from .services.contract_size import ContractSizeService
from .services.wallet_provider import WalletProviderService


class DeployConfigApp:
    """Main application class for inspecting and checking the deployment configuration."""

    def __init__(
        self,
        settings: Settings,
        environ: Optional[Mapping[str, str]] = None,
        console: Optional[Console] = None,
        configuration: Optional[Configuration] = None
    ):
        self.settings = settings
        self.environ = os.environ if environ is None else environ
        self.console = console or Console()
        self.formatter = ConsoleFormatter(self.console)
        self.logger = logging.getLogger(__name__)
        self.loader = ConfigurationLoader(
            environ=self.environ,
            env_file=settings.env_file,
            configuration=configuration
        )
        self.configuration: Configuration = self.loader.load(settings.build_directory)

    def show(self) -> int:
        """Print the configuration without resolving any secrets."""
        self.formatter.format_configuration(self.configuration)
        return 0

    def check(self, network_name: str, probe: bool = False, summary: bool = False) -> int:
        """Resolve the selected network's provider, optionally probing its endpoint."""
        env_config = EnvironmentConfig(
            self.loader,
            env_file=self.settings.env_file,
            environ=self.environ,
            console=self.console
        )
        if not env_config.validate_all(network_name, show_summary=summary):
            return 1

        try:
            provider = self.loader.provider_for(network_name)
        except MissingConfiguration as e:
            self.logger.error(f"❌ {e}")
            return 1

        probed_chain_id = None
        if probe:
            service = WalletProviderService(timeout=self.settings.rpc_timeout)
            try:
                probed_chain_id = service.verify_chain_id(provider)
            except DeployConfigError as e:
                self.logger.error(f"❌ {e}")
                return 1
            finally:
                service.close()

        verification_keys = {
            service: self.loader.api_key(service) is not None
            for service in self.configuration.api_keys
        }

        self.formatter.format_provider(provider, probed_chain_id, verification_keys)
        self.logger.info(f"✅ Network '{network_name}' is ready for deployment")
        return 0

    def compile_args(self, source_files: Optional[List[str]] = None, as_json: bool = False) -> int:
        """Print the solc invocation, or a standard-JSON input document for the given sources."""
        compiler = CompilerService(self.configuration.compiler, self.configuration.build_output_directory)
        source_files = list(source_files or [])

        if not as_json:
            self.formatter.format_solc_arguments(compiler.version, compiler.solc_arguments(source_files))
            return 0

        sources = {}
        for source_file in source_files:
            try:
                sources[source_file] = Path(source_file).read_text(encoding='utf-8')
            except OSError as e:
                raise ArtifactError(f"Cannot read source {source_file}: {e.strerror}") from e

        self.formatter.format_standard_json(compiler.standard_json_input(sources))
        return 0

    def sizes(self, build_directory: Optional[str] = None) -> int:
        """Report deployed bytecode sizes, failing if any contract is over the limit."""
        if 'truffle-contract-size' not in self.configuration.plugins:
            self.logger.warning("Contract size plugin is not enabled in this configuration")
            return 1

        service = ContractSizeService(build_directory or self.configuration.build_output_directory)
        sizes = service.collect()
        self.formatter.format_contract_sizes(sizes)
        return 1 if any(s.exceeds_limit for s in sizes) else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Smart-contract deployment configuration")
    parser.add_argument('--env-file', help='Path to the .env file (default: ENV_FILE or .env)')
    parser.add_argument('--log-level', help='Logging level (default: LOG_LEVEL or INFO)')

    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('show', help='Show the configuration')

    check_parser = subparsers.add_parser('check', help='Check a network is ready for deployment')
    check_parser.add_argument('--network', required=True, help='Network to check')
    check_parser.add_argument('--probe', action='store_true', help='Query the endpoint for its chain id')
    check_parser.add_argument('--summary', action='store_true', help='Print the environment summary')

    compile_parser = subparsers.add_parser('compile-args', help='Print solc arguments')
    compile_parser.add_argument('sources', nargs='*', help='Solidity source files')
    compile_parser.add_argument('--json', action='store_true', help='Print a solc standard-JSON input instead')

    sizes_parser = subparsers.add_parser('sizes', help='Report compiled contract sizes')
    sizes_parser.add_argument('--build-dir', help='Artifact directory (default: configured build directory)')

    return parser


def main(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    if environ is None:
        environ = os.environ

    try:
        settings = Settings.from_env(environ)
        if args.env_file:
            settings.env_file = args.env_file
        if args.log_level:
            settings.log_level = args.log_level
        settings.validate()
    except ValueError as e:
        print(f"❌ Invalid settings: {e}", file=sys.stderr)
        return 2

    console = Console()
    setup_logging(settings.log_level, settings.log_directory, console=console)
    logger = logging.getLogger(__name__)

    try:
        app = DeployConfigApp(settings, environ=environ, console=console)

        if args.command == 'show':
            return app.show()
        if args.command == 'check':
            return app.check(args.network, probe=args.probe, summary=args.summary)
        if args.command == 'compile-args':
            return app.compile_args(args.sources, as_json=args.json)
        if args.command == 'sizes':
            return app.sizes(args.build_dir)
    except DeployConfigError as e:
        logger.error(f"❌ {e}")
        return 1

    return 2


if __name__ == "__main__":
    sys.exit(main())
