"""
Console formatter for deployment configuration with rich formatting.
"""

from typing import Dict, List, Optional
from urllib.parse import urlsplit

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..models.configuration import Configuration
from ..models.network import WalletProvider
from ..services.contract_size import MAX_CONTRACT_SIZE, ContractSize


class ConsoleFormatter:
    """Formats configuration data for console output. Secret values are never printed."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def format_configuration(self, configuration: Configuration) -> None:
        """Format and print the configuration summary to console."""

        general_table = Table(show_header=False, box=None, padding=(0, 1))
        general_table.add_column("Setting", style="bold cyan")
        general_table.add_column("Value", style="bold white")

        compiler = configuration.compiler
        general_table.add_row("📁 Build Directory", configuration.build_output_directory)
        general_table.add_row("🛠️ Compiler", f"solc {compiler.version}")
        general_table.add_row(
            "⚙️ Optimizer",
            f"{'enabled' if compiler.optimizer_enabled else 'disabled'} ({compiler.optimizer_runs} runs)"
        )
        general_table.add_row(
            "⏱️ Test Timeouts",
            "enabled" if configuration.test_runner_options.enable_timeouts else "disabled"
        )
        general_table.add_row("🧩 Plugins", ", ".join(configuration.plugins) or "none")

        networks_table = Table(title="🌐 Networks")
        networks_table.add_column("Network", style="bold")
        networks_table.add_column("Chain ID", justify="right")
        networks_table.add_column("Timeout", justify="right")
        networks_table.add_column("Dry Run")
        networks_table.add_column("Gas Limit", justify="right")
        networks_table.add_column("Gas Price", justify="right")
        networks_table.add_column("Endpoint Var", style="dim")
        networks_table.add_column("Secret Var", style="dim")

        for network in configuration.networks.values():
            networks_table.add_row(
                network.name,
                str(network.chain_id),
                f"{network.timeout_blocks} blocks",
                "skip" if network.skip_dry_run else "run",
                f"{network.gas_limit:,}",
                f"{network.gas_price_gwei:,} gwei",
                network.rpc_endpoint_env_var,
                network.secret_env_var
            )

        self.console.print(Panel(general_table, title="📊 Deployment Configuration"))
        self.console.print(networks_table)

    def format_provider(
        self,
        provider: WalletProvider,
        probed_chain_id: Optional[int] = None,
        verification_keys: Optional[Dict[str, bool]] = None
    ) -> None:
        """Print a resolved provider. The endpoint may carry an API key, so only its host is shown."""
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Field", style="bold cyan")
        table.add_column("Value", style="bold white")

        table.add_row("🌐 Network", provider.network)
        table.add_row("🔗 Chain ID", str(provider.chain_id))
        table.add_row("📡 Endpoint", _endpoint_host(provider.endpoint))
        table.add_row("🔑 Secret", str(provider.secret))
        if probed_chain_id is not None:
            table.add_row("✅ Endpoint Chain ID", str(probed_chain_id))
        for service, is_set in (verification_keys or {}).items():
            table.add_row(f"🔎 {service} API Key", "set" if is_set else "unset")

        self.console.print(Panel(table, title="🔐 Wallet Provider"))

    def format_solc_arguments(self, version: str, arguments: List[str]) -> None:
        self.console.print(f"[bold cyan]solc {version}[/bold cyan] {' '.join(arguments)}")

    def format_standard_json(self, document: dict) -> None:
        self.console.print_json(data=document)

    def format_contract_sizes(self, sizes: List[ContractSize]) -> None:
        """Format and print contract sizes to console."""

        if not sizes:
            self.console.print(Panel("❌ No compiled contracts found.", title="📦 Contract Sizes"))
            return

        size_table = Table(title="📦 Contract Sizes")
        size_table.add_column("Contract", style="bold")
        size_table.add_column("Size", justify="right")
        size_table.add_column("Bytes", justify="right", style="dim")
        size_table.add_column("Limit", justify="right")

        for size in sizes:
            style = "bold red" if size.exceeds_limit else ("yellow" if size.limit_percentage > 90 else None)
            size_table.add_row(
                size.name,
                f"{size.size_kib:.2f} KiB",
                f"{size.size_bytes:,}",
                f"{size.limit_percentage:.1f}%",
                style=style
            )

        self.console.print(size_table)

        oversized = [s for s in sizes if s.exceeds_limit]
        if oversized:
            self.console.print(
                f"⚠️ [bold red]{len(oversized)} contract(s) exceed the {MAX_CONTRACT_SIZE:,} byte limit[/bold red]"
            )


def _endpoint_host(endpoint: str) -> str:
    parts = urlsplit(endpoint)
    if parts.scheme and parts.hostname:
        return f"{parts.scheme}://{parts.hostname}"
    return "(unparsed endpoint)"
