"""
Compiler invocation parameters.
"""

from typing import Dict, List, Optional

from ..models.compiler import CompilerSettings


class CompilerService:
    """Hands the configured solc version and optimizer settings to the toolchain."""

    def __init__(self, settings: CompilerSettings, output_directory: str):
        self.settings = settings
        self.output_directory = output_directory

    def solc_settings(self) -> dict:
        """The ``settings`` block of a solc standard-JSON input."""
        return {
            'optimizer': {
                'enabled': self.settings.optimizer_enabled,
                'runs': self.settings.optimizer_runs,
            },
            'outputSelection': {
                '*': {
                    '*': ['abi', 'evm.bytecode', 'evm.deployedBytecode'],
                },
            },
        }

    def standard_json_input(self, sources: Dict[str, str]) -> dict:
        """
        Build a solc standard-JSON input document.

        Args:
            sources: Mapping of source unit name to Solidity source text
        """
        return {
            'language': 'Solidity',
            'sources': {name: {'content': content} for name, content in sources.items()},
            'settings': self.solc_settings(),
        }

    def solc_arguments(self, source_files: Optional[List[str]] = None) -> List[str]:
        """Command-line arguments for a ``solc`` binary of the configured version."""
        args = []
        if self.settings.optimizer_enabled:
            args += ['--optimize', '--optimize-runs', str(self.settings.optimizer_runs)]
        args += [
            '--combined-json', 'abi,bin,bin-runtime',
            '--output-dir', self.output_directory,
            '--overwrite',
        ]
        args += list(source_files or [])
        return args

    @property
    def version(self) -> str:
        return self.settings.version
