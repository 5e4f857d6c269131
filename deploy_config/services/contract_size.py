"""
Contract size reporting for compiled artifacts.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..errors import ArtifactError

# EIP-170 deployed bytecode limit
MAX_CONTRACT_SIZE = 24576


@dataclass
class ContractSize:
    """Deployed bytecode size of one compiled contract."""

    name: str
    size_bytes: int

    @property
    def size_kib(self) -> float:
        return self.size_bytes / 1024

    @property
    def exceeds_limit(self) -> bool:
        return self.size_bytes > MAX_CONTRACT_SIZE

    @property
    def limit_percentage(self) -> float:
        return (self.size_bytes / MAX_CONTRACT_SIZE) * 100

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'size_bytes': self.size_bytes,
            'size_kib': self.size_kib,
            'exceeds_limit': self.exceeds_limit,
        }


def bytecode_size(bytecode: Optional[str]) -> int:
    """Size in bytes of a hex-encoded bytecode string."""
    if not bytecode:
        return 0
    if bytecode.startswith(('0x', '0X')):
        bytecode = bytecode[2:]
    # Unlinked library placeholders are 40 hex chars, same width as an address
    return len(bytecode) // 2


class ContractSizeService:
    """Reads build artifacts and reports deployed contract sizes."""

    def __init__(self, build_directory: str):
        self.build_directory = Path(build_directory)
        self.logger = logging.getLogger(__name__)

    def _read_artifact(self, path: Path) -> Optional[ContractSize]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                artifact = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.warning(f"Skipping unreadable artifact {path.name}: {e}")
            return None

        if not isinstance(artifact, dict):
            self.logger.warning(f"Skipping artifact {path.name}: not a JSON object")
            return None

        deployed = artifact.get('deployedBytecode')
        if isinstance(deployed, dict):
            deployed = deployed.get('object')

        name = artifact.get('contractName') or path.stem
        return ContractSize(name=name, size_bytes=bytecode_size(deployed))

    def collect(self, include_empty: bool = False) -> List[ContractSize]:
        """
        Collect sizes for every artifact in the build directory.

        Interfaces and abstract contracts have no deployed bytecode and are
        skipped unless ``include_empty`` is set.

        Returns:
            Contract sizes, largest first
        """
        if not self.build_directory.is_dir():
            raise ArtifactError(f"Build directory not found: {self.build_directory}")

        sizes = []
        for path in sorted(self.build_directory.glob('*.json')):
            size = self._read_artifact(path)
            if size is None:
                continue
            if size.size_bytes == 0 and not include_empty:
                continue
            sizes.append(size)

        oversized = [s.name for s in sizes if s.exceeds_limit]
        if oversized:
            self.logger.warning(f"Contracts over the {MAX_CONTRACT_SIZE} byte limit: {', '.join(oversized)}")

        self.logger.info(f"Measured {len(sizes)} contracts in {self.build_directory}")
        return sorted(sizes, key=lambda s: s.size_bytes, reverse=True)
