"""
Compiler and test runner settings.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CompilerSettings:
    """Represents the solc version and optimizer configuration."""
    
    version: str = '0.8.14'
    optimizer_enabled: bool = True
    optimizer_runs: int = 20000
    
    def __post_init__(self):
        parts = self.version.split('.')
        if len(parts) != 3 or not all(p.isdigit() for p in parts):
            raise ValueError(f"Compiler version must be MAJOR.MINOR.PATCH, got '{self.version}'")
        if self.optimizer_runs < 0:
            raise ValueError("Optimizer runs cannot be negative")
    
    def to_dict(self) -> dict:
        return {
            'version': self.version,
            'settings': {
                'optimizer': {
                    'enabled': self.optimizer_enabled,
                    'runs': self.optimizer_runs,
                },
            },
        }


@dataclass(frozen=True)
class MochaOptions:
    """Options passed to the mocha contract test runner."""
    
    enable_timeouts: bool = False
    
    def to_dict(self) -> dict:
        return {'enableTimeouts': self.enable_timeouts}
