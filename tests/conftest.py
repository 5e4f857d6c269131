"""Shared pytest fixtures for the deploy_config test suite."""

from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console

MATIC_MNEMONIC = "test test test test test test test test test test test junk"
MUMBAI_MNEMONIC = "candy maple cake sugar pudding cream honey rich smooth crumble sweet treat"


@pytest.fixture
def full_env() -> dict[str, str]:
    """Environment with every declared network's variables set."""
    return {
        "MATIC_DEPLOYER_FINAL": MATIC_MNEMONIC,
        "MATIC_ENDPOINT_FINAL": "https://polygon-rpc.example.org/v1/matic-key-123",
        "MUMBAI_DEPLOYER": MUMBAI_MNEMONIC,
        "MUMBAI_ENDPOINT": "https://mumbai-rpc.example.org/v1/mumbai-key-456",
    }


@pytest.fixture
def missing_env_file(tmp_path) -> str:
    """Path to an .env file that does not exist."""
    return str(tmp_path / "absent.env")


@pytest.fixture
def recording_console() -> Console:
    """Rich console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after the test reconfigures it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
