"""
Logging configuration for the deployment configuration tool.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Iterable, List, Optional

from rich.console import Console
from rich.logging import RichHandler

from ..models.secret import MASK, Secret


class SecretRedactingFilter(logging.Filter):
    """Replaces registered secret values in log records with a mask."""

    def __init__(self, secrets: Optional[Iterable[str]] = None):
        super().__init__()
        self._secrets: List[str] = []
        for secret in secrets or []:
            self.register(secret)

    def register(self, secret) -> None:
        """Register a value (or Secret) that must never appear in log output."""
        value = secret.reveal() if isinstance(secret, Secret) else secret
        if value and value not in self._secrets:
            self._secrets.append(value)
            # Longest first so overlapping values are fully masked
            self._secrets.sort(key=len, reverse=True)

    def redact(self, text: str) -> str:
        for value in self._secrets:
            text = text.replace(value, MASK)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        if self._secrets:
            record.msg = self.redact(record.getMessage())
            record.args = None
        return True


_redacting_filter = SecretRedactingFilter()


def get_redacting_filter() -> SecretRedactingFilter:
    """Get the process-wide redacting filter attached by setup_logging."""
    return _redacting_filter


def setup_logging(
    log_level: str = "INFO",
    log_directory: str = "logs",
    console: Optional[Console] = None
) -> None:
    """
    Setup logging configuration.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_directory: Directory to store log files
        console: Rich console used for terminal output
    """

    # Create log directory if it doesn't exist
    log_dir = Path(log_directory)
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "deploy_config.log"

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # File handler with rotation (10MB max, keep 5 backups)
    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(detailed_formatter)
    file_handler.addFilter(_redacting_filter)

    console_handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    console_handler.addFilter(_redacting_filter)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Clear any existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # Set specific logger levels
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('requests').setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging initialized - Level: {log_level}, File: {log_file}")
