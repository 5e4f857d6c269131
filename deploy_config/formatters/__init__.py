"""
Output formatters.
"""

from .console_formatter import ConsoleFormatter

__all__ = ['ConsoleFormatter']
