"""
Ether denomination conversions.
"""

from decimal import Decimal, InvalidOperation
from typing import Union

UNITS = {
    'wei': 1,
    'kwei': 10 ** 3,
    'mwei': 10 ** 6,
    'gwei': 10 ** 9,
    'szabo': 10 ** 12,
    'finney': 10 ** 15,
    'ether': 10 ** 18,
}

Amount = Union[int, str, Decimal]


def _unit_factor(unit: str) -> int:
    try:
        return UNITS[unit.lower()]
    except KeyError:
        raise ValueError(f"Unknown denomination '{unit}'. Expected one of: {', '.join(UNITS)}")


def to_wei(amount: Amount, unit: str) -> int:
    """
    Convert an amount expressed in a human denomination to wei.
    
    Args:
        amount: Amount as int, decimal string or Decimal (floats are rejected)
        unit: Denomination name, e.g. 'gwei'
        
    Returns:
        Integer amount in wei
    """
    if isinstance(amount, float):
        raise TypeError("Floats are ambiguous for currency amounts; pass a string or Decimal")
    
    try:
        value = Decimal(amount)
    except (InvalidOperation, TypeError):
        raise ValueError(f"Invalid amount: {amount!r}")
    
    if not value.is_finite():
        raise ValueError(f"Invalid amount: {amount!r}")
    if value < 0:
        raise ValueError(f"Amount cannot be negative: {amount!r}")
    
    wei = value * _unit_factor(unit)
    if wei != wei.to_integral_value():
        raise ValueError(f"{amount} {unit} is not a whole number of wei")
    
    return int(wei)


def from_wei(wei: int, unit: str) -> Decimal:
    """Convert an integer wei amount to the given denomination."""
    if wei < 0:
        raise ValueError(f"Amount cannot be negative: {wei!r}")
    return Decimal(wei) / _unit_factor(unit)
