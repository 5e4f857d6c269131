"""
Secret value wrapper that never renders its contents.
"""

MASK = '**********'


class Secret:
    """Holds a sensitive string such as a mnemonic or private key."""
    
    __slots__ = ('_value',)
    
    def __init__(self, value: str):
        self._value = value
    
    def reveal(self) -> str:
        """Return the underlying value. Only call this at the hand-off to the signer."""
        return self._value
    
    def __bool__(self) -> bool:
        return bool(self._value)
    
    def __eq__(self, other) -> bool:
        if isinstance(other, Secret):
            return self._value == other._value
        return NotImplemented
    
    def __hash__(self) -> int:
        return hash(self._value)
    
    def __repr__(self) -> str:
        return f"Secret('{MASK}')"
    
    def __str__(self) -> str:
        return MASK
