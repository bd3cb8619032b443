from __future__ import annotations

from typing import Iterable


class CollectionException(Exception):
    """Base exception for the collection toolkit"""
    pass


class OutOfRangeException(CollectionException, ValueError):
    """Exception raised when more items are requested than are available"""
    
    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        
        super().__init__(
            f"You requested {requested} items, but there are only "
            f"{available} items available."
        )


class InvalidOperatorException(CollectionException, ValueError):
    """Exception raised when an unknown comparison operator is used"""
    
    def __init__(self, operator: str, allowed_operators: Iterable[str]) -> None:
        self.operator = operator
        self.allowed_operators = list(allowed_operators)
        
        allowed_str = ", ".join(self.allowed_operators)
        
        super().__init__(
            f"Operator `{operator}` is not supported. "
            f"Allowed operator(s) are `{allowed_str}`."
        )
