"""
Tokens component - dot-path lookup.
"""

from .component import lookup_token, run
from .models import TokenLookupInput, TokenLookupResult

__all__ = [
    "run",
    "lookup_token",
    "TokenLookupInput",
    "TokenLookupResult",
]
