"""
Tokens component - dot-path lookup into the resolved token tree.

``colors.light.primary`` walks one key per segment. A missing segment is
an ordinary result, never an exception.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import TokenLookupInput, TokenLookupResult


def lookup_token(tokens: Mapping[str, Any], path: str) -> TokenLookupResult:
    """Resolve a dot path such as ``typography.scale.h1.size``."""
    segments = [segment for segment in path.strip().split(".") if segment]
    available = list(tokens.keys())

    if not segments:
        return TokenLookupResult(path=path, found=False, available_keys=available)

    node: Any = tokens
    for segment in segments:
        if not isinstance(node, Mapping) or segment not in node:
            return TokenLookupResult(
                path=path,
                found=False,
                missing_segment=segment,
                available_keys=available,
            )
        node = node[segment]

    return TokenLookupResult(path=path, found=True, value=node)


def run(inp: TokenLookupInput) -> TokenLookupResult:
    """Main entry point for the tokens component."""
    return lookup_token(inp.tokens, inp.path)
