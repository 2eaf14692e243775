"""psi Language Server package.

This package provides:
- A pygls-based Language Server for psi.
- A lightweight indexer that checks each line the way the REPL would, without evaluation.
"""

__all__ = [
    "server",
    "indexer",
]
