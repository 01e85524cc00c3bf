"""
CLI runner module.

Provides commands:
- expenses: list/add/delete expenses
- genres: list/add/delete genres
- init-config: write a default config file
"""

from .main import create_cli, main

__all__ = [
    "create_cli",
    "main",
]
