"""
Data models exchanged with the Shishutsukan server.
"""

from .models import (
    ApiMessage,
    Expense,
    ExpenseWithId,
    Genre,
    GenreWithId,
    parse_list,
)

__all__ = [
    "ApiMessage",
    "Expense",
    "ExpenseWithId",
    "Genre",
    "GenreWithId",
    "parse_list",
]
