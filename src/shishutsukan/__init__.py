"""
Shishutsukan expense API client.

Typed access to a Shishutsukan server: add, list and delete expenses and
genres (expense categories) over HTTP+JSON.
"""

from .client import ShishutsukanClient
from .errors import (
    DecodingError,
    HttpStatusError,
    InvalidUrlError,
    NetworkError,
    ServerError,
    ShishutsukanError,
)
from .schemas import ApiMessage, Expense, ExpenseWithId, Genre, GenreWithId

__version__ = "0.1.0"

__all__ = [
    "ShishutsukanClient",
    "ApiMessage",
    "Expense",
    "ExpenseWithId",
    "Genre",
    "GenreWithId",
    "ShishutsukanError",
    "InvalidUrlError",
    "HttpStatusError",
    "NetworkError",
    "DecodingError",
    "ServerError",
]
