"""
Wire models for the Shishutsukan expense API.

Field names are the exact JSON keys the server uses. Values are passed
through untouched: dates and timestamps stay strings, amounts are not
range-checked. Records are immutable; every decode produces new instances.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ..errors import DecodingError


def _require_mapping(data: Any, model: str) -> dict:
    if not isinstance(data, dict):
        raise DecodingError(f"{model}: expected JSON object, got {type(data).__name__}")
    return data


def _require_str(data: dict, key: str, model: str) -> str:
    if key not in data:
        raise DecodingError(f"{model}: missing field '{key}'")
    value = data[key]
    if not isinstance(value, str):
        raise DecodingError(f"{model}.{key}: expected string, got {type(value).__name__}")
    return value


def _require_int(data: dict, key: str, model: str) -> int:
    if key not in data:
        raise DecodingError(f"{model}: missing field '{key}'")
    value = data[key]
    # bool is an int subclass, but JSON true/false is not a number
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodingError(f"{model}.{key}: expected integer, got {type(value).__name__}")
    return value


def _optional_str(data: dict, key: str, model: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise DecodingError(f"{model}.{key}: expected string or null, got {type(value).__name__}")
    return value


def _loads(text: str | bytes, model: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as e:
        raise DecodingError(f"{model}: invalid JSON: {e}") from e


class _JsonModel(ABC):
    """Shared JSON helpers; subclasses provide to_dict/from_dict."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Convert to API JSON mapping."""

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Any):
        """Deserialize from a decoded JSON value."""

    @classmethod
    def from_json(cls, text: str | bytes):
        """Deserialize from JSON text."""
        return cls.from_dict(_loads(text, cls.__name__))


@dataclass(frozen=True)
class Expense(_JsonModel):
    """Expense to be created (no id yet)."""

    date: str  # e.g. "2025-01-15"
    genre: str  # genre name, not an id
    amount: int

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date, "genre": self.genre, "amount": self.amount}

    @classmethod
    def from_dict(cls, data: Any) -> "Expense":
        data = _require_mapping(data, "Expense")
        return cls(
            date=_require_str(data, "date", "Expense"),
            genre=_require_str(data, "genre", "Expense"),
            amount=_require_int(data, "amount", "Expense"),
        )


@dataclass(frozen=True)
class ExpenseWithId(_JsonModel):
    """Stored expense as returned by GET /expenses."""

    id: int
    date: str
    genre: str
    amount: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "genre": self.genre,
            "amount": self.amount,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "ExpenseWithId":
        data = _require_mapping(data, "ExpenseWithId")
        return cls(
            id=_require_int(data, "id", "ExpenseWithId"),
            date=_require_str(data, "date", "ExpenseWithId"),
            genre=_require_str(data, "genre", "ExpenseWithId"),
            amount=_require_int(data, "amount", "ExpenseWithId"),
        )

    def without_id(self) -> Expense:
        """Drop the server id, e.g. to re-submit the same expense."""
        return Expense(date=self.date, genre=self.genre, amount=self.amount)


@dataclass(frozen=True)
class Genre(_JsonModel):
    """Genre (expense category) to be created."""

    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}

    @classmethod
    def from_dict(cls, data: Any) -> "Genre":
        data = _require_mapping(data, "Genre")
        return cls(name=_require_str(data, "name", "Genre"))


@dataclass(frozen=True)
class GenreWithId(_JsonModel):
    """Stored genre as returned by GET /genres."""

    id: int
    name: str
    created_at: str  # server timestamp, kept verbatim

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "created_at": self.created_at}

    @classmethod
    def from_dict(cls, data: Any) -> "GenreWithId":
        data = _require_mapping(data, "GenreWithId")
        return cls(
            id=_require_int(data, "id", "GenreWithId"),
            name=_require_str(data, "name", "GenreWithId"),
            created_at=_require_str(data, "created_at", "GenreWithId"),
        )


@dataclass(frozen=True)
class ApiMessage(_JsonModel):
    """
    Response envelope for write operations.

    The server sets either "message" (success) or "error". Absent fields
    are left out of to_dict() instead of being emitted as null.
    """

    message: str | None = None
    error: str | None = None

    @property
    def is_error(self) -> bool:
        """True when the body carries an "error" field, even an empty one."""
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.message is not None:
            result["message"] = self.message
        if self.error is not None:
            result["error"] = self.error
        return result

    @classmethod
    def from_dict(cls, data: Any) -> "ApiMessage":
        data = _require_mapping(data, "ApiMessage")
        return cls(
            message=_optional_str(data, "message", "ApiMessage"),
            error=_optional_str(data, "error", "ApiMessage"),
        )


def parse_list(data: Any, model: type) -> list:
    """Decode a JSON array into a list of model instances."""
    if not isinstance(data, list):
        raise DecodingError(
            f"list of {model.__name__}: expected JSON array, got {type(data).__name__}"
        )
    return [model.from_dict(item) for item in data]
