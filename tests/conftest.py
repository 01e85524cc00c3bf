"""Test fixtures and utilities."""

from collections.abc import Iterator

import pytest

from shishutsukan import ShishutsukanClient

BASE_URL = "http://shishutsukan.test:8000"


@pytest.fixture
def client() -> Iterator[ShishutsukanClient]:
    """Client pointed at the mocked server."""
    with ShishutsukanClient(BASE_URL) as c:
        yield c


@pytest.fixture
def sample_expenses() -> list[dict]:
    """Sample GET /expenses response body."""
    return [
        {"id": 1, "date": "2025-01-15", "genre": "食費", "amount": 1000},
        {"id": 2, "date": "2025-01-20", "genre": "交通費", "amount": 500},
    ]


@pytest.fixture
def sample_genres() -> list[dict]:
    """Sample GET /genres response body."""
    return [
        {"id": 1, "name": "食費", "created_at": "2025-01-01 00:00:00"},
        {"id": 7, "name": "娯楽費", "created_at": "2025-01-10 12:34:56"},
    ]
