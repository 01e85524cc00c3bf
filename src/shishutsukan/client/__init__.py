"""
Shishutsukan API Client.

Provides:
- Add/list/delete expenses (POST/GET /expenses, DELETE /expenses/{id})
- Add/list/delete genres (POST/GET /genres, DELETE /genres/{id})

Errors in the response body are raised even when the HTTP status is 200.
"""

from .client import ShishutsukanClient

__all__ = [
    "ShishutsukanClient",
]
