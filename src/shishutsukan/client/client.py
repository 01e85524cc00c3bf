"""
Shishutsukan API client implementation.
"""

import logging
from typing import Any
from urllib.parse import urlparse

import requests

from ..config import ClientConfig
from ..errors import (
    DecodingError,
    HttpStatusError,
    InvalidUrlError,
    NetworkError,
    ServerError,
)
from ..schemas.models import (
    ApiMessage,
    Expense,
    ExpenseWithId,
    Genre,
    GenreWithId,
    parse_list,
)

logger = logging.getLogger(__name__)


class ShishutsukanClient:
    """
    Client for the Shishutsukan expense API.

    Features:
    - Add, list and delete expenses
    - Add, list and delete genres
    - Server-reported errors raised even on HTTP 200

    No retries and no client-side timeout: a failed call raises
    immediately, and timeouts are whatever the session does unless
    `timeout` is given.
    """

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize Shishutsukan client.

        Args:
            base_url: Server URL (e.g., "http://localhost:8000")
            session: Existing requests session to send requests through
            timeout: Per-request timeout in seconds, None for no timeout

        Raises:
            InvalidUrlError: If base_url is not an absolute http(s) URL
        """
        parsed = urlparse(base_url)
        if parsed.scheme not in ("http", "https"):
            raise InvalidUrlError(base_url, "scheme must be http or https")
        if not parsed.netloc:
            raise InvalidUrlError(base_url, "host is missing")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    @classmethod
    def with_session(cls, base_url: str, session: requests.Session) -> "ShishutsukanClient":
        """Create a client that reuses a caller-configured session."""
        return cls(base_url, session=session)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "ShishutsukanClient":
        """Create a client from loaded configuration."""
        return cls(config.base_url, timeout=config.timeout_seconds)

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "ShishutsukanClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ShishutsukanClient(base_url={self.base_url!r})"

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: dict | None = None,
    ) -> requests.Response:
        """Make an API request and reject non-2xx responses."""
        url = f"{self.base_url}{endpoint}"

        logger.debug("API Request: %s %s", method, url)
        if json_data is not None:
            logger.debug("Request body: %s", json_data)

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json_data,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except (
            requests.exceptions.InvalidURL,
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
        ) as e:
            raise InvalidUrlError(url, str(e)) from e
        except requests.exceptions.Timeout as e:
            logger.error("Timeout for %s: %s", url, e)
            raise NetworkError(f"Request to {url} timed out: {e}", original=e) from e
        except requests.exceptions.ConnectionError as e:
            logger.error("Connection error to %s: %s", url, e)
            raise NetworkError(f"Failed to connect to {self.base_url}: {e}", original=e) from e
        except requests.exceptions.RequestException as e:
            logger.error("Request error for %s: %s", url, e)
            raise NetworkError(f"Request failed: {e}", original=e) from e

        logger.debug("Response status: %s", response.status_code)

        if not 200 <= response.status_code < 300:
            logger.warning("API Error %s for %s %s", response.status_code, method, url)
            raise HttpStatusError(response.status_code, response_body=response.text)

        return response

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise DecodingError(f"Response from {response.url} is not valid JSON: {e}") from e

    def _send_write(
        self,
        method: str,
        endpoint: str,
        json_data: dict | None = None,
    ) -> ApiMessage:
        """Run a write operation and unwrap its ApiMessage envelope."""
        response = self._request(method, endpoint, json_data=json_data)
        message = ApiMessage.from_dict(self._decode(response))

        if message.is_error:
            logger.warning("Server reported error for %s %s: %s", method, endpoint, message.error)
            raise ServerError(message.error)

        return message

    # Expenses

    def add_expense(self, expense: Expense) -> ApiMessage:
        """
        Add an expense.

        Args:
            expense: Expense to store

        Returns:
            Server message (usually "ok")

        Raises:
            HttpStatusError: If the status is not 2xx
            ServerError: If the body carries an error
        """
        return self._send_write("POST", "/expenses", json_data=expense.to_dict())

    def get_expenses(self) -> list[ExpenseWithId]:
        """List all stored expenses."""
        response = self._request("GET", "/expenses")
        return parse_list(self._decode(response), ExpenseWithId)

    def delete_expense(self, expense_id: int) -> ApiMessage:
        """
        Delete an expense by id.

        The server answers "deleted" even when the id does not exist.
        """
        return self._send_write("DELETE", f"/expenses/{expense_id}")

    # Genres

    def get_genres(self) -> list[GenreWithId]:
        """List all genres."""
        response = self._request("GET", "/genres")
        return parse_list(self._decode(response), GenreWithId)

    def add_genre(self, genre: Genre) -> ApiMessage:
        """
        Add a genre.

        Raises:
            ServerError: If the name already exists
        """
        return self._send_write("POST", "/genres", json_data=genre.to_dict())

    def delete_genre(self, genre_id: int) -> ApiMessage:
        """
        Delete a genre by id.

        Raises:
            ServerError: If expenses still use the genre
        """
        return self._send_write("DELETE", f"/genres/{genre_id}")
