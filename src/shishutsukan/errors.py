"""
Exceptions raised by the Shishutsukan client.

Every failure surfaces as a subclass of ShishutsukanError:
- InvalidUrlError: base URL is not an absolute http(s) URL
- HttpStatusError: response status outside 200-299
- NetworkError: transport failure (connection, DNS, timeout)
- DecodingError: body is not JSON or has the wrong shape
- ServerError: success status, but the body carries an "error" field
"""


class ShishutsukanError(Exception):
    """Base exception for Shishutsukan client errors."""

    pass


class InvalidUrlError(ShishutsukanError):
    """Base URL cannot be used to build request URLs."""

    def __init__(self, url: str, reason: str = "invalid URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}")


class HttpStatusError(ShishutsukanError):
    """Server answered with a non-success HTTP status."""

    def __init__(self, status_code: int, response_body: str | None = None):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(f"HTTP error: {status_code}")


class NetworkError(ShishutsukanError):
    """Request never produced a response."""

    def __init__(self, message: str, original: Exception | None = None):
        self.original = original
        super().__init__(message)


class DecodingError(ShishutsukanError):
    """Response body could not be decoded into the expected model."""

    pass


class ServerError(ShishutsukanError):
    """Server reported an error in the response body."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Server error: {message}")
