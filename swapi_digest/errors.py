"""Failures raised by the SWAPI fetch client."""


class FetchError(Exception):
    """Base class for a failed fetch of a single resource path."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(message)


class HttpStatusError(FetchError):
    """Upstream answered with a status code of 400 or above."""

    def __init__(self, path: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(path, f"Request failed with status code {status_code}")


class MalformedPayloadError(FetchError):
    """Response body could not be decoded as JSON."""

    def __init__(self, path: str, detail: str = "") -> None:
        message = f"Malformed JSON payload for {path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(path, message)


class TransportError(FetchError):
    """Connection-level failure (DNS, refused, reset, TLS)."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(path, f"Transport error for {path}: {detail}")


class FetchTimeoutError(FetchError, TimeoutError):
    """No response within the configured timeout."""

    def __init__(self, path: str, timeout_ms: int) -> None:
        self.timeout_ms = timeout_ms
        super().__init__(path, f"Request timeout for {path}")
