# src/gpt3_kit/completions/errors.py


class CompletionError(Exception):
    """Base class for all completion failures."""


class RequestConstructionError(CompletionError):
    """The HTTP request could not be built (e.g. malformed base URL)."""


class TransportError(CompletionError):
    """The HTTP exchange did not complete (DNS, refused connection, timeout).

    The underlying ``httpx`` exception is kept as ``__cause__``.
    """


class APIStatusError(CompletionError):
    """The server answered with a status other than 200.

    The body is kept as text for diagnostics and is never decoded.
    """

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"unexpected status code: {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeError(CompletionError):
    """The response body is not a valid completions envelope."""
