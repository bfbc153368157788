from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class WikiArtError(Exception):
    """Base class for everything raised by this package."""


@dataclass
class FetchError(WikiArtError):
    """
    A page or resource could not be retrieved.

    Raised for transport failures (connection errors, timeouts) and for
    non-2xx responses. The more specific subclasses below are picked by
    HTTP status code.
    """

    url: str
    status_code: Optional[int] = None   # None for network-level failures
    detail: str = ""

    def __post_init__(self) -> None:
        if self.status_code is None:
            msg = f"Fetching {self.url} failed"
        else:
            msg = f"HTTP {self.status_code} for {self.url}"
        if self.detail:
            msg = f"{msg}: {self.detail}"
        super().__init__(msg)

    @property
    def retryable(self) -> bool:
        """Whether a retry might make sense. Nothing in the package retries."""
        if self.status_code is None:
            return True
        return self.status_code == 429 or 500 <= self.status_code < 600


# -------------------------------------------------
# Typed fetch errors
# -------------------------------------------------

class NotFoundError(FetchError):
    pass


class ForbiddenError(FetchError):
    pass


class RateLimitError(FetchError):
    pass


class ServerError(FetchError):
    pass


# -------------------------------------------------
# Extraction errors
# -------------------------------------------------

class ExtractionError(WikiArtError):
    """A structurally required element is missing from a page."""


class ParseError(ExtractionError, ValueError):
    """Text was found where a number was expected but did not parse."""


# -------------------------------------------------
# Mapping helpers
# -------------------------------------------------

_STATUS_TO_EXCEPTION = {
    403: ForbiddenError,
    404: NotFoundError,
    410: NotFoundError,
    429: RateLimitError,
}


def _pick_exception_class(status_code: int) -> type[FetchError]:
    if status_code in _STATUS_TO_EXCEPTION:
        return _STATUS_TO_EXCEPTION[status_code]
    if 500 <= status_code < 600:
        return ServerError
    return FetchError


def error_from_response(response) -> FetchError:
    """
    Build a concrete FetchError subclass from a `requests.Response`.

    The site answers errors with HTML pages, so only the status line is
    kept as detail.
    """
    status_code = response.status_code
    exc_cls = _pick_exception_class(status_code)
    return exc_cls(
        url=str(response.url),
        status_code=status_code,
        detail=getattr(response, "reason", None) or "",
    )


def raise_for_fetch_error(response) -> None:
    """
    Raise a suitable FetchError subclass if `response` is not a success.

    - 2xx/3xx -> returns silently.
    - >= 400  -> raises.
    """
    if response.status_code >= 400:
        raise error_from_response(response)
