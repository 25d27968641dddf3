from __future__ import annotations

import enum
import logging
from typing import Optional
from urllib.parse import SplitResult, urlsplit

logger = logging.getLogger(__name__)


@enum.unique
class Protocol(str, enum.Enum):
    """Enumeration of the URL schemes recognized by Url."""

    UNSPECIFIED = ""
    HTTP = "http"
    HTTPS = "https"

    def __repr__(self):
        return self.name

    def __str__(self):
        return self.value


Protocol.UNSPECIFIED.__doc__ = "Scheme missing or not an HTTP scheme"
Protocol.HTTP.__doc__ = "Plain text HTTP"
Protocol.HTTPS.__doc__ = "HTTP over TLS"


class Url:
    """A URL parsed into its protocol, host and path.

    The string form of a Url is always the exact string it was created from,
    parsed components are never reassembled. Parsing never fails: the empty
    string, or a string that cannot be split, yields a Url with an unspecified
    protocol and empty host and path.

    Instances are immutable.
    """

    __slots__ = ("_raw", "_parts")

    _raw: str
    _parts: Optional[SplitResult]

    def __init__(self, raw: str = ""):
        parts: Optional[SplitResult] = None
        if raw:
            try:
                parts = urlsplit(raw)
                # Accessing the port validates it.
                parts.port
            except ValueError as e:
                logger.debug("cannot split URL %r: %s", raw, e)
                parts = None

        object.__setattr__(self, "_raw", raw)
        object.__setattr__(self, "_parts", parts)

    def __setattr__(self, name, value):
        raise AttributeError(f"cannot assign to field '{name}' of immutable Url")

    def __delattr__(self, name):
        raise AttributeError(f"cannot delete field '{name}' of immutable Url")

    def __reduce__(self):
        return (Url, (self._raw,))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __str__(self):
        return self._raw

    def __repr__(self):
        return f"Url({self._raw!r})"

    def __eq__(self, other):
        if not isinstance(other, Url):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    @property
    def protocol(self) -> Protocol:
        if self._parts is None:
            return Protocol.UNSPECIFIED
        match self._parts.scheme.lower():
            case "http":
                return Protocol.HTTP
            case "https":
                return Protocol.HTTPS
            case _:
                return Protocol.UNSPECIFIED

    @property
    def host(self) -> str:
        if self._parts is None:
            return ""
        return self._parts.hostname or ""

    @property
    def port(self) -> Optional[int]:
        if self._parts is None:
            return None
        return self._parts.port

    @property
    def path(self) -> str:
        if self._parts is None:
            return ""
        return self._parts.path

    @property
    def query(self) -> str:
        if self._parts is None:
            return ""
        return self._parts.query

    @property
    def fragment(self) -> str:
        if self._parts is None:
            return ""
        return self._parts.fragment
