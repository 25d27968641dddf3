from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional

from httpreq.header import Header, HeaderMap, HeaderPairs
from httpreq.method import Method
from httpreq.url import Url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestComponents:
    """Snapshot of the method, URL and headers accumulated by a
    RequestBuilder.

    Snapshots are never modified. Builders derive a new snapshot with one
    field replaced on every call.
    """

    method: Method = Method.GET
    url: Url = field(default_factory=Url)
    header: Header = field(default_factory=Header)


class RequestBuilder:
    """Builds requests one field at a time.

    Every method returns a new builder and leaves the receiver untouched, so
    a builder can be shared and extended along several branches. A new
    builder holds no components; the first call to method, url or header
    seeds them from the defaults of RequestComponents.
    """

    __slots__ = ("_components", "_body")

    def __init__(
        self,
        components: Optional[RequestComponents] = None,
        body: Optional[str] = None,
    ):
        self._components = components
        self._body = body

    def __eq__(self, other):
        if not isinstance(other, RequestBuilder):
            return NotImplemented
        return (self._components, self._body) == (other._components, other._body)

    def __hash__(self):
        return hash((self._components, self._body))

    def __repr__(self):
        return f"RequestBuilder(components={self._components!r}, body={self._body!r})"

    def components(self) -> Optional[RequestComponents]:
        """Returns the components accumulated so far, or None if no field has
        been set."""
        return self._components

    def _current(self) -> RequestComponents:
        if self._components is None:
            return RequestComponents()
        return self._components

    def method(self, method: Method) -> RequestBuilder:
        components = replace(self._current(), method=method)
        return RequestBuilder(components, self._body)

    def url(self, url: str) -> RequestBuilder:
        components = replace(self._current(), url=Url(str(url)))
        return RequestBuilder(components, self._body)

    def header(self, name: str, value: str) -> RequestBuilder:
        """Adds a header to the request.

        If the request already has a header with the same name, the value
        that was set first is kept and this one is discarded.
        """
        current = self._current()

        added = HeaderMap()
        added.insert(name, value)

        merged = HeaderMap.from_pairs(
            [*added.items(), *current.header.get_map().items()]
        )
        components = replace(current, header=Header.from_map(merged))
        return RequestBuilder(components, self._body)

    def headers(self, headers: HeaderPairs) -> RequestBuilder:
        """Adds each header in order, as if by repeated calls to header."""
        pairs = headers.items() if isinstance(headers, Mapping) else headers
        builder = self
        for name, value in pairs:
            builder = builder.header(name, value)
        return builder

    def body(self, body: str) -> RequestBuilder:
        return RequestBuilder(self._components, body)

    def build(self) -> Request:
        """Returns the request described by the builder. Fields that were
        never set take their default values, and the body defaults to the
        empty string."""
        components = self._current()
        body = self._body if self._body is not None else ""
        logger.debug(
            "building %s request to '%s' with %d header(s) and %d byte body",
            components.method,
            components.url,
            len(components.header),
            len(body),
        )
        return Request(components, body)


class Request:
    """An HTTP request: a method, URL, headers and body.

    Requests are created with a RequestBuilder, usually obtained from one of
    Request.builder, Request.get, Request.post, Request.put or Request.delete.
    """

    __slots__ = ("_components", "_body")

    def __init__(self, components: RequestComponents, body: str = ""):
        self._components = components
        self._body = body

    def __eq__(self, other):
        if not isinstance(other, Request):
            return NotImplemented
        return (self._components, self._body) == (other._components, other._body)

    def __hash__(self):
        return hash((self._components, self._body))

    def __repr__(self):
        return f"Request(components={self._components!r}, body={self._body!r})"

    @staticmethod
    def builder() -> RequestBuilder:
        return RequestBuilder()

    @staticmethod
    def get(url: str) -> RequestBuilder:
        return Request.builder().method(Method.GET).url(url)

    @staticmethod
    def post(url: str) -> RequestBuilder:
        return Request.builder().method(Method.POST).url(url)

    @staticmethod
    def put(url: str) -> RequestBuilder:
        return Request.builder().method(Method.PUT).url(url)

    @staticmethod
    def delete(url: str) -> RequestBuilder:
        return Request.builder().method(Method.DELETE).url(url)

    @property
    def components(self) -> RequestComponents:
        return self._components

    @property
    def method(self) -> Method:
        return self._components.method

    @property
    def url(self) -> Url:
        return self._components.url

    @property
    def header(self) -> Header:
        return self._components.header

    @property
    def body(self) -> str:
        return self._body

    def to_builder(self) -> RequestBuilder:
        """Returns a builder holding the components and body of the request,
        to derive new requests from it."""
        return RequestBuilder(self._components, self._body)
