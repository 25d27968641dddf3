"""Immutable builders for HTTP request descriptors."""

from httpreq.error import HTTPReqError, InvalidArgumentError
from httpreq.header import Header, HeaderMap
from httpreq.method import Method
from httpreq.request import Request, RequestBuilder, RequestComponents
from httpreq.url import Protocol, Url

__all__ = [
    "HTTPReqError",
    "Header",
    "HeaderMap",
    "InvalidArgumentError",
    "Method",
    "Protocol",
    "Request",
    "RequestBuilder",
    "RequestComponents",
    "Url",
]
