class HTTPReqError(Exception):
    """Base class for httpreq exceptions."""


class InvalidArgumentError(HTTPReqError, ValueError):
    """Invalid argument was received."""
