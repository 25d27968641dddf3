import enum

from httpreq.error import InvalidArgumentError


@enum.unique
class Method(str, enum.Enum):
    """Enumeration of the HTTP methods a request can be built with."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    def __repr__(self):
        return self.name

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, name: str) -> "Method":
        """Returns the method matching name, ignoring case.

        Raises:
            InvalidArgumentError: if name is not a supported method.
        """
        try:
            return cls(name.upper())
        except ValueError:
            raise InvalidArgumentError(f"unsupported HTTP method '{name}'") from None
