from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from http_message_signatures.structures import CaseInsensitiveDict

from httpreq.request import Request


@dataclass
class Message:
    """The view of a request that HTTP message signatures operate on.

    Unlike Request, a Message is mutable: signing adds headers to it in place.
    """

    method: str
    url: str
    headers: CaseInsensitiveDict
    body: Union[str, bytes]

    @classmethod
    def from_request(cls, request: Request) -> Message:
        return cls(
            method=str(request.method),
            url=str(request.url),
            headers=request.header.get_map().to_case_insensitive(),
            body=request.body,
        )
