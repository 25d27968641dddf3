from __future__ import annotations

from typing import (
    Dict,
    Iterable,
    Iterator,
    Mapping,
    MutableMapping,
    Optional,
    Tuple,
    Union,
)

from http_message_signatures.structures import CaseInsensitiveDict
from typing_extensions import Self, TypeAlias

HeaderPairs: TypeAlias = Union[Mapping[str, str], Iterable[Tuple[str, str]]]
"""Header entries given either as a mapping or as (name, value) pairs."""


class HeaderMap(MutableMapping[str, str]):
    """An ordered map of header names to values.

    Names are compared by exact string equality, no case folding is applied.
    Entries keep the order in which names were first inserted.
    """

    __slots__ = ("_entries",)

    _entries: Dict[str, str]

    def __init__(self, entries: Optional[HeaderPairs] = None):
        self._entries = {}
        if entries is not None:
            self.extend(entries)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> Self:
        """Builds a map by inserting pairs in order, later pairs overwrite
        earlier pairs with the same name."""
        return cls(pairs)

    def insert(self, key: str, value: str) -> Optional[str]:
        """Sets the value of a header and returns the value it replaced, if
        any."""
        previous = self._entries.get(key)
        self._entries[key] = value
        return previous

    def extend(self, entries: HeaderPairs):
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        for key, value in pairs:
            self.insert(key, value)

    def get_key_value(self, key: str) -> Optional[Tuple[str, str]]:
        if key not in self._entries:
            return None
        return key, self._entries[key]

    def to_case_insensitive(self) -> CaseInsensitiveDict:
        return CaseInsensitiveDict(self._entries)

    def copy(self) -> HeaderMap:
        return HeaderMap(self._entries)

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __setitem__(self, key: str, value: str):
        self.insert(key, value)

    def __delitem__(self, key: str):
        del self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return f"HeaderMap({self._entries!r})"


class Header(Mapping[str, str]):
    """Read-only headers of a request.

    A Header wraps exactly one HeaderMap. It holds its own copy of the map it
    is created from, and get_map returns a fresh copy, so a Header never
    changes once constructed.
    """

    __slots__ = ("_map",)

    _map: HeaderMap

    def __init__(self, entries: Optional[HeaderPairs] = None):
        self._map = HeaderMap(entries)

    @classmethod
    def from_map(cls, header_map: HeaderMap) -> Self:
        return cls(header_map)

    def get_map(self) -> HeaderMap:
        return self._map.copy()

    def get_key_value(self, key: str) -> Optional[Tuple[str, str]]:
        return self._map.get_key_value(key)

    def __getitem__(self, key: str) -> str:
        return self._map[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __hash__(self):
        return hash(frozenset(self.items()))

    def __repr__(self):
        return f"Header({dict(self._map)!r})"
