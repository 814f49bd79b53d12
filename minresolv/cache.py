"""An in-memory cache of raw DNS responses keyed by question."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from .query import Search

_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_MASK = 0xFFFFFFFFFFFFFFFF


def fnv1a_hash(data: bytes | str) -> int:
    """Return the 64-bit FNV-1a hash of ``data``."""
    if isinstance(data, str):
        data = data.encode()
    value = _FNV_OFFSET
    for byte in data:
        value = ((value ^ byte) * _FNV_PRIME) & _MASK
    return value


def cache_key(search: Search) -> int:
    """Return the case-insensitive hash identifying a search."""
    text = f"{search.name};{search.opcode:x};{search.qtype:x};{search.qclass:x}"
    return fnv1a_hash(text.lower())


@dataclass
class CacheAnswer:
    """A cached response and the time it was stored."""

    response: bytes
    timestamp: float = field(default_factory=time.time)
    ttl: int = 0

    @property
    def length(self) -> int:
        return len(self.response)


class ResolvCache:
    """Cache of responses; the first response stored for a question is kept."""

    def __init__(self) -> None:
        self._answers: dict[int, CacheAnswer] = {}

    def search(self, search: Search) -> CacheAnswer | None:
        """Return the cached answer for ``search``, or None."""
        return self._answers.get(cache_key(search))

    def push(self, search: Search, response: bytes) -> None:
        """Store ``response`` unless the question is already cached."""
        self._answers.setdefault(cache_key(search), CacheAnswer(bytes(response)))

    def is_empty(self) -> bool:
        return not self._answers

    def clear(self) -> None:
        self._answers.clear()

    def __len__(self) -> int:
        return len(self._answers)

    def __contains__(self, search: object) -> bool:
        return isinstance(search, Search) and cache_key(search) in self._answers