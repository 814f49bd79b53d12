"""Search parameters and timeouts for resolver lookups."""

from __future__ import annotations

from dataclasses import dataclass

CLASS_IN = 1
OPCODE_QUERY = 0


@dataclass(frozen=True)
class Search:
    """A single DNS question together with the opcode to send it with."""

    name: str
    qtype: int
    qclass: int = CLASS_IN
    opcode: int = OPCODE_QUERY


@dataclass(frozen=True)
class Timeout:
    """A receive timeout split into seconds and microseconds."""

    sec: int = 5
    usec: int = 5000

    def __post_init__(self) -> None:
        if self.sec < 0 or self.usec < 0:
            raise ValueError("timeout components must not be negative")

    def seconds(self) -> float:
        """Return the whole timeout in seconds."""
        return self.sec + self.usec / 1_000_000