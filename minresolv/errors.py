"""Resolver error codes and the exception that carries them."""

from __future__ import annotations

import enum


class ResolvError(enum.IntEnum):
    """Error codes reported by the resolver."""

    EUNKNOWN = -14
    ESYSCALL = -13
    ESOCKET = -12
    ENORECORD = -11
    ENOTZONE = -10
    ENOTAUTH = -9
    ENXERSET = -8
    EYXRRSET = -7
    EYXDOMAIN = -6
    EREFUSED = -5
    ENOTIMP = -4
    ENXDOMAIN = -3
    ESERVFAIL = -2
    EFORMER = -1


_MESSAGES = {
    ResolvError.EFORMER: "resource format error",
    ResolvError.ESERVFAIL: "server failed to complete the request",
    ResolvError.ENXDOMAIN: "non-existent requested domain",
    ResolvError.ENOTIMP: "server does not implement the type of query performed",
    ResolvError.EREFUSED: "search query refused",
    ResolvError.EYXDOMAIN: "name exists when it should not",
    ResolvError.EYXRRSET: "RR set exists when it should not",
    ResolvError.ENXERSET: "RR set that should exist does not",
    ResolvError.ENOTAUTH: "server not authoritative for zone",
    ResolvError.ENOTZONE: "name not contained in zone",
    ResolvError.ENORECORD: "record query not found",
    ResolvError.ESOCKET: "socket operation failed",
    ResolvError.ESYSCALL: "system call failed",
}

_UNKNOWN = "unknown error"


def strerror(error: ResolvError | int) -> str:
    """Return the human-readable description of an error code."""
    try:
        code = ResolvError(error)
    except ValueError:
        return _UNKNOWN
    return _MESSAGES.get(code, _UNKNOWN)


class ResolverError(Exception):
    """Raised when a lookup fails; ``error`` holds the :class:`ResolvError`."""

    def __init__(self, error: ResolvError | int, detail: str | None = None) -> None:
        try:
            self.error: ResolvError | int = ResolvError(error)
        except ValueError:
            self.error = error
        self.detail = detail
        message = strerror(error)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)