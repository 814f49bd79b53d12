"""Stub DNS resolver with host, MX, NS, SOA and TXT lookups and a response cache."""

__version__ = "0.1.0"
__all__ = ["cache", "errors", "query", "resolver"]