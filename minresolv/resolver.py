"""Stub resolver that queries a single DNS server and decodes the answers."""

from __future__ import annotations

import enum
import ipaddress
import socket
import struct
from dataclasses import dataclass, field

import dns.exception
import dns.message
import dns.name
import dns.rdatatype
import dns.reversename

from .errors import ResolvError, ResolverError
from .query import Search, Timeout

DEFAULT_SERVER = "8.8.8.8"
DNS_PORT = 53
DEFAULT_ATTEMPTS = 5

_HEADER_SIZE = 12
_UDP_BUFFER = 65535
_LENGTH_PREFIX = struct.Struct("!H")

_RCODE_ERRORS = (
    ResolvError.EFORMER,
    ResolvError.ESERVFAIL,
    ResolvError.ENXDOMAIN,
    ResolvError.ENOTIMP,
    ResolvError.EREFUSED,
    ResolvError.EYXDOMAIN,
    ResolvError.EYXRRSET,
    ResolvError.ENXERSET,
    ResolvError.ENOTAUTH,
    ResolvError.ENOTZONE,
)


class AnswerKind(enum.Enum):
    """The shape of result a lookup decodes its answers into."""

    HOSTENTRY = "hostentry"
    MX = "mx"
    NS = "ns"
    SOA = "soa"
    TXT = "txt"


@dataclass
class HostEntry:
    """Names and addresses found for a host."""

    hostname: str | None
    names: list[str] = field(default_factory=list)
    addrs: list[str] = field(default_factory=list)

    @property
    def name(self) -> str | None:
        return self.names[0] if self.names else None

    @property
    def addr(self) -> str | None:
        return self.addrs[0] if self.addrs else None


@dataclass(frozen=True)
class MxEntry:
    """One mail exchanger and its preference."""

    exchange: str
    preference: int


@dataclass
class MxResult:
    hostname: str
    mx: list[MxEntry] = field(default_factory=list)


@dataclass
class NsResult:
    hostname: str
    nsnames: list[str] = field(default_factory=list)


@dataclass
class SoaResult:
    hostname: str
    mname: str | None = None
    rname: str | None = None
    serial: int = 0
    refresh: int = 0
    retry: int = 0
    expire: int = 0
    minimum: int = 0


@dataclass
class TxtResult:
    hostname: str
    txts: list[str] = field(default_factory=list)


Result = HostEntry | MxResult | NsResult | SoaResult | TxtResult


def rcode_to_error(rcode: int) -> ResolvError:
    """Map a DNS response code to the matching :class:`ResolvError`."""
    if 1 <= rcode <= len(_RCODE_ERRORS):
        return _RCODE_ERRORS[rcode - 1]
    return ResolvError.EUNKNOWN


def _text(name: dns.name.Name) -> str:
    return name.to_text(omit_final_dot=True)


def _empty_result(kind: AnswerKind, hostname: str) -> Result:
    if kind is AnswerKind.HOSTENTRY:
        return HostEntry(hostname)
    if kind is AnswerKind.MX:
        return MxResult(hostname)
    if kind is AnswerKind.NS:
        return NsResult(hostname)
    if kind is AnswerKind.SOA:
        return SoaResult(hostname)
    return TxtResult(hostname)


def _apply(result: Result, rdata) -> None:
    rdtype = rdata.rdtype
    if isinstance(result, HostEntry):
        if rdtype in (dns.rdatatype.A, dns.rdatatype.AAAA):
            result.addrs.append(rdata.address)
        elif rdtype in (dns.rdatatype.CNAME, dns.rdatatype.PTR):
            result.names.append(_text(rdata.target))
    elif isinstance(result, MxResult) and rdtype == dns.rdatatype.MX:
        result.mx.append(MxEntry(_text(rdata.exchange), rdata.preference))
    elif isinstance(result, NsResult) and rdtype == dns.rdatatype.NS:
        result.nsnames.append(_text(rdata.target))
    elif isinstance(result, SoaResult) and rdtype == dns.rdatatype.SOA:
        result.mname = _text(rdata.mname)
        result.rname = _text(rdata.rname)
        result.serial = rdata.serial
        result.refresh = rdata.refresh
        result.retry = rdata.retry
        result.expire = rdata.expire
        result.minimum = rdata.minimum
    elif isinstance(result, TxtResult) and rdtype == dns.rdatatype.TXT:
        result.txts.append(b"".join(rdata.strings).decode("utf-8", errors="replace"))


def parse_answers(kind: AnswerKind, response: bytes) -> Result | None:
    """Decode the answer section of ``response``.

    Returns None when the message carries no question or no answer.
    """
    try:
        message = dns.message.from_wire(response)
    except (dns.exception.DNSException, ValueError) as exc:
        raise ResolverError(ResolvError.EFORMER, str(exc)) from exc

    if not message.question or not any(len(rrset) for rrset in message.answer):
        return None

    result = _empty_result(kind, _text(message.question[0].name))
    for rrset in message.answer:
        for rdata in rrset:
            _apply(result, rdata)
    return result


@dataclass(frozen=True)
class _Reserved:
    hostname: str
    names: tuple[str, ...]
    addrs: tuple[str, ...]

    def entry(self) -> HostEntry:
        return HostEntry(self.hostname, list(self.names), [self.addrs[0]])


_RESERVED4 = (
    _Reserved("any", ("any", "all"), ("0.0.0.0",)),
    _Reserved("localhost", ("localhost", "loopback"), ("127.0.0.1",)),
    _Reserved("broadcast", ("broadcast",), ("255.255.255.255",)),
)

_RESERVED6 = (
    _Reserved("any", ("any", "all"), ("::",)),
    _Reserved("localhost", ("localhost", "loopback"), ("::1",)),
)


def _reserved_by_name(table: tuple[_Reserved, ...], name: str) -> HostEntry | None:
    wanted = name.casefold()
    for reserved in table:
        if any(candidate.casefold() == wanted for candidate in reserved.names):
            return reserved.entry()
    return None


def _reserved_by_addr(table: tuple[_Reserved, ...], addr: str) -> HostEntry | None:
    wanted = addr.casefold()
    for reserved in table:
        if any(candidate.casefold() == wanted for candidate in reserved.addrs):
            return reserved.entry()
    return None


def _is_ipv4(text: str) -> bool:
    try:
        return isinstance(ipaddress.ip_address(text), ipaddress.IPv4Address)
    except ValueError:
        return False


def reserved_lookup(search: Search, name: str) -> HostEntry | None:
    """Answer A, AAAA and PTR questions about well-known names without a query."""
    if search.qtype == dns.rdatatype.A:
        return _reserved_by_name(_RESERVED4, name)
    if search.qtype == dns.rdatatype.AAAA:
        return _reserved_by_name(_RESERVED6, name)
    if search.qtype == dns.rdatatype.PTR:
        table = _RESERVED4 if _is_ipv4(name) else _RESERVED6
        return _reserved_by_addr(table, name)
    return None


def _query_name(name: str) -> str:
    try:
        return dns.name.from_text(name).to_text()
    except dns.exception.DNSException as exc:
        raise ValueError(f"invalid domain name {name!r}: {exc}") from exc


def _reverse_name(addr: str) -> str:
    try:
        return dns.reversename.from_address(addr).to_text()
    except (dns.exception.DNSException, ValueError) as exc:
        raise ValueError(f"invalid address {addr!r}") from exc


def _build_query(search: Search) -> bytes:
    message = dns.message.make_query(search.name, search.qtype, search.qclass)
    message.set_opcode(search.opcode & 0x0F)
    return message.to_wire()


def _message_id(message: bytes) -> int:
    return _LENGTH_PREFIX.unpack_from(message)[0]


def _truncated(message: bytes) -> bool:
    return bool(message[2] & 0x02)


def _recv_exact(sock: socket.socket, size: int) -> bytes | None:
    data = b""
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            return None
        data += chunk
    return data


def _recv_upto(sock: socket.socket, size: int) -> bytes:
    data = b""
    while len(data) < size:
        try:
            chunk = sock.recv(size - len(data))
        except OSError:
            break
        if not chunk:
            break
        data += chunk
    return data


class Resolver:
    """Sends questions to one DNS server over UDP, retrying over TCP when truncated."""

    def __init__(
        self,
        server: str = DEFAULT_SERVER,
        port: int = DNS_PORT,
        timeout: Timeout | None = None,
        attempts: int = DEFAULT_ATTEMPTS,
    ) -> None:
        if attempts < 1:
            raise ValueError("attempts must be at least 1")
        self.server = server
        self.port = port
        self.timeout = timeout if timeout is not None else Timeout()
        self.attempts = attempts

    @property
    def _address(self) -> tuple[str, int]:
        return (self.server, self.port)

    def search(self, search: Search) -> bytes:
        """Send ``search`` to the server and return the raw response."""
        query = _build_query(search)
        try:
            return self._udp_exchange(query)
        except OSError as exc:
            raise ResolverError(ResolvError.ESOCKET, str(exc)) from exc

    def _udp_exchange(self, query: bytes) -> bytes:
        query_id = _message_id(query)
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.settimeout(self.timeout.seconds())
            for _ in range(self.attempts):
                try:
                    sock.sendto(query, self._address)
                except OSError:
                    continue
                response = self._udp_receive(sock, query_id)
                if response is None:
                    continue
                if _truncated(response):
                    return self._tcp_exchange(query)
                return response
        raise ResolverError(ResolvError.ESOCKET, "no response from server")

    @staticmethod
    def _udp_receive(sock: socket.socket, query_id: int) -> bytes | None:
        while True:
            try:
                data, _ = sock.recvfrom(_UDP_BUFFER)
            except OSError:
                return None
            if not data:
                return None
            if len(data) >= _HEADER_SIZE and _message_id(data) == query_id:
                return data

    def _tcp_exchange(self, query: bytes) -> bytes:
        payload = _LENGTH_PREFIX.pack(len(query)) + query
        for _ in range(self.attempts):
            try:
                with socket.create_connection(
                    self._address, timeout=self.timeout.seconds()
                ) as sock:
                    sock.sendall(payload)
                    prefix = _recv_exact(sock, _LENGTH_PREFIX.size)
                    if prefix is None:
                        continue
                    (length,) = _LENGTH_PREFIX.unpack(prefix)
                    return _recv_upto(sock, length)
            except OSError:
                continue
        raise ResolverError(ResolvError.ESOCKET, "TCP exchange failed")

    def _lookup(self, search: Search, kind: AnswerKind) -> Result:
        response = self.search(search)
        if len(response) < _HEADER_SIZE:
            raise ResolverError(ResolvError.EFORMER, "short response")
        rcode = response[3] & 0x0F
        if rcode:
            raise ResolverError(rcode_to_error(rcode))
        result = parse_answers(kind, response)
        if result is None:
            raise ResolverError(ResolvError.ENORECORD)
        return result

    def _host(self, search: Search, name: str) -> HostEntry:
        reserved = reserved_lookup(search, name)
        if reserved is not None:
            return reserved
        return self._lookup(search, AnswerKind.HOSTENTRY)

    def host4byname(self, name: str) -> HostEntry:
        """Look up the IPv4 addresses of ``name``."""
        return self._host(Search(_query_name(name), dns.rdatatype.A), name)

    def host6byname(self, name: str) -> HostEntry:
        """Look up the IPv6 addresses of ``name``."""
        return self._host(Search(_query_name(name), dns.rdatatype.AAAA), name)

    def hostbyaddr(self, addr: str) -> HostEntry:
        """Look up the names of the host at ``addr``."""
        return self._host(Search(_reverse_name(addr), dns.rdatatype.PTR), addr)

    def mxbyname(self, name: str) -> MxResult:
        """Look up the mail exchangers of ``name``."""
        return self._lookup(Search(_query_name(name), dns.rdatatype.MX), AnswerKind.MX)

    def nsbyname(self, name: str) -> NsResult:
        """Look up the name servers of ``name``."""
        return self._lookup(Search(_query_name(name), dns.rdatatype.NS), AnswerKind.NS)

    def soabyname(self, name: str) -> SoaResult:
        """Look up the start-of-authority record of ``name``."""
        return self._lookup(Search(_query_name(name), dns.rdatatype.SOA), AnswerKind.SOA)

    def txtbyname(self, name: str) -> TxtResult:
        """Look up the text records of ``name``."""
        return self._lookup(Search(_query_name(name), dns.rdatatype.TXT), AnswerKind.TXT)