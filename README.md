# minresolv

minresolv is a small stub DNS resolver. It sends one question to a single upstream server over UDP. If the reply is truncated, it repeats the question over TCP. The answer section comes back as plain Python dataclasses.

The default upstream server is `8.8.8.8`, port 53.

## Installation

```
pip install minresolv
```

minresolv depends on `dnspython`, which it uses to build queries and decode responses.

## Looking up hosts

```python
from minresolv.resolver import Resolver

resolver = Resolver()

entry = resolver.host4byname("example.com")
print(entry.hostname, entry.addr, entry.addrs, entry.names)

entry6 = resolver.host6byname("example.com")
reverse = resolver.hostbyaddr("192.0.2.1")
```

The host lookups return a `HostEntry` with these fields:

- `hostname` is the name in the question, without the final dot.
- `addrs` lists the A and AAAA records found in the answer.
- `names` lists the CNAME and PTR targets found in the answer.
- `addr` and `name` are the first item of `addrs` and `names`, or `None` when that list is empty.

`hostbyaddr` turns the address into its reverse-lookup name before it sends the question. Invalid names and addresses raise `ValueError`.

### Reserved names

Some names are answered locally and send nothing over the network. The match ignores case.

| Lookup | Names | Address |
|---|---|---|
| `host4byname` | `any`, `all` | `0.0.0.0` |
| `host4byname` | `localhost`, `loopback` | `127.0.0.1` |
| `host4byname` | `broadcast` | `255.255.255.255` |
| `host6byname` | `any`, `all` | `::` |
| `host6byname` | `localhost`, `loopback` | `::1` |

`hostbyaddr` answers these addresses from the same tables. An IPv4 address is matched against the IPv4 table and any other address against the IPv6 table. `minresolv.resolver.reserved_lookup(search, name)` performs the same check directly.

## Other record types

```python
mx = resolver.mxbyname("example.com")
for entry in mx.mx:
    print(entry.preference, entry.exchange)

ns = resolver.nsbyname("example.com")
print(ns.nsnames)

soa = resolver.soabyname("example.com")
print(soa.mname, soa.rname, soa.serial, soa.refresh, soa.retry, soa.expire, soa.minimum)

txt = resolver.txtbyname("example.com")
print(txt.txts)
```

These lookups return `MxResult`, `NsResult`, `SoaResult` and `TxtResult`. Each record's character strings are joined together and decoded as UTF-8.

## Lower-level pieces

- `Resolver.search(search)` sends a `minresolv.query.Search` and returns the raw response bytes. A `Search` holds `name`, `qtype`, `qclass` (default IN) and `opcode` (default QUERY).
- `minresolv.resolver.parse_answers(kind, response)` decodes a raw response into the result type chosen by an `AnswerKind` member: `HOSTENTRY`, `MX`, `NS`, `SOA` or `TXT`. It returns `None` when the message has no question or no answer. It raises `ResolverError` with `EFORMER` when the message cannot be decoded.
- `minresolv.resolver.rcode_to_error(rcode)` maps a DNS response code to a `ResolvError`.

## Configuration

You can set the upstream server, its port, the timeout and the number of attempts:

```python
from minresolv.query import Timeout
from minresolv.resolver import Resolver

resolver = Resolver(server="1.1.1.1", port=53, timeout=Timeout(2, 0), attempts=3)
```

- `Timeout(sec, usec)` defaults to 5 seconds plus 5000 microseconds. Negative parts raise `ValueError`.
- `attempts` defaults to 5 and must be at least 1.
- The UDP socket is IPv4, so the server must be reachable over IPv4.

## Errors

A failed lookup raises `minresolv.errors.ResolverError`. Its `error` attribute holds a `ResolvError` member. The cases are:

- the server returned a non-zero response code: the mapped error, for example `ENXDOMAIN`
- the response had no answers: `ENORECORD`
- the response was too short or could not be decoded: `EFORMER`
- the server did not answer, or the transport failed: `ESOCKET`

`minresolv.errors.strerror` returns a readable description of a code.

```python
from minresolv.errors import ResolverError, strerror

try:
    resolver.host4byname("no-such-name.invalid")
except ResolverError as exc:
    print(exc.error, strerror(exc.error))
```

## Caching

`minresolv.cache.ResolvCache` keeps raw responses keyed by a `Search`. The key is a 64-bit FNV-1a hash (`fnv1a_hash`, `cache_key`) of four parts of the search:

- the name, compared without regard to case
- the opcode
- the type
- the class

`push(search, response)` stores the first response for a key and ignores any later one. `search(search)` returns a `CacheAnswer` with `response`, `length`, `timestamp` and `ttl`, or `None` when nothing is stored. The cache also has `is_empty()`, `clear()`, `len()` and `in`.

## What minresolv does not do

- `Resolver` does not use `ResolvCache`. To cache responses, pass them to the cache yourself.
- It does not read the system resolver configuration. It queries one server only.
- It has no command-line tool.
- It has no separate CNAME lookup. CNAME targets appear only in the `names` of a host lookup.