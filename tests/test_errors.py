import pytest

from minresolv.errors import ResolvError, ResolverError, strerror


@pytest.mark.parametrize(
    "code, message",
    [
        (ResolvError.EFORMER, "resource format error"),
        (ResolvError.ESERVFAIL, "server failed to complete the request"),
        (ResolvError.ENXDOMAIN, "non-existent requested domain"),
        (ResolvError.ENOTIMP, "server does not implement the type of query performed"),
        (ResolvError.EREFUSED, "search query refused"),
        (ResolvError.EYXDOMAIN, "name exists when it should not"),
        (ResolvError.EYXRRSET, "RR set exists when it should not"),
        (ResolvError.ENXERSET, "RR set that should exist does not"),
        (ResolvError.ENOTAUTH, "server not authoritative for zone"),
        (ResolvError.ENOTZONE, "name not contained in zone"),
        (ResolvError.ENORECORD, "record query not found"),
    ],
)
def test_strerror_messages(code, message):
    assert strerror(code) == message


def test_unknown_codes():
    assert strerror(ResolvError.EUNKNOWN) == "unknown error"
    assert strerror(12345) == "unknown error"


def test_enum_range_matches_header():
    assert ResolverError(-14).error is ResolvError.EUNKNOWN
    assert ResolverError(-1).error is ResolvError.EFORMER
    assert strerror(-14) == "unknown error"
    assert strerror(-1) == "resource format error"
    assert sorted(ResolvError) == list(range(-14, 0))


def test_int_code_accepted():
    assert strerror(int(ResolvError.EREFUSED)) == strerror(ResolvError.EREFUSED)


def test_socket_and_syscall_have_messages():
    assert strerror(ResolvError.ESOCKET) != strerror(ResolvError.EUNKNOWN)
    assert strerror(ResolvError.ESYSCALL) != strerror(ResolvError.EUNKNOWN)


def test_resolver_error_carries_code():
    err = ResolverError(ResolvError.ENXDOMAIN)
    assert isinstance(err, Exception)
    assert err.error is ResolvError.ENXDOMAIN
    assert str(err) == "non-existent requested domain"
    assert err.detail is None


def test_resolver_error_with_detail():
    err = ResolverError(ResolvError.EREFUSED, "example.com")
    assert str(err) == "search query refused: example.com"
    assert err.detail == "example.com"


def test_resolver_error_from_int():
    err = ResolverError(-2)
    assert err.error is ResolvError.ESERVFAIL
    assert str(err) == "server failed to complete the request"