import time

from minresolv.cache import CacheAnswer, ResolvCache, cache_key, fnv1a_hash
from minresolv.query import Search


def test_fnv1a_empty_is_offset_basis():
    assert fnv1a_hash(b"") == 0xCBF29CE484222325


def test_fnv1a_single_byte():
    assert fnv1a_hash(b"a") == 0xAF63DC4C8601EC8C


def test_fnv1a_str_matches_bytes():
    assert fnv1a_hash("example.com") == fnv1a_hash(b"example.com")
    assert 0 <= fnv1a_hash(b"x" * 1000) < 2**64


def test_cache_key_format():
    search = Search("example.com", 1)
    assert cache_key(search) == fnv1a_hash("example.com;0;1;1")


def test_cache_key_case_insensitive():
    assert cache_key(Search("Example.COM", 1)) == cache_key(Search("example.com", 1))


def test_cache_key_depends_on_type():
    assert cache_key(Search("example.com", 1)) != cache_key(Search("example.com", 28))


def test_new_cache_is_empty():
    cache = ResolvCache()
    assert cache.is_empty()
    assert cache.search(Search("example.com", 1)) is None


def test_push_then_search():
    cache = ResolvCache()
    search = Search("example.com", 1)
    before = time.time()
    cache.push(search, b"\x12\x34response")
    after = time.time()
    answer = cache.search(search)
    assert answer.response == b"\x12\x34response"
    assert answer.length == len(b"\x12\x34response")
    assert before <= answer.timestamp <= after
    assert not cache.is_empty()
    assert search in cache


def test_push_keeps_first_response():
    cache = ResolvCache()
    search = Search("example.com", 1)
    cache.push(search, b"first")
    cache.push(search, b"second")
    assert cache.search(search).response == b"first"
    assert len(cache) == 1


def test_lookup_ignores_case():
    cache = ResolvCache()
    cache.push(Search("EXAMPLE.com", 15), b"mx")
    assert cache.search(Search("example.COM", 15)).response == b"mx"


def test_distinct_questions_stored_separately():
    cache = ResolvCache()
    cache.push(Search("example.com", 1), b"a")
    cache.push(Search("example.com", 28), b"aaaa")
    assert len(cache) == 2
    assert cache.search(Search("example.com", 28)).response == b"aaaa"


def test_clear_empties_cache():
    cache = ResolvCache()
    cache.push(Search("example.com", 1), b"a")
    cache.clear()
    assert cache.is_empty()
    assert cache.search(Search("example.com", 1)) is None


def test_cache_answer_defaults():
    answer = CacheAnswer(b"abc")
    assert answer.ttl == 0
    assert answer.length == 3