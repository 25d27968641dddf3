import copy
import pickle

import pytest

from httpreq import Protocol, Url


def test_https_url():
    url = Url("https://example.com/index/index.html")
    assert str(url) == "https://example.com/index/index.html"
    assert url.protocol == Protocol.HTTPS
    assert url.host == "example.com"
    assert url.path == "/index/index.html"
    assert url.port is None


def test_http_url_with_port_query_and_fragment():
    url = Url("http://localhost:8080/search?q=1&page=2#results")
    assert url.protocol == Protocol.HTTP
    assert url.host == "localhost"
    assert url.port == 8080
    assert url.path == "/search"
    assert url.query == "q=1&page=2"
    assert url.fragment == "results"


def test_string_form_is_not_reassembled():
    raw = "HTTPS://Example.COM:443//a/../b?"
    url = Url(raw)
    assert str(url) == raw
    assert url.protocol == Protocol.HTTPS
    assert url.host == "example.com"
    assert url.port == 443


def test_empty_url():
    url = Url("")
    assert str(url) == ""
    assert url.protocol == Protocol.UNSPECIFIED
    assert url.host == ""
    assert url.path == ""
    assert url.port is None
    assert url == Url()


def test_unknown_scheme():
    url = Url("ftp://example.com/file.txt")
    assert url.protocol == Protocol.UNSPECIFIED
    assert url.host == "example.com"
    assert url.path == "/file.txt"


def test_relative_url():
    url = Url("/index.html")
    assert url.protocol == Protocol.UNSPECIFIED
    assert url.host == ""
    assert url.path == "/index.html"


@pytest.mark.parametrize("raw", ["http://[::1/path", "http://example.com:port/"])
def test_unsplittable_url(raw):
    url = Url(raw)
    assert str(url) == raw
    assert url.protocol == Protocol.UNSPECIFIED
    assert url.host == ""
    assert url.path == ""
    assert url.port is None


def test_equality_and_hash():
    a = Url("https://example.com/")
    b = Url("https://example.com/")
    c = Url("https://example.com")
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert a != "https://example.com/"


def test_immutable():
    url = Url("https://example.com/")
    with pytest.raises(AttributeError):
        url._raw = "http://other.com/"  # type: ignore[misc]
    assert str(url) == "https://example.com/"


def test_pickle_and_copy():
    url = Url("https://example.com/a?b=c")
    assert pickle.loads(pickle.dumps(url)) == url
    assert pickle.loads(pickle.dumps(Url(""))) == Url("")
    assert copy.deepcopy(url) is url
