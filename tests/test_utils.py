# File: tests/test_utils.py
import pytest

from link_finder.crawler.models import CrawlScope
from link_finder.utils import canonicalize, extract_domain, is_in_scope, origin_of

SCOPE = CrawlScope(seed="https://ex.com/", domain="ex.com", max_depth=2)


@pytest.mark.parametrize(
    "raw",
    ["https://ex.com/a/", "https://ex.com/a#frag", "https://ex.com/a", "HTTPS://EX.COM/a", "https://ex.com:443/a/#x"],
)
def test_equivalent_forms_share_one_canonical_url(raw):
    assert canonicalize(raw) == "https://ex.com/a"


@pytest.mark.parametrize(
    "raw",
    ["javascript:void(0)", "mailto:a@b.com", "#section", "", "   ", "tel:+123456", "data:text/html,hi", None],
)
def test_rejected_candidates(raw):
    assert canonicalize(raw, "https://ex.com/page") is None


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("example.com", "https://example.com/"),
        ("example.com/docs/", "https://example.com/docs"),
        ("http://example.com", "http://example.com/"),
        ("//example.com/x", "https://example.com/x"),
        ("example.com:8080/a", "https://example.com:8080/a"),
    ],
)
def test_seed_bootstrap_adds_https(raw, expected):
    assert canonicalize(raw) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("/about", "https://ex.com/about"),
        ("contact/", "https://ex.com/blog/contact"),
        ("../up", "https://ex.com/up"),
        ("//ex.com/proto-relative", "https://ex.com/proto-relative"),
        ("https://other.org/x/", "https://other.org/x"),
        ("?page=2", "https://ex.com/blog/post?page=2"),
        ("/search/?q=a#top", "https://ex.com/search?q=a"),
    ],
)
def test_relative_resolution(raw, expected):
    assert canonicalize(raw, "https://ex.com/blog/post") == expected


def test_bare_origin_keeps_its_slash():
    assert canonicalize("https://ex.com") == "https://ex.com/"
    assert canonicalize("https://ex.com/") == "https://ex.com/"
    assert canonicalize("/", "https://ex.com/a/b") == "https://ex.com/"


@pytest.mark.parametrize(
    "raw",
    [
        "ftp://ex.com/file",
        "https://:80/",
        "http://[::1",
        "https://ex.com:notaport/",
        "http://exa mple.com/",
        "http://exa mple.com/x",
        "https://ex<am>ple.com/",
        "https://a..b.com/",
        "http://[zz::1]/",
    ],
)
def test_malformed_or_foreign_scheme_is_rejected(raw):
    assert canonicalize(raw, "https://ex.com/") is None


@pytest.mark.parametrize(
    "raw",
    [
        "example.com",
        "https://ex.com/a/b/",
        "https://ex.com/a?b=1#c",
        "http://user@ex.com:8080/p/",
        "https://[::1]:8443/x",
        "https://ex.com/a//",
        "https://ex.com///",
    ],
)
def test_canonicalize_is_idempotent(raw):
    once = canonicalize(raw)
    assert once is not None
    assert canonicalize(once) == once
    assert canonicalize(once, "https://ex.com/elsewhere") == once


def test_scope_is_exact_hostname_match():
    assert is_in_scope("https://ex.com/x", SCOPE)
    assert is_in_scope("http://ex.com/x", SCOPE)
    assert not is_in_scope("https://sub.ex.com/x", SCOPE)
    assert not is_in_scope("https://www.ex.com/x", SCOPE)
    assert not is_in_scope("https://ex.com.evil.org/x", SCOPE)
    assert not is_in_scope("ftp://ex.com/x", SCOPE)
    assert not is_in_scope(None, SCOPE)


def test_extract_domain_and_origin():
    assert extract_domain("https://Ex.com:8080/a") == "ex.com"
    assert extract_domain("http://[::1") == ""
    assert origin_of("https://ex.com:8080/a/b?c") == "https://ex.com:8080"


def test_unparseable_seed_is_rejected_without_base():
    assert canonicalize("not a url") is None
    assert canonicalize("exa mple.com/x") is None


def test_repeated_trailing_slashes_are_stripped():
    assert canonicalize("/a//", "https://ex.com/") == "https://ex.com/a"
    assert canonicalize("https://ex.com//") == "https://ex.com/"
    assert canonicalize("https://ex.com/a//?q=1/") == "https://ex.com/a?q=1/"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("https://127.0.0.1:8080/x", "https://127.0.0.1:8080/x"),
        ("http://[2001:DB8::1]/", "http://[2001:db8::1]/"),
        ("https://my_host.ex.com/", "https://my_host.ex.com/"),
        ("https://bücher.de/a", "https://bücher.de/a"),
    ],
)
def test_valid_hosts_are_kept(raw, expected):
    assert canonicalize(raw) == expected
