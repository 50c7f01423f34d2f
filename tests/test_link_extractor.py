# File: tests/test_link_extractor.py
from link_finder.crawler.link_extractor import extract_links, iter_raw_hrefs

BASE = "https://ex.com/docs/page"

PAGE = """
<html>
<head>
  <base href="/docs/">
  <link rel="canonical" href="https://ex.com/docs/page/">
  <link rel="next" href="/docs/page-2">
  <link rel="stylesheet" href="/static/site.css">
  <meta http-equiv="Refresh" content="5; URL='/moved'">
</head>
<body>
  <a href="/about">About</a>
  <a href="team#lead">Team</a>
  <a href="javascript:void(0)">JS</a>
  <a href="mailto:a@b.com">Mail</a>
  <a href="#top">Top</a>
  <a href="">Empty</a>
  <div data-href="/cards/1" data-url="/cards/2"></div>
  <button data-link="/signup"></button>
  <span data-path="pricing"></span>
  <form action="/search"></form>
  <map><area href="/map/region" alt="r"></map>
  <iframe src="/embed/video"></iframe>
  <iframe src="data:text/html,hello"></iframe>
  <a href="https://other.org/x">External</a>
  <a href="/about/">About again</a>
</body>
</html>
"""


def test_rule_set_covers_every_source():
    links = set(extract_links(PAGE, BASE))
    assert links == {
        "https://ex.com/docs",
        "https://ex.com/docs/page",
        "https://ex.com/docs/page-2",
        "https://ex.com/moved",
        "https://ex.com/about",
        "https://ex.com/docs/team",
        "https://ex.com/cards/1",
        "https://ex.com/cards/2",
        "https://ex.com/signup",
        "https://ex.com/docs/pricing",
        "https://ex.com/search",
        "https://ex.com/map/region",
        "https://ex.com/embed/video",
        "https://other.org/x",
    }


def test_each_url_is_yielded_once_per_page():
    links = list(extract_links(PAGE, BASE))
    assert len(links) == len(set(links))
    assert links.count("https://ex.com/about") == 1


def test_stylesheets_only_with_all_link_elements():
    assert "https://ex.com/static/site.css" not in set(extract_links(PAGE, BASE))
    assert "https://ex.com/static/site.css" in set(extract_links(PAGE, BASE, all_link_elements=True))


def test_anchors_come_first_in_document_order():
    links = list(extract_links(PAGE, BASE))
    assert links[:2] == ["https://ex.com/about", "https://ex.com/docs/team"]


def test_extraction_is_lazy():
    gen = extract_links("<a href='/x'></a><a href='/y'></a>", BASE)
    assert next(gen) == "https://ex.com/x"
    assert next(gen) == "https://ex.com/y"
    assert next(gen, None) is None


def test_meta_refresh_without_url_is_ignored():
    raw = list(iter_raw_hrefs('<meta http-equiv="refresh" content="30">'))
    assert raw == []


def test_raw_hrefs_are_trimmed():
    raw = list(iter_raw_hrefs('<a href="  /padded  ">x</a>'))
    assert raw == ["/padded"]


def test_garbage_markup_yields_nothing():
    assert list(extract_links("<<<not html at all", BASE)) == []
