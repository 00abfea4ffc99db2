import re

from tocmerge.site.identity import PAGE_ID_TERMINATOR, page_id


_CORPUS = [
    "/",
    "/index.html",
    "/a/index.html",
    "/a/index.htm",
    "/b.html",
    "/b.html/",
    "/docs/été/page.html",
    "/docs/a b.html",
    "/a",
    "/ab",
]


def test_page_id_is_deterministic():
    for url in _CORPUS:
        assert page_id(url) == page_id(url)


def test_page_id_distinct_for_distinct_urls():
    ids = [page_id(url) for url in _CORPUS]
    assert len(set(ids)) == len(_CORPUS)


def test_page_id_is_url_and_id_safe():
    for url in _CORPUS:
        assert re.fullmatch(r"[A-Za-z0-9_\-]*\.", page_id(url))


def test_page_ids_are_prefix_free():
    ids = [page_id(url) for url in _CORPUS]
    for first in ids:
        for second in ids:
            if first != second:
                assert not second.startswith(first)
    assert all(i.count(PAGE_ID_TERMINATOR) == 1 for i in ids)
