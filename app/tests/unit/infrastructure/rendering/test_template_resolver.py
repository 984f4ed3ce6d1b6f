"""Tests for infrastructure.rendering.resolver module."""

import pytest

from infrastructure.rendering import (
    TemplateKey,
    TemplateNotFoundError,
    TemplateRenderError,
    TemplateResolver,
    with_suffix,
)
from infrastructure.storage import InMemoryContentStore
from tests.factories.rendering import make_store


class CountingStore(InMemoryContentStore):
    """In-memory store that counts list_files() calls."""

    def __init__(self, files=None):
        super().__init__(files)
        self.listings = 0

    def list_files(self):
        self.listings += 1
        return super().list_files()


@pytest.fixture
def resolver():
    store = make_store(
        {
            "page.html": "page",
            "page_alt.html": "alt",
            "page_beta.html": "beta",
            "index.html": "default",
            "index.fr.html": "localized",
            "_foo.html": "foo partial",
            "users/_card.html": "card partial",
            "_note.txt": "note partial",
        }
    )
    return TemplateResolver(store, templates_dir="templates")


class TestWithSuffix:
    """Tests for with_suffix() and TemplateKey."""

    @pytest.mark.parametrize(
        "name,suffix,expected",
        [
            ("page.html", "alt", "page_alt.html"),
            ("users/show.html", "v2", "users/show_v2.html"),
            ("page", "alt", "page_alt"),
        ],
    )
    def test_with_suffix(self, name, suffix, expected):
        assert with_suffix(name, suffix) == expected

    def test_candidates_order(self):
        key = TemplateKey("page.html", ("alt", "", "beta"))
        assert key.candidates() == ["page_alt.html", "page_beta.html", "page.html"]


class TestResolve:
    """Tests for TemplateResolver.resolve()."""

    def test_bare_name(self, resolver):
        assert resolver.resolve("page.html") == "page"

    def test_suffix_wins_over_bare_name(self, resolver):
        assert resolver.resolve("page.html", ["alt"]) == "alt"

    def test_first_existing_suffix_wins(self, resolver):
        assert resolver.resolve("page.html", ["missing", "beta", "alt"]) == "beta"

    def test_missing_suffix_falls_back(self, resolver):
        assert resolver.resolve("page.html", ["missing"]) == "page"

    def test_localized_name_tried_first(self, resolver):
        assert resolver.resolve("index.html", localized_name="index.fr.html") == "localized"

    def test_missing_localized_name_falls_back(self, resolver):
        assert resolver.resolve("index.html", localized_name="index.de.html") == "default"

    def test_find_returns_resolved_name(self, resolver):
        assert resolver.find("page.html", ["alt"]) == ("page_alt.html", "alt")

    def test_not_found(self, resolver):
        with pytest.raises(TemplateNotFoundError) as exc_info:
            resolver.resolve("missing.html", ["alt"])
        error = exc_info.value
        assert error.name == "missing.html"
        assert error.tried == ("templates/missing_alt.html", "templates/missing.html")
        assert not error.partial
        assert "Template not found: missing.html" in str(error)

    def test_leading_slash_and_empty_templates_dir(self):
        resolver = TemplateResolver(InMemoryContentStore({"page.html": "root"}), templates_dir="")
        assert resolver.resolve("/page.html") == "root"


class TestResolvePartial:
    """Tests for TemplateResolver.resolve_partial()."""

    @pytest.mark.parametrize("reference", ["foo", "foo.html", "_foo.html", "_foo"])
    def test_reference_forms(self, resolver, reference):
        assert resolver.resolve_partial(reference) == "foo partial"

    def test_partial_in_subdirectory(self, resolver):
        assert resolver.resolve_partial("users/card") == "card partial"
        assert resolver.find_partial("users/card.html")[0] == "users/_card.html"

    def test_partial_with_other_extension(self, resolver):
        assert resolver.find_partial("note") == ("_note.txt", "note partial")

    def test_partial_not_found(self, resolver):
        with pytest.raises(TemplateNotFoundError, match="Partial not found: bar") as exc_info:
            resolver.resolve_partial("bar")
        assert exc_info.value.partial

    def test_custom_partial_extension(self):
        store = make_store({"_row.jinja": "row"})
        resolver = TemplateResolver(store, partial_extension=".jinja")
        assert resolver.find_partial("row") == ("_row.jinja", "row")

    def test_partial_listing_is_read_once(self):
        store = CountingStore({"templates/_note.txt": "note"})
        resolver = TemplateResolver(store)
        assert resolver.resolve_partial("note") == "note"
        with pytest.raises(TemplateNotFoundError):
            resolver.resolve_partial("bar")
        with pytest.raises(TemplateNotFoundError):
            resolver.resolve_partial("baz")
        assert store.listings == 1

    def test_invalidate_rereads_listing(self):
        store = CountingStore()
        resolver = TemplateResolver(store)
        with pytest.raises(TemplateNotFoundError):
            resolver.resolve_partial("note")

        store.put("templates/_note.txt", "note")
        resolver.invalidate()
        assert resolver.resolve_partial("note") == "note"
        assert store.listings == 2


class TestInvalidEncoding:
    """Templates that are not UTF-8 fail the render."""

    def test_template_not_utf8(self):
        store = InMemoryContentStore({"templates/page.html": b"caf\xe9"})
        resolver = TemplateResolver(store)
        with pytest.raises(TemplateRenderError, match="not valid UTF-8") as exc_info:
            resolver.resolve("page.html")
        assert exc_info.value.name == "page.html"
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_suffixed_template_not_utf8(self):
        store = make_store({"page.html": "page"})
        store.put("templates/page_alt.html", b"\xff\xfe")
        resolver = TemplateResolver(store)
        with pytest.raises(TemplateRenderError) as exc_info:
            resolver.resolve("page.html", ["alt"])
        assert exc_info.value.name == "page_alt.html"

    def test_partial_not_utf8(self):
        store = InMemoryContentStore({"templates/_card.html": b"\xc3\x28"})
        resolver = TemplateResolver(store)
        with pytest.raises(TemplateRenderError, match="_card.html"):
            resolver.resolve_partial("card")
