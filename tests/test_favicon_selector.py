import pytest
from bs4 import BeautifulSoup

from wishlist.core.models import FaviconAttributes
from wishlist.services.exceptions import FaviconNotFoundError
from wishlist.services.favicon_selector import (
    NO_SIZE,
    is_acceptable,
    largest_width,
    relation_tier,
    select_favicon,
)


def head_of(links: str):
    html = f"<html><head><title>Shop</title>{links}</head><body></body></html>"
    return BeautifulSoup(html, "lxml", multi_valued_attributes=None).head


class TestSelectFavicon:
    """Unit tests for select_favicon"""

    def test_mask_icon_beats_larger_icon(self):
        """Test the relation tier decides before any size is considered."""
        head = head_of(
            '<link rel="icon" sizes="16x16" href="/icon-16.png">'
            '<link rel="mask-icon" href="/mask.png">'
        )

        assert select_favicon(head) == "/mask.png"

    def test_apple_touch_icon_beats_plain_icon(self):
        """Test apple icons rank above plain icons regardless of size."""
        head = head_of(
            '<link rel="icon" sizes="512x512" href="/icon-512.png">'
            '<link rel="apple-touch-icon" sizes="57x57" href="/apple-57.png">'
        )

        assert select_favicon(head) == "/apple-57.png"

    def test_mask_icon_beats_apple_touch_icon(self):
        head = head_of(
            '<link rel="apple-touch-icon" sizes="180x180" href="/apple.png">'
            '<link rel="mask-icon" href="/mask.png">'
        )

        assert select_favicon(head) == "/mask.png"

    def test_larger_size_wins_within_tier(self):
        """Test two plain icons are ordered by declared width."""
        head = head_of(
            '<link rel="icon" sizes="16x16" href="/icon-16.png">'
            '<link rel="icon" sizes="32x32" href="/icon-32.png">'
        )

        assert select_favicon(head) == "/icon-32.png"

    def test_each_candidate_ranked_by_its_own_sizes(self):
        """Test every candidate is measured by its own sizes attribute."""
        # If the first candidate's sizes were used for both sides of the
        # comparison every pair would tie and document order would pick
        # the 16x16 icon.
        head = head_of(
            '<link rel="icon" sizes="16x16" href="/icon-16.png">'
            '<link rel="icon" sizes="96x96" href="/icon-96.png">'
            '<link rel="icon" sizes="48x48" href="/icon-48.png">'
        )

        assert select_favicon(head) == "/icon-96.png"

    def test_largest_token_of_a_candidate_counts(self):
        """Test a multi-size candidate is ranked by its largest width."""
        head = head_of(
            '<link rel="icon" sizes="32x32" href="/single.png">'
            '<link rel="icon" sizes="16x16 64x64" href="/multi.png">'
        )

        assert select_favicon(head) == "/multi.png"

    def test_sized_candidate_beats_unsized_one(self):
        """Test a parseable size outranks a missing or unparseable one."""
        head = head_of(
            '<link rel="icon" href="/unsized.png">'
            '<link rel="icon" sizes="any" href="/any.png">'
            '<link rel="icon" sizes="16x16" href="/sized.png">'
        )

        assert select_favicon(head) == "/sized.png"

    def test_ties_keep_document_order(self):
        """Test equal candidates resolve to the first one declared."""
        head = head_of(
            '<link rel="icon" href="/first.png">'
            '<link rel="shortcut icon" href="/second.png">'
        )

        assert select_favicon(head) == "/first.png"

    def test_non_png_type_is_excluded(self):
        """Test an SVG icon is skipped even though it would rank first."""
        head = head_of(
            '<link rel="mask-icon" type="image/svg+xml" href="/mask.svg">'
            '<link rel="icon" href="/favicon.png">'
        )

        assert select_favicon(head) == "/favicon.png"

    def test_png_type_is_kept(self):
        head = head_of('<link rel="icon" type="image/png" href="/favicon.png">')

        assert select_favicon(head) == "/favicon.png"

    def test_unrelated_links_are_ignored(self):
        """Test stylesheets and canonical links are never picked."""
        head = head_of(
            '<link rel="stylesheet" href="/site.css">'
            '<link rel="canonical" href="https://shop.example.com/">'
        )

        with pytest.raises(FaviconNotFoundError):
            select_favicon(head)

    def test_only_svg_icons_raise(self):
        head = head_of('<link rel="icon" type="image/svg+xml" href="/favicon.svg">')

        with pytest.raises(FaviconNotFoundError):
            select_favicon(head)

    def test_missing_head_raises(self):
        """Test a document without a head has no favicon."""
        with pytest.raises(FaviconNotFoundError):
            select_favicon(None)

    def test_selection_is_deterministic(self):
        """Test repeated selection on the same tree gives the same answer."""
        head = head_of(
            '<link rel="icon" sizes="32x32" href="/a.png">'
            '<link rel="icon" sizes="32x32" href="/b.png">'
            '<link rel="apple-touch-icon-precomposed" href="/c.png">'
        )

        assert {select_favicon(head) for _ in range(5)} == {"/c.png"}


class TestIsAcceptable:
    """Unit tests for the candidate filter"""

    @pytest.mark.parametrize("rel", [
        "icon", "shortcut icon", "apple-touch-icon", "apple-touch-icon-precomposed", "mask-icon",
    ])
    def test_icon_relations_are_accepted(self, rel):
        assert is_acceptable(FaviconAttributes(rel=rel, href="/x.png"))

    @pytest.mark.parametrize("rel", ["stylesheet", "ICON", "", "preload"])
    def test_other_relations_are_rejected(self, rel):
        """Test relation matching is a case-sensitive substring check."""
        assert not is_acceptable(FaviconAttributes(rel=rel, href="/x.png"))

    def test_non_png_type_is_rejected(self):
        assert not is_acceptable(FaviconAttributes(rel="icon", type="image/x-icon"))


class TestRanking:
    """Unit tests for the ranking helpers"""

    @pytest.mark.parametrize("rel,expected", [
        ("mask-icon", 0),
        ("MASK-ICON", 0),
        ("apple-touch-icon", 1),
        ("Apple-Touch-Icon-Precomposed", 1),
        ("icon", 2),
        ("shortcut icon", 2),
    ])
    def test_relation_tier(self, rel, expected):
        assert relation_tier(rel) == expected

    @pytest.mark.parametrize("sizes,expected", [
        ("16x16", 16),
        ("16x16 32x32", 32),
        ("48X48", 48),
        ("  64x64  ", 64),
        ("any", NO_SIZE),
        ("", NO_SIZE),
        ("axb", NO_SIZE),
        ("any 24x24", 24),
    ])
    def test_largest_width(self, sizes, expected):
        assert largest_width(sizes) == expected
