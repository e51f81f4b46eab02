from dataclasses import dataclass
from typing import ClassVar, Tuple

import pytest
from bs4 import BeautifulSoup, NavigableString

from wishlist.core.models import FaviconAttributes, Metadata, OGPAttributes
from wishlist.services.attribute_binder import (
    bind_element_attributes,
    bind_ogp_pair,
    strip_ogp_prefix,
)
from wishlist.services.exceptions import BindingFailedError


@dataclass
class NumericSizes:
    sizes: int = 0

    BINDABLE_FIELDS: ClassVar[Tuple[str, ...]] = ("sizes",)


class UndeclaredField:
    BINDABLE_FIELDS: ClassVar[Tuple[str, ...]] = ("rel",)


def first_tag(html: str, **kwargs):
    return BeautifulSoup(html, "html.parser", **kwargs).find(True)


class TestBindElementAttributes:
    """Unit tests for bind_element_attributes"""

    def test_binds_matching_attributes(self):
        """Test matched attributes are copied and unknown ones ignored."""
        # Arrange
        link = first_tag('<link rel="icon" type="image/png" sizes="32x32" href="/icon.png" data-x="y">')
        candidate = FaviconAttributes()

        # Act
        bind_element_attributes(link, candidate)

        # Assert
        assert candidate == FaviconAttributes(rel="icon", type="image/png", sizes="32x32", href="/icon.png")

    def test_unmatched_fields_keep_defaults(self):
        """Test fields without a matching attribute stay empty."""
        candidate = FaviconAttributes()

        bind_element_attributes(first_tag('<link href="/favicon.ico">'), candidate)

        assert candidate.href == "/favicon.ico"
        assert candidate.rel == ""
        assert candidate.type == ""
        assert candidate.sizes == ""

    def test_attribute_names_match_case_insensitively(self):
        """Test attribute keys are matched regardless of case."""
        soup = BeautifulSoup("", "html.parser")
        meta = soup.new_tag("meta", attrs={"PROPERTY": "og:title", "Content": "Shoes"})
        attributes = OGPAttributes()

        bind_element_attributes(meta, attributes)

        assert attributes == OGPAttributes(property="og:title", content="Shoes")

    def test_multi_valued_attribute_keeps_raw_string(self):
        """Test a rel split into a list by bs4 is bound as the original string."""
        link = first_tag('<link rel="apple-touch-icon icon" href="/a.png">')
        candidate = FaviconAttributes()

        bind_element_attributes(link, candidate)

        assert candidate.rel == "apple-touch-icon icon"

    def test_non_element_node_fails(self):
        """Test binding a text node is rejected."""
        with pytest.raises(BindingFailedError):
            bind_element_attributes(NavigableString("icon"), FaviconAttributes())

    def test_non_string_field_fails(self):
        """Test a matched field that is not a string field is a binding error."""
        with pytest.raises(BindingFailedError) as exc_info:
            bind_element_attributes(first_tag('<link sizes="16x16">'), NumericSizes())

        assert exc_info.value.error_code == "BINDING_ERROR"
        assert "must be of type str" in exc_info.value.message

    def test_undeclared_field_fails(self):
        """Test a declared field the record does not have cannot be set."""
        with pytest.raises(BindingFailedError) as exc_info:
            bind_element_attributes(first_tag('<link rel="icon">'), UndeclaredField())

        assert "Cannot set field" in exc_info.value.message

    def test_unmatched_attributes_never_touch_broken_fields(self):
        """Test the type check only applies to fields that were matched."""
        target = NumericSizes()

        bind_element_attributes(first_tag('<link rel="icon">'), target)

        assert target.sizes == 0


class TestBindOGPPair:
    """Unit tests for bind_ogp_pair"""

    def setup_method(self):
        self.metadata = Metadata(url="https://shop.example.com/p/1")

    def test_prefixed_property_sets_field(self):
        """Test og:description sets description."""
        bind_ogp_pair(OGPAttributes(property="og:description", content="hi"), self.metadata)

        assert self.metadata.description == "hi"

    def test_unprefixed_property_sets_field(self):
        """Test the og: prefix is optional."""
        bind_ogp_pair(OGPAttributes(property="description", content="hi"), self.metadata)

        assert self.metadata.description == "hi"

    @pytest.mark.parametrize("prop", ["og:Title", "OG:title", "TITLE"])
    def test_property_matches_case_insensitively(self, prop):
        """Test the remaining key is compared case-insensitively."""
        bind_ogp_pair(OGPAttributes(property=prop, content="Shoes"), self.metadata)

        assert self.metadata.title == "Shoes"

    def test_image_property_sets_image(self):
        """Test og:image sets image."""
        bind_ogp_pair(OGPAttributes(property="og:image", content="https://cdn.example.com/a.jpg"), self.metadata)

        assert self.metadata.image == "https://cdn.example.com/a.jpg"

    @pytest.mark.parametrize("prop", ["og:site_name", "twitter:title", "og:image:width", "", "og:"])
    def test_unknown_property_is_ignored(self, prop):
        """Test properties without a matching field change nothing."""
        bind_ogp_pair(OGPAttributes(property=prop, content="x"), self.metadata)

        assert self.metadata == Metadata(url="https://shop.example.com/p/1")

    def test_og_url_never_overrides_url(self):
        """Test the record keeps the URL it was extracted from."""
        bind_ogp_pair(OGPAttributes(property="og:url", content="https://elsewhere.example.com"), self.metadata)

        assert self.metadata.url == "https://shop.example.com/p/1"

    def test_non_string_field_fails(self):
        """Test a matched non-string field is a binding error."""
        with pytest.raises(BindingFailedError):
            bind_ogp_pair(OGPAttributes(property="og:sizes", content="16x16"), NumericSizes())


class TestStripOGPPrefix:
    """Unit tests for strip_ogp_prefix"""

    @pytest.mark.parametrize("key,expected", [
        ("og:title", "title"),
        ("OG:title", "title"),
        ("title", "title"),
        ("twitter:og:title", "twitter:og:title"),
        ("og:og:title", "og:title"),
        ("", ""),
    ])
    def test_strips_only_a_leading_prefix(self, key, expected):
        assert strip_ogp_prefix(key) == expected
