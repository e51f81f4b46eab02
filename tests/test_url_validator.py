import pytest
from wishlist.services.url_validator import URLValidator


class TestURLValidator:
    """Unit tests for URLValidator"""

    def setup_method(self):
        """Set up test fixtures before each test method."""
        self.validator = URLValidator()

    @pytest.mark.parametrize("url", [
        "https://www.example.com",
        "http://example.com",
        "https://shop.example.com/products/42?color=red",
        "https://example.com:8443/path",
    ])
    def test_valid_urls(self, url):
        """Test that public http(s) URLs are accepted."""
        assert self.validator.validate(url) is True

    @pytest.mark.parametrize("url", [
        "",
        "not-a-url",
        "ftp://example.com",
        "javascript:alert('xss')",
        "//example.com",
        "https://",
        "http://:80",
    ])
    def test_invalid_urls(self, url):
        """Test that malformed URLs and other schemes are rejected."""
        assert self.validator.validate(url) is False

    def test_non_string_input(self):
        assert self.validator.validate(None) is False
        assert self.validator.validate(b"https://example.com") is False

    @pytest.mark.parametrize("url", [
        "http://127.0.0.1",
        "http://localhost",
        "http://10.0.0.1",
        "http://172.16.0.1",
        "http://192.168.1.1",
        "https://127.0.0.1:8080",
        "https://localhost/path",
    ])
    def test_private_hosts_are_blocked(self, url):
        """Test that private hosts are blocked to prevent SSRF."""
        assert self.validator.validate(url) is False

    def test_private_hosts_allowed_when_blocking_is_off(self):
        validator = URLValidator(block_private_hosts=False)

        assert validator.validate("http://localhost:8080/wishlist") is True
        assert validator.validate("http://192.168.1.1") is True
        assert validator.validate("ftp://localhost") is False

    def test_public_172_range_is_not_blocked(self):
        assert self.validator.validate("http://172.32.0.1") is True

    def test_out_of_range_port(self):
        """Test that out-of-range ports return False."""
        assert self.validator.validate("http://[::1]:65536") is False
        assert self.validator.validate("http://example.com:999999") is False
