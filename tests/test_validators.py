"""
Tests for boundary validation of management requests.
"""

from redirector.core.validators import (
    RedirectMapping,
    ValidationFailure,
    is_valid_target_url,
    parse_delete_key,
    parse_mapping_form,
)


class TestTargetURLValidation:
    """Test absolute URL validation for redirect targets."""

    def test_valid_urls(self):
        """Test that absolute URLs are accepted."""
        valid_urls = [
            "http://example.com",
            "https://example.com/posts",
            "https://www.example.com/path/to/page?query=value#frag",
            "http://subdomain.example.com:8080/path",
            "http://localhost:3000",
            "https://[::1]/",
            "mailto:someone@example.com",
            "ftp://files.example.com/pub",
        ]
        for url in valid_urls:
            assert is_valid_target_url(url), f"Should be valid: {url}"

    def test_invalid_urls(self):
        """Test that relative or malformed URLs are rejected."""
        invalid_urls = [
            "not a url",
            "example.com",  # Missing scheme
            "/relative/path",
            "",
            "http://",  # Missing host
            "https:///path-only",
            "http://example.com:99999",  # Port out of range
            "http://[::1",  # Unterminated IPv6 literal
            "1http://example.com",  # Scheme must start with a letter
            "https://exa mple.com",
        ]
        for url in invalid_urls:
            assert not is_valid_target_url(url), f"Should be invalid: {url}"


class TestParseMappingForm:
    """Test extraction of redirect mappings from form data."""

    def test_valid_form(self):
        result = parse_mapping_form(
            {"shortPath": "/blog", "targetUrl": "https://example.com/posts"}
        )
        assert result == RedirectMapping(short_path="/blog", target_url="https://example.com/posts")

    def test_missing_fields(self):
        """Missing or empty fields both count as missing."""
        forms = [
            {},
            {"shortPath": "/blog"},
            {"targetUrl": "https://example.com"},
            {"shortPath": "", "targetUrl": "https://example.com"},
            {"shortPath": "/blog", "targetUrl": ""},
        ]
        for form in forms:
            assert parse_mapping_form(form) is ValidationFailure.MISSING_FIELDS, f"Form: {form}"

    def test_short_path_must_start_with_slash(self):
        result = parse_mapping_form({"shortPath": "blog", "targetUrl": "https://example.com"})
        assert result is ValidationFailure.INVALID_SHORT_PATH

    def test_short_path_is_checked_before_target(self):
        result = parse_mapping_form({"shortPath": "blog", "targetUrl": "not a url"})
        assert result is ValidationFailure.INVALID_SHORT_PATH

    def test_invalid_target_url(self):
        result = parse_mapping_form({"shortPath": "/blog", "targetUrl": "not a url"})
        assert result is ValidationFailure.INVALID_TARGET_URL

    def test_target_url_is_trimmed(self):
        """Surrounding whitespace is dropped before validating and storing."""
        result = parse_mapping_form({"shortPath": "/blog", "targetUrl": "  https://example.com/posts\n"})
        assert result == RedirectMapping(short_path="/blog", target_url="https://example.com/posts")

    def test_whitespace_only_target_url(self):
        result = parse_mapping_form({"shortPath": "/blog", "targetUrl": "   "})
        assert result is ValidationFailure.INVALID_TARGET_URL

    def test_reserved_short_path(self):
        result = parse_mapping_form(
            {"shortPath": "/register", "targetUrl": "https://example.com"},
            reserved_paths=frozenset({"/register", "/health"}),
        )
        assert result is ValidationFailure.RESERVED_SHORT_PATH

    def test_failure_messages(self):
        """Each failure carries the plain-text body returned to clients."""
        assert ValidationFailure.MISSING_KEY.message == "Missing key"
        assert ValidationFailure.MISSING_FIELDS.message == "Missing required fields"
        assert ValidationFailure.INVALID_TARGET_URL.message == "Invalid target URL"


class TestParseDeleteKey:
    """Test extraction of the key to delete."""

    def test_key_present(self):
        assert parse_delete_key({"key": "/blog"}) == "/blog"

    def test_key_missing(self):
        assert parse_delete_key({}) is ValidationFailure.MISSING_KEY
        assert parse_delete_key({"key": ""}) is ValidationFailure.MISSING_KEY
