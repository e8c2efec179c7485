"""Tests for httpcontract enumerations."""

import pytest

from httpcontract.models.enums import HttpMethod


class TestHttpMethod:
    """Tests for HttpMethod."""

    def test_values_are_uppercase_names(self) -> None:
        """Test that every member's value equals its name."""
        for method in HttpMethod:
            assert method.value == method.name

    @pytest.mark.parametrize("raw", ["get", "GET", " Get "])
    def test_parse_is_case_insensitive(self, raw: str) -> None:
        """Test parsing method names regardless of case and whitespace."""
        assert HttpMethod.parse(raw) is HttpMethod.GET

    def test_parse_accepts_members(self) -> None:
        """Test that parsing a member returns the member."""
        assert HttpMethod.parse(HttpMethod.PATCH) is HttpMethod.PATCH

    def test_parse_rejects_unknown(self) -> None:
        """Test that unknown methods raise ValueError."""
        with pytest.raises(ValueError):
            HttpMethod.parse("FETCH")

    @pytest.mark.parametrize("raw", ["PROPFIND", "mkcol", "FETCH"])
    def test_lookup_maps_extension_methods_to_custom(self, raw: str) -> None:
        """Test that lookup tolerates methods outside the standard set."""
        assert HttpMethod.lookup(raw) is HttpMethod.CUSTOM

    def test_lookup_returns_standard_members(self) -> None:
        """Test that lookup agrees with parse for standard methods."""
        assert HttpMethod.lookup(" delete ") is HttpMethod.DELETE

    def test_permits_request_body(self) -> None:
        """Test which methods carry a request body."""
        assert HttpMethod.POST.permits_request_body()
        assert HttpMethod.PUT.permits_request_body()
        assert not HttpMethod.GET.permits_request_body()
        assert not HttpMethod.HEAD.permits_request_body()
        assert HttpMethod.CUSTOM.permits_request_body()

    def test_is_str(self) -> None:
        """Test that members compare equal to their string values."""
        assert HttpMethod.POST == "POST"
