"""Tests for identity normalization and parsing."""

import pytest
from adiparse.core.errors import FailureKind
from adiparse.identity import (
    ParsedIdentity,
    identity_url_from_name,
    normalize_identity_url,
    parse_identity_url,
    path_train,
    strip_scheme,
)


class TestNormalizeIdentityUrl:
    """Tests for normalize_identity_url."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("sunstream", "acc://sunstream.acme"),
            ("sunstream.acme", "acc://sunstream.acme"),
            ("acc://sunstream.acme", "acc://sunstream.acme"),
            ("ACC://SunStream.ACME", "acc://sunstream.acme"),
            ("acc://sunstream.acme/", "acc://sunstream.acme"),
            ("acc://sunstream.acme/blog//", "acc://sunstream.acme/blog"),
            ("sunstream/blog", "acc://sunstream.acme/blog"),
            ("sunstream/notes.acme", "acc://sunstream.acme/notes.acme"),
            ("acc://sunstream.acme/notes.acme", "acc://sunstream.acme/notes.acme"),
            ("  sunstream  ", "acc://sunstream.acme"),
        ],
    )
    def test_accepted_shapes(self, raw, expected):
        assert normalize_identity_url(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_blank_input_is_invalid(self, raw):
        assert normalize_identity_url(raw) is None

    @pytest.mark.parametrize(
        "raw",
        ["sunstream", "SunStream.acme", "acc://sunstream", "sunstream/blog/", "acc://a.acme/x/y"],
    )
    def test_idempotent(self, raw):
        once = normalize_identity_url(raw)
        assert normalize_identity_url(once) == once

    def test_identity_url_from_name(self):
        assert identity_url_from_name("Sunstream") == "acc://sunstream.acme"

    def test_strip_scheme(self):
        assert strip_scheme("acc://sunstream.acme") == "sunstream.acme"
        assert strip_scheme("sunstream.acme") == "sunstream.acme"


class TestParseIdentityUrl:
    """Tests for parse_identity_url."""

    def test_root_identity(self):
        result = parse_identity_url("acc://sunstream.acme")

        assert result.parsed is True
        assert result.failure is None
        identity = result.identity
        assert identity.canonical_url == "acc://sunstream.acme"
        assert identity.root_name == "sunstream"
        assert identity.sub_path == ""
        assert identity.path_train == "sunstream"
        assert identity.path == "sunstream.acme"
        assert identity.root_url == "acc://sunstream.acme"
        assert identity.data_account_url == "sunstream.acme"

    def test_sub_path(self):
        result = parse_identity_url("acc://sunstream.acme/somepath")

        assert result.identity.root_name == "sunstream"
        assert result.identity.sub_path == "somepath"
        assert result.identity.path_train == "sunstream.somepath"
        assert result.identity.root_url == "acc://sunstream.acme"

    def test_nested_sub_path_keeps_dots(self):
        result = parse_identity_url("sunstream/blog/post.v2")

        assert result.identity.sub_path == "blog/post.v2"
        assert result.identity.path_train == "sunstream.blog.post.v2"

    def test_loose_input_is_normalized(self):
        assert parse_identity_url("SunStream").identity == parse_identity_url(
            "acc://sunstream.acme"
        ).identity

    def test_blank_input_cannot_parse(self):
        result = parse_identity_url("  ")

        assert result.parsed is False
        assert result.identity is None
        assert result.failure == FailureKind.MALFORMED_LOCATOR
        assert result.reason == "empty identity url"

    @pytest.mark.parametrize("raw", ["acc://", "foo.bar", "acc://a.b.acme", "acc://.acme"])
    def test_malformed_shape_cannot_parse(self, raw):
        result = parse_identity_url(raw)

        assert result.parsed is False
        assert "invalid identity url format" in result.reason

    def test_to_dict(self):
        identity = parse_identity_url("sunstream/blog").identity
        assert identity.to_dict() == {
            "canonical_url": "acc://sunstream.acme/blog",
            "root_name": "sunstream",
            "sub_path": "blog",
            "path_train": "sunstream.blog",
            "root_url": "acc://sunstream.acme",
        }


def test_path_train_drops_empty_segments():
    assert path_train("a", "x//y/") == "a.x.y"
    assert path_train("a", "") == "a"


def test_parsed_identity_is_frozen():
    identity = ParsedIdentity(canonical_url="acc://a.acme", root_name="a")
    with pytest.raises(AttributeError):
        identity.root_name = "b"  # type: ignore[misc]
