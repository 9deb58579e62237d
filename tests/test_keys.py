"""Tests for key decoding and destination key derivation."""

from urllib.parse import quote, quote_plus

import pytest

from images_avif.core.exceptions import ConversionStage, KeyDecodeError
from images_avif.core.keys import decode_key, derive_target_key


class TestDecodeKey:
    """Tests for decode_key."""

    def test_literal_key_is_unchanged(self):
        assert decode_key("images/photo1.jpg") == "images/photo1.jpg"

    def test_plus_becomes_space(self):
        assert decode_key("images/holiday+photo.jpg") == "images/holiday photo.jpg"

    def test_percent_escapes_are_decoded(self):
        assert decode_key("images/caf%C3%A9%2B1.jpg") == "images/café+1.jpg"

    def test_decoding_twice_is_stable_for_literal_keys(self):
        key = "a/b/plain-key_01.png"
        assert decode_key(decode_key(key)) == key

    @pytest.mark.parametrize(
        "literal",
        [
            "photos/holiday photo.jpg",
            "photos/100% cotton.png",
            "résumé/été+hiver.jpeg",
            "deep/nested/path/with spaces/and&symbols=1.gif",
            "写真/猫.jpg",
        ],
    )
    def test_decoding_recovers_percent_encoded_keys(self, literal):
        assert decode_key(quote_plus(literal, safe="/")) == literal
        assert decode_key(quote(literal, safe="/")) == literal

    @pytest.mark.parametrize("raw_key", ["bad%zzkey.jpg", "trailing%", "half%a"])
    def test_malformed_escape_raises(self, raw_key):
        with pytest.raises(KeyDecodeError, match="failed to decode S3 key") as exc_info:
            decode_key(raw_key)
        assert exc_info.value.stage == ConversionStage.DECODE_KEY
        assert exc_info.value.key == raw_key

    def test_invalid_utf8_escape_raises(self):
        with pytest.raises(KeyDecodeError) as exc_info:
            decode_key("images/%FF%FE.jpg")
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class TestDeriveTargetKey:
    """Tests for derive_target_key."""

    @pytest.mark.parametrize(
        "source_key, expected",
        [
            ("a/b/photo.jpg", "a/b/photo.avif"),
            ("a/b/photo", "a/b/photo.avif"),
            ("a.b.jpg", "a.b.avif"),
            ("noext.", "noext.avif"),
            ("photos/img", "photos/img.avif"),
            ("dir.v2/photo", "dir.v2/photo.avif"),
            ("photo.JPEG", "photo.avif"),
            ("already.avif", "already.avif"),
            ("dir/.hidden", "dir/.avif"),
            (".hidden", ".avif"),
            ("a/...", "a/...avif"),
            ("a.d/", "a.d/.avif"),
        ],
    )
    def test_extension_replacement(self, source_key, expected):
        assert derive_target_key(source_key, ".avif") == expected

    def test_default_extension_is_avif(self):
        assert derive_target_key("images/photo1.jpg") == "images/photo1.avif"

    def test_custom_extension(self):
        assert derive_target_key("images/photo1.jpg", ".webp") == "images/photo1.webp"
