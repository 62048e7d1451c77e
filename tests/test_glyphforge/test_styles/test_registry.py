"""Tests for the closed style registry."""

import random

import pytest

from glyphforge.character import tables
from glyphforge.character import transformation as tx
from glyphforge.shared.exceptions import StyleError, UnknownStyleError
from glyphforge.styles import (
    SAMPLE_TEXT,
    STYLE_DEFINITIONS,
    Style,
    StyleInfo,
    describe_styles,
    get_definition,
    is_style,
    resolve_style,
    reversible_styles,
    style_names,
)


class TestStyleEnumeration:
    """Test the set of registered styles."""

    def test_style_count(self):
        assert len(Style) == 31
        assert len(style_names()) == 31

    def test_listing_order(self):
        names = style_names()

        assert names[0] == "bold"
        assert names[-1] == "medieval"
        assert names.index("upsideDown") < names.index("zalgo")

    def test_every_style_has_one_definition(self):
        assert set(STYLE_DEFINITIONS) == set(Style)
        assert all(
            definition.style is style for style, definition in STYLE_DEFINITIONS.items()
        )

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            STYLE_DEFINITIONS[Style.BOLD] = None  # type: ignore[index]


class TestResolveStyle:
    """Test style name resolution."""

    def test_resolve_name(self):
        assert resolve_style("boldItalic") is Style.BOLD_ITALIC
        assert resolve_style(Style.HEX) is Style.HEX

    def test_unknown_name(self):
        with pytest.raises(UnknownStyleError, match="Unknown style: not-a-style") as exc_info:
            resolve_style("not-a-style")

        assert exc_info.value.style == "not-a-style"
        assert isinstance(exc_info.value, StyleError)
        assert isinstance(exc_info.value, ValueError)

    def test_names_are_case_sensitive(self):
        with pytest.raises(UnknownStyleError):
            resolve_style("Bold")

    def test_non_string(self):
        with pytest.raises(UnknownStyleError):
            resolve_style(None)

    def test_is_style(self):
        assert is_style("wave")
        assert not is_style("WAVE")
        assert not is_style(3)


class TestStyleDefinition:
    """Test per-style definitions."""

    def test_alias_tables(self):
        assert get_definition("bubble").table is tables.CIRCLED_MAP
        assert get_definition("medieval").table is tables.FRAKTUR_MAP

    def test_apply(self):
        assert get_definition("bold").apply("AB") == "\U0001D400\U0001D401"
        assert get_definition(Style.WAVE).apply("ab") == "~a~b~"

    def test_handler_signature(self):
        definition = get_definition("zalgo")
        result = definition.handler("a", tx.ZalgoOptions(intensity="mini"), random.Random(1))

        assert len(result) == 3

    def test_reversible_styles(self):
        reversible = reversible_styles()

        assert "bold" in reversible
        assert "bubble" in reversible
        for name in ("upsideDown", "zalgo", "morse", "binary", "hex",
                     "strikethrough", "underline", "sparkles", "wave"):
            assert name not in reversible

    def test_inverse_and_domain(self):
        definition = get_definition("squared")

        assert definition.reversible
        assert definition.inverse["\U0001F130"] == "A"
        assert "A" in definition.domain
        assert "a" not in definition.domain

    def test_non_table_style_has_no_inverse(self):
        definition = get_definition("morse")

        assert not definition.reversible
        assert definition.inverse is None
        assert definition.domain == frozenset()


class TestDescribeStyles:
    """Test style discovery."""

    def test_describes_every_style_in_order(self):
        infos = describe_styles()

        assert [info.name for info in infos] == list(style_names())
        assert all(isinstance(info, StyleInfo) for info in infos)
        assert all(info.description for info in infos)

    def test_examples_render_sample(self):
        infos = {info.name: info for info in describe_styles()}

        assert SAMPLE_TEXT == "Hello"
        assert infos["bold"].example == tx.bold("Hello")
        assert infos["morse"].example == ".... . .-.. .-.. ---"
        assert infos["wave"].example == "~H~e~l~l~o~"

    def test_zalgo_example_uses_given_intensity(self):
        infos = {info.name: info for info in describe_styles(rng=random.Random(5))}

        # mini: one mark above and one below per character
        assert len(infos["zalgo"].example) == len("Hello") * 3

    def test_custom_sample(self):
        infos = {info.name: info for info in describe_styles(sample="Hi")}

        assert infos["hex"].example == "48 69"

    def test_to_dict(self):
        info = StyleInfo(name="bold", description="Bold", example="x")

        assert info.to_dict() == {"name": "bold", "description": "Bold", "example": "x"}
