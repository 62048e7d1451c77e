"""Tests for per-style transformation functions."""

import random

import pytest

from glyphforge.character import transformation as tx
from glyphforge.character.tables import ZALGO_MARKS, ZALGO_MID
from glyphforge.character.transformation import (
    ZALGO_MARK_COUNTS,
    ZalgoMarkCounts,
    ZalgoOptions,
    apply_map,
)
from glyphforge.shared.config import ZalgoIntensity


def mark_runs(text):
    """Lengths of the combining mark runs after each base character."""
    runs = []
    for char in text:
        if char in ZALGO_MARKS:
            runs[-1] += 1
        else:
            runs.append(0)
    return runs


class TestApplyMap:
    """Test table substitution."""

    def test_unmapped_characters_pass_through(self):
        assert apply_map("a-b", {"a": "x"}) == "x-b"

    def test_empty_input(self):
        assert apply_map("", {"a": "x"}) == ""


class TestMapStyles:
    """Test table-driven styles."""

    def test_bold(self):
        assert tx.bold("AB") == "\U0001D400\U0001D401"

    def test_out_of_domain_passthrough(self):
        """Test a digit under fraktur is left unchanged."""
        result = tx.fraktur("a1")

        assert result[0] == "\U0001D51E"
        assert result[1] == "1"

    def test_astral_input_is_not_split(self):
        """Test styled astral characters pass through as whole characters."""
        styled = tx.bold("Hi")

        assert len(styled) == 2
        assert tx.italic(styled) == styled

    def test_small_caps_folds_case(self):
        assert tx.small_caps("Ab") == "ᴀʙ"

    def test_subscript_partial_coverage(self):
        assert tx.subscript("a2b") == "ₐ₂b"

    def test_vaporwave(self):
        assert tx.vaporwave("A b") == "Ａ　ｂ"

    def test_leet(self):
        assert tx.leet("Leet") == "1337"

    def test_upside_down_reverses(self):
        """Test characters are flipped and the sequence reversed."""
        assert tx.upside_down("ab") == "qɐ"
        assert tx.upside_down("Hi!") == "¡ıH"


class TestEncodings:
    """Test Morse, binary and hex encodings."""

    def test_morse(self):
        assert tx.morse("SOS") == "... --- ..."

    def test_morse_uppercases_input(self):
        assert tx.morse("sos") == "... --- ..."

    def test_morse_unknown_characters_pass_through(self):
        assert tx.morse("a b") == ".-   -..."
        assert tx.morse("#") == "#"

    def test_binary(self):
        assert tx.binary("A") == "01000001"
        assert tx.binary("AB") == "01000001 01000010"

    def test_hexadecimal(self):
        assert tx.hexadecimal("A") == "41"
        assert tx.hexadecimal("\n") == "0a"

    def test_encodings_keep_only_low_byte(self):
        """Test codepoints above U+00FF are truncated to their low byte."""
        assert tx.binary("Ł") == "01000001"
        assert tx.hexadecimal("€") == "ac"
        assert tx.hexadecimal("Ł") == tx.hexadecimal("A")


class TestZalgoOptions:
    """Test zalgo options coercion."""

    def test_defaults(self):
        options = ZalgoOptions()

        assert options.intensity is ZalgoIntensity.NORMAL
        assert options.counts == ZalgoMarkCounts(3, 1, 3)

    def test_intensity_from_wire_value(self):
        assert ZalgoOptions(intensity="maxi").intensity is ZalgoIntensity.MAXI

    def test_unknown_intensity(self):
        with pytest.raises(ValueError, match="Unknown zalgo intensity"):
            ZalgoOptions(intensity="huge")

    def test_pool_switches(self):
        options = ZalgoOptions(intensity="maxi", up=False, down=False)

        assert options.counts == ZalgoMarkCounts(up=0, mid=3, down=0)
        assert options.counts.total == 3

    def test_from_value(self):
        assert ZalgoOptions.from_value(None) == ZalgoOptions()
        assert ZalgoOptions.from_value("mini").intensity is ZalgoIntensity.MINI
        assert ZalgoOptions.from_value(ZalgoIntensity.MAXI).intensity is ZalgoIntensity.MAXI
        assert ZalgoOptions.from_value({"intensity": "mini", "mid": False}) == ZalgoOptions(
            intensity=ZalgoIntensity.MINI, mid=False
        )

    def test_from_value_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="Unknown zalgo options"):
            ZalgoOptions.from_value({"intensity": "mini", "sideways": True})

    def test_from_value_rejects_other_types(self):
        with pytest.raises(TypeError):
            ZalgoOptions.from_value(3)

    def test_mark_count_table(self):
        assert ZALGO_MARK_COUNTS[ZalgoIntensity.MINI].total == 2
        assert ZALGO_MARK_COUNTS[ZalgoIntensity.NORMAL].total == 7
        assert ZALGO_MARK_COUNTS[ZalgoIntensity.MAXI].total == 19


class TestZalgo:
    """Test zalgo decoration."""

    def test_mini_run_bounds(self):
        result = tx.zalgo("Hello", ZalgoOptions(intensity="mini"), random.Random())
        runs = mark_runs(result)

        assert len(runs) == 5
        assert all(run <= 2 for run in runs)

    def test_maxi_run_bounds(self):
        result = tx.zalgo("Hello", ZalgoOptions(intensity="maxi"), random.Random())

        assert all(run <= 19 for run in mark_runs(result))

    def test_base_characters_preserved(self):
        result = tx.zalgo("Hello", rng=random.Random(3))

        assert "".join(char for char in result if char not in ZALGO_MARKS) == "Hello"

    def test_seeded_output_is_reproducible(self):
        first = tx.zalgo("Hello", ZalgoOptions(intensity="maxi"), random.Random(42))
        second = tx.zalgo("Hello", ZalgoOptions(intensity="maxi"), random.Random(42))

        assert first == second

    def test_disabled_pools(self):
        result = tx.zalgo("ab", ZalgoOptions(up=False, down=False), random.Random(1))
        marks = [char for char in result if char in ZALGO_MARKS]

        assert len(marks) == 2
        assert all(mark in ZALGO_MID for mark in marks)

    def test_empty_input(self):
        assert tx.zalgo("", rng=random.Random(1)) == ""


class TestDecorations:
    """Test combining-mark and wrapping decorations."""

    def test_strikethrough(self):
        assert tx.strikethrough("ab") == "a̶b̶"

    def test_underline(self):
        assert tx.underline("ab") == "a̲b̲"

    def test_sparkles(self):
        assert tx.sparkles("hi") == "✨ h ✨ i ✨"

    def test_wave(self):
        assert tx.wave("hi") == "~h~i~"

    def test_wrapping_styles_on_empty_input(self):
        assert tx.sparkles("") == "✨  ✨"
        assert tx.wave("") == "~~"


class TestAliases:
    """Test alias styles match their targets exactly."""

    @pytest.mark.parametrize("text", ["", "Hello World", "abc123", "\U0001D400?"])
    def test_bubble_is_circled(self, text):
        assert tx.bubble(text) == tx.circled(text)

    @pytest.mark.parametrize("text", ["", "Hello World", "abc123", "\U0001D400?"])
    def test_medieval_is_fraktur(self, text):
        assert tx.medieval(text) == tx.fraktur(text)
