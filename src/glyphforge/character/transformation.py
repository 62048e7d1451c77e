"""Per-style text transformations.

Every function here is a pure mapping from an input string to a styled string,
iterating by Unicode scalar value (Python ``str`` characters), so astral
characters such as the mathematical alphabets are never split. Characters a
style does not define pass through unchanged.

The only non-deterministic style is zalgo; it draws from an injectable
``random.Random`` so callers can seed it.
"""

import random
from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional, Union

from glyphforge.shared.config import ZalgoIntensity

from .tables import (
    BOLD_FRAKTUR_MAP,
    BOLD_ITALIC_MAP,
    BOLD_MAP,
    BOLD_SCRIPT_MAP,
    CIRCLED_MAP,
    COMBINING_LONG_STROKE_OVERLAY,
    COMBINING_LOW_LINE,
    DOUBLE_STRUCK_MAP,
    FRAKTUR_MAP,
    FULLWIDTH_MAP,
    ITALIC_MAP,
    LEET_MAP,
    MONOSPACE_MAP,
    MORSE_MAP,
    NEGATIVE_CIRCLED_MAP,
    NEGATIVE_SQUARED_MAP,
    PARENTHESIZED_MAP,
    REGIONAL_MAP,
    SCRIPT_MAP,
    SMALL_CAPS_MAP,
    SPARKLE,
    SQUARED_MAP,
    SUBSCRIPT_MAP,
    SUPERSCRIPT_MAP,
    UPSIDE_DOWN_MAP,
    WAVE,
    ZALGO_DOWN,
    ZALGO_MID,
    ZALGO_UP,
    CodepointMap,
)

BYTE_MASK = 0xFF
MORSE_SEPARATOR = " "
ENCODING_SEPARATOR = " "


class ZalgoMarkCounts(NamedTuple):
    """Number of marks drawn from each pool per base character."""

    up: int
    mid: int
    down: int

    @property
    def total(self) -> int:
        return self.up + self.mid + self.down


ZALGO_MARK_COUNTS: Dict[ZalgoIntensity, ZalgoMarkCounts] = {
    ZalgoIntensity.MINI: ZalgoMarkCounts(up=1, mid=0, down=1),
    ZalgoIntensity.NORMAL: ZalgoMarkCounts(up=3, mid=1, down=3),
    ZalgoIntensity.MAXI: ZalgoMarkCounts(up=8, mid=3, down=8),
}


@dataclass(frozen=True)
class ZalgoOptions:
    """Options for the zalgo style.

    Attributes:
        intensity: How many marks to draw per pool
        up: Draw marks placed above the base character
        mid: Draw marks overlaying the base character
        down: Draw marks placed below the base character
    """

    intensity: ZalgoIntensity = ZalgoIntensity.NORMAL
    up: bool = True
    mid: bool = True
    down: bool = True

    def __post_init__(self) -> None:
        """Accept wire values such as ``"maxi"`` for the intensity."""
        object.__setattr__(self, "intensity", ZalgoIntensity.parse(self.intensity))

    @property
    def counts(self) -> ZalgoMarkCounts:
        """Effective per-pool counts after applying the pool switches."""
        base = ZALGO_MARK_COUNTS[self.intensity]
        return ZalgoMarkCounts(
            up=base.up if self.up else 0,
            mid=base.mid if self.mid else 0,
            down=base.down if self.down else 0,
        )

    @classmethod
    def from_value(
        cls, value: Union[None, str, ZalgoIntensity, "ZalgoOptions", Dict[str, object]]
    ) -> "ZalgoOptions":
        """Coerce ``None``, an intensity, a mapping or an instance to options."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, (str, ZalgoIntensity)):
            return cls(intensity=ZalgoIntensity.parse(value))
        if isinstance(value, dict):
            unknown = set(value) - {"intensity", "up", "mid", "down"}
            if unknown:
                raise ValueError(f"Unknown zalgo options: {sorted(unknown)}")
            return cls(**value)  # type: ignore[arg-type]
        raise TypeError(f"Cannot build zalgo options from {type(value).__name__}")


_DEFAULT_RNG = random.Random()


def apply_map(text: str, table: CodepointMap) -> str:
    """Substitute each character through ``table``, keeping unmapped ones."""
    return "".join(table.get(char, char) for char in text)


# Unicode font transforms
def bold(text: str) -> str:
    return apply_map(text, BOLD_MAP)


def italic(text: str) -> str:
    return apply_map(text, ITALIC_MAP)


def bold_italic(text: str) -> str:
    return apply_map(text, BOLD_ITALIC_MAP)


def script(text: str) -> str:
    return apply_map(text, SCRIPT_MAP)


def bold_script(text: str) -> str:
    return apply_map(text, BOLD_SCRIPT_MAP)


def fraktur(text: str) -> str:
    return apply_map(text, FRAKTUR_MAP)


def bold_fraktur(text: str) -> str:
    return apply_map(text, BOLD_FRAKTUR_MAP)


def double_struck(text: str) -> str:
    return apply_map(text, DOUBLE_STRUCK_MAP)


def monospace(text: str) -> str:
    return apply_map(text, MONOSPACE_MAP)


def circled(text: str) -> str:
    return apply_map(text, CIRCLED_MAP)


def negative_circled(text: str) -> str:
    return apply_map(text, NEGATIVE_CIRCLED_MAP)


def squared(text: str) -> str:
    return apply_map(text, SQUARED_MAP)


def negative_squared(text: str) -> str:
    return apply_map(text, NEGATIVE_SQUARED_MAP)


def parenthesized(text: str) -> str:
    return apply_map(text, PARENTHESIZED_MAP)


def small_caps(text: str) -> str:
    return apply_map(text, SMALL_CAPS_MAP)


def superscript(text: str) -> str:
    return apply_map(text, SUPERSCRIPT_MAP)


def subscript(text: str) -> str:
    return apply_map(text, SUBSCRIPT_MAP)


def upside_down(text: str) -> str:
    """Flip each character, then reverse the sequence of resulting characters."""
    return apply_map(text, UPSIDE_DOWN_MAP)[::-1]


def vaporwave(text: str) -> str:
    return apply_map(text, FULLWIDTH_MAP)


def regional(text: str) -> str:
    return apply_map(text, REGIONAL_MAP)


def leet(text: str) -> str:
    return apply_map(text, LEET_MAP)


# Encodings
def morse(text: str) -> str:
    """Encode as Morse code, one space between character codes.

    Characters without a code (including spaces) are emitted as themselves.
    """
    return MORSE_SEPARATOR.join(MORSE_MAP.get(char, char) for char in text.upper())


def binary(text: str) -> str:
    """Encode each character as 8 binary digits.

    Only the low byte of each codepoint is kept, so characters above U+00FF
    are truncated.
    """
    return ENCODING_SEPARATOR.join(
        format(ord(char) & BYTE_MASK, "08b") for char in text
    )


def hexadecimal(text: str) -> str:
    """Encode each character as 2 lowercase hex digits (low byte only)."""
    return ENCODING_SEPARATOR.join(
        format(ord(char) & BYTE_MASK, "02x") for char in text
    )


# Decorations
def zalgo(
    text: str,
    options: Optional[ZalgoOptions] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Append random combining marks after every character.

    Marks are drawn with replacement, up pool first, then mid, then down.

    Args:
        text: Input text
        options: Intensity and pool switches (defaults to normal, all pools)
        rng: Random source; pass a seeded ``random.Random`` for reproducible
            output

    Returns:
        Text with combining marks stacked on each character
    """
    counts = (options or ZalgoOptions()).counts
    source = rng or _DEFAULT_RNG

    pieces = []
    for char in text:
        pieces.append(char)
        pieces.extend(source.choice(ZALGO_UP) for _ in range(counts.up))
        pieces.extend(source.choice(ZALGO_MID) for _ in range(counts.mid))
        pieces.extend(source.choice(ZALGO_DOWN) for _ in range(counts.down))
    return "".join(pieces)


def strikethrough(text: str) -> str:
    return "".join(char + COMBINING_LONG_STROKE_OVERLAY for char in text)


def underline(text: str) -> str:
    return "".join(char + COMBINING_LOW_LINE for char in text)


def sparkles(text: str) -> str:
    joiner = f" {SPARKLE} "
    return f"{SPARKLE} " + joiner.join(text) + f" {SPARKLE}"


def wave(text: str) -> str:
    return WAVE + WAVE.join(text) + WAVE


# Aliases
def bubble(text: str) -> str:
    """Bubble letters; identical to :func:`circled`."""
    return circled(text)


def medieval(text: str) -> str:
    """Medieval lettering; identical to :func:`fraktur`."""
    return fraktur(text)
