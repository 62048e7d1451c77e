"""Closed registry of GlyphForge styles.

The set of styles is fixed at import: :class:`Style` enumerates every name and
``STYLE_DEFINITIONS`` binds each member to exactly one handler, a description
and, for table-driven styles, the substitution table it uses. Adding a style
means touching the enum, the definitions below and, when table-driven,
:mod:`glyphforge.character.tables`.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Tuple, Union

from glyphforge.character import tables
from glyphforge.character import transformation as tx
from glyphforge.character.tables import CodepointMap, invert_map, reversible_domain
from glyphforge.character.transformation import ZalgoOptions
from glyphforge.shared.config import ZalgoIntensity
from glyphforge.shared.exceptions import UnknownStyleError

SAMPLE_TEXT = "Hello"

Handler = Callable[[str, ZalgoOptions, random.Random], str]


class Style(Enum):
    """Every style the engine can apply, in listing order."""

    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "boldItalic"
    SCRIPT = "script"
    BOLD_SCRIPT = "boldScript"
    FRAKTUR = "fraktur"
    BOLD_FRAKTUR = "boldFraktur"
    DOUBLE_STRUCK = "doubleStruck"
    MONOSPACE = "monospace"
    CIRCLED = "circled"
    NEGATIVE_CIRCLED = "negativeCircled"
    SQUARED = "squared"
    NEGATIVE_SQUARED = "negativeSquared"
    PARENTHESIZED = "parenthesized"
    SMALL_CAPS = "smallCaps"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"
    UPSIDE_DOWN = "upsideDown"
    VAPORWAVE = "vaporwave"
    REGIONAL = "regional"
    LEET = "leet"
    MORSE = "morse"
    BINARY = "binary"
    HEX = "hex"
    ZALGO = "zalgo"
    STRIKETHROUGH = "strikethrough"
    UNDERLINE = "underline"
    SPARKLES = "sparkles"
    WAVE = "wave"
    BUBBLE = "bubble"
    MEDIEVAL = "medieval"


@dataclass(frozen=True)
class StyleInfo:
    """Preview of a style for discovery."""

    name: str
    description: str
    example: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "description": self.description,
            "example": self.example,
        }


@dataclass(frozen=True)
class StyleDefinition:
    """Binding of a style to its handler.

    Attributes:
        style: Style member
        handler: Callable taking (text, zalgo options, random source)
        description: Human-readable description
        table: Substitution table for reversible table-driven styles
    """

    style: Style
    handler: Handler
    description: str
    table: Optional[CodepointMap] = None
    inverse: Optional[CodepointMap] = field(default=None, init=False, compare=False)
    domain: FrozenSet[str] = field(default=frozenset(), init=False, compare=False)

    def __post_init__(self) -> None:
        """Precompute the inverse table of reversible styles."""
        if self.table is not None:
            object.__setattr__(self, "inverse", invert_map(self.table))
            object.__setattr__(self, "domain", reversible_domain(self.table))

    @property
    def name(self) -> str:
        return self.style.value

    @property
    def reversible(self) -> bool:
        return self.inverse is not None

    def apply(
        self,
        text: str,
        options: Optional[ZalgoOptions] = None,
        rng: Optional[random.Random] = None,
    ) -> str:
        return self.handler(text, options or ZalgoOptions(), rng or random.Random())


def _text_only(func: Callable[[str], str]) -> Handler:
    def handler(text: str, options: ZalgoOptions, rng: random.Random) -> str:
        return func(text)

    handler.__name__ = func.__name__
    handler.__doc__ = func.__doc__
    return handler


def _zalgo_handler(text: str, options: ZalgoOptions, rng: random.Random) -> str:
    return tx.zalgo(text, options, rng)


def _define(
    style: Style,
    func: Callable[[str], str],
    description: str,
    table: Optional[CodepointMap] = None,
) -> StyleDefinition:
    return StyleDefinition(style, _text_only(func), description, table)


_DEFINITION_LIST: Tuple[StyleDefinition, ...] = (
    _define(Style.BOLD, tx.bold, "Mathematical bold text", tables.BOLD_MAP),
    _define(Style.ITALIC, tx.italic, "Mathematical italic text", tables.ITALIC_MAP),
    _define(Style.BOLD_ITALIC, tx.bold_italic, "Mathematical bold italic text",
            tables.BOLD_ITALIC_MAP),
    _define(Style.SCRIPT, tx.script, "Mathematical script/cursive text",
            tables.SCRIPT_MAP),
    _define(Style.BOLD_SCRIPT, tx.bold_script, "Mathematical bold script text",
            tables.BOLD_SCRIPT_MAP),
    _define(Style.FRAKTUR, tx.fraktur, "Mathematical Fraktur/Gothic text",
            tables.FRAKTUR_MAP),
    _define(Style.BOLD_FRAKTUR, tx.bold_fraktur, "Mathematical bold Fraktur text",
            tables.BOLD_FRAKTUR_MAP),
    _define(Style.DOUBLE_STRUCK, tx.double_struck, "Mathematical double-struck text",
            tables.DOUBLE_STRUCK_MAP),
    _define(Style.MONOSPACE, tx.monospace, "Mathematical monospace text",
            tables.MONOSPACE_MAP),
    _define(Style.CIRCLED, tx.circled, "Circled letters", tables.CIRCLED_MAP),
    _define(Style.NEGATIVE_CIRCLED, tx.negative_circled, "Negative circled letters",
            tables.NEGATIVE_CIRCLED_MAP),
    _define(Style.SQUARED, tx.squared, "Squared letters", tables.SQUARED_MAP),
    _define(Style.NEGATIVE_SQUARED, tx.negative_squared, "Negative squared letters",
            tables.NEGATIVE_SQUARED_MAP),
    _define(Style.PARENTHESIZED, tx.parenthesized, "Parenthesized letters",
            tables.PARENTHESIZED_MAP),
    _define(Style.SMALL_CAPS, tx.small_caps, "Small capital letters",
            tables.SMALL_CAPS_MAP),
    _define(Style.SUPERSCRIPT, tx.superscript, "Superscript text",
            tables.SUPERSCRIPT_MAP),
    _define(Style.SUBSCRIPT, tx.subscript, "Subscript text", tables.SUBSCRIPT_MAP),
    _define(Style.UPSIDE_DOWN, tx.upside_down, "Upside down/flipped text"),
    _define(Style.VAPORWAVE, tx.vaporwave, "Fullwidth vaporwave aesthetic",
            tables.FULLWIDTH_MAP),
    _define(Style.REGIONAL, tx.regional, "Regional indicator symbols",
            tables.REGIONAL_MAP),
    _define(Style.LEET, tx.leet, "Leet speak (1337)", tables.LEET_MAP),
    _define(Style.MORSE, tx.morse, "Morse code"),
    _define(Style.BINARY, tx.binary, "Binary encoding"),
    _define(Style.HEX, tx.hexadecimal, "Hexadecimal encoding"),
    StyleDefinition(Style.ZALGO, _zalgo_handler, "Zalgo/cursed text"),
    _define(Style.STRIKETHROUGH, tx.strikethrough, "Strikethrough text"),
    _define(Style.UNDERLINE, tx.underline, "Underlined text"),
    _define(Style.SPARKLES, tx.sparkles, "Sparkle decorated text"),
    _define(Style.WAVE, tx.wave, "Wave decorated text"),
    _define(Style.BUBBLE, tx.bubble, "Bubble letters (same as circled)",
            tables.CIRCLED_MAP),
    _define(Style.MEDIEVAL, tx.medieval, "Medieval/Gothic style (same as fraktur)",
            tables.FRAKTUR_MAP),
)

STYLE_DEFINITIONS: Mapping[Style, StyleDefinition] = MappingProxyType(
    {definition.style: definition for definition in _DEFINITION_LIST}
)

_undefined = [style.value for style in Style if style not in STYLE_DEFINITIONS]
if _undefined:
    raise RuntimeError(f"Styles without a handler: {_undefined}")


def resolve_style(style: Union[str, Style, Any]) -> Style:
    """Resolve a style name to its enum member.

    Raises:
        UnknownStyleError: If the name is not in the enumeration
    """
    if isinstance(style, Style):
        return style
    if isinstance(style, str):
        try:
            return Style(style)
        except ValueError:
            raise UnknownStyleError(style) from None
    raise UnknownStyleError(style)


def get_definition(style: Union[str, Style]) -> StyleDefinition:
    """Look up the definition of a style by member or name."""
    return STYLE_DEFINITIONS[resolve_style(style)]


def style_names() -> Tuple[str, ...]:
    """All style names in listing order."""
    return tuple(style.value for style in Style)


def is_style(name: object) -> bool:
    return isinstance(name, str) and name in _NAMES


def reversible_styles() -> Tuple[str, ...]:
    return tuple(
        definition.name for definition in _DEFINITION_LIST if definition.reversible
    )


def describe_styles(
    sample: str = SAMPLE_TEXT,
    rng: Optional[random.Random] = None,
    example_intensity: ZalgoIntensity = ZalgoIntensity.MINI,
) -> List[StyleInfo]:
    """Describe every style with an example rendering of ``sample``.

    Args:
        sample: Text rendered in each style
        rng: Random source for the zalgo example
        example_intensity: Zalgo intensity used for the example

    Returns:
        One StyleInfo per style, in listing order
    """
    example_options = ZalgoOptions(intensity=example_intensity)
    source = rng or random.Random()
    return [
        StyleInfo(
            name=definition.name,
            description=definition.description,
            example=definition.handler(sample, example_options, source),
        )
        for definition in _DEFINITION_LIST
    ]


_NAMES: FrozenSet[str] = frozenset(style_names())
