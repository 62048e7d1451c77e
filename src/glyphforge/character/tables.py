"""Codepoint substitution tables for GlyphForge styles.

Tables are built once at import from contiguous Unicode blocks plus explicit
exception overlays, then frozen as read-only mappings. Keys are single Unicode
scalar values (one-character ``str``); values are replacement strings.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

CodepointMap = Mapping[str, str]

LATIN_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LATIN_LOWER = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"
ALPHABET_SIZE = 26

# Mathematical Alphanumeric Symbols block bases (U+1D400-U+1D7FF)
BOLD_BASE = 0x1D400
ITALIC_BASE = 0x1D434
BOLD_ITALIC_BASE = 0x1D468
SCRIPT_BASE = 0x1D49C
BOLD_SCRIPT_BASE = 0x1D4D0
FRAKTUR_BASE = 0x1D504
DOUBLE_STRUCK_BASE = 0x1D538
BOLD_FRAKTUR_BASE = 0x1D56C
MONOSPACE_BASE = 0x1D670

BOLD_DIGIT_BASE = 0x1D7CE
DOUBLE_STRUCK_DIGIT_BASE = 0x1D7D8
MONOSPACE_DIGIT_BASE = 0x1D7F6

# Enclosed Alphanumerics (U+2460-U+24FF)
CIRCLED_UPPER_BASE = 0x24B6
CIRCLED_LOWER_BASE = 0x24D0
CIRCLED_ONE = 0x2460  # digits 1-9; the block has no circled zero at this offset
CIRCLED_ZERO = 0x24EA
PARENTHESIZED_BASE = 0x249C  # lowercase only in Unicode

# Enclosed Alphanumeric Supplement (U+1F100-U+1F1FF)
SQUARED_BASE = 0x1F130
NEGATIVE_CIRCLED_BASE = 0x1F150
NEGATIVE_SQUARED_BASE = 0x1F170
REGIONAL_INDICATOR_BASE = 0x1F1E6

# Halfwidth and Fullwidth Forms
FULLWIDTH_OFFSET = 0xFF00 - 0x20
PRINTABLE_ASCII_FIRST = 0x21
PRINTABLE_ASCII_LAST = 0x7E
IDEOGRAPHIC_SPACE = "\u3000"

# Letters pre-allocated to Letterlike Symbols (U+2100-U+214F) before the math
# alphabets were encoded; the math block leaves holes at these positions.
ITALIC_EXCEPTIONS: Dict[str, str] = {"h": "\u210E"}

SCRIPT_EXCEPTIONS: Dict[str, str] = {
    "B": "\u212C", "E": "\u2130", "F": "\u2131", "H": "\u210B",
    "I": "\u2110", "L": "\u2112", "M": "\u2133", "R": "\u211B",
    "e": "\u212F", "g": "\u210A", "o": "\u2134",
}

FRAKTUR_EXCEPTIONS: Dict[str, str] = {
    "C": "\u212D", "H": "\u210C", "I": "\u2111", "R": "\u211C", "Z": "\u2128",
}

DOUBLE_STRUCK_EXCEPTIONS: Dict[str, str] = {
    "C": "\u2102", "H": "\u210D", "N": "\u2115", "P": "\u2119",
    "Q": "\u211A", "R": "\u211D", "Z": "\u2124",
}


def freeze(table: Dict[str, str]) -> CodepointMap:
    """Return a read-only view over a private copy of ``table``."""
    return MappingProxyType(dict(table))


def build_alphabet_map(
    upper_base: int,
    lower_base: Optional[int] = None,
    digit_base: Optional[int] = None,
    exceptions: Optional[Mapping[str, str]] = None,
) -> CodepointMap:
    """Build a letter table from contiguous codepoint blocks.

    Args:
        upper_base: Codepoint of the styled ``A``
        lower_base: Codepoint of the styled ``a``; defaults to the block
            immediately after the uppercase letters
        digit_base: Codepoint of the styled ``0``, if the style has digits
        exceptions: Overlay applied after the algorithmic pass

    Returns:
        Frozen character table
    """
    if lower_base is None:
        lower_base = upper_base + ALPHABET_SIZE

    table: Dict[str, str] = {}
    for offset in range(ALPHABET_SIZE):
        table[LATIN_UPPER[offset]] = chr(upper_base + offset)
        table[LATIN_LOWER[offset]] = chr(lower_base + offset)

    if digit_base is not None:
        for offset, digit in enumerate(DIGITS):
            table[digit] = chr(digit_base + offset)

    if exceptions:
        table.update(exceptions)

    return freeze(table)


def build_case_folded_map(base: int) -> CodepointMap:
    """Build a table for blocks with a single letter case; both cases share it."""
    return build_alphabet_map(base, lower_base=base)


def build_circled_map() -> CodepointMap:
    table = dict(build_alphabet_map(CIRCLED_UPPER_BASE, CIRCLED_LOWER_BASE))
    for value, digit in enumerate(DIGITS):
        table[digit] = chr(CIRCLED_ZERO) if value == 0 else chr(CIRCLED_ONE + value - 1)
    return freeze(table)


def build_fullwidth_map() -> CodepointMap:
    table = {
        chr(code): chr(code + FULLWIDTH_OFFSET)
        for code in range(PRINTABLE_ASCII_FIRST, PRINTABLE_ASCII_LAST + 1)
    }
    table[" "] = IDEOGRAPHIC_SPACE
    return freeze(table)


def invert_map(table: CodepointMap) -> CodepointMap:
    """Build the inverse of a table.

    When several sources share a styled form, the first source in table order
    wins, e.g. uppercase for case-folded blocks.
    """
    inverse: Dict[str, str] = {}
    for source, styled in table.items():
        inverse.setdefault(styled, source)
    return freeze(inverse)


def reversible_domain(table: CodepointMap) -> FrozenSet[str]:
    """Characters whose styled form maps back to themselves through ``invert_map``."""
    inverse = invert_map(table)
    return frozenset(
        source for source, styled in table.items() if inverse[styled] == source
    )


# Mathematical alphabets
BOLD_MAP = build_alphabet_map(BOLD_BASE, digit_base=BOLD_DIGIT_BASE)
ITALIC_MAP = build_alphabet_map(ITALIC_BASE, exceptions=ITALIC_EXCEPTIONS)
BOLD_ITALIC_MAP = build_alphabet_map(BOLD_ITALIC_BASE)
SCRIPT_MAP = build_alphabet_map(SCRIPT_BASE, exceptions=SCRIPT_EXCEPTIONS)
BOLD_SCRIPT_MAP = build_alphabet_map(BOLD_SCRIPT_BASE)
FRAKTUR_MAP = build_alphabet_map(FRAKTUR_BASE, exceptions=FRAKTUR_EXCEPTIONS)
BOLD_FRAKTUR_MAP = build_alphabet_map(BOLD_FRAKTUR_BASE)
DOUBLE_STRUCK_MAP = build_alphabet_map(
    DOUBLE_STRUCK_BASE,
    digit_base=DOUBLE_STRUCK_DIGIT_BASE,
    exceptions=DOUBLE_STRUCK_EXCEPTIONS,
)
MONOSPACE_MAP = build_alphabet_map(MONOSPACE_BASE, digit_base=MONOSPACE_DIGIT_BASE)

# Enclosed forms
CIRCLED_MAP = build_circled_map()
NEGATIVE_CIRCLED_MAP = build_case_folded_map(NEGATIVE_CIRCLED_BASE)
SQUARED_MAP = build_case_folded_map(SQUARED_BASE)
NEGATIVE_SQUARED_MAP = build_case_folded_map(NEGATIVE_SQUARED_BASE)
PARENTHESIZED_MAP = build_case_folded_map(PARENTHESIZED_BASE)
REGIONAL_MAP = build_case_folded_map(REGIONAL_INDICATOR_BASE)

FULLWIDTH_MAP = build_fullwidth_map()

SMALL_CAPS_MAP = freeze({
    "a": "\u1D00", "b": "\u0299", "c": "\u1D04", "d": "\u1D05", "e": "\u1D07",
    "f": "\uA730", "g": "\u0262", "h": "\u029C", "i": "\u026A", "j": "\u1D0A",
    "k": "\u1D0B", "l": "\u029F", "m": "\u1D0D", "n": "\u0274", "o": "\u1D0F",
    "p": "\u1D18", "q": "\u01EB", "r": "\u0280", "s": "\uA731", "t": "\u1D1B",
    "u": "\u1D1C", "v": "\u1D20", "w": "\u1D21", "x": "\u1D22", "y": "\u028F",
    "z": "\u1D22",
    "A": "\u1D00", "B": "\u0299", "C": "\u1D04", "D": "\u1D05", "E": "\u1D07",
    "F": "\uA730", "G": "\u0262", "H": "\u029C", "I": "\u026A", "J": "\u1D0A",
    "K": "\u1D0B", "L": "\u029F", "M": "\u1D0D", "N": "\u0274", "O": "\u1D0F",
    "P": "\u1D18", "Q": "\u01EB", "R": "\u0280", "S": "\uA731", "T": "\u1D1B",
    "U": "\u1D1C", "V": "\u1D20", "W": "\u1D21", "X": "\u1D22", "Y": "\u028F",
    "Z": "\u1D22",
})

SUPERSCRIPT_MAP = freeze({
    "a": "\u1D43", "b": "\u1D47", "c": "\u1D9C", "d": "\u1D48", "e": "\u1D49",
    "f": "\u1DA0", "g": "\u1D4D", "h": "\u02B0", "i": "\u2071", "j": "\u02B2",
    "k": "\u1D4F", "l": "\u02E1", "m": "\u1D50", "n": "\u207F", "o": "\u1D52",
    "p": "\u1D56", "q": "\u02A0", "r": "\u02B3", "s": "\u02E2", "t": "\u1D57",
    "u": "\u1D58", "v": "\u1D5B", "w": "\u02B7", "x": "\u02E3", "y": "\u02B8",
    "z": "\u1DBB",
    "A": "\u1D2C", "B": "\u1D2E", "C": "\u1D9C", "D": "\u1D30", "E": "\u1D31",
    "F": "\u1DA0", "G": "\u1D33", "H": "\u1D34", "I": "\u1D35", "J": "\u1D36",
    "K": "\u1D37", "L": "\u1D38", "M": "\u1D39", "N": "\u1D3A", "O": "\u1D3C",
    "P": "\u1D3E", "Q": "\u02A0", "R": "\u1D3F", "S": "\u02E2", "T": "\u1D40",
    "U": "\u1D41", "V": "\u2C7D", "W": "\u1D42", "X": "\u02E3", "Y": "\u02B8",
    "Z": "\u1DBB",
    "0": "\u2070", "1": "\u00B9", "2": "\u00B2", "3": "\u00B3", "4": "\u2074",
    "5": "\u2075", "6": "\u2076", "7": "\u2077", "8": "\u2078", "9": "\u2079",
    "+": "\u207A", "-": "\u207B", "=": "\u207C", "(": "\u207D", ")": "\u207E",
})

# Unicode has no subscript form for most letters; those pass through.
SUBSCRIPT_MAP = freeze({
    "a": "\u2090", "e": "\u2091", "h": "\u2095", "i": "\u1D62", "j": "\u2C7C",
    "k": "\u2096", "l": "\u2097", "m": "\u2098", "n": "\u2099", "o": "\u2092",
    "p": "\u209A", "r": "\u1D63", "s": "\u209B", "t": "\u209C", "u": "\u1D64",
    "v": "\u1D65", "x": "\u2093",
    "0": "\u2080", "1": "\u2081", "2": "\u2082", "3": "\u2083", "4": "\u2084",
    "5": "\u2085", "6": "\u2086", "7": "\u2087", "8": "\u2088", "9": "\u2089",
    "+": "\u208A", "-": "\u208B", "=": "\u208C", "(": "\u208D", ")": "\u208E",
})

UPSIDE_DOWN_MAP = freeze({
    "a": "\u0250", "b": "q", "c": "\u0254", "d": "p", "e": "\u01DD",
    "f": "\u025F", "g": "\u0183", "h": "\u0265", "i": "\u0131", "j": "\u027E",
    "k": "\u029E", "l": "l", "m": "\u026F", "n": "u", "o": "o",
    "p": "d", "q": "b", "r": "\u0279", "s": "s", "t": "\u0287",
    "u": "n", "v": "\u028C", "w": "\u028D", "x": "x", "y": "\u028E", "z": "z",
    "A": "\u2200", "B": "\u1012", "C": "\u0186", "D": "\u15E1", "E": "\u018E",
    "F": "\u2132", "G": "\u2141", "H": "H", "I": "I", "J": "\u017F",
    "K": "\u22CA", "L": "\u02E5", "M": "W", "N": "N", "O": "O",
    "P": "\u0500", "Q": "\u038C", "R": "\u1D1A", "S": "S", "T": "\u22A5",
    "U": "\u2229", "V": "\u039B", "W": "M", "X": "X", "Y": "\u2144", "Z": "Z",
    "0": "0", "1": "\u0196", "2": "\u1105", "3": "\u0190", "4": "\u3123",
    "5": "\u03DB", "6": "9", "7": "\u3125", "8": "8", "9": "6",
    ".": "\u02D9", ",": "'", "'": ",", '"': ",,", "!": "\u00A1",
    "?": "\u00BF", "[": "]", "]": "[", "(": ")", ")": "(",
    "{": "}", "}": "{", "<": ">", ">": "<", "&": "\u214B",
    "_": "\u203E", ";": "\u061B", "\u203F": "\u2040",
})

LEET_MAP = freeze({
    "a": "4", "A": "4", "b": "8", "B": "8", "e": "3", "E": "3",
    "g": "9", "G": "9", "i": "1", "I": "1", "l": "1", "L": "1",
    "o": "0", "O": "0", "s": "5", "S": "5", "t": "7", "T": "7",
    "z": "2", "Z": "2",
})

# International Morse; keys are uppercase only.
MORSE_MAP = freeze({
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".",
    "F": "..-.", "G": "--.", "H": "....", "I": "..", "J": ".---",
    "K": "-.-", "L": ".-..", "M": "--", "N": "-.", "O": "---",
    "P": ".--.", "Q": "--.-", "R": ".-.", "S": "...", "T": "-",
    "U": "..-", "V": "...-", "W": ".--", "X": "-..-", "Y": "-.--", "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
    ".": ".-.-.-", ",": "--..--", "?": "..--..", "'": ".----.", "!": "-.-.--",
    "/": "-..-.", "(": "-.--.", ")": "-.--.-", "&": ".-...", ":": "---...",
    ";": "-.-.-.", "=": "-...-", "+": ".-.-.", "-": "-....-", "_": "..--.-",
    '"': ".-..-.", "$": "...-..-", "@": ".--.-.",
})

# Combining marks appended by the zalgo style, grouped by vertical placement.
ZALGO_UP: Tuple[str, ...] = (
    "\u030D", "\u030E", "\u0304", "\u0305", "\u033F", "\u0311", "\u0306",
    "\u0310", "\u0352", "\u0357", "\u0351", "\u0307", "\u0308", "\u030A",
    "\u0342", "\u0343", "\u0344", "\u034A", "\u034B", "\u034C", "\u0303",
    "\u0302", "\u030C", "\u0350", "\u0300", "\u0301", "\u030B", "\u030F",
    "\u0312", "\u0313", "\u0314", "\u033D", "\u0309", "\u0363", "\u0364",
    "\u0365", "\u0366", "\u0367", "\u0368", "\u0369", "\u036A", "\u036B",
    "\u036C", "\u036D", "\u036E", "\u036F", "\u033E", "\u035B",
)

ZALGO_MID: Tuple[str, ...] = (
    "\u0315", "\u031B", "\u0340", "\u0341", "\u0358", "\u0321", "\u0322",
    "\u0327", "\u0328", "\u0334", "\u0335", "\u0336", "\u034F", "\u035C",
    "\u035D", "\u035E", "\u035F", "\u0360", "\u0362", "\u0338", "\u0337",
)

ZALGO_DOWN: Tuple[str, ...] = (
    "\u0316", "\u0317", "\u0318", "\u0319", "\u031C", "\u031D", "\u031E",
    "\u031F", "\u0320", "\u0324", "\u0325", "\u0326", "\u0329", "\u032A",
    "\u032B", "\u032C", "\u032D", "\u032E", "\u032F", "\u0330", "\u0331",
    "\u0332", "\u0333", "\u0339", "\u033A", "\u033B", "\u033C", "\u0345",
    "\u0347", "\u0348", "\u0349", "\u034D", "\u034E", "\u0353", "\u0354",
    "\u0355", "\u0356", "\u0359", "\u035A", "\u0323",
)

ZALGO_MARKS: FrozenSet[str] = frozenset(ZALGO_UP + ZALGO_MID + ZALGO_DOWN)

COMBINING_LONG_STROKE_OVERLAY = "\u0336"
COMBINING_LOW_LINE = "\u0332"
SPARKLE = "\u2728"
WAVE = "~"
