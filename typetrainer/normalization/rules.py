"""Replacement tables for diacritics split off their letters by PDF extractors.

Some extractors emit an accented letter as a bare letter plus a separate
accent glyph, in either order and sometimes with spaces or tabs in between
(``g´en´er´e``, ``comple`te``). Each rule below joins one such pair back into
the precomposed character. The tables are applied in order, first
mark-before-letter, then letter-before-mark.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class LooseMark:
    """A diacritic that may appear detached from its letter."""

    name: str
    spacing: str  # free-standing clone, e.g. U+00B4 ACUTE ACCENT
    combining: str  # true combining form, e.g. U+0301

    @property
    def char_class(self) -> str:
        return f"[{re.escape(self.spacing)}{self.combining}]"


ACUTE = LooseMark("acute", "\u00b4", "\u0301")
GRAVE = LooseMark("grave", "`", "\u0300")
CIRCUMFLEX = LooseMark("circumflex", "^", "\u0302")
CEDILLA = LooseMark("cedilla", "\u00b8", "\u0327")
DIAERESIS = LooseMark("diaeresis", "\u00a8", "\u0308")

LOOSE_MARKS: tuple[LooseMark, ...] = (ACUTE, GRAVE, CIRCUMFLEX, CEDILLA, DIAERESIS)

# Spaces and tabs only; a line break between mark and letter is not repaired.
_GAP = "[ \t]*"


@dataclass(frozen=True)
class ReplacementRule:
    """One compiled ``pattern -> replacement`` substitution."""

    pattern: re.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _letter(letter: str) -> str:
    # Either ASCII case; the replacement is always lowercase.
    return f"[{letter.lower()}{letter.upper()}]"


def mark_before_letter(mark: LooseMark, letter: str, replacement: str) -> ReplacementRule:
    return ReplacementRule(
        re.compile(f"{mark.char_class}{_GAP}{_letter(letter)}"),
        replacement,
    )


def letter_before_mark(letter: str, mark: LooseMark, replacement: str) -> ReplacementRule:
    return ReplacementRule(
        re.compile(f"{_letter(letter)}{_GAP}{mark.char_class}"),
        replacement,
    )


MARK_BEFORE_LETTER_RULES: tuple[ReplacementRule, ...] = (
    mark_before_letter(ACUTE, "e", "é"),
    mark_before_letter(GRAVE, "a", "à"),
    mark_before_letter(GRAVE, "e", "è"),
    mark_before_letter(GRAVE, "u", "ù"),
    mark_before_letter(CIRCUMFLEX, "a", "â"),
    mark_before_letter(CIRCUMFLEX, "e", "ê"),
    mark_before_letter(CIRCUMFLEX, "i", "î"),
    mark_before_letter(CIRCUMFLEX, "o", "ô"),
    mark_before_letter(CIRCUMFLEX, "u", "û"),
    mark_before_letter(CEDILLA, "c", "ç"),
    mark_before_letter(DIAERESIS, "e", "ë"),
    mark_before_letter(DIAERESIS, "i", "ï"),
    mark_before_letter(DIAERESIS, "u", "ü"),
)

LETTER_BEFORE_MARK_RULES: tuple[ReplacementRule, ...] = (
    letter_before_mark("a", GRAVE, "à"),
    letter_before_mark("a", CIRCUMFLEX, "â"),
    letter_before_mark("c", CEDILLA, "ç"),
    letter_before_mark("e", ACUTE, "é"),
    letter_before_mark("e", GRAVE, "è"),
    letter_before_mark("e", CIRCUMFLEX, "ê"),
    letter_before_mark("e", DIAERESIS, "ë"),
    letter_before_mark("i", CIRCUMFLEX, "î"),
    letter_before_mark("i", DIAERESIS, "ï"),
    letter_before_mark("o", CIRCUMFLEX, "ô"),
    letter_before_mark("u", GRAVE, "ù"),
    letter_before_mark("u", CIRCUMFLEX, "û"),
    letter_before_mark("u", DIAERESIS, "ü"),
)

# Typographic apostrophe, acute and grave used as apostrophes, and the ASCII
# apostrophe itself all become U+0027.
APOSTROPHE_VARIANTS: str = "\u2019\u00b4'`"
