"""Cleanup applied to every text before it is stored.

Processing flow:
1. Join mark-before-letter pairs (``´e`` -> ``é``).
2. Join letter-before-mark pairs (``e´`` -> ``é``).
3. Unicode NFC, so leftover decomposed sequences collapse where possible.
   Steps 1-3 repeat until the text stops changing.
4. Unify apostrophe variants to U+0027. This runs after NFC so accent glyphs
   that were not part of a recognised pair end up as plain apostrophes.
5. Strip surrounding whitespace.
"""

import unicodedata
from typing import ClassVar

from typetrainer.normalization.rules import (
    APOSTROPHE_VARIANTS,
    LETTER_BEFORE_MARK_RULES,
    MARK_BEFORE_LETTER_RULES,
    ReplacementRule,
)


class TextNormalizer:
    """Pure, deterministic and idempotent text cleanup. Never raises."""

    _APOSTROPHES: ClassVar[dict[int, str]] = str.maketrans(
        dict.fromkeys(APOSTROPHE_VARIANTS, "'")
    )

    def normalize(self, text: str | None) -> str:
        """Return the cleaned, NFC-normalized form of *text* ("" for None)."""
        if not text:
            return ""
        cleaned = self._repair(text)
        cleaned = cleaned.translate(self._APOSTROPHES)
        return cleaned.strip()

    @classmethod
    def _repair(cls, text: str) -> str:
        # NFC can reorder combining marks or swap singletons (U+0341 -> U+0301)
        # into a new pair, so repeat until stable. Once in NFC, every repair
        # shortens the text.
        while True:
            repaired = cls._apply(MARK_BEFORE_LETTER_RULES, text)
            repaired = cls._apply(LETTER_BEFORE_MARK_RULES, repaired)
            repaired = unicodedata.normalize("NFC", repaired)
            if repaired == text:
                return repaired
            text = repaired

    @staticmethod
    def _apply(rules: tuple[ReplacementRule, ...], text: str) -> str:
        for rule in rules:
            text = rule.apply(text)
        return text


_default_normalizer = TextNormalizer()


def normalize_text(text: str | None) -> str:
    """Module-level shortcut for :meth:`TextNormalizer.normalize`."""
    return _default_normalizer.normalize(text)
