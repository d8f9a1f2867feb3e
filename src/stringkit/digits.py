#!/usr/bin/env python3
"""
Digit transliteration between Persian, Arabic-Indic and Western digits.

Digits are mapped positionally between the three alphabets and the decimal
separator is rewritten to the convention of the target alphabet:
- Persian / Arabic-Indic targets use "/" for both "." and the Arabic "٫"
- Western targets use "." for both "/" and "٫"
"""

from types import MappingProxyType
from typing import Dict, Optional

from .tables import (
    ARABIC_DECIMAL_SEPARATOR,
    ARABIC_TO_PERSIAN_LETTERS,
    PERSIAN_DISPLAY_SEPARATOR,
    WESTERN_DECIMAL_SEPARATOR,
    DigitAlphabet,
)


def _build_table(target: DigitAlphabet) -> Dict[int, str]:
    """Build a str.translate table that rewrites text into ``target`` digits."""
    table: Dict[int, str] = {}
    for source in DigitAlphabet:
        if source is target:
            continue
        for source_digit, target_digit in zip(source.digits, target.digits):
            table[ord(source_digit)] = target_digit

    if target is DigitAlphabet.WESTERN:
        separators = (PERSIAN_DISPLAY_SEPARATOR, ARABIC_DECIMAL_SEPARATOR)
        replacement = WESTERN_DECIMAL_SEPARATOR
    else:
        separators = (WESTERN_DECIMAL_SEPARATOR, ARABIC_DECIMAL_SEPARATOR)
        replacement = PERSIAN_DISPLAY_SEPARATOR
    for separator in separators:
        table[ord(separator)] = replacement

    return table


_TRANSLATION_TABLES = MappingProxyType(
    {alphabet: MappingProxyType(_build_table(alphabet)) for alphabet in DigitAlphabet}
)

_ARABIC_TO_PERSIAN_TABLE = MappingProxyType(str.maketrans(dict(ARABIC_TO_PERSIAN_LETTERS)))


def translate(text: Optional[str], target: DigitAlphabet) -> str:
    """
    Rewrite every digit of the other two alphabets into ``target`` digits.

    Characters outside the digit alphabets pass through unchanged, apart from
    the decimal separators described in the module docstring.

    Args:
        text: Input text (None is treated as empty)
        target: Alphabet to produce

    Returns:
        Transliterated text, never None
    """
    if not text:
        return ""
    return text.translate(_TRANSLATION_TABLES[target])


def to_persian_numbers(text: Optional[str]) -> str:
    """Convert Western and Arabic-Indic digits to Persian digits."""
    return translate(text, DigitAlphabet.PERSIAN)


def to_arabic_numbers(text: Optional[str]) -> str:
    """Convert Western and Persian digits to Arabic-Indic digits."""
    return translate(text, DigitAlphabet.ARABIC_INDIC)


def to_english_numbers(text: Optional[str]) -> str:
    """Convert Persian and Arabic-Indic digits to Western digits."""
    return translate(text, DigitAlphabet.WESTERN)


def arabic_to_persian(text: Optional[str]) -> str:
    """Replace Arabic letter variants (ك, ي, ى, ئ, ة) with their Persian forms."""
    if not text:
        return ""
    return text.translate(_ARABIC_TO_PERSIAN_TABLE)
