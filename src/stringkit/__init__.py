#!/usr/bin/env python3
"""
stringkit - String transformation and validation toolkit

Edit distance and similarity scoring, identifier case-style conversion,
Persian/Arabic-Indic/Western digit transliteration and checksum validators
for Iranian identifiers and payment cards.

Version: 1.0.0
"""

from .case_style import CaseStyle, convert, render, tokenize
from .digits import (
    arabic_to_persian,
    to_arabic_numbers,
    to_english_numbers,
    to_persian_numbers,
    translate,
)
from .fuzzy import levenshtein_distance, similarity
from .numeric import NumericKind, UnsupportedNumericTypeError, parse_number
from .tables import DigitAlphabet
from .toolkit import StringToolkit
from .validators import (
    is_valid_credit_card,
    is_valid_iranian_mobile_number,
    is_valid_iranian_national_code,
    luhn_check,
)

__version__ = "1.0.0"
__author__ = "stringkit Team"
__description__ = "String transformation and validation toolkit"

__all__ = [
    "CaseStyle",
    "DigitAlphabet",
    "NumericKind",
    "StringToolkit",
    "UnsupportedNumericTypeError",
    "arabic_to_persian",
    "convert",
    "is_valid_credit_card",
    "is_valid_iranian_mobile_number",
    "is_valid_iranian_national_code",
    "levenshtein_distance",
    "luhn_check",
    "parse_number",
    "render",
    "similarity",
    "to_arabic_numbers",
    "to_english_numbers",
    "to_persian_numbers",
    "tokenize",
    "translate",
]
