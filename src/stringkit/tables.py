#!/usr/bin/env python3
"""
Shared lookup tables for stringkit.

Everything here is built once at import time and never mutated afterwards:
- Digit alphabets (Persian, Arabic-Indic, Western)
- Arabic to Persian letter unification map
- Case-style boundary regex
- Default Iranian mobile operator prefixes
"""

import re
from enum import Enum
from types import MappingProxyType


class DigitAlphabet(Enum):
    """Supported digit alphabets, each an ordered run of ten characters."""

    PERSIAN = "۰۱۲۳۴۵۶۷۸۹"
    ARABIC_INDIC = "٠١٢٣٤٥٦٧٨٩"
    WESTERN = "0123456789"

    @property
    def digits(self) -> str:
        return self.value


# Arabic decimal separator (U+066B)
ARABIC_DECIMAL_SEPARATOR = "٫"

# Display decimal separator used with Persian/Arabic-Indic digits
PERSIAN_DISPLAY_SEPARATOR = "/"

WESTERN_DECIMAL_SEPARATOR = "."

# Arabic letter variants that have a distinct Persian form
ARABIC_TO_PERSIAN_LETTERS = MappingProxyType(
    {
        "ك": "ک",
        "ى": "ی",
        "ي": "ی",
        "ئ": "ی",
        "ة": "ه",
    }
)

# Zero-width position before an ASCII capital preceded by a letter or digit
CAMEL_BOUNDARY_RE = re.compile(r"(?<=[A-Za-z0-9])(?=[A-Z])")

ASCII_DIGITS_RE = re.compile(r"[0-9]+")

DEFAULT_OPERATOR_PREFIXES = ("090", "091", "092", "093", "099")

# Address and phone shapes accepted by the general-purpose validators
EMAIL_ADDRESS_RE = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}"
    r"@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(?:\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)
PHONE_RE = re.compile(
    r"(?:\+[0-9]+[\- .]*)?"
    r"(?:\([0-9]+\)[\- .]*)?"
    r"[0-9][0-9\- .]+[0-9]"
)
DECIMAL_NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")
SIGNED_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
# Plain decimal or exponent notation; no underscores, inf or nan
FLOAT_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
