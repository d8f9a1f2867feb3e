#!/usr/bin/env python3
"""
Configured entry point for stringkit.

StringToolkit binds a Config to the operations that have configurable
behaviour (similarity precision, mobile operator allow-list) and re-exposes
the remaining free functions for convenience.
"""

from typing import Optional

from . import case_style, digits, fuzzy, validators
from .case_style import CaseStyle
from .config_loader import Config, load_config
from .logging_config import setup_logging
from .tables import DigitAlphabet


class StringToolkit:
    """Free functions of stringkit bound to one configuration."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else load_config()
        setup_logging(self.config.log_level)

    def similarity(self, s1: Optional[str], s2: Optional[str]) -> float:
        return fuzzy.similarity(s1, s2, digits=self.config.similarity_digits)

    def distance(self, s1: str, s2: str) -> int:
        return fuzzy.levenshtein_distance(s1, s2)

    def is_valid_iranian_mobile_number(self, number: Optional[str]) -> bool:
        return validators.is_valid_iranian_mobile_number(
            number, self.config.mobile_operator_prefixes
        )

    def is_valid_iranian_national_code(self, code: Optional[str]) -> bool:
        return validators.is_valid_iranian_national_code(code)

    def is_valid_credit_card(self, number: Optional[str]) -> bool:
        return validators.is_valid_credit_card(number)

    def convert_case(
        self, text: Optional[str], source: CaseStyle, target: CaseStyle
    ) -> str:
        return case_style.convert(text, source, target)

    def translate_digits(self, text: Optional[str], target: DigitAlphabet) -> str:
        return digits.translate(text, target)
