#!/usr/bin/env python3
"""
Identifier case-style conversion for stringkit.

An identifier is split into lowercase word tokens under its source style and
joined again under the target style. Supported styles:
- camelCase
- PascalCase
- snake_case
- kebab-case
- SCREAMING_SNAKE_CASE

Acronym runs produce one token per capital ("HTTPServer" -> h, t, t, p,
server); existing callers depend on that split.
"""

from enum import Enum
from typing import List, Optional, Sequence

from .tables import CAMEL_BOUNDARY_RE


class CaseStyle(Enum):
    """Identifier naming conventions."""

    CAMEL = "camel"
    PASCAL = "pascal"
    SNAKE = "snake"
    KEBAB = "kebab"
    SCREAMING_SNAKE = "screaming_snake"


_SEPARATORS = {
    CaseStyle.SNAKE: "_",
    CaseStyle.SCREAMING_SNAKE: "_",
    CaseStyle.KEBAB: "-",
}


def _capitalize_first(token: str) -> str:
    # str.capitalize() would also lowercase the tail
    return token[:1].upper() + token[1:]


def tokenize(text: str, source_style: CaseStyle) -> List[str]:
    """Split an identifier written in ``source_style`` into lowercase tokens."""
    if not text:
        return []

    if source_style in (CaseStyle.CAMEL, CaseStyle.PASCAL):
        return [segment.lower() for segment in CAMEL_BOUNDARY_RE.split(text)]

    return [segment.lower() for segment in text.split(_SEPARATORS[source_style])]


def render(tokens: Sequence[str], target_style: CaseStyle) -> str:
    """Join tokens into an identifier written in ``target_style``."""
    if not tokens:
        return ""

    if target_style is CaseStyle.CAMEL:
        return tokens[0] + "".join(_capitalize_first(t) for t in tokens[1:])
    if target_style is CaseStyle.PASCAL:
        return "".join(_capitalize_first(t) for t in tokens)
    if target_style is CaseStyle.SCREAMING_SNAKE:
        return "_".join(t.upper() for t in tokens)

    return _SEPARATORS[target_style].join(t.lower() for t in tokens)


def convert(
    text: Optional[str], source_style: CaseStyle, target_style: CaseStyle
) -> str:
    """
    Convert an identifier from one case style to another.

    snake_case and SCREAMING_SNAKE_CASE only differ by letter case, so moving
    between them folds the whole string without re-splitting it.

    Args:
        text: Identifier to convert (None is treated as empty)
        source_style: Style the identifier is written in
        target_style: Style to produce

    Returns:
        Converted identifier, or "" for empty input
    """
    if not text:
        return ""

    snake_family = (CaseStyle.SNAKE, CaseStyle.SCREAMING_SNAKE)
    if source_style in snake_family and target_style in snake_family:
        if target_style is CaseStyle.SCREAMING_SNAKE:
            return text.upper()
        return text.lower()

    return render(tokenize(text, source_style), target_style)


def upper_camel_to_snake_case(text: str) -> str:
    """Example: "ExampleVariableName" -> "example_variable_name"."""
    return convert(text, CaseStyle.PASCAL, CaseStyle.SNAKE)


def lower_camel_to_snake_case(text: str) -> str:
    """Example: "camelCaseExample" -> "camel_case_example"."""
    return convert(text, CaseStyle.CAMEL, CaseStyle.SNAKE)


def snake_to_upper_camel_case(text: str) -> str:
    """Example: "example_variable_name" -> "ExampleVariableName"."""
    return convert(text, CaseStyle.SNAKE, CaseStyle.PASCAL)


def snake_to_lower_camel_case(text: str) -> str:
    """Example: "snake_case_example" -> "snakeCaseExample"."""
    return convert(text, CaseStyle.SNAKE, CaseStyle.CAMEL)


def to_screaming_snake_case(text: str) -> str:
    """Example: "example_variable_name" -> "EXAMPLE_VARIABLE_NAME"."""
    return convert(text, CaseStyle.SNAKE, CaseStyle.SCREAMING_SNAKE)


def screaming_snake_to_snake_case(text: str) -> str:
    """Example: "EXAMPLE_VARIABLE_NAME" -> "example_variable_name"."""
    return convert(text, CaseStyle.SCREAMING_SNAKE, CaseStyle.SNAKE)


def camel_to_kebab_case(text: str) -> str:
    """Example: "camelCaseExample" -> "camel-case-example"."""
    return convert(text, CaseStyle.CAMEL, CaseStyle.KEBAB)


def kebab_to_lower_camel_case(text: str) -> str:
    """Example: "kebab-case-example" -> "kebabCaseExample"."""
    return convert(text, CaseStyle.KEBAB, CaseStyle.CAMEL)


def kebab_to_upper_camel_case(text: str) -> str:
    """Example: "kebab-case-example" -> "KebabCaseExample"."""
    return convert(text, CaseStyle.KEBAB, CaseStyle.PASCAL)


def kebab_to_snake_case(text: str) -> str:
    return convert(text, CaseStyle.KEBAB, CaseStyle.SNAKE)


def snake_to_kebab_case(text: str) -> str:
    return convert(text, CaseStyle.SNAKE, CaseStyle.KEBAB)
