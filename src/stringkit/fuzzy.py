#!/usr/bin/env python3
"""
Edit distance and similarity scoring for stringkit.

Contains:
- Levenshtein distance (unit cost insert/delete/substitute)
- Percentage similarity derived from the distance
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein distance between two strings.

    Case-sensitive and code-point based. Only two rows of the DP matrix are
    kept, sized by the shorter string.
    """
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def similarity(s1: Optional[str], s2: Optional[str], digits: int = 3) -> float:
    """
    Calculate similarity percentage (0.0 to 100.0) between two strings.

    The score is ``(max_len - distance) / max_len * 100`` rounded half away
    from zero to ``digits`` decimal places.

    Absent inputs follow a fixed contract: both None gives 100.0, exactly one
    None gives 0.0. Two empty strings are identical and score 100.0.

    Args:
        s1: First string or None
        s2: Second string or None
        digits: Number of decimal places to keep

    Returns:
        Similarity percentage
    """
    if s1 is None and s2 is None:
        return 100.0
    if s1 is None or s2 is None:
        return 0.0

    max_len = max(len(s1), len(s2))
    if max_len == 0:
        return 100.0

    distance = levenshtein_distance(s1, s2)
    with localcontext() as ctx:
        # Room for the integer part (at most 100) plus every requested decimal
        ctx.prec = max(digits, 0) + len(str(max_len)) + 8
        score = Decimal((max_len - distance) * 100) / Decimal(max_len)
        quantum = Decimal(1).scaleb(-digits)
        return float(score.quantize(quantum, rounding=ROUND_HALF_UP))
