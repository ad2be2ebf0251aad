"""
Heuristic password strength score.
"""

from __future__ import annotations

import re
from typing import Dict, Optional

# ASCII classes: accented letters count as non-word characters.
_VARIATIONS = (
    re.compile(r"\d", re.ASCII),
    re.compile(r"[a-z]"),
    re.compile(r"[A-Z]"),
    re.compile(r"\W", re.ASCII),
)


def score_password(password: Optional[str]) -> int:
    """
    Score a password.

    Every character adds 5 / (times it has been seen so far), so repeats
    are worth less and less. Each of digits, lowercase, uppercase and
    non-word characters present adds one point, minus one overall.
    The result is truncated toward zero.
    """
    if not password:
        return 0

    score = 0.0
    seen: Dict[str, int] = {}
    for char in password:
        seen[char] = seen.get(char, 0) + 1
        score += 5.0 / seen[char]

    variation_count = sum(1 for pattern in _VARIATIONS if pattern.search(password))
    score += variation_count - 1

    return int(score)


def strength_label(score: int) -> str:
    if score > 80:
        return "strong"
    if score > 60:
        return "good"
    if score >= 30:
        return "weak"
    return "very weak"
