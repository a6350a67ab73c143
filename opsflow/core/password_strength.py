from __future__ import annotations

import re

from opsflow.models.credential import PasswordStrength

SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'
MIN_LENGTH = 8

_RULES = (
    re.compile(r"[A-Z]"),
    re.compile(r"[a-z]"),
    re.compile(r"\d"),
    re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]"),
)


def strength_score(password: str) -> int:
    """Number of satisfied rules: upper, lower, digit, special, length >= 8."""
    score = sum(1 for rule in _RULES if rule.search(password))
    if len(password) >= MIN_LENGTH:
        score += 1
    return score


def calculate_strength(password: str | None) -> PasswordStrength:
    if not password:
        return PasswordStrength.WEAK
    score = strength_score(password)
    if score <= 2:
        return PasswordStrength.WEAK
    if score <= 4:
        return PasswordStrength.MEDIUM
    return PasswordStrength.STRONG
