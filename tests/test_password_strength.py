from __future__ import annotations

import unittest

from opsflow.core.password_strength import calculate_strength, strength_score
from opsflow.models.credential import PasswordStrength


class PasswordStrengthTests(unittest.TestCase):
    def test_empty_password_is_weak(self) -> None:
        self.assertEqual(calculate_strength(""), PasswordStrength.WEAK)
        self.assertEqual(calculate_strength(None), PasswordStrength.WEAK)

    def test_scores(self) -> None:
        self.assertEqual(strength_score("abc"), 1)
        self.assertEqual(strength_score("abcdefgh"), 2)
        self.assertEqual(strength_score("Abcdefg1"), 4)
        self.assertEqual(strength_score("Abcdef1!"), 5)

    def test_classification(self) -> None:
        self.assertEqual(calculate_strength("abcdefgh"), PasswordStrength.WEAK)
        self.assertEqual(calculate_strength("Abcdefg1"), PasswordStrength.MEDIUM)
        self.assertEqual(calculate_strength("Abc1!"), PasswordStrength.MEDIUM)
        self.assertEqual(calculate_strength("Abcdef1!"), PasswordStrength.STRONG)

    def test_only_listed_special_characters_count(self) -> None:
        self.assertEqual(strength_score("_"), 0)
        self.assertEqual(strength_score("?"), 1)

    def test_satisfying_more_rules_never_scores_lower(self) -> None:
        order = [PasswordStrength.WEAK, PasswordStrength.MEDIUM, PasswordStrength.STRONG]
        chain = ["a", "aB", "aB3", "aB3$", "aB3$efgh"]
        ranks = [order.index(calculate_strength(p)) for p in chain]
        self.assertEqual(ranks, sorted(ranks))


if __name__ == "__main__":
    unittest.main()
