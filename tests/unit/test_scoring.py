"""
test_scoring.py - Unit tests for segpass.scoring
"""

import itertools
import unittest

from segpass.scoring import score_password, strength_label


class TestScorePassword(unittest.TestCase):
    """Test the strength heuristic"""

    def test_empty(self):
        self.assertEqual(score_password(""), 0)

    def test_none(self):
        self.assertEqual(score_password(None), 0)

    def test_repeated_character(self):
        # 5 + 2.5 + 1.67 + 1.25 + 1.0, one variation (lowercase) -> +0
        self.assertEqual(score_password("aaaaa"), 11)

    def test_all_variations(self):
        # four distinct chars, four variations -> 20 + 3
        self.assertEqual(score_password("Aa1!"), 23)

    def test_no_variation_subtracts_one(self):
        # underscore is a word character but neither letter nor digit
        self.assertEqual(score_password("_"), 4)

    def test_non_word_character(self):
        self.assertEqual(score_password("-"), 5)

    def test_latin1_counts_as_non_word(self):
        self.assertEqual(score_password("é"), 5)
        self.assertEqual(score_password("aé"), 11)

    def test_case_sensitive_repetition(self):
        self.assertEqual(score_password("aA"), 11)
        self.assertEqual(score_password("aa"), 7)

    def test_truncates(self):
        # 5 + 2.5 + 1.67 = 9.17, lowercase only
        self.assertEqual(score_password("aaa"), 9)

    def test_permutation_keeps_score(self):
        password = "aB3$aB"
        scores = {score_password("".join(p)) for p in itertools.permutations(password)}
        self.assertEqual(scores, {score_password(password)})

    def test_pure(self):
        password = "correct-horse-battery-staple"
        self.assertEqual(score_password(password), score_password(password))

    def test_long_password_scores_high(self):
        self.assertGreater(score_password("Xq7!mP2#vL9@kR4$wT6%"), 80)


class TestStrengthLabel(unittest.TestCase):
    """Test score labels"""

    def test_thresholds(self):
        self.assertEqual(strength_label(81), "strong")
        self.assertEqual(strength_label(80), "good")
        self.assertEqual(strength_label(61), "good")
        self.assertEqual(strength_label(60), "weak")
        self.assertEqual(strength_label(30), "weak")
        self.assertEqual(strength_label(29), "very weak")
        self.assertEqual(strength_label(-1), "very weak")


if __name__ == "__main__":
    unittest.main()
