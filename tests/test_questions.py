import unittest

from onlineexam.errors import InvalidGradeError
from onlineexam.model.question import EssayQuestion, ObjectiveQuestion


class ObjectiveQuestionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.q = ObjectiveQuestion("GK_Q1", "What is the capital of France?", 2, ["London", "Paris"], "Paris")

    def test_match_ignores_case_and_whitespace(self) -> None:
        self.assertEqual(self.q.check_answer(" paris "), 2)
        self.assertEqual(self.q.check_answer("Paris"), 2)
        self.assertEqual(self.q.check_answer("PARIS"), 2)

    def test_wrong_or_missing_answer_scores_zero(self) -> None:
        self.assertEqual(self.q.check_answer("London"), 0)
        self.assertEqual(self.q.check_answer(""), 0)
        self.assertEqual(self.q.check_answer(None), 0)

    def test_options_are_a_snapshot(self) -> None:
        options = ["a", "b"]
        q = ObjectiveQuestion("Q", "?", 1, options, "a")
        options.append("c")
        self.assertEqual(q.options, ("a", "b"))

    def test_identity_equality(self) -> None:
        twin = ObjectiveQuestion("GK_Q1", "What is the capital of France?", 2, ["London", "Paris"], "Paris")
        self.assertNotEqual(self.q, twin)
        self.assertEqual(self.q, self.q)

    def test_marks_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            ObjectiveQuestion("Q", "?", 0, ["a"], "a")

    def test_correct_answer_is_required(self) -> None:
        with self.assertRaises(TypeError):
            ObjectiveQuestion("Q", "?", 1, ["a"])
        for blank in ["", "   "]:
            with self.assertRaises(ValueError):
                ObjectiveQuestion("Q", "?", 1, ["a"], blank)

    def test_fractional_marks_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            ObjectiveQuestion("Q", "?", 2.5, ["a"], "a")
        self.assertEqual(ObjectiveQuestion("Q", "?", 2.0, ["a"], "a").marks, 2)


class EssayQuestionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.q = EssayQuestion("GK_E1", "Explain relativity.", 5)

    def test_automatic_score_is_always_zero(self) -> None:
        for answer in ["", "A thorough answer.", "Explain relativity.", None]:
            self.assertEqual(self.q.check_answer(answer), 0)

    def test_manual_grade_in_range(self) -> None:
        self.assertEqual(self.q.manual_grade(3), 3)
        self.assertEqual(self.q.manual_grade(0), 0)
        self.assertEqual(self.q.manual_grade(5), 5)

    def test_manual_grade_out_of_range_is_rejected(self) -> None:
        with self.assertRaises(InvalidGradeError):
            self.q.manual_grade(7)
        with self.assertRaises(InvalidGradeError):
            self.q.manual_grade(-1)
        self.assertEqual(self.q.check_answer("anything"), 0)

    def test_marks_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            EssayQuestion("E", "?", -2)

    def test_marks_are_normalized_to_int(self) -> None:
        q = EssayQuestion("E", "?", "5")
        self.assertEqual(q.marks, 5)
        self.assertIsInstance(q.marks, int)
        self.assertEqual(q.manual_grade(5), 5)

    def test_invalid_marks_are_rejected(self) -> None:
        for marks in [2.5, True, "five", None]:
            with self.assertRaises(ValueError):
                EssayQuestion("E", "?", marks)


if __name__ == "__main__":
    unittest.main()
