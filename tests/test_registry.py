import random
import unittest
from datetime import timedelta

from onlineexam.app.registry import ExamRegistry
from onlineexam.model.question import EssayQuestion, ObjectiveQuestion
from onlineexam.model.users import Admin


class RegistryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = ExamRegistry()
        self.admin = self.registry.create_admin("adminUser")
        self.s1 = self.registry.create_student("student1")
        self.s2 = self.registry.create_student("student2")
        self.pool = self.admin.create_question_pool("General Knowledge Pool")
        self.q1 = ObjectiveQuestion("GK_Q1", "Capital of France?", 1, ["London", "Paris"], "Paris")
        self.q2 = ObjectiveQuestion("GK_Q2", "Red planet?", 1, ["Earth", "Mars"], "Mars")
        self.e1 = EssayQuestion("GK_E1", "Relativity?", 5)
        for q in (self.q1, self.q2, self.e1):
            self.pool.add_question(q)

    def _exam(self):
        exam = self.admin.create_exam("GK Test", timedelta(minutes=30), pool=self.pool, rng=random.Random(3))
        exam.add_question(self.q1)
        exam.set_random_question_count(2)
        return exam

    def test_admin_registers_exams_in_shared_registry(self) -> None:
        exam = self._exam()
        self.assertEqual(self.registry.exams, (exam,))
        self.assertIs(self.registry.find_exam(exam.exam_id), exam)
        self.assertIs(exam.creator, self.admin)
        self.assertEqual(self.admin.question_pools, (self.pool,))
        self.assertEqual(len(self.registry.users), 3)

    def test_admin_without_registry_registers_nothing(self) -> None:
        loose = Admin("loose")
        loose.create_exam("Orphan", timedelta(minutes=5))
        self.assertEqual(self.registry.exams, ())

    def test_unpublished_exam_cannot_be_started(self) -> None:
        exam = self._exam()
        self.assertIsNone(self.s1.start_exam(exam))
        self.assertEqual(exam.exam_sessions, ())
        self.assertEqual(self.registry.published_exams(), [])

    def test_student_takes_exam_once(self) -> None:
        exam = self._exam()
        self.assertTrue(self.admin.publish_exam(exam))
        session = self.s1.start_exam(exam)
        self.assertIsNotNone(session)
        self.addCleanup(session.submit)
        self.assertEqual(session.total_questions, 3)
        self.assertEqual(exam.exam_sessions, (session,))
        self.assertEqual(self.s1.exam_sessions, (session,))
        self.assertIsNone(self.s1.start_exam(exam))
        self.assertEqual(len(exam.exam_sessions), 1)

    def test_results_and_summary(self) -> None:
        exam = self._exam()
        self.admin.publish_exam(exam)

        first = self.s1.start_exam(exam)
        first.submit_answer(self.q1, "Paris")
        first.submit_answer(self.q2, "Mars")
        r1 = self.s1.submit_exam(first)

        second = self.s2.start_exam(exam)
        second.submit_answer(self.q1, "London")
        r2 = self.s2.submit_exam(second)

        self.assertEqual((r1.score, r1.total_marks), (2, 7))
        self.assertEqual((r2.score, r2.total_marks), (0, 7))
        self.assertIs(self.s1.submit_exam(first), r1)
        self.assertIs(self.s1.view_exam_result(exam), r1)
        self.assertEqual(self.admin.view_exam_results(exam), [r1, r2])

        summary = self.admin.generate_exam_summary(exam)
        self.assertEqual(summary.count, 2)
        self.assertEqual(summary.average, 1.0)
        self.assertEqual(summary.highest, 2)
        self.assertEqual(summary.lowest, 0)

    def test_pending_sessions_are_left_out_of_results(self) -> None:
        exam = self._exam()
        self.admin.publish_exam(exam)
        session = self.s1.start_exam(exam)
        self.addCleanup(session.submit)
        self.assertEqual(self.admin.view_exam_results(exam), [])
        self.assertIsNone(self.s1.view_exam_result(exam))
        self.assertEqual(self.admin.generate_exam_summary(exam).count, 0)


if __name__ == "__main__":
    unittest.main()
