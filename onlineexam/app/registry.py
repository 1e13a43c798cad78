from __future__ import annotations

"""Exam registry: the single shared place users and exams are registered.

Pass one instance to every Admin that creates exams; an admin without a
registry creates exams nobody else can find.
"""

from typing import List, Optional, Tuple, Union

from ..model.exam import Exam
from ..model.users import Admin, Student

UserT = Union[Admin, Student]


class ExamRegistry:
    def __init__(self) -> None:
        self._users: List[UserT] = []
        self._exams: List[Exam] = []

    @property
    def users(self) -> Tuple[UserT, ...]:
        return tuple(self._users)

    @property
    def exams(self) -> Tuple[Exam, ...]:
        return tuple(self._exams)

    def create_admin(self, username: str) -> Admin:
        admin = Admin(username, registry=self)
        self._users.append(admin)
        return admin

    def create_student(self, username: str) -> Student:
        student = Student(username)
        self._users.append(student)
        return student

    def add_exam(self, exam: Exam) -> None:
        if any(e is exam for e in self._exams):
            return
        self._exams.append(exam)

    def find_exam(self, exam_id: str) -> Optional[Exam]:
        for e in self._exams:
            if e.exam_id == exam_id:
                return e
        return None

    def published_exams(self) -> List[Exam]:
        return [e for e in self._exams if e.published]
