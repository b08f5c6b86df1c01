"""Students Service - Business Logic Layer (SoC)"""
from datetime import date
from typing import Dict, List, Optional
from student_marks.config.settings import PURGE_FEW_MARKS
from student_marks.config.log_config import get_logger
from student_marks.exceptions.exceptions import StudentNotFoundError
from student_marks.models.student import (
    Mark, NameAvgScore, Student, StudentRecord, marks_from_documents
)
from student_marks.repositories.core.record_store import RecordStore
from student_marks.repositories.core.repository_factory import RepositoryFactory

logger = get_logger("service")

class StudentsService:
    def __init__(self, store: Optional[RecordStore] = None, purge_few_marks: bool = PURGE_FEW_MARKS):
        self.store = store or RepositoryFactory.get_student_store()
        self.student_repo = RepositoryFactory.get_student_repo(self.store)
        self.aggregations = RepositoryFactory.get_student_aggregations(self.store)
        self.purge_few_marks = purge_few_marks

    # ============= MUTATIONS =============

    def add_student(self, student: Student) -> Student:
        self.store.insert(student.to_document())
        logger.debug("saved %s", student)
        return student

    def update_phone(self, student_id: int, phone: str) -> Student:
        doc = self.store.update_one(student_id, {"$set": {"phone": phone}}, {"marks": 0})
        if doc is None:
            raise StudentNotFoundError(student_id)
        logger.debug("student %s, new phone number %s", student_id, phone)
        return Student.from_document(doc)

    def add_mark(self, student_id: int, mark: Mark) -> List[Mark]:
        """Append a mark atomically and return the whole mark history"""
        doc = self.store.update_one(student_id, {"$push": {"marks": mark.to_document()}}, {"marks": 1})
        if doc is None:
            raise StudentNotFoundError(student_id)
        logger.debug("student %s, added mark %s", student_id, mark)
        return marks_from_documents(doc["marks"])

    def remove_student(self, student_id: int) -> StudentRecord:
        doc = self.store.delete_one(student_id)
        if doc is None:
            raise StudentNotFoundError(student_id)
        record = StudentRecord.from_document(doc)
        logger.debug("removed student %s, marks %s", student_id, record.marks)
        return record

    def remove_students_few_marks(self, threshold_marks: int) -> List[Student]:
        """Delete every student with fewer marks than the threshold"""
        students = self._to_students(self.student_repo.delete_few_marks(threshold_marks))
        logger.debug("removed %s students having less than %s marks", len(students), threshold_marks)
        return students

    # ============= SINGLE STUDENT READS =============

    def get_marks(self, student_id: int) -> List[Mark]:
        doc = self.student_repo.find_student_marks(student_id)
        if doc is None:
            raise StudentNotFoundError(student_id)
        marks = marks_from_documents(doc.get("marks", []))
        logger.debug("id %s, marks %s", student_id, marks)
        return marks

    def get_student(self, student_id: int) -> Student:
        doc = self.student_repo.find_student_no_marks(student_id)
        if doc is None:
            raise StudentNotFoundError(student_id)
        return Student.from_document(doc)

    def get_student_by_phone(self, phone: str) -> Optional[Student]:
        doc = self.student_repo.find_by_phone(phone)
        if doc is None:
            return None
        return Student(doc["_id"], doc["name"], phone)

    def get_student_subject_marks(self, student_id: int, subject: str) -> List[Mark]:
        # existence is checked by the aggregation before its pipeline runs
        rows = self.aggregations.subject_marks_for_student(student_id, subject)
        return marks_from_documents(rows, subject)

    def get_student_marks_at_dates(self, student_id: int, date_from: date, date_to: date) -> List[Mark]:
        self._ensure_exists(student_id)
        rows = self.aggregations.marks_in_date_range(student_id, date_from, date_to)
        return marks_from_documents(rows)

    # ============= COLLECTION QUERIES =============

    def get_students_by_phone_prefix(self, phone_prefix: str) -> List[Student]:
        students = self._to_students(self.student_repo.find_by_phone_prefix(phone_prefix))
        logger.debug("number of students having phone prefix %s is %s", phone_prefix, len(students))
        return students

    def get_students_all_good_marks(self, threshold_score: int) -> List[Student]:
        return self._to_students(self.student_repo.find_good_marks(threshold_score))

    def get_students_few_marks(self, threshold_marks: int) -> List[Student]:
        """Students having fewer marks than the threshold.

        With purging on, the matched students are deleted as well, so a
        second call returns a subset of the first.
        """
        if self.purge_few_marks:
            return self.remove_students_few_marks(threshold_marks)
        return self._to_students(self.student_repo.find_few_marks(threshold_marks))

    def get_students_all_good_marks_subject(self, subject: str, threshold_score: int) -> List[Student]:
        students = self._to_students(self.student_repo.find_good_marks_subject(subject, threshold_score))
        logger.debug("students with good marks in %s: %s", subject, students)
        return students

    def get_students_marks_amount_between(self, min_marks: int, max_marks: int) -> List[Student]:
        logger.debug("received min %s and max %s values", min_marks, max_marks)
        students = self._to_students(self.student_repo.find_marks_amount_between(min_marks, max_marks))
        logger.debug("students having %s..%s marks: %s", min_marks, max_marks, students)
        return students

    # ============= RANKINGS =============

    def get_student_avg_score(self, avg_score_threshold: int) -> List[NameAvgScore]:
        rows = self.aggregations.average_score_above(avg_score_threshold)
        return [NameAvgScore(row["_id"], int(row["avgScore"])) for row in rows]

    def get_best_students(self, n_students: int) -> List[str]:
        return [row["_id"] for row in self.aggregations.best_students(n_students)]

    def get_worst_students(self, n_students: int) -> List[str]:
        return [row["name"] for row in self.aggregations.worst_students(n_students)]

    # ============= HELPERS =============

    def _ensure_exists(self, student_id: int) -> None:
        if not self.store.exists(student_id):
            raise StudentNotFoundError(student_id)

    @staticmethod
    def _to_students(docs: List[Dict]) -> List[Student]:
        return [Student.from_document(doc) for doc in docs]
