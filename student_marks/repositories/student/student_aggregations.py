"""Student Aggregations - multi-stage pipelines over the students collection"""
from datetime import date
from typing import Dict, List
from student_marks.config.settings import SCORE_BEST_STUDENT
from student_marks.config.log_config import get_logger
from student_marks.exceptions.exceptions import StudentNotFoundError
from student_marks.repositories.core.record_store import RecordStore
from student_marks.repositories.student.student_pipelines import (
    build_student_subject_marks_pipeline, build_student_marks_at_dates_pipeline,
    build_avg_score_pipeline, build_best_students_pipeline, build_worst_students_pipeline
)

logger = get_logger("aggregations")

class StudentAggregations:
    def __init__(self, store: RecordStore, best_score: int = SCORE_BEST_STUDENT):
        self.store = store
        self.best_score = best_score

    def subject_marks_for_student(self, student_id: int, subject: str) -> List[Dict]:
        """Rows of (score, date) for one student's marks in a subject"""
        if not self.store.exists(student_id):
            raise StudentNotFoundError(student_id)
        rows = self.store.aggregate(build_student_subject_marks_pipeline(student_id, subject))
        logger.debug("student %s subject %s rows: %s", student_id, subject, rows)
        return rows

    def marks_in_date_range(self, student_id: int, date_from: date, date_to: date) -> List[Dict]:
        """Rows of (subject, score, date); date_from <= date_to is the caller's job"""
        rows = self.store.aggregate(build_student_marks_at_dates_pipeline(student_id, date_from, date_to))
        logger.debug("student %s marks from %s to %s rows: %s", student_id, date_from, date_to, rows)
        return rows

    def average_score_above(self, avg_score_threshold: int) -> List[Dict]:
        """Rows of {_id: name, avgScore} sorted by avgScore descending"""
        rows = self.store.aggregate(build_avg_score_pipeline(avg_score_threshold))
        logger.debug("average score above %s rows: %s", avg_score_threshold, rows)
        return rows

    def best_students(self, n_students: int) -> List[Dict]:
        # $limit must be positive
        if n_students <= 0:
            return []
        rows = self.store.aggregate(build_best_students_pipeline(n_students, self.best_score))
        logger.debug("best %s students rows: %s", n_students, rows)
        return rows

    def worst_students(self, n_students: int) -> List[Dict]:
        if n_students <= 0:
            return []
        rows = self.store.aggregate(build_worst_students_pipeline(n_students))
        logger.debug("worst %s students rows: %s", n_students, rows)
        return rows
