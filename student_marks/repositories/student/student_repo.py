"""Student Repository - Data Access Layer (SoC)"""
from typing import Dict, List, Optional
from student_marks.repositories.core.record_store import RecordStore
from student_marks.repositories.student.student_pipelines import build_marks_of_subject_pipeline
from student_marks.repositories.student.student_queries import (
    MARKS_ONLY, ID_NAME, ID_NAME_PHONE,
    build_id_filter, build_ids_filter, build_phone_filter, build_phone_prefix_filter,
    build_good_marks_filter, build_few_marks_filter, build_good_marks_subject_filter,
    build_marks_amount_between_filter
)

class StudentRepo:
    def __init__(self, store: RecordStore):
        self.store = store

    def find_student_marks(self, student_id: int) -> Optional[Dict]:
        return self.store.find_one(build_id_filter(student_id), MARKS_ONLY)

    def find_student_no_marks(self, student_id: int) -> Optional[Dict]:
        return self.store.find_one(build_id_filter(student_id), ID_NAME_PHONE)

    def find_by_phone(self, phone: str) -> Optional[Dict]:
        """First student with this phone; phones are not unique"""
        return self.store.find_one(build_phone_filter(phone), ID_NAME)

    def find_by_phone_prefix(self, prefix: str) -> List[Dict]:
        return self.store.find(build_phone_prefix_filter(prefix), ID_NAME_PHONE)

    def find_good_marks(self, threshold_score: int) -> List[Dict]:
        return self.store.find(build_good_marks_filter(threshold_score), ID_NAME_PHONE)

    def find_few_marks(self, threshold_marks: int) -> List[Dict]:
        return self.store.find(build_few_marks_filter(threshold_marks), ID_NAME_PHONE)

    def delete_few_marks(self, threshold_marks: int) -> List[Dict]:
        """Delete students having fewer marks than the threshold.

        Returns the students matched by the read. Deletion re-applies the
        predicate to exactly those ids, so a student who got enough marks
        in between is kept.
        """
        students = self.find_few_marks(threshold_marks)
        if students:
            ids = [student["_id"] for student in students]
            query = {**build_ids_filter(ids), **build_few_marks_filter(threshold_marks)}
            self.store.delete_many(query)
        return students

    def find_good_marks_subject(self, subject: str, threshold_score: int) -> List[Dict]:
        return self.store.find(build_good_marks_subject_filter(subject, threshold_score), ID_NAME_PHONE)

    def find_marks_amount_between(self, min_marks: int, max_marks: int) -> List[Dict]:
        return self.store.find(build_marks_amount_between_filter(min_marks, max_marks), ID_NAME_PHONE)

    def find_subject_marks(self, student_id: int, subject: str) -> Optional[List[Dict]]:
        """Marks of one subject for a student; None when the student is absent"""
        results = self.store.aggregate(build_marks_of_subject_pipeline(student_id, subject))
        return results[0]["marks"] if results else None
