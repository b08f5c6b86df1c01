"""Reference student fixture - loads a known set of students and marks"""
from typing import Dict, List
from student_marks.config.log_config import get_logger
from student_marks.models.student import Mark, Student
from student_marks.repositories.core.record_store import RecordStore
from student_marks.utils.time.timeutils import parse_date

logger = get_logger("seed")

SUBJECT_1 = "subject1"
SUBJECT_2 = "subject2"
SUBJECT_3 = "subject3"
SUBJECT_4 = "subject4"

STUDENTS: List[Student] = [
    Student(1, "name1", "050-1234567"),
    Student(2, "name2", "055-1234567"),
    Student(3, "name3", "050-2345678"),
    Student(4, "name4", "053-1234567"),
    Student(5, "name5", "054-1234567"),
    Student(6, "name6", "050-3456789"),
    Student(7, "name7", "056-1234567"),
]

MARKS: Dict[int, List[Mark]] = {
    1: [
        Mark(SUBJECT_1, parse_date("2024-01-01"), 100),
        Mark(SUBJECT_3, parse_date("2024-01-05"), 70),
        Mark(SUBJECT_1, parse_date("2024-01-10"), 90),
    ],
    2: [
        Mark(SUBJECT_1, parse_date("2024-01-15"), 50),
    ],
    3: [
        Mark(SUBJECT_2, parse_date("2024-01-02"), 60),
        Mark(SUBJECT_3, parse_date("2024-01-20"), 75),
        Mark(SUBJECT_1, parse_date("2024-02-01"), 65),
    ],
    4: [
        Mark(SUBJECT_2, parse_date("2024-01-03"), 90),
        Mark(SUBJECT_2, parse_date("2024-01-25"), 95),
        Mark(SUBJECT_1, parse_date("2024-02-05"), 94),
    ],
    5: [
        Mark(SUBJECT_3, parse_date("2024-01-07"), 40),
        Mark(SUBJECT_2, parse_date("2024-02-10"), 65),
    ],
    6: [
        Mark(SUBJECT_2, parse_date("2024-01-04"), 100),
        Mark(SUBJECT_4, parse_date("2024-01-30"), 100),
        Mark(SUBJECT_1, parse_date("2024-02-15"), 100),
    ],
    7: [],
}

def get_student_marks(student_id: int) -> List[Mark]:
    return list(MARKS.get(student_id, []))

def create_db(store: RecordStore) -> None:
    """Clear the store and load the reference students in id order"""
    store.delete_many({})
    for student in STUDENTS:
        document = student.to_document()
        document["marks"] = [mark.to_document() for mark in MARKS[student.id]]
        store.insert(document)
    logger.debug("loaded %s reference students", len(STUDENTS))
