from datetime import datetime

import pytest

from student_marks.exceptions.exceptions import StudentAlreadyExistsError
from student_marks.models.student import Student
from student_marks.repositories.student.student_queries import build_phone_prefix_filter


def ids(docs):
    return [doc["_id"] for doc in docs]


def test_find_student_marks_projection(student_repo):
    doc = student_repo.find_student_marks(2)
    assert set(doc) == {"_id", "marks"}
    assert doc["marks"] == [{"subject": "subject1", "date": datetime(2024, 1, 15), "score": 50}]


def test_find_student_marks_found_but_empty(student_repo):
    assert student_repo.find_student_marks(7) == {"_id": 7, "marks": []}
    assert student_repo.find_student_marks(99) is None


def test_find_student_no_marks_projection(student_repo):
    assert student_repo.find_student_no_marks(3) == {"_id": 3, "name": "name3", "phone": "050-2345678"}
    assert student_repo.find_student_no_marks(99) is None


def test_find_by_phone(student_repo):
    assert student_repo.find_by_phone("056-1234567") == {"_id": 7, "name": "name7"}
    assert student_repo.find_by_phone("000") is None


def test_find_by_phone_prefix(student_repo):
    docs = student_repo.find_by_phone_prefix("05")
    assert ids(docs) == [1, 2, 3, 4, 5, 6, 7]
    assert set(docs[0]) == {"_id", "name", "phone"}


def test_phone_prefix_filter_is_anchored_and_escaped():
    assert build_phone_prefix_filter("050+") == {"phone": {"$regex": r"^050\+"}}


def test_find_good_marks(student_repo):
    assert ids(student_repo.find_good_marks(70)) == [4, 6]
    assert ids(student_repo.find_good_marks(93)) == [6]
    assert ids(student_repo.find_good_marks(100)) == []


def test_find_few_marks_is_read_only(student_repo, seeded_store):
    assert ids(student_repo.find_few_marks(2)) == [2, 7]
    assert ids(student_repo.find_few_marks(2)) == [2, 7]
    assert seeded_store.exists(2)


def test_find_few_marks_zero_threshold(student_repo):
    assert student_repo.find_few_marks(0) == []


def test_delete_few_marks(student_repo, seeded_store):
    assert ids(student_repo.delete_few_marks(2)) == [2, 7]
    assert not seeded_store.exists(2)
    assert not seeded_store.exists(7)
    assert seeded_store.exists(5)
    assert student_repo.delete_few_marks(2) == []


def test_delete_few_marks_only_deletes_still_matching(student_repo, seeded_store, monkeypatch):
    find_few_marks = student_repo.find_few_marks

    def find_then_add_marks(threshold_marks):
        docs = find_few_marks(threshold_marks)
        # student 7 gets two marks between the read and the delete
        seeded_store.update_one(7, {"$push": {"marks": {"$each": [
            {"subject": "subject1", "date": datetime(2024, 3, 1), "score": 80},
            {"subject": "subject2", "date": datetime(2024, 3, 2), "score": 81},
        ]}}})
        return docs

    monkeypatch.setattr(student_repo, "find_few_marks", find_then_add_marks)
    student_repo.delete_few_marks(2)
    assert not seeded_store.exists(2)
    assert seeded_store.exists(7)
    assert len(student_repo.find_student_marks(7)["marks"]) == 2


def test_find_good_marks_subject(student_repo):
    assert ids(student_repo.find_good_marks_subject("subject2", 70)) == [4, 6]
    assert ids(student_repo.find_good_marks_subject("subject4", 0)) == [6]
    assert student_repo.find_good_marks_subject("subject9", 0) == []


def test_find_marks_amount_between(student_repo):
    assert ids(student_repo.find_marks_amount_between(0, 1)) == [2, 7]
    assert ids(student_repo.find_marks_amount_between(1, 2)) == [2, 5]
    assert student_repo.find_marks_amount_between(2, 1) == []


def test_find_subject_marks(student_repo):
    assert student_repo.find_subject_marks(1, "subject1") == [
        {"subject": "subject1", "date": datetime(2024, 1, 1), "score": 100},
        {"subject": "subject1", "date": datetime(2024, 1, 10), "score": 90},
    ]


def test_find_subject_marks_empty_vs_absent(student_repo):
    assert student_repo.find_subject_marks(1, "subject4") == []
    assert student_repo.find_subject_marks(99, "subject1") is None


def test_store_insert_duplicate(seeded_store):
    with pytest.raises(StudentAlreadyExistsError) as error:
        seeded_store.insert(Student(3, "again", "000").to_document())
    assert error.value.student_id == 3


def test_store_update_and_delete_absent(seeded_store):
    assert seeded_store.update_one(99, {"$set": {"phone": "1"}}) is None
    assert seeded_store.delete_one(99) is None
