import logging
from datetime import date, datetime

import mongomock
import pytest

from student_marks.config import settings
from student_marks.config.log_config import ROOT_LOGGER_NAME, get_logger
from student_marks.models.student import Mark, Student, StudentRecord
from student_marks.repositories.core import repository_factory
from student_marks.repositories.core.record_store import MongoRecordStore
from student_marks.repositories.core.repository_factory import RepositoryFactory
from student_marks.services.student.students_service import StudentsService
from student_marks.utils.index.optimizer import ensure_indexes
from student_marks.utils.time.timeutils import date_to_native, native_to_date, parse_date


def test_date_conversion_is_idempotent():
    day = date(2024, 2, 29)
    native = date_to_native(day)
    assert native == datetime(2024, 2, 29)
    assert date_to_native(native) == native
    assert native_to_date(native) == day
    assert native_to_date(day) == day


def test_parse_date_rejects_garbage():
    assert parse_date("2024-01-30") == date(2024, 1, 30)
    with pytest.raises(ValueError):
        parse_date("30/01/2024")


def test_mark_document_uses_native_datetime():
    mark = Mark("subject1", date(2024, 1, 30), -5)
    assert mark.to_document() == {"subject": "subject1", "date": datetime(2024, 1, 30), "score": -5}


def test_student_document_starts_with_empty_marks():
    assert Student(3, "n", "p").to_document() == {"_id": 3, "name": "n", "phone": "p", "marks": []}


def test_student_record_without_marks_field():
    record = StudentRecord.from_document({"_id": 3, "name": "n", "phone": "p"})
    assert record.marks == []


@pytest.mark.parametrize("raw, expected", [
    ("true", True), ("0", False), ("Off", False), ("YES", True), ("maybe", True),
])
def test_safe_bool_env(monkeypatch, raw, expected):
    monkeypatch.setenv("SOME_FLAG", raw)
    assert settings.safe_bool_env("SOME_FLAG", "true") is expected


def test_safe_int_env_falls_back(monkeypatch):
    monkeypatch.setenv("SOME_NUMBER", "abc")
    assert settings.safe_int_env("SOME_NUMBER", "80") == 80


def test_ensure_indexes():
    collection = mongomock.MongoClient().index_db.students_a
    ensure_indexes(collection)
    ensure_indexes(collection)
    info = collection.index_information()
    assert "phone_1" in info
    assert "marks.subject_1_marks.score_1" in info


@pytest.fixture()
def patched_factory(monkeypatch):
    collection = mongomock.MongoClient().factory_db.students
    monkeypatch.setattr(repository_factory, "get_collection", lambda name: collection)
    RepositoryFactory.reset()
    yield collection
    RepositoryFactory.reset()


def test_factory_caches_store(patched_factory):
    store = RepositoryFactory.get_student_store()
    assert isinstance(store, MongoRecordStore)
    assert store.collection is patched_factory
    assert RepositoryFactory.get_student_store() is store
    assert "phone_1" in patched_factory.index_information()


def test_service_defaults_to_factory_store(patched_factory):
    service = StudentsService()
    service.add_student(Student(1, "name1", "050-1234567"))
    assert patched_factory.find_one({"_id": 1})["marks"] == []


class CollectingHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_module_logger_drops_repeated_message():
    handler = CollectingHandler()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.addHandler(handler)
    try:
        logger = get_logger("service")
        logger.warning("repeated message %s", 1)
        logger.warning("repeated message %s", 1)
        logger.warning("repeated message %s", 2)
    finally:
        root.removeHandler(handler)
    assert [record.getMessage() for record in handler.records] == [
        "repeated message 1", "repeated message 2"
    ]


def test_get_logger_adds_one_duplicate_filter():
    get_logger("repo")
    logger = get_logger("repo")
    assert logger.name == f"{ROOT_LOGGER_NAME}.repo"
    assert len(logger.filters) == 1
