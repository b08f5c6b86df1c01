import os

# Keep test runs from writing log files
os.environ.setdefault("LOG_FILE_ENABLED", "false")

import mongomock
import pytest

from student_marks.repositories.core.record_store import MongoRecordStore
from student_marks.repositories.student.student_aggregations import StudentAggregations
from student_marks.repositories.student.student_repo import StudentRepo
from student_marks.services.student.students_service import StudentsService
from student_marks.utils.seed.seed_data import create_db


@pytest.fixture()
def collection():
    """A fresh in-memory students collection for every test."""
    return mongomock.MongoClient().students_db.students


@pytest.fixture()
def store(collection):
    return MongoRecordStore(collection)


@pytest.fixture()
def seeded_store(store):
    create_db(store)
    return store


@pytest.fixture()
def student_repo(seeded_store):
    return StudentRepo(seeded_store)


@pytest.fixture()
def aggregations(seeded_store):
    return StudentAggregations(seeded_store)


@pytest.fixture()
def service(seeded_store):
    return StudentsService(seeded_store, purge_few_marks=True)


@pytest.fixture()
def read_only_service(seeded_store):
    return StudentsService(seeded_store, purge_few_marks=False)
