"""Repository Factory - DRY Implementation"""
from typing import Dict, Optional
from student_marks.db import COLLECTIONS, get_collection
from student_marks.repositories.core.record_store import MongoRecordStore, RecordStore
from student_marks.repositories.student.student_repo import StudentRepo
from student_marks.repositories.student.student_aggregations import StudentAggregations
from student_marks.utils.index.optimizer import ensure_indexes

class RepositoryFactory:
    """Centralized repository creation (DRY principle)"""

    _stores: Dict[str, RecordStore] = {}

    @classmethod
    def get_student_store(cls, collection_name: str = COLLECTIONS['student_collection']) -> RecordStore:
        """Get or create the record store of a students collection"""
        if collection_name not in cls._stores:
            collection = get_collection(collection_name)
            ensure_indexes(collection)
            cls._stores[collection_name] = MongoRecordStore(collection)
        return cls._stores[collection_name]

    @classmethod
    def get_student_repo(cls, store: Optional[RecordStore] = None) -> StudentRepo:
        return StudentRepo(store or cls.get_student_store())

    @classmethod
    def get_student_aggregations(cls, store: Optional[RecordStore] = None) -> StudentAggregations:
        return StudentAggregations(store or cls.get_student_store())

    @classmethod
    def reset(cls) -> None:
        cls._stores.clear()
