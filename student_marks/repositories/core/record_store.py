"""Record Store - the only layer that talks to the datastore (SoC)"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError
from student_marks.exceptions.exceptions import StudentAlreadyExistsError


class RecordStore(ABC):
    """Persistence contract for student records.

    Single-record writes are atomic. ``update_one`` and ``delete_one``
    return ``None`` when the id is absent so callers can tell
    "not found" apart from an empty result.
    """

    @abstractmethod
    def exists(self, student_id: int) -> bool:
        ...

    @abstractmethod
    def insert(self, document: Dict) -> None:
        """Insert a new record; raises StudentAlreadyExistsError on a taken id"""

    @abstractmethod
    def find_one(self, query: Dict, projection: Optional[Dict] = None) -> Optional[Dict]:
        ...

    @abstractmethod
    def find(self, query: Dict, projection: Optional[Dict] = None) -> List[Dict]:
        ...

    @abstractmethod
    def aggregate(self, pipeline: List[Dict]) -> List[Dict]:
        ...

    @abstractmethod
    def update_one(self, student_id: int, update: Dict, projection: Optional[Dict] = None) -> Optional[Dict]:
        """Apply an update operator document and return the record after it"""

    @abstractmethod
    def delete_one(self, student_id: int) -> Optional[Dict]:
        """Delete one record and return its pre-deletion snapshot"""

    @abstractmethod
    def delete_many(self, query: Dict) -> int:
        ...


class MongoRecordStore(RecordStore):
    def __init__(self, collection: Collection):
        self.collection = collection

    def exists(self, student_id: int) -> bool:
        return self.collection.find_one({"_id": student_id}, {"_id": 1}) is not None

    def insert(self, document: Dict) -> None:
        try:
            self.collection.insert_one(document)
        except DuplicateKeyError:
            raise StudentAlreadyExistsError(document["_id"])

    def find_one(self, query: Dict, projection: Optional[Dict] = None) -> Optional[Dict]:
        return self.collection.find_one(query, projection)

    def find(self, query: Dict, projection: Optional[Dict] = None) -> List[Dict]:
        return list(self.collection.find(query, projection))

    def aggregate(self, pipeline: List[Dict]) -> List[Dict]:
        return list(self.collection.aggregate(pipeline))

    def update_one(self, student_id: int, update: Dict, projection: Optional[Dict] = None) -> Optional[Dict]:
        return self.collection.find_one_and_update(
            {"_id": student_id},
            update,
            projection=projection,
            return_document=ReturnDocument.AFTER
        )

    def delete_one(self, student_id: int) -> Optional[Dict]:
        return self.collection.find_one_and_delete({"_id": student_id})

    def delete_many(self, query: Dict) -> int:
        result = self.collection.delete_many(query)
        return result.deleted_count
