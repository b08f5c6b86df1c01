"""Index Optimization Utilities - Database Performance (SoC)"""
from pymongo.collection import Collection
from student_marks.config.log_config import get_logger

logger = get_logger("indexes")

STUDENT_INDEXES = [
    [("phone", 1)],
    [("marks.subject", 1), ("marks.score", 1)],
]

_indexed_collections = set()

def ensure_indexes(collection: Collection) -> None:
    """Create the students indexes once per collection per process"""
    if collection.full_name in _indexed_collections:
        return

    existing_keys = [list(idx.get("key", {}).items()) for idx in collection.list_indexes()]
    for keys in STUDENT_INDEXES:
        if keys not in existing_keys:
            collection.create_index(keys)
            logger.info("created index %s on %s", keys, collection.full_name)

    _indexed_collections.add(collection.full_name)
