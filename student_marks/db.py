from typing import Optional
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from student_marks.config.settings import (
    DB_URL, DB_NAME, STUDENTS_COLLECTION, MONGO_CLIENT_CONFIG
)

# Collection definitions
COLLECTIONS = {
    'student_collection': STUDENTS_COLLECTION,
}

_client: Optional[MongoClient] = None

def get_mongo_client() -> MongoClient:
    """Get the process-wide MongoDB client with connection pooling."""
    global _client
    if _client is None:
        _client = MongoClient(DB_URL, **MONGO_CLIENT_CONFIG)
    return _client

def get_db() -> Database:
    """Get MongoDB database with proper connection pooling."""
    return get_mongo_client()[DB_NAME]

def get_collection(name: str) -> Collection:
    """Get collection from database."""
    return get_db()[name]
