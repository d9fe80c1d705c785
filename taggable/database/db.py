"""
Database connection handling
"""
from pymongo import MongoClient
from taggable.config.config import MONGO_URI, MONGO_DB_NAME, logger

_client = None

def get_client():
    """Return the shared MongoDB client, connecting on first use"""
    global _client
    if _client is None:
        logger.info(f"Connecting to MongoDB at {MONGO_URI}")
        _client = MongoClient(MONGO_URI)
    return _client

def set_client(client) -> None:
    """Replace the shared client (e.g. with a mongomock client in tests)"""
    global _client
    _client = client

def get_db():
    """Return the configured database"""
    return get_client()[MONGO_DB_NAME]

def get_collection(name: str):
    """Return a collection of the configured database"""
    return get_db()[name]
