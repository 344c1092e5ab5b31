"""MongoDB adapter for day plan storage.
"""

import logging
from pymongo import MongoClient
from pymongo.collection import Collection

logger = logging.getLogger("mealprep.mongo")

PLANS_COLLECTION = "day_plans"

_client = None
_db = None


# ------------------ Connection ------------------
def connect(uri: str, db_name: str = "mealprep"):
    global _client, _db
    try:
        _client = MongoClient(uri)
        _db = _client[db_name]
        _client.admin.command("ping")
        logger.info("Connected to MongoDB %s (database: %s)", uri, db_name)
    except Exception as exc:
        _client = None
        _db = None
        logger.warning("Could not initialize MongoDB client: %s", exc)


def close():
    """Close MongoDB connection."""
    global _client, _db
    try:
        if _client is not None:
            _client.close()
            logger.info("MongoDB client closed")
    except Exception:
        logger.exception("Error closing MongoDB client")
    finally:
        _client = None
        _db = None


def is_connected() -> bool:
    return _db is not None


def plans_collection() -> Collection:
    """Collection holding one document per calendar date."""
    if _db is None:
        raise RuntimeError("MongoDB client not initialized; call connect() first")
    return _db[PLANS_COLLECTION]
