"""
Worker Repository for MongoDB operations.
"""
from typing import Any, Dict, List
from pymongo.errors import DuplicateKeyError, PyMongoError
from gigconnect.infrastructure.mongodb_client import MongoDBClient
from gigconnect.core.config import settings
from gigconnect.core.logging import get_logger

logger = get_logger(__name__)

# internal fields never returned to clients
HIDDEN_FIELDS = {"__v": 0}


class WorkerRepository:
    """
    Data access for worker records.
    Errors from the driver are logged and re-raised; callers decide how to
    report them.
    """

    def __init__(self, mongodb_client: MongoDBClient):
        self._mongodb_client = mongodb_client
        self._collection = mongodb_client.get_collection(settings.WORKER_COLLECTION)
        logger.debug("WorkerRepository initialized")

    async def find(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        Return every worker matching ``query``.
        """
        try:
            cursor = self._collection.find(query, HIDDEN_FIELDS)
            workers = await cursor.to_list(length=None)
            logger.info(f"Found {len(workers)} workers")
            return workers
        except PyMongoError as e:
            logger.error(f"Error finding workers: {str(e)}")
            raise

    async def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert one worker and return it with its generated ``_id``.

        Raises:
            DuplicateKeyError: contact already used by another worker
            PyMongoError: any other driver failure
        """
        try:
            record = dict(document)
            result = await self._collection.insert_one(record)
            record["_id"] = result.inserted_id
            logger.info(f"Inserted worker: {result.inserted_id}")
            return record
        except DuplicateKeyError as e:
            logger.warning(f"Duplicate key inserting worker: {e.details}")
            raise
        except PyMongoError as e:
            logger.error(f"Error inserting worker: {str(e)}")
            raise
