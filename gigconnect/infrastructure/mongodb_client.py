"""
MongoDB Client using Motor (async driver).
"""
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError
from gigconnect.core.config import settings
from gigconnect.core.logging import get_logger

logger = get_logger(__name__)


class MongoDBClient:
    """
    Async MongoDB client.
    Owns the Motor connection pool for the lifetime of the application.
    """

    def __init__(
        self,
        connection_string: Optional[str] = None,
        database_name: Optional[str] = None
    ):
        """
        Args:
            connection_string: MongoDB URI (default: settings.MONGODB_URI)
            database_name: database name (default: settings.MONGODB_DATABASE)
        """
        self._connection_string = connection_string or settings.MONGODB_URI
        self._database_name = database_name or settings.MONGODB_DATABASE
        self._client: Optional[AsyncIOMotorClient] = None
        self._db: Optional[AsyncIOMotorDatabase] = None

        logger.info(f"MongoDB client initialized for database: {self._database_name}")

    async def connect(self) -> None:
        """
        Connect to MongoDB and verify the connection with a ping.

        Raises:
            ConnectionFailure: when the server cannot be reached
        """
        try:
            logger.info("Connecting to MongoDB...")

            self._client = AsyncIOMotorClient(
                self._connection_string,
                serverSelectionTimeoutMS=5000,
                connectTimeoutMS=10000,
                maxPoolSize=50,
            )
            self._db = self._client[self._database_name]

            await self._client.admin.command('ping')

            logger.info(f"Successfully connected to MongoDB database: {self._database_name}")

        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.error(f"Failed to connect to MongoDB: {str(e)}")
            raise ConnectionFailure(f"MongoDB connection failed: {str(e)}")
        except Exception as e:
            logger.error(f"Unexpected error during MongoDB connection: {str(e)}")
            raise

    async def disconnect(self) -> None:
        """Close the connection pool."""
        if self._client:
            logger.info("Disconnecting from MongoDB...")
            self._client.close()
            self._client = None
            self._db = None
            logger.info("MongoDB connection closed")

    def get_database(self) -> AsyncIOMotorDatabase:
        """
        Returns:
            AsyncIOMotorDatabase: the connected database

        Raises:
            RuntimeError: when called before connect()
        """
        if self._db is None:
            raise RuntimeError(
                "Database not connected. Call connect() first."
            )
        return self._db

    def get_collection(self, collection_name: str) -> AsyncIOMotorCollection:
        db = self.get_database()
        return db[collection_name]

    async def ping(self) -> bool:
        """
        Returns:
            bool: True when the server answers a ping
        """
        try:
            if self._client is None:
                return False

            await self._client.admin.command('ping')
            return True
        except Exception as e:
            logger.error(f"MongoDB ping failed: {str(e)}")
            return False

    async def create_indexes(self) -> None:
        """
        Create the worker collection indexes.

        ``contact`` is unique but sparse: records without a contact never
        collide, and concurrent inserts with the same contact are settled by
        the server (the loser gets a DuplicateKeyError).
        """
        try:
            logger.info("Creating and verifying indexes...")
            collection = self.get_collection(settings.WORKER_COLLECTION)

            await collection.create_index([("contact", ASCENDING)], unique=True, sparse=True)
            await collection.create_index([("city", ASCENDING)])
            await collection.create_index([("skills", ASCENDING)])

            logger.info(f"Indexes ready on '{self._database_name}.{settings.WORKER_COLLECTION}'")

        except Exception as e:
            logger.error(f"Failed to create or verify indexes: {str(e)}")
            raise

    @property
    def is_connected(self) -> bool:
        return self._client is not None and self._db is not None


_mongodb_client: Optional[MongoDBClient] = None


def get_mongodb_client() -> MongoDBClient:
    """
    Return the MongoDB client singleton.
    """
    global _mongodb_client

    if _mongodb_client is None:
        _mongodb_client = MongoDBClient()

    return _mongodb_client
