"""
Individual health check strategies for the service components.
"""
from abc import ABC, abstractmethod
from gigconnect.schemas.health_status import HealthStatus, Status
from gigconnect.core.config import settings
from gigconnect.infrastructure.mongodb_client import MongoDBClient


class HealthCheckStrategy(ABC):
    """
    Interface every health check implements.
    """
    @abstractmethod
    async def check(self) -> HealthStatus:
        """
        Inspect the component and report its status.
        """
        pass


class MongoDBHealthCheck(HealthCheckStrategy):
    """MongoDB reachability."""
    def __init__(self, client: MongoDBClient):
        self.client = client

    async def check(self) -> HealthStatus:
        try:
            if await self.client.ping():
                return HealthStatus(status=Status.OK, message="Connection successful.")
            return HealthStatus(status=Status.UNHEALTHY, message="Ping to database failed.")
        except Exception as e:
            return HealthStatus(status=Status.UNHEALTHY, message=f"An exception occurred: {e}")


class ContactIndexHealthCheck(HealthCheckStrategy):
    """
    Duplicate contacts are only rejected when the sparse unique index on
    ``contact`` exists, so its absence makes the service unhealthy.
    """
    def __init__(self, client: MongoDBClient):
        self.client = client

    async def check(self) -> HealthStatus:
        try:
            collection = self.client.get_collection(settings.WORKER_COLLECTION)
            indexes = await collection.index_information()
            for spec in indexes.values():
                keys = [field for field, _ in spec.get("key", [])]
                if keys == ["contact"] and spec.get("unique") and spec.get("sparse"):
                    return HealthStatus(status=Status.OK, message="Unique contact index present.")
            return HealthStatus(status=Status.UNHEALTHY, message="Unique contact index missing.")
        except Exception as e:
            return HealthStatus(status=Status.UNHEALTHY, message=f"An exception occurred: {e}")
