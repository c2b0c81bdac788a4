"""
Aggregates results from multiple health check strategies.
"""
import asyncio
from typing import Dict, List
from gigconnect.services.health_checks import (
    HealthCheckStrategy,
    MongoDBHealthCheck,
    ContactIndexHealthCheck,
)
from gigconnect.schemas.health_status import HealthStatus, Status
from gigconnect.infrastructure.mongodb_client import MongoDBClient
from gigconnect.core.logging import get_logger

logger = get_logger(__name__)


class HealthAggregator:
    """
    Runs every registered HealthCheckStrategy and collects the results.
    """
    def __init__(self, mongodb_client: MongoDBClient, strategies: List[HealthCheckStrategy] = None):
        self._strategies: List[HealthCheckStrategy] = strategies or [
            MongoDBHealthCheck(client=mongodb_client),
            ContactIndexHealthCheck(client=mongodb_client),
        ]
        logger.debug(f"HealthAggregator initialized with {len(self._strategies)} check strategies.")

    async def check_all(self) -> Dict[str, HealthStatus]:
        """
        Run all checks concurrently. A check that raises is reported as unhealthy.
        """
        tasks = {
            strategy.__class__.__name__.replace("HealthCheck", ""): strategy.check()
            for strategy in self._strategies
        }

        results = await asyncio.gather(*tasks.values(), return_exceptions=True)

        final_results = {}
        for name, result in zip(tasks.keys(), results):
            if isinstance(result, HealthStatus):
                final_results[name] = result
            else:
                logger.error(f"Health check '{name}' raised an unexpected exception: {result}")
                final_results[name] = HealthStatus(
                    status=Status.UNHEALTHY,
                    message=f"Checker failed with exception: {type(result).__name__}"
                )

        return final_results

    @staticmethod
    def overall(details: Dict[str, HealthStatus]) -> Status:
        if any(result.status == Status.UNHEALTHY for result in details.values()):
            return Status.UNHEALTHY
        return Status.OK
