"""
Dependency Injection for FastAPI.
"""
from functools import lru_cache
from fastapi import Depends

from gigconnect.services.health_aggregator import HealthAggregator
from gigconnect.services.worker_service import WorkerService
from gigconnect.repositories.worker_repository import WorkerRepository
from gigconnect.infrastructure.mongodb_client import MongoDBClient, get_mongodb_client
from gigconnect.core.logging import get_logger

logger = get_logger(__name__)

# ============================================
# Infrastructure Layer Dependencies
# ============================================

@lru_cache()
def get_mongodb_client_cached() -> MongoDBClient:
    return get_mongodb_client()

# ============================================
# Repository Layer Dependencies
# ============================================

def get_worker_repository(
    mongodb_client: MongoDBClient = Depends(get_mongodb_client_cached)
) -> WorkerRepository:
    return WorkerRepository(mongodb_client)

# ============================================
# Service Layer Dependencies
# ============================================

def get_worker_service(
    worker_repo: WorkerRepository = Depends(get_worker_repository)
) -> WorkerService:
    return WorkerService(worker_repo=worker_repo)


def get_health_aggregator(
    mongodb_client: MongoDBClient = Depends(get_mongodb_client_cached)
) -> HealthAggregator:
    return HealthAggregator(mongodb_client=mongodb_client)

# ============================================
# Lifespan Management
# ============================================

async def startup_dependencies():
    logger.info("Initializing dependencies...")
    mongodb_client = get_mongodb_client_cached()
    await mongodb_client.connect()
    await mongodb_client.create_indexes()
    logger.info("Dependencies initialized successfully")


async def shutdown_dependencies():
    logger.info("Shutting down dependencies...")
    mongodb_client = get_mongodb_client_cached()
    await mongodb_client.disconnect()
    logger.info("Dependencies shutdown complete")
