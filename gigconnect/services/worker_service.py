"""
Worker Service orchestrating search and creation.
"""
from typing import Any, Optional
from pymongo.errors import DuplicateKeyError
from gigconnect.repositories.worker_repository import WorkerRepository
from gigconnect.services.filter_builder import build_worker_filter
from gigconnect.services.worker_normalizer import validate_and_normalize
from gigconnect.core.logging import get_logger
from gigconnect.core.result import Result, Ok, Err, ConflictError, StoreError

logger = get_logger(__name__)


class WorkerService:
    """
    Business logic for the worker API.
    Store failures are translated into Err values here; nothing is retried.
    """

    def __init__(self, worker_repo: WorkerRepository):
        self._worker_repo = worker_repo

    async def search_workers(
        self,
        name: Optional[str] = None,
        skill: Optional[str] = None,
        city: Optional[str] = None,
    ) -> Result:
        """
        Find workers matching the given search terms.

        Returns:
            Ok(list of worker documents) or Err(StoreError)
        """
        query = build_worker_filter(name_term=name, skill_term=skill, city_term=city)
        logger.debug(f"Worker search query: {query}")

        try:
            workers = await self._worker_repo.find(query)
        except Exception as e:
            logger.opt(exception=e).error(f"GET /api/workers failed: {e}")
            return Err(StoreError(
                error=e,
                context={"query": query},
                message="Error fetching workers"
            ))

        return Ok(workers)

    async def create_worker(self, raw: Any) -> Result:
        """
        Validate, normalize and insert one worker.

        Returns:
            Ok(worker document with _id), or Err of StructuralValidationError,
            EmptySkillsError, ConflictError or StoreError.
        """
        normalized = validate_and_normalize(raw)
        if isinstance(normalized, Err):
            return normalized

        document = normalized.value
        try:
            worker = await self._worker_repo.insert(document)
        except DuplicateKeyError as e:
            logger.warning(f"Worker contact already registered: {document.get('contact')}")
            return Err(ConflictError(error=e, context={"contact": document.get("contact")}))
        except Exception as e:
            logger.opt(exception=e).error(f"POST /api/workers failed: {e}")
            return Err(StoreError(error=e, message="Error creating worker"))

        logger.info(f"Worker created: {worker.get('_id')}")
        return Ok(worker)
