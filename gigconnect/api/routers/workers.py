"""
Worker Router: search and registration of service professionals.
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from gigconnect.schemas.worker import WorkerRead, MessageResponse, ValidationErrorResponse
from gigconnect.services.worker_service import WorkerService
from gigconnect.api.dependencies import get_worker_service
from gigconnect.core.logging import get_logger
from gigconnect.core.result import Ok, Err

logger = get_logger(__name__)

router = APIRouter(prefix="/api/workers", tags=["workers"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _error_response(result: Err) -> JSONResponse:
    return JSONResponse(
        status_code=result.status_code,
        content=jsonable_encoder(result.to_response())
    )


async def read_submission(request: Request) -> Any:
    """
    Read a create body sent as JSON or as a form.

    Repeated form keys (``skills=a&skills=b``) and bracket keys
    (``skills[]=a``) become lists. An unparsable JSON body yields ``None``,
    which fails structural validation.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        body: Dict[str, Any] = {}
        for key in set(form.keys()):
            values = form.getlist(key)
            field = key[:-2] if key.endswith("[]") else key
            body[field] = values if key.endswith("[]") or len(values) > 1 else values[0]
        return body

    try:
        return await request.json()
    except ValueError:
        logger.info("Worker submission body is not valid JSON")
        return None


@router.get(
    "",
    response_model=List[WorkerRead],
    responses={500: {"model": MessageResponse, "description": "Store failure"}},
    summary="Search workers",
    description="Filters by exact city and by name or skill substring. No parameters returns every worker."
)
async def search_workers(
    skill: Optional[str] = Query(default=None, description="Skill substring"),
    city: Optional[str] = Query(default=None, description="Exact city, case-insensitive"),
    name: Optional[str] = Query(default=None, description="Name substring"),
    worker_service: WorkerService = Depends(get_worker_service)
):
    """
    ``name`` and ``skill`` are alternatives (either may match); ``city`` always
    restricts the result.
    """
    result = await worker_service.search_workers(name=name, skill=skill, city=city)

    match result:
        case Ok(workers):
            return [WorkerRead.model_validate(worker) for worker in workers]
        case Err():
            return _error_response(result)


@router.post(
    "",
    response_model=WorkerRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": MessageResponse, "description": "Contact already registered"},
        422: {"model": ValidationErrorResponse, "description": "Invalid submission"},
        500: {"model": MessageResponse, "description": "Store failure"}
    },
    summary="Register a worker"
)
async def create_worker(
    request: Request,
    worker_service: WorkerService = Depends(get_worker_service)
):
    """
    Accepts ``name, city, skills, experience`` and optionally
    ``contact, ratings, distance, photo, description``. ``skills`` may be a
    list or a comma separated string.
    """
    raw = await read_submission(request)
    result = await worker_service.create_worker(raw)

    match result:
        case Ok(worker):
            return WorkerRead.model_validate(worker)
        case Err():
            logger.info(f"Worker creation rejected ({result.status_code}): {result.error_message}")
            return _error_response(result)
