"""
Health check status models.
"""
from enum import Enum
from typing import Dict
from pydantic import BaseModel, Field


class Status(str, Enum):
    OK = "ok"
    UNHEALTHY = "unhealthy"


class HealthStatus(BaseModel):
    """
    Result of a single component check.
    """
    status: Status = Field(..., description="Component status")
    message: str = Field(default="", description="Additional detail")


class HealthReport(BaseModel):
    """
    Combined report returned by ``GET /health``.
    """
    overall_status: Status
    details: Dict[str, HealthStatus] = Field(default_factory=dict)
