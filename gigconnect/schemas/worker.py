"""
Worker request/response schemas.
"""
from datetime import datetime
from typing import List, Optional, Union
from pydantic import BaseModel, Field, validator


class WorkerSubmission(BaseModel):
    """
    Structural checks for ``POST /api/workers``.

    Only the shape of the input is verified here; sanitizing and normalizing
    the values is done afterwards on the raw body.
    """
    name: str = Field(..., min_length=2, max_length=100, description="Display name")
    city: str = Field(..., min_length=2, max_length=100, description="City")
    skills: Union[List[str], str] = Field(
        ...,
        description="List of skills or a comma separated string",
        examples=["plumbing, electrical", ["plumbing", "electrical"]]
    )
    experience: int = Field(..., ge=0, le=100, description="Years of experience")
    contact: Optional[str] = Field(default=None, description="Phone or email, unique")
    ratings: Optional[float] = Field(default=None, ge=0, le=5, description="Rating (0-5)")
    distance: Optional[float] = Field(default=None, description="Distance in km")
    photo: Optional[str] = Field(default=None, description="Photo URL")
    description: Optional[str] = Field(default=None, description="Free text description")

    class Config:
        extra = "ignore"

    @validator("name", "city", pre=True)
    def strip_text(cls, v):
        """Length limits apply to the trimmed value"""
        if isinstance(v, str):
            return v.strip()
        return v

    @validator("ratings", "distance", pre=True)
    def blank_as_missing(cls, v):
        """Empty form fields count as not provided"""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @validator("skills")
    def validate_skills(cls, v):
        """A list must not be empty; a string must not be blank"""
        if isinstance(v, list):
            if not v:
                raise ValueError("skills required")
            return v
        if not v.strip():
            raise ValueError("skills required")
        return v


class WorkerRead(BaseModel):
    """
    Worker record as returned by the API.
    """
    id: str = Field(..., alias="_id", description="Generated record id")
    name: str
    city: str
    skills: List[str]
    experience: int
    ratings: float = 0
    distance: float = 0
    contact: Optional[str] = None
    photo: Optional[str] = None
    description: Optional[str] = None
    isVerified: bool = False
    createdAt: Optional[datetime] = None

    @validator("id", pre=True)
    def stringify_id(cls, v):
        """ObjectId -> str"""
        return str(v)

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "_id": "665f1c2e9b1e8a0012345678",
                "name": "Jordan Miles",
                "city": "austin",
                "skills": ["plumbing", "electrical"],
                "experience": 7,
                "ratings": 4.5,
                "distance": 3,
                "contact": "555-0101",
                "isVerified": False,
                "createdAt": "2024-05-01T12:00:00Z"
            }
        }


class MessageResponse(BaseModel):
    """
    Error response carrying a single message.
    """
    message: str = Field(..., description="Error message")


class FieldError(BaseModel):
    field: str
    msg: str


class ValidationErrorResponse(BaseModel):
    """
    Error response for structural validation failures.
    """
    errors: List[FieldError] = Field(default_factory=list)
