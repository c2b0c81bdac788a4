"""
Validation and normalization of worker submissions.

The pipeline runs in a fixed order:
1. structural validation (WorkerSubmission schema)
2. markup stripping of name, city and description
3. skill normalization (list or comma separated string -> list)
4. numeric coercion with defaults
5. optional fields

Nothing here touches the database. Every step returns a Result so the
caller can map failures onto responses without catching exceptions.
"""
import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping
from pydantic import ValidationError
from gigconnect.core.logging import get_logger
from gigconnect.core.result import Result, Ok, Err, StructuralValidationError, EmptySkillsError
from gigconnect.schemas.worker import WorkerSubmission
from gigconnect.services.sanitizer import strip_markup

logger = get_logger(__name__)


def validate_submission(raw: Any) -> Result:
    """
    Check the shape of a raw request body.

    Returns:
        Ok(WorkerSubmission) or Err(StructuralValidationError) with one
        entry per failed field.
    """
    if not isinstance(raw, Mapping):
        return Err(StructuralValidationError(
            errors=[{"field": "body", "msg": "Request body must be an object"}]
        ))

    try:
        return Ok(WorkerSubmission.model_validate(dict(raw)))
    except ValidationError as e:
        return Err(StructuralValidationError(errors=_field_errors(e, raw), error=e))


def _field_errors(exc: ValidationError, raw: Mapping) -> List[Dict[str, Any]]:
    # union members report one error each; keep the first per field
    errors: Dict[str, Dict[str, Any]] = {}
    for detail in exc.errors():
        field = str(detail["loc"][0]) if detail["loc"] else "body"
        if field in errors:
            continue
        entry: Dict[str, Any] = {"field": field, "msg": detail["msg"]}
        if field in raw:
            entry["value"] = raw[field]
        errors[field] = entry
    return list(errors.values())


def normalize_skills(skills: Any) -> List[str]:
    """
    Turn a list, or a comma separated string, into a list of trimmed
    lowercase skills. Empty entries are dropped; duplicates are kept.

    >>> normalize_skills("Plumbing, , Electrical,plumbing")
    ['plumbing', 'electrical', 'plumbing']
    """
    if isinstance(skills, (list, tuple)):
        pieces = [str(s) for s in skills]
    else:
        pieces = str(skills).split(",")
    return [s for s in (p.strip().lower() for p in pieces) if s]


def to_number(value: Any, default: float = 0) -> float:
    """
    Lenient numeric conversion.
    Anything that is not a finite number (None, "", "abc", NaN) becomes ``default``.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        number = value
    else:
        text = str(value).strip()
        if not text:
            return default
        try:
            number = float(text)
        except ValueError:
            return default
    if isinstance(number, float):
        if not math.isfinite(number):
            return default
        if number.is_integer():
            return int(number)
    return number


def _optional_number(raw: Mapping, key: str) -> float:
    # explicit 0 is a value, only a missing field falls back
    if raw.get(key) is not None:
        return to_number(raw[key])
    return 0


def normalize_submission(raw: Mapping) -> Result:
    """
    Sanitize and normalize a structurally valid body into a worker document.

    Returns:
        Ok(dict) ready for insertion, or Err(EmptySkillsError) when no skill
        is left after normalization.
    """
    name = strip_markup(str(raw.get("name") or "").strip())
    city = strip_markup(str(raw.get("city") or "").strip()).lower()
    contact = str(raw.get("contact") or "").strip()

    skills = normalize_skills(raw.get("skills"))
    if not skills:
        logger.info("Rejected worker submission: no skills after normalization")
        return Err(EmptySkillsError(context={"skills": raw.get("skills")}))

    document: Dict[str, Any] = {
        "name": name,
        "city": city,
        "skills": skills,
        "experience": to_number(raw.get("experience")),
        "ratings": _optional_number(raw, "ratings"),
        "distance": _optional_number(raw, "distance"),
        "isVerified": False,
        "createdAt": datetime.now(timezone.utc),
    }

    # an empty contact is left out so the sparse unique index ignores it
    if contact:
        document["contact"] = contact
    if raw.get("photo"):
        document["photo"] = str(raw["photo"]).strip()
    if raw.get("description"):
        document["description"] = strip_markup(str(raw["description"]))

    return Ok(document)


def validate_and_normalize(raw: Any) -> Result:
    """
    Full create pipeline short of persistence.

    Structural errors are reported before anything else runs.
    """
    validated = validate_submission(raw)
    if isinstance(validated, Err):
        logger.info(f"Rejected worker submission: {validated.error_message}")
        return validated
    return normalize_submission(raw)
