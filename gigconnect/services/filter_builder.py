"""
Builds MongoDB filters for the worker search endpoint.
"""
import re
from typing import Any, Dict, List, Optional

_REGEX_SPECIAL = re.compile(r"[.*+?^${}()|\[\]\\]")


def escape_regex(text: str = "") -> str:
    """
    Backslash-escape every regex metacharacter so the text matches literally.

    >>> escape_regex("a.b")
    'a\\\\.b'
    """
    return _REGEX_SPECIAL.sub(lambda m: "\\" + m.group(0), text)


def _clean(term: Optional[str]) -> Optional[str]:
    if term is None:
        return None
    term = term.strip()
    return term or None


def build_worker_filter(
    name_term: Optional[str] = None,
    skill_term: Optional[str] = None,
    city_term: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the query document for ``GET /api/workers``.

    - city: exact match, case-insensitive, ignoring whitespace around the
      stored value. Always required when given.
    - name / skill: case-insensitive substring match on the name or on any
      entry of ``skills``. When both are given either one may match.
    - no terms: ``{}``, which matches every worker.

    All user text is escaped before it is embedded in a pattern.
    """
    name_term = _clean(name_term)
    skill_term = _clean(skill_term)
    city_term = _clean(city_term)

    and_clauses: List[Dict[str, Any]] = []

    if city_term:
        pattern = rf"^\s*{escape_regex(city_term)}\s*$"
        and_clauses.append({"city": {"$regex": pattern, "$options": "i"}})

    or_clauses: List[Dict[str, Any]] = []
    if name_term:
        or_clauses.append({"name": {"$regex": escape_regex(name_term), "$options": "i"}})
    if skill_term:
        or_clauses.append(
            {"skills": {"$elemMatch": {"$regex": escape_regex(skill_term), "$options": "i"}}}
        )
    if or_clauses:
        and_clauses.append({"$or": or_clauses})

    return {"$and": and_clauses} if and_clauses else {}
