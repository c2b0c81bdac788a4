"""
Async HTTP client for the worker API.

Mirrors what the "Find Help" and registration pages do in the browser:
a single search box term is sent both as ``skill`` and ``name``, blank
searches never reach the API, and the last fetched list is kept in a
cache that every new search invalidates.
"""
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import httpx
from gigconnect.core.logging import get_logger

logger = get_logger(__name__)


class RegistrationInputError(ValueError):
    """Registration form input rejected before sending."""


@dataclass(frozen=True)
class RegistrationOutcome:
    ok: bool
    status_code: int
    message: str


def build_registration_payload(
    name: str = "",
    email: str = "",
    phone: str = "",
    primary_skill: str = "",
    city: str = "",
    experience: str = "",
    agreed_to_terms: bool = False,
) -> Dict[str, Any]:
    """
    Validate registration form fields and build the create payload.

    Phone is preferred over email as the contact. Skills are sent as the
    raw comma separated string; the server splits them.

    Raises:
        RegistrationInputError: with the message to show next to the form
    """
    name = (name or "").strip()
    contact = (phone or "").strip() or (email or "").strip()
    primary_skill = (primary_skill or "").strip()
    city = (city or "").strip()
    experience_raw = str(experience if experience is not None else "").strip()

    if not name:
        raise RegistrationInputError("Please enter your full name.")
    if not contact:
        raise RegistrationInputError("Please enter phone or email as contact.")
    if not primary_skill:
        raise RegistrationInputError("Please enter at least one primary skill.")
    if not city:
        raise RegistrationInputError("Please enter your city.")

    try:
        years = float(experience_raw) if experience_raw else 0.0
    except ValueError:
        years = -1.0
    if not math.isfinite(years) or years < 0:
        raise RegistrationInputError("Please enter a valid experience (years).")
    if not agreed_to_terms:
        raise RegistrationInputError("You must agree to the Terms of Service & Privacy Policy.")

    return {
        "name": name,
        "contact": contact,
        "city": city,
        "skills": primary_skill,
        "experience": int(years) if years.is_integer() else years,
        "ratings": 0,
        "distance": 0,
    }


class WorkerSearchClient:
    """
    Search and registration client with a local result cache.
    """

    def __init__(self, base_url: str = "http://localhost:3000", client: Optional[httpx.AsyncClient] = None):
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=10.0)
        self._professionals: List[Dict[str, Any]] = []

    @property
    def professionals(self) -> List[Dict[str, Any]]:
        """Workers returned by the latest search."""
        return list(self._professionals)

    def clear(self) -> None:
        self._professionals = []

    async def search(self, skill_term: str = "", city_term: str = "") -> List[Dict[str, Any]]:
        """
        Search workers by skill/name and city.

        Both terms blank: the cache is cleared and no request is made.

        Raises:
            httpx.HTTPStatusError: non-2xx response (the cache stays empty)
        """
        skill_term = (skill_term or "").strip()
        city_term = (city_term or "").strip()

        self.clear()
        if not skill_term and not city_term:
            logger.debug("Empty search, skipping request")
            return []

        params: Dict[str, str] = {}
        if skill_term:
            params["skill"] = skill_term
            params["name"] = skill_term
        if city_term:
            params["city"] = city_term

        response = await self._client.get("/api/workers", params=params)
        response.raise_for_status()

        self._professionals = list(response.json())
        logger.info(f"Search {params} returned {len(self._professionals)} workers")
        return self.professionals

    async def register(self, payload: Dict[str, Any]) -> RegistrationOutcome:
        """
        Submit a registration and translate the response into a message.
        """
        try:
            response = await self._client.post("/api/workers", json=payload)
        except httpx.HTTPError as e:
            logger.opt(exception=e).error(f"Registration request failed: {e}")
            return RegistrationOutcome(False, 0, "Unexpected error. Please try again later.")

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.status_code == 201:
            return RegistrationOutcome(True, 201, "Registered successfully!")
        if response.status_code == 409:
            message = data.get("message") or "Contact already exists."
        elif response.status_code == 422:
            errors = data.get("errors")
            if isinstance(errors, list):
                message = "; ".join(str(e.get("msg", "")) for e in errors) or "Validation failed."
            else:
                message = data.get("message") or "Validation failed."
        else:
            message = data.get("message") or "Registration failed. Try again."

        logger.info(f"Registration rejected ({response.status_code}): {message}")
        return RegistrationOutcome(False, response.status_code, message)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "WorkerSearchClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
