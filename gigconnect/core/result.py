"""
Result pattern for explicit success/failure handling.

Services return ``Ok(value)`` or ``Err(error_type)`` instead of raising, and
the API layer turns each ``ErrorType`` into an HTTP response.
"""
from typing import Any, Dict, List, TypeVar, Generic, Union
from dataclasses import dataclass
from abc import ABC, abstractmethod

T = TypeVar('T')


@dataclass(frozen=True)
class Ok(Generic[T]):
    """
    Successful result.

    Attributes:
        value: the produced value
    """
    value: T


class ErrorType(ABC):
    """
    Base class for failure kinds.
    Each concrete error declares the HTTP status it maps to and what the
    client is allowed to see.
    """

    def __init__(self, error: Exception = None, context: dict = None):
        """
        Args:
            error: the underlying exception, if any
            context: extra information for logs (never sent to clients)
        """
        self.error = error
        self.context = context or {}

    @property
    @abstractmethod
    def status_code(self) -> int:
        """HTTP status code for this failure."""
        pass

    @property
    def client_message(self) -> str:
        """Message safe to return to the client."""
        return self.error_message

    @property
    def error_message(self) -> str:
        """Message for logs."""
        return str(self.error) if self.error is not None else self.__class__.__name__

    def to_response(self) -> Dict[str, Any]:
        """JSON body returned to the client."""
        return {"message": self.client_message}

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.error_message}"


class StructuralValidationError(ErrorType):
    """
    Request body failed shape/length checks.
    Carries one entry per failed field.
    """

    def __init__(self, errors: List[Dict[str, Any]], error: Exception = None, context: dict = None):
        super().__init__(error=error, context=context)
        self.errors = errors

    @property
    def status_code(self) -> int:
        return 422

    @property
    def error_message(self) -> str:
        fields = ", ".join(str(e.get("field")) for e in self.errors)
        return f"Invalid fields: {fields}"

    def to_response(self) -> Dict[str, Any]:
        return {"errors": self.errors}


class EmptySkillsError(ErrorType):
    """No skill survived normalization."""

    @property
    def status_code(self) -> int:
        return 422

    @property
    def client_message(self) -> str:
        return "At least one skill required"


class ConflictError(ErrorType):
    """Unique key (contact) already taken."""

    @property
    def status_code(self) -> int:
        return 409

    @property
    def client_message(self) -> str:
        return "Duplicate key error"


class StoreError(ErrorType):
    """
    Any other persistence or query failure.
    The client only gets a generic message; details stay in the logs.
    """

    def __init__(self, error: Exception = None, context: dict = None, message: str = "Error accessing worker store"):
        super().__init__(error=error, context=context)
        self._client_message = message

    @property
    def status_code(self) -> int:
        return 500

    @property
    def client_message(self) -> str:
        return self._client_message


@dataclass(frozen=True)
class Err:
    """
    Failed result.

    Attributes:
        error_type: concrete ErrorType instance
    """
    error_type: ErrorType

    @property
    def status_code(self) -> int:
        return self.error_type.status_code

    @property
    def error_message(self) -> str:
        return self.error_type.error_message

    @property
    def context(self) -> dict:
        return self.error_type.context

    def to_response(self) -> Dict[str, Any]:
        return self.error_type.to_response()


Result = Union[Ok[T], Err]
