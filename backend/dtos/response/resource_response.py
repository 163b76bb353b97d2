"""
Resource Response DTOs

Results returned by resource handlers. A handler either produces a
ResourceResponse (any HTTP status with optional body and headers) or a
BadRequestAlert describing why the request was rejected. The HTTP layer
turns both into framework responses.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from constants import HTTPStatus
from domain.value_objects import ErrorKey


@dataclass(frozen=True)
class ResourceResponse:
    """Successful (or not-found) outcome of a resource operation."""

    status: int
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)
    location: Optional[str] = None

    @classmethod
    def ok(cls, body: Any, headers: Optional[Dict[str, str]] = None) -> "ResourceResponse":
        return cls(status=HTTPStatus.OK, body=body, headers=headers or {})

    @classmethod
    def created(cls, location: str, body: Any, headers: Optional[Dict[str, str]] = None) -> "ResourceResponse":
        return cls(status=HTTPStatus.CREATED, body=body, headers=headers or {}, location=location)

    @classmethod
    def no_content(cls, headers: Optional[Dict[str, str]] = None) -> "ResourceResponse":
        return cls(status=HTTPStatus.NO_CONTENT, headers=headers or {})

    @classmethod
    def not_found(cls) -> "ResourceResponse":
        return cls(status=HTTPStatus.NOT_FOUND)


@dataclass(frozen=True)
class BadRequestAlert:
    """
    Client error for a request whose identifiers failed validation.

    Rendered as HTTP 400 with a problem payload and failure alert headers.
    """

    message: str
    entity_name: str
    error_key: ErrorKey

    @property
    def status(self) -> int:
        return HTTPStatus.BAD_REQUEST

    @classmethod
    def of(cls, entity_name: str, error_key: ErrorKey) -> "BadRequestAlert":
        """Build an alert using the default title for the error key."""
        return cls(message=error_key.default_title(), entity_name=entity_name, error_key=error_key)

    def to_problem(self) -> Dict[str, Any]:
        """Problem-details payload sent as the response body."""
        return {
            "type": "about:blank",
            "title": self.message,
            "status": self.status,
            "message": self.error_key.message_key,
            "params": self.entity_name,
            "entityName": self.entity_name,
            "errorKey": self.error_key.value,
        }


ResourceResult = Union[ResourceResponse, BadRequestAlert]
