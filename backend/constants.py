"""
Application-wide constants.

This module centralizes the magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""
from enum import Enum


API_PREFIX = "/api"

# Entity name used in alert headers and error payloads
FRIENDS_ENTITY_NAME = "friends"
FRIENDS_RESOURCE_PATH = f"{API_PREFIX}/friends"

# Ids are stored as signed 64-bit integers
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class AlertAction(str, Enum):
    """Mutations that produce an alert header for the client UI."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"

    def sentence(self, entity_name: str, param: str) -> str:
        """English alert text used when translation keys are disabled"""
        article = "A new" if self is AlertAction.CREATED else "A"
        return f"{article} {entity_name} is {self.value} with identifier {param}"


class AppState:
    """Application availability, reported by the health endpoint"""
    NORMAL = "NORMAL"
    MAINTENANCE = "MAINTENANCE"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503
