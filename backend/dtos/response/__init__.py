"""
Response DTOs

Outcomes of resource operations, independent of the web framework.
The HTTP layer converts them into framework responses.
"""

from .resource_response import BadRequestAlert, ResourceResponse, ResourceResult

__all__ = ["BadRequestAlert", "ResourceResponse", "ResourceResult"]
