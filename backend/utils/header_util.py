"""
Alert header helpers.

Mutating endpoints tell the client UI what happened through a pair of
response headers:

    X-<app>-alert   message (translation key or English sentence)
    X-<app>-params  URL-encoded parameter, usually the entity id

Rejected requests send X-<app>-error instead of X-<app>-alert.
"""

from typing import Dict
from urllib.parse import quote

from constants import AlertAction


def create_alert(application_name: str, message: str, param: str) -> Dict[str, str]:
    """Build the alert header pair."""
    return {
        f"X-{application_name}-alert": message,
        f"X-{application_name}-params": quote(param, safe=""),
    }


def create_entity_alert(
    application_name: str,
    enable_translation: bool,
    entity_name: str,
    param: str,
    action: AlertAction,
) -> Dict[str, str]:
    """
    Build alert headers for a created/updated/deleted entity.

    Args:
        application_name: Header prefix and translation namespace
        enable_translation: Send '<app>.<entity>.<action>' instead of a sentence
        entity_name: Name of the entity, e.g. 'friends'
        param: Identifier of the affected entity
        action: Which mutation happened

    Returns:
        Dict of header name to value
    """
    if enable_translation:
        message = f"{application_name}.{entity_name}.{action.value}"
    else:
        message = action.sentence(entity_name, param)
    return create_alert(application_name, message, param)


def create_entity_creation_alert(application_name: str, enable_translation: bool,
                                 entity_name: str, param: str) -> Dict[str, str]:
    return create_entity_alert(application_name, enable_translation, entity_name, param, AlertAction.CREATED)


def create_entity_update_alert(application_name: str, enable_translation: bool,
                               entity_name: str, param: str) -> Dict[str, str]:
    return create_entity_alert(application_name, enable_translation, entity_name, param, AlertAction.UPDATED)


def create_entity_deletion_alert(application_name: str, enable_translation: bool,
                                 entity_name: str, param: str) -> Dict[str, str]:
    return create_entity_alert(application_name, enable_translation, entity_name, param, AlertAction.DELETED)


def create_failure_alert(application_name: str, entity_name: str, error_key: str) -> Dict[str, str]:
    """Headers for a rejected request (error key is sent as 'error.<key>')."""
    return {
        f"X-{application_name}-error": f"error.{error_key}",
        f"X-{application_name}-params": entity_name,
    }
