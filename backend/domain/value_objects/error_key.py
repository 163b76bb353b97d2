"""
ErrorKey Value Object

Machine-readable keys for client errors raised while validating
identifiers on write requests.
"""

from enum import Enum


class ErrorKey(str, Enum):
    """
    Validation failure kinds for the Friends resource.

    The value is sent to clients as ``error.<value>`` so front-ends can
    translate it.
    """

    ID_EXISTS = "idexists"      # create request already carries an id
    ID_NULL = "idnull"          # update request body has no id
    ID_INVALID = "idinvalid"    # path id and body id disagree
    ID_NOT_FOUND = "idnotfound"  # no stored entity with that id

    @property
    def message_key(self) -> str:
        """Translation key sent in the error payload and headers."""
        return f"error.{self.value}"

    def default_title(self) -> str:
        """Human-readable title for the error payload"""
        titles = {
            ErrorKey.ID_EXISTS: "A new friends cannot already have an ID",
            ErrorKey.ID_NULL: "Invalid id",
            ErrorKey.ID_INVALID: "Invalid ID",
            ErrorKey.ID_NOT_FOUND: "Entity not found",
        }
        return titles[self]
