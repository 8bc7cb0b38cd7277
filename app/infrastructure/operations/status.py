"""Operation status enumeration.

Status codes for operation results, used to classify the outcome of a
validation, lookup or cache operation so callers can branch on the tag.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        INVALID_INPUT: Input was rejected before any collaborator was called
        NOT_FOUND: Input was valid but no record exists for it
        UNAVAILABLE: A backing resource (database, cache) could not be used
    """

    SUCCESS = "success"
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"
