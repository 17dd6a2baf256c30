"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of best-effort
operations (such as the comment scan pass) so callers can absorb them
without raising.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        PERMANENT_ERROR: Input could not be processed (e.g. undecodable text)
        NOT_FOUND: Resource missing or unreadable
    """

    SUCCESS = "success"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
