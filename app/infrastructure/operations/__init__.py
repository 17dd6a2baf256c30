"""Operation result types and status enums.

This module contains the standardized result type used by best-effort
operations, so that recoverable failures are reported as values rather
than raised.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
