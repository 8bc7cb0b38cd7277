"""Operation result types and status enums.

This module contains the tagged result type returned at every boundary of
the lookup pipeline, along with its status enum.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
