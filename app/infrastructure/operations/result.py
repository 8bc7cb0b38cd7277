"""Operation result dataclass.

Uniform result type returned from operations across the application,
including status, data, and error information.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass(frozen=True)
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- optional payload (can be dict, model, or object)
        error_code: Optional[str] -- optional machine error code
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Helper property to check if operation was successful.

        Returns:
            True if status is SUCCESS, False otherwise
        """
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data.

        Args:
            data: Optional payload to include with the result
            message: Human-friendly success message

        Returns:
            OperationResult with SUCCESS status
        """
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create an error OperationResult.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional machine error code
            data: Optional payload to include with the error

        Returns:
            OperationResult with specified error status
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            data=data,
        )

    @classmethod
    def invalid_input(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create an INVALID_INPUT result for rejected caller input."""
        return cls.error(OperationStatus.INVALID_INPUT, message, error_code)

    @classmethod
    def not_found(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a NOT_FOUND result for valid input with no matching record."""
        return cls.error(OperationStatus.NOT_FOUND, message, error_code)

    @classmethod
    def unavailable(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create an UNAVAILABLE result.

        Use when a backing resource cannot be used at all, such as:
        - Missing or corrupt database file
        - Cache connection refused or timed out
        - Cache disabled by configuration

        Args:
            message: Human-friendly error message
            error_code: Optional machine error code

        Returns:
            OperationResult with UNAVAILABLE status
        """
        return cls.error(OperationStatus.UNAVAILABLE, message, error_code)
