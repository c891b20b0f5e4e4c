"""
LocalLife Error Handling

Engine error kinds, the exceptions raised by the analysis engine, and
user-friendly HTTP errors with actionable fix suggestions.
"""

from typing import Optional, List, Dict, Any
from enum import Enum

from fastapi import HTTPException
from pydantic import BaseModel


class ErrorKind(str, Enum):
    """Conditions the analysis engine can run into."""
    INSUFFICIENT_DATA = "insufficient_data"
    INSUFFICIENT_PAIR_SAMPLES = "insufficient_pair_samples"
    ZERO_VARIANCE = "zero_variance"
    INTERNAL = "internal"


class LocalLifeError(Exception):
    """Base class for errors that abort an analysis run."""
    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def details(self) -> Dict[str, Any]:
        return {}


class InsufficientDataError(LocalLifeError):
    """Too few records to run a correlation analysis."""
    kind = ErrorKind.INSUFFICIENT_DATA

    def __init__(self, record_count: int, required: int):
        super().__init__(
            f"Not enough data for correlation analysis: "
            f"{record_count} records, at least {required} required"
        )
        self.record_count = record_count
        self.required = required

    @property
    def details(self) -> Dict[str, Any]:
        return {"record_count": self.record_count, "required": self.required}


# === HTTP Errors ===

class ErrorCategory(str, Enum):
    """Categories of errors for better UX."""
    INSUFFICIENT_DATA = "insufficient_data"
    VALIDATION = "validation"
    INTERNAL = "internal"


class HelpfulError(BaseModel):
    """
    Error response with actionable guidance.

    All LocalLife errors should include:
    - A clear, human-readable message
    - The category of error for UI handling
    - Specific suggestions to fix the issue
    """
    error: str
    message: str
    category: ErrorCategory
    suggestions: List[str]
    details: Optional[Dict[str, Any]] = None


class LocalLifeException(HTTPException):
    """
    HTTP exception with helpful error details.

    Usage:
        raise LocalLifeException.insufficient_data(record_count=4, required=10)
    """

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        category: ErrorCategory,
        suggestions: List[str],
        details: Optional[Dict[str, Any]] = None
    ):
        self.helpful_error = HelpfulError(
            error=error,
            message=message,
            category=category,
            suggestions=suggestions,
            details=details
        )
        super().__init__(
            status_code=status_code,
            detail=self.helpful_error.model_dump(mode="json")
        )

    @classmethod
    def insufficient_data(cls, record_count: int, required: int) -> "LocalLifeException":
        """Not enough daily records for correlation analysis."""
        return cls(
            status_code=422,
            error="insufficient_data",
            message=f"Not enough data for correlation analysis ({record_count} of {required} days)",
            category=ErrorCategory.INSUFFICIENT_DATA,
            suggestions=[
                f"Keep collecting data until at least {required} days are recorded",
                "Check that the background collectors are running"
            ],
            details={"record_count": record_count, "required": required}
        )

    @classmethod
    def invalid_year_pair(cls, year1: int, year2: int) -> "LocalLifeException":
        """Comparison requested between the same year."""
        return cls(
            status_code=400,
            error="invalid_year_pair",
            message=f"Cannot compare year {year1} with itself",
            category=ErrorCategory.VALIDATION,
            suggestions=[
                "Pick two different years",
                "Use GET /api/stats/years to list years with data"
            ],
            details={"year1": year1, "year2": year2}
        )

    @classmethod
    def internal_error(cls, message: str = "An unexpected error occurred") -> "LocalLifeException":
        """Generic internal error."""
        return cls(
            status_code=500,
            error="internal_error",
            message=message,
            category=ErrorCategory.INTERNAL,
            suggestions=[
                "Try again in a moment",
                "Check the server logs for details",
                "Report this issue if it persists"
            ]
        )


def format_error_response(exc: LocalLifeException) -> Dict[str, Any]:
    """Format exception for JSON response."""
    return exc.helpful_error.model_dump(mode="json")
