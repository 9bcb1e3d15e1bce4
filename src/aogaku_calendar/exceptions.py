"""
Academic Calendar Exception Hierarchy

Domain-specific exceptions for the academic calendar engine.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: AC_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class AcademicCalendarError(Exception):
    """
    Base exception for all academic calendar errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (AC_*)
        details: Additional context about the error
        academic_year: Associated academic year if applicable
    """
    message: str
    code: str = "AC_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    academic_year: Optional[int] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.academic_year is not None:
            parts.append(f"(academic year: {self.academic_year})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.academic_year is not None:
            result["academic_year"] = self.academic_year
        return result


# =============================================================================
# Routing Errors
# =============================================================================

@dataclass
class UnsupportedAcademicYearError(AcademicCalendarError):
    """No rule set is registered for the date's academic year."""
    code: str = "AC_UNSUPPORTED_ACADEMIC_YEAR"


@dataclass
class DuplicateAcademicYearError(AcademicCalendarError):
    """More than one rule set was registered for the same academic year."""
    code: str = "AC_DUPLICATE_ACADEMIC_YEAR"


@dataclass
class ConfigurationError(AcademicCalendarError):
    """Calendar settings are invalid."""
    code: str = "AC_CONFIG_ERROR"


# =============================================================================
# Rule Data Errors
# =============================================================================

@dataclass
class RuleSetValidationError(AcademicCalendarError):
    """Rule set failed integrity validation."""
    code: str = "AC_RULE_SET_INVALID"


@dataclass
class RulePackLoadError(AcademicCalendarError):
    """Failed to load a rule pack from file."""
    code: str = "AC_RULE_PACK_LOAD_ERROR"


@dataclass
class RulePackValidationError(AcademicCalendarError):
    """Rule pack schema validation failed."""
    code: str = "AC_RULE_PACK_VALIDATION_ERROR"


@dataclass
class RulePackVersionMismatch(AcademicCalendarError):
    """Rule pack schema version is not supported."""
    code: str = "AC_RULE_PACK_VERSION_MISMATCH"
