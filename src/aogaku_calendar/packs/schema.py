"""
Rule Pack Schemas

Pydantic models for validating academic-year rule packs (YAML/JSON).

A rule pack holds one academic year's hand-curated calendar facts. The
schemas map to the domain models in aogaku_calendar.models.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders check major version compatibility
"""
from __future__ import annotations

from datetime import date
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Enums as Literals (for YAML validation)
# =============================================================================

TierValue = Literal[
    "break_range", "exam_range", "forced_class_day",
    "makeup", "kyuko", "term_range",
]

DefaultCategoryValue = Literal["class_day", "kyuko"]


# =============================================================================
# Base Schemas
# =============================================================================

class DateRangeSchema(BaseModel):
    """Schema for an inclusive date range."""
    start: date = Field(..., description="First day (inclusive)")
    end: date = Field(..., description="Last day (inclusive)")

    @model_validator(mode="after")
    def validate_order(self) -> "DateRangeSchema":
        if self.end < self.start:
            raise ValueError(f"Range end {self.end} is before start {self.start}")
        return self

    model_config = {"extra": "forbid"}


class BreaksSchema(BaseModel):
    """Schema for the three long vacations."""
    summer: DateRangeSchema
    winter: DateRangeSchema
    spring: DateRangeSchema

    model_config = {"extra": "forbid"}


class TermSchema(BaseModel):
    """Schema for a teaching term."""
    name: str = Field(..., description="Term name (e.g., 'spring', 'autumn')")
    ranges: list[DateRangeSchema] = Field(
        ..., min_length=1, description="Class-day ranges in chronological order"
    )

    model_config = {"extra": "forbid"}


class CampusDatesSchema(BaseModel):
    """Schema for a day set with campus-specific additions."""
    common: list[date] = Field(default_factory=list, description="All campuses")
    aoyama: list[date] = Field(default_factory=list, description="Aoyama only")
    sagamihara: list[date] = Field(default_factory=list, description="Sagamihara only")

    model_config = {"extra": "forbid"}


class HolidaySchema(BaseModel):
    """Schema for a named holiday."""
    day: date = Field(..., alias="date", description="Holiday date")
    name: str = Field(..., description="Display name")

    model_config = {"extra": "forbid", "populate_by_name": True}


# =============================================================================
# Rule Pack Schema
# =============================================================================

class RulePackSchema(BaseModel):
    """Top-level schema for an academic-year rule pack."""
    schema_version: str = Field(SCHEMA_VERSION, description="Schema version for compatibility")
    academic_year: int = Field(..., ge=1900, le=9999, description="Year the academic year starts")
    label: Optional[str] = Field(None, description="Display label (default: AY<year>)")

    # Precedence
    tiers: list[TierValue] = Field(..., description="Tier evaluation order")
    default_category: DefaultCategoryValue = Field(
        "class_day", description="Category when no tier matched"
    )

    # Periods
    breaks: BreaksSchema
    exams: list[DateRangeSchema] = Field(default_factory=list)
    terms: list[TermSchema] = Field(default_factory=list)

    # Day sets
    kyuko: CampusDatesSchema = Field(default_factory=CampusDatesSchema)
    makeup: CampusDatesSchema = Field(default_factory=CampusDatesSchema)
    forced_class_days: list[date] = Field(default_factory=list)
    national_holidays: list[date] = Field(default_factory=list)

    # Display
    holidays: list[HolidaySchema] = Field(default_factory=list)

    @field_validator("tiers")
    @classmethod
    def validate_unique_tiers(cls, v: list[str]) -> list[str]:
        duplicates = sorted({t for t in v if v.count(t) > 1})
        if duplicates:
            raise ValueError(f"Duplicate tiers: {', '.join(duplicates)}")
        return v

    model_config = {
        "extra": "forbid",  # Reject unknown fields
    }


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_rule_pack(data: dict[str, Any]) -> RulePackSchema:
    """
    Validate a rule pack dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return RulePackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """Check if a rule pack's schema major version matches ours."""
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    pack_major = pack_version.split(".")[0]
    current_major = SCHEMA_VERSION.split(".")[0]
    return pack_major == current_major
