"""
Academic Calendar Rule Packs

Schema validation and loading for rule packs.

Rule packs are YAML or JSON files holding one academic year's
hand-curated calendar rules, in the same shape as the built-in years.
They let operators register a new academic year without a code change.

Usage:
    from aogaku_calendar.packs import load_rule_pack, RulePackLoader

    # Load a single rule pack
    rule_set = load_rule_pack("packs/ay2027.yaml")

    # Load every pack in a directory
    loader = RulePackLoader()
    rule_sets = loader.load_directory("packs/")
"""
from __future__ import annotations

from .loader import (
    RulePackLoader,
    load_rule_pack,
    load_rule_pack_from_string,
)
from .schema import (
    SCHEMA_VERSION,
    BreaksSchema,
    CampusDatesSchema,
    DateRangeSchema,
    HolidaySchema,
    RulePackSchema,
    TermSchema,
    check_schema_version,
    validate_rule_pack,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Loader
    "RulePackLoader",
    "load_rule_pack",
    "load_rule_pack_from_string",
    # Validation
    "validate_rule_pack",
    "check_schema_version",
    # Schemas
    "RulePackSchema",
    "BreaksSchema",
    "CampusDatesSchema",
    "DateRangeSchema",
    "HolidaySchema",
    "TermSchema",
]
