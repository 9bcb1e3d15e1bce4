"""
Rule Pack Loader

Loads and validates academic-year rule packs from YAML or JSON files.

Converts Pydantic schema models to RuleSet domain models, then runs the
rule set integrity checks.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from ..exceptions import (
    RulePackLoadError,
    RulePackValidationError,
    RulePackVersionMismatch,
)
from ..models import (
    Campus,
    CampusDateSets,
    DateRange,
    DateSet,
    DayCategory,
    Holiday,
    RuleSet,
    Term,
    Tier,
)
from ..validators import check_rule_set
from .schema import (
    SCHEMA_VERSION,
    CampusDatesSchema,
    DateRangeSchema,
    RulePackSchema,
    check_schema_version,
    validate_rule_pack,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_range(schema: DateRangeSchema) -> DateRange:
    return DateRange(start=schema.start, end=schema.end)


def _convert_campus_dates(schema: CampusDatesSchema) -> CampusDateSets:
    return CampusDateSets.build(
        common=schema.common,
        campus_only={
            Campus.AOYAMA: schema.aoyama,
            Campus.SAGAMIHARA: schema.sagamihara,
        },
    )


def _convert_rule_pack(schema: RulePackSchema) -> RuleSet:
    """Convert RulePackSchema to RuleSet model."""
    return RuleSet(
        academic_year=schema.academic_year,
        label=schema.label or f"AY{schema.academic_year}",
        tiers=tuple(Tier(t) for t in schema.tiers),
        default_category=DayCategory(schema.default_category),
        summer_break=_convert_range(schema.breaks.summer),
        winter_break=_convert_range(schema.breaks.winter),
        spring_break=_convert_range(schema.breaks.spring),
        exams=tuple(_convert_range(r) for r in schema.exams),
        terms=tuple(
            Term(name=t.name, ranges=tuple(_convert_range(r) for r in t.ranges))
            for t in schema.terms
        ),
        kyuko=_convert_campus_dates(schema.kyuko),
        makeup=_convert_campus_dates(schema.makeup),
        forced_class_days=DateSet.from_iterable(schema.forced_class_days),
        national_holidays=DateSet.from_iterable(schema.national_holidays),
        holidays=tuple(
            Holiday(date=h.day, name=h.name)
            for h in sorted(schema.holidays, key=lambda h: h.day)
        ),
    )


# =============================================================================
# Rule Pack Loader
# =============================================================================

class RulePackLoader:
    """
    Loads rule packs from YAML or JSON files.

    Usage:
        loader = RulePackLoader()
        rule_set = loader.load("packs/ay2027.yaml")
        rule_sets = loader.load_directory("packs/")
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject packs with incompatible schema versions
        """
        self.strict_version = strict_version

    def load(self, path: Union[str, Path]) -> RuleSet:
        """
        Load a rule pack from a file.

        Args:
            path: Path to YAML or JSON file

        Returns:
            Validated RuleSet

        Raises:
            RulePackLoadError: If the file cannot be read or parsed
            RulePackVersionMismatch: If schema version incompatible
            RulePackValidationError: If schema validation fails
            RuleSetValidationError: If rule set integrity checks fail
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise RulePackLoadError(
                message=f"Failed to load rule pack: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e

        rule_set = self.load_data(data, source=str(path))
        logger.info("Loaded rule pack %s from %s", rule_set.label, path)
        return rule_set

    def load_data(self, data: Any, source: str = "") -> RuleSet:
        """
        Build a rule set from already-parsed pack data.

        Args:
            data: Mapping loaded from YAML/JSON
            source: Where the data came from, for error messages

        Returns:
            Validated RuleSet
        """
        if not isinstance(data, dict):
            raise RulePackLoadError(
                message="Rule pack must be a mapping at the top level",
                details={"source": source, "type": type(data).__name__},
            )

        if self.strict_version and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise RulePackVersionMismatch(
                message=f"Schema version mismatch: pack has {pack_version}, "
                        f"expected {SCHEMA_VERSION}",
                details={
                    "pack_version": pack_version,
                    "expected_version": SCHEMA_VERSION,
                    "source": source,
                },
            )

        try:
            schema = validate_rule_pack(data)
        except ValidationError as e:
            raise RulePackValidationError(
                message=f"Rule pack validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False), "source": source},
            ) from e

        rule_set = _convert_rule_pack(schema)
        check_rule_set(rule_set, source)
        return rule_set

    def load_directory(
        self,
        directory: Union[str, Path],
        pattern: str = "*.yaml",
    ) -> list[RuleSet]:
        """
        Load all rule packs from a directory, in file name order.

        Raises:
            RulePackLoadError: If the directory does not exist
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise RulePackLoadError(
                message=f"Directory not found: {directory}",
                details={"path": str(directory)},
            )

        return [self.load(path) for path in sorted(directory.glob(pattern))]

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)


# =============================================================================
# Convenience Functions
# =============================================================================

def load_rule_pack(path: Union[str, Path]) -> RuleSet:
    """
    Load a rule pack from a file.

    Convenience function that creates a temporary loader.
    """
    return RulePackLoader().load(path)


def load_rule_pack_from_string(content: str, format: str = "yaml") -> RuleSet:
    """
    Load a rule pack from a string.

    Args:
        content: YAML or JSON string
        format: "yaml" or "json"

    Returns:
        Validated RuleSet
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise RulePackLoadError(
            message=f"Failed to parse rule pack: {e}",
            details={"format": format, "error": str(e)},
        ) from e
    return RulePackLoader().load_data(data, source=f"<{format} string>")


__all__ = [
    "RulePackLoader",
    "load_rule_pack",
    "load_rule_pack_from_string",
]
