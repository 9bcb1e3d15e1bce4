"""
Calendar Settings

Environment-driven configuration and the composition root that wires
rule sets into a CalendarRouter.

Environment variables:
- AOGAKU_CALENDAR_FALLBACK_YEAR: academic year whose rules classify dates
  in unregistered years (unset: such dates raise)
- AOGAKU_CALENDAR_PACK_DIR: directory of extra rule packs to load
- AOGAKU_CALENDAR_PACK_PATTERN: glob for pack files (default: *.yaml)
- AOGAKU_CALENDAR_INCLUDE_BUILTIN: register the built-in years (default: true)
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .calendars import builtin_rule_sets
from .engine import CalendarRouter
from .exceptions import ConfigurationError
from .models import RuleSet
from .packs import RulePackLoader


logger = logging.getLogger(__name__)

ENV_PREFIX = "AOGAKU_CALENDAR_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        message=f"{name} must be a boolean, got {raw!r}",
        details={"variable": name, "value": raw},
    )


def _parse_year(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(
            message=f"{name} must be an integer year, got {raw!r}",
            details={"variable": name, "value": raw},
        )


@dataclass(frozen=True)
class CalendarSettings:
    """
    Router configuration.

    Attributes:
        fallback_year: Year used for dates outside every registered year.
            None means such dates raise UnsupportedAcademicYearError.
        pack_dir: Directory of extra rule packs (None: no packs)
        pack_pattern: Glob selecting pack files in pack_dir
        include_builtin: Whether to register the compiled-in years
    """
    fallback_year: Optional[int] = None
    pack_dir: Optional[Path] = None
    pack_pattern: str = "*.yaml"
    include_builtin: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> CalendarSettings:
        """
        Read settings from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Raises:
            ConfigurationError: If a variable has an invalid value
        """
        env = os.environ if environ is None else environ

        fallback_raw = env.get(f"{ENV_PREFIX}FALLBACK_YEAR", "").strip()
        pack_dir_raw = env.get(f"{ENV_PREFIX}PACK_DIR", "").strip()
        builtin_raw = env.get(f"{ENV_PREFIX}INCLUDE_BUILTIN")

        settings = cls(
            fallback_year=(
                _parse_year(f"{ENV_PREFIX}FALLBACK_YEAR", fallback_raw)
                if fallback_raw else None
            ),
            pack_dir=Path(pack_dir_raw) if pack_dir_raw else None,
            pack_pattern=env.get(f"{ENV_PREFIX}PACK_PATTERN", "").strip() or "*.yaml",
            include_builtin=(
                _parse_bool(f"{ENV_PREFIX}INCLUDE_BUILTIN", builtin_raw)
                if builtin_raw is not None else True
            ),
        )
        logger.debug("Calendar settings from environment: %s", settings)
        return settings


def load_rule_sets(settings: CalendarSettings) -> list[RuleSet]:
    """Collect the built-in rule sets and any packs the settings point at."""
    rule_sets: list[RuleSet] = []
    if settings.include_builtin:
        rule_sets.extend(builtin_rule_sets())
    if settings.pack_dir is not None:
        packs = RulePackLoader().load_directory(settings.pack_dir, settings.pack_pattern)
        logger.info("Loaded %d rule pack(s) from %s", len(packs), settings.pack_dir)
        rule_sets.extend(packs)
    return rule_sets


def create_router(settings: Optional[CalendarSettings] = None) -> CalendarRouter:
    """
    Build a CalendarRouter from settings.

    This is the composition root: callers own the returned router and
    pass it to whatever needs classification.

    Args:
        settings: Settings to use (default: CalendarSettings.from_env())

    Returns:
        A router over the configured rule sets
    """
    if settings is None:
        settings = CalendarSettings.from_env()
    return CalendarRouter(
        rule_sets=load_rule_sets(settings),
        fallback_year=settings.fallback_year,
    )
