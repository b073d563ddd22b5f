"""
Configuration Loader (``hr_config.loader``).

Responsibility
--------------
Loads the YAML configuration file and parses it into the frozen
``hr_config.schema`` dataclasses.  Runtime callers go through
``hr_config.get_active_config()``.

Invariants enforced
-------------------
* Numeric settings are parsed as ``Decimal`` (never float).
* Bonus tiers are validated: rates in [0, 1], strictly descending
  ``min_score``.
* ``compute_checksum`` produces a deterministic SHA-256 hash of the parsed
  document.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Invalid values  -> ``ValueError`` with the offending key in the message.
"""

import hashlib
import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from hr_config.schema import HrConfig, LoggingConfig, ReportingConfig, SalaryHistoryConfig
from hr_kernel.db.types import MAX_PERFORMANCE_SCORE, MIN_PERFORMANCE_SCORE
from hr_kernel.domain.bonus import DEFAULT_BONUS_TIERS, BonusTier, validate_tiers
from hr_kernel.domain.salary import ZeroSalaryPolicy
from hr_kernel.models.employee import DEFAULT_PERFORMANCE_SCORE
from hr_kernel.selectors.employee_selector import DEFAULT_STREAM_BATCH_SIZE


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if the document is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a mapping, got {type(data).__name__}")
    return data


def parse_decimal(value: Any, key: str) -> Decimal:
    """Parse a Decimal from a YAML scalar, rejecting floats' binary artefacts."""
    if isinstance(value, bool):
        raise ValueError(f"{key}: expected a number, got {value!r}")
    try:
        return Decimal(str(value))
    except (InvalidOperation, TypeError):
        raise ValueError(f"{key}: expected a number, got {value!r}") from None


def parse_bonus_tiers(data: Any) -> tuple[BonusTier, ...]:
    """Parse and validate the ``bonus_tiers`` list."""
    if data is None:
        return DEFAULT_BONUS_TIERS
    if not isinstance(data, list):
        raise ValueError(f"bonus_tiers: expected a list, got {type(data).__name__}")

    tiers = []
    for index, item in enumerate(data):
        key = f"bonus_tiers[{index}]"
        if not isinstance(item, dict):
            raise ValueError(f"{key}: expected a mapping with min_score and rate")
        try:
            min_score = parse_decimal(item["min_score"], f"{key}.min_score")
            rate = parse_decimal(item["rate"], f"{key}.rate")
        except KeyError as exc:
            raise ValueError(f"{key}: missing {exc.args[0]}") from None
        tiers.append(BonusTier(min_score=min_score, rate=rate))

    return validate_tiers(tiers)


def parse_performance_score(value: Any) -> Decimal:
    if value is None:
        return DEFAULT_PERFORMANCE_SCORE
    score = parse_decimal(value, "default_performance_score")
    if not MIN_PERFORMANCE_SCORE <= score <= MAX_PERFORMANCE_SCORE:
        raise ValueError(f"default_performance_score: must be within [0, 10], got {score}")
    return score


def parse_salary_history(data: dict[str, Any]) -> SalaryHistoryConfig:
    raw = data.get("zero_salary_policy", ZeroSalaryPolicy.REJECT.value)
    try:
        policy = ZeroSalaryPolicy(raw)
    except ValueError:
        allowed = ", ".join(p.value for p in ZeroSalaryPolicy)
        raise ValueError(
            f"salary_history.zero_salary_policy: expected one of {allowed}, got {raw!r}"
        ) from None
    return SalaryHistoryConfig(zero_salary_policy=policy)


def parse_reporting(data: dict[str, Any]) -> ReportingConfig:
    batch_size = data.get("stream_batch_size", DEFAULT_STREAM_BATCH_SIZE)
    if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size < 1:
        raise ValueError(
            f"reporting.stream_batch_size: expected a positive integer, got {batch_size!r}"
        )
    return ReportingConfig(stream_batch_size=batch_size)


def parse_logging(data: dict[str, Any]) -> LoggingConfig:
    level = str(data.get("level", "INFO")).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"logging.level: unknown level {level!r}")
    return LoggingConfig(level=level)


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise ValueError(f"{key}: expected a mapping, got {type(section).__name__}")
    return section


def parse_config(data: dict[str, Any]) -> HrConfig:
    """
    Parse a complete HrConfig from a YAML document.

    Missing keys fall back to the kernel defaults.
    """
    return HrConfig(
        bonus_tiers=parse_bonus_tiers(data.get("bonus_tiers")),
        default_performance_score=parse_performance_score(
            data.get("default_performance_score")
        ),
        salary_history=parse_salary_history(_section(data, "salary_history")),
        reporting=parse_reporting(_section(data, "reporting")),
        logging=parse_logging(_section(data, "logging")),
        checksum=compute_checksum(data),
    )


def load_config(path: Path) -> HrConfig:
    """Load and parse the configuration file at ``path``."""
    return parse_config(load_yaml_file(path))


def compute_checksum(data: dict[str, Any]) -> str:
    """
    Compute SHA-256 checksum of canonical JSON serialization.

    Identical ``data`` always produces identical checksums.
    """
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
