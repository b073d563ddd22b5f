"""
HrConfig schema.

The runtime configuration artifact.  YAML is parsed into these frozen
dataclasses by ``hr_config.loader``; kernel value types (BonusTier,
ZeroSalaryPolicy) are used directly so bridges can hand them to services
without further translation.
"""

from dataclasses import dataclass
from decimal import Decimal

from hr_kernel.domain.bonus import DEFAULT_BONUS_TIERS, BonusTier
from hr_kernel.domain.salary import ZeroSalaryPolicy
from hr_kernel.models.employee import DEFAULT_PERFORMANCE_SCORE
from hr_kernel.selectors.employee_selector import DEFAULT_STREAM_BATCH_SIZE


@dataclass(frozen=True)
class SalaryHistoryConfig:
    """How salary changes are recorded."""

    zero_salary_policy: ZeroSalaryPolicy = ZeroSalaryPolicy.REJECT


@dataclass(frozen=True)
class ReportingConfig:
    """Department report tuning."""

    stream_batch_size: int = DEFAULT_STREAM_BATCH_SIZE


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


@dataclass(frozen=True)
class HrConfig:
    """
    Complete HR kernel configuration.

    ``checksum`` is the SHA-256 of the parsed YAML document; it identifies
    exactly which configuration governed a run.
    """

    bonus_tiers: tuple[BonusTier, ...] = DEFAULT_BONUS_TIERS
    default_performance_score: Decimal = DEFAULT_PERFORMANCE_SCORE
    salary_history: SalaryHistoryConfig = SalaryHistoryConfig()
    reporting: ReportingConfig = ReportingConfig()
    logging: LoggingConfig = LoggingConfig()
    checksum: str = ""
