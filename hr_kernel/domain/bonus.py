"""
Bonus tiers -- pure performance bonus computation.

Responsibility:
    Maps a (salary, performance score) pair to a bonus amount using an
    ordered table of score thresholds.  No I/O; BonusCalculator in the
    services layer handles the employee lookup.

Architecture position:
    Kernel > Domain -- pure functional core.

Invariants enforced:
    - Tiers are evaluated top-down and the first tier whose ``min_score``
      is <= the score wins, so a score exactly on a threshold gets the
      higher tier.
    - Scores below every threshold earn 0.
    - The result is rounded to cents with ROUND_HALF_UP.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from hr_kernel.db.types import round_money


@dataclass(frozen=True)
class BonusTier:
    """Salary multiplier granted from ``min_score`` upwards."""

    min_score: Decimal
    rate: Decimal

    def __post_init__(self):
        if self.rate < 0 or self.rate > 1:
            raise ValueError(f"Bonus rate must be within [0, 1], got {self.rate}")


DEFAULT_BONUS_TIERS: tuple[BonusTier, ...] = (
    BonusTier(min_score=Decimal("9"), rate=Decimal("0.15")),
    BonusTier(min_score=Decimal("7"), rate=Decimal("0.10")),
    BonusTier(min_score=Decimal("5"), rate=Decimal("0.05")),
)


def validate_tiers(tiers: Sequence[BonusTier]) -> tuple[BonusTier, ...]:
    """
    Check that thresholds are strictly descending and return them as a tuple.

    Raises:
        ValueError: If a threshold is not lower than the one before it.
    """
    ordered = tuple(tiers)
    for higher, lower in zip(ordered, ordered[1:]):
        if lower.min_score >= higher.min_score:
            raise ValueError(
                "Bonus tiers must be ordered by strictly descending min_score: "
                f"{higher.min_score} is followed by {lower.min_score}"
            )
    return ordered


def select_tier(
    performance_score: Decimal,
    tiers: Sequence[BonusTier] = DEFAULT_BONUS_TIERS,
) -> BonusTier | None:
    """Return the first tier the score qualifies for, or None."""
    for tier in tiers:
        if performance_score >= tier.min_score:
            return tier
    return None


def calculate_bonus(
    salary: Decimal,
    performance_score: Decimal,
    tiers: Sequence[BonusTier] = DEFAULT_BONUS_TIERS,
) -> Decimal:
    """
    Compute the bonus for a salary at a given performance score.

    >>> calculate_bonus(Decimal("1000"), Decimal("9.5"))
    Decimal('150.00')
    >>> calculate_bonus(Decimal("1000"), Decimal("4.9"))
    Decimal('0.00')
    """
    tier = select_tier(performance_score, tiers)
    if tier is None:
        return round_money(Decimal("0"))
    return round_money(salary * tier.rate)
