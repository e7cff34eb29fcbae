"""Progressive income tax over an ordered slab table.

Slab tables are plain data so that another progressive regime can be
swapped in without touching the walk in `compute_annual_tax`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class TaxSlab:
    """One bracket of annual income. `upper_bound=None` means unbounded."""

    upper_bound: Optional[float]
    rate: float


DEFAULT_TAX_SLABS: tuple[TaxSlab, ...] = (
    TaxSlab(upper_bound=250_000, rate=0.0),
    TaxSlab(upper_bound=500_000, rate=0.05),
    TaxSlab(upper_bound=1_000_000, rate=0.20),
    TaxSlab(upper_bound=None, rate=0.30),
)

TAX_REGIMES: dict[str, tuple[TaxSlab, ...]] = {
    "default": DEFAULT_TAX_SLABS,
}


def validate_slabs(slabs: Sequence[TaxSlab]) -> tuple[TaxSlab, ...]:
    """Check that slabs partition [0, inf) with non-decreasing rates."""
    if not slabs:
        raise ValidationError("tax slab table is empty")

    last_upper = 0.0
    last_rate = 0.0
    for index, slab in enumerate(slabs):
        if not 0 <= slab.rate < 1:
            raise ValidationError(f"tax slab {index}: rate {slab.rate} outside [0, 1)")
        if slab.rate < last_rate:
            raise ValidationError(f"tax slab {index}: rates must not decrease")
        last_rate = slab.rate

        is_last = index == len(slabs) - 1
        if slab.upper_bound is None:
            if not is_last:
                raise ValidationError(f"tax slab {index}: only the last slab may be unbounded")
            continue
        if is_last:
            raise ValidationError("the last tax slab must be unbounded")
        if slab.upper_bound <= last_upper:
            raise ValidationError(f"tax slab {index}: upper bound must increase")
        last_upper = slab.upper_bound

    return tuple(slabs)


def slabs_from_config(rows: Iterable[Sequence]) -> tuple[TaxSlab, ...]:
    """Build a validated table from (upper_bound, rate) pairs."""
    slabs = [TaxSlab(upper_bound=None if upper is None else float(upper), rate=float(rate)) for upper, rate in rows]
    return validate_slabs(slabs)


def get_regime(name: str) -> tuple[TaxSlab, ...]:
    try:
        return TAX_REGIMES[name]
    except KeyError:
        raise ValidationError(f"unknown tax regime: {name}")


def compute_annual_tax(annual_income: float, slabs: Sequence[TaxSlab] = DEFAULT_TAX_SLABS) -> float:
    remaining = annual_income
    last_upper = 0.0
    tax = 0.0

    for slab in slabs:
        if slab.upper_bound is None:
            tax += remaining * slab.rate
            break

        taxable = max(0.0, min(remaining, slab.upper_bound - last_upper))
        tax += taxable * slab.rate
        remaining -= taxable
        last_upper = slab.upper_bound
        if remaining <= 0:
            break

    return tax
