from __future__ import annotations

import pytest

from src.payroll_system.payroll_system.core.exceptions import ValidationError
from src.payroll_system.payroll_system.payroll.tax import (
    DEFAULT_TAX_SLABS,
    TaxSlab,
    compute_annual_tax,
    get_regime,
    slabs_from_config,
    validate_slabs,
)


@pytest.mark.parametrize(
    "income, expected",
    [
        (0, 0),
        (250_000, 0),
        (500_000, 12_500),
        (780_000, 68_500),
        (1_000_000, 112_500),
        (1_500_000, 262_500),
    ],
)
def test_default_slab_values(income, expected):
    assert compute_annual_tax(income) == pytest.approx(expected)


def test_tax_is_non_decreasing_and_continuous_across_boundaries():
    incomes = [i * 10_000 for i in range(0, 151)]
    taxes = [compute_annual_tax(i) for i in incomes]
    assert taxes == sorted(taxes)

    for boundary in (250_000, 500_000, 1_000_000):
        below = compute_annual_tax(boundary - 0.01)
        above = compute_annual_tax(boundary + 0.01)
        assert above - below < 0.01


def test_alternate_regime_is_substitutable():
    flat = (TaxSlab(upper_bound=100, rate=0.0), TaxSlab(upper_bound=None, rate=0.1))
    assert compute_annual_tax(1_100, flat) == pytest.approx(100)


def test_validate_accepts_default_table():
    assert validate_slabs(DEFAULT_TAX_SLABS) == DEFAULT_TAX_SLABS
    assert get_regime("default") == DEFAULT_TAX_SLABS


@pytest.mark.parametrize(
    "slabs",
    [
        [],
        [TaxSlab(upper_bound=100, rate=0.1)],
        [TaxSlab(upper_bound=None, rate=0.1), TaxSlab(upper_bound=100, rate=0.2)],
        [TaxSlab(upper_bound=100, rate=0.2), TaxSlab(upper_bound=None, rate=0.1)],
        [TaxSlab(upper_bound=100, rate=0.0), TaxSlab(upper_bound=50, rate=0.1), TaxSlab(upper_bound=None, rate=0.2)],
        [TaxSlab(upper_bound=None, rate=1.0)],
    ],
)
def test_validate_rejects_malformed_tables(slabs):
    with pytest.raises(ValidationError):
        validate_slabs(slabs)


def test_slabs_from_config_rows():
    slabs = slabs_from_config([(300_000, 0), (None, 0.1)])
    assert slabs == (TaxSlab(upper_bound=300_000.0, rate=0.0), TaxSlab(upper_bound=None, rate=0.1))


def test_unknown_regime():
    with pytest.raises(ValidationError):
        get_regime("flat-2099")
