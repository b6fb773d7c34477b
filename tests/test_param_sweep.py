import numpy as np
import pytest

from utils.param_sweep import SWEEP_COLUMNS, bill_grid, sweep_monthly_bills


def test_bill_grid_includes_stop():
    np.testing.assert_allclose(bill_grid(50, 100, 25), [50.0, 75.0, 100.0])


def test_bill_grid_rejects_non_positive_step():
    with pytest.raises(ValueError):
        bill_grid(50, 100, 0)


def test_sweep_skips_non_positive_bills():
    df = sweep_monthly_bills([-10, 0, 150])
    assert list(df.columns) == SWEEP_COLUMNS
    assert len(df) == 1
    row = df.iloc[0]
    assert row["MonthlyBill($)"] == 150
    assert row["SystemSize(kW)"] == pytest.approx(4.6)
    assert row["PriceMin($)"] == 11500
    assert row["PriceMax($)"] == 18400


def test_sweep_with_ev():
    df = sweep_monthly_bills([150], has_electric_vehicle=True)
    assert df.iloc[0]["SystemSize(kW)"] == pytest.approx(7.7)
    assert df.iloc[0]["LifetimeSavingsMax($)"] == 75000


def test_sweep_is_monotonic_in_bill():
    df = sweep_monthly_bills(bill_grid(10, 1200, 10))
    assert len(df) == 120
    for column in ("SystemSize(kW)", "PriceMax($)", "LifetimeSavingsMax($)", "HomeValueMax($)"):
        assert df[column].is_monotonic_increasing
    assert (df["HomeValueMin($)"] == 39500).all()
    assert df["HomeValueMax($)"].max() == 79000


def test_empty_sweep():
    df = sweep_monthly_bills([])
    assert df.empty
    assert list(df.columns) == SWEEP_COLUMNS
