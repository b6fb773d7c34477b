# utils/param_sweep.py
import numpy as np
import pandas as pd

from models.assumptions import DEFAULT_ASSUMPTIONS
from models.estimate_model import Computed, EstimateInput, UtilityProvider, estimate

SWEEP_COLUMNS = [
    "MonthlyBill($)", "SystemSize(kW)",
    "PriceMin($)", "PriceMax($)",
    "LifetimeSavingsMin($)", "LifetimeSavingsMax($)",
    "HomeValueMin($)", "HomeValueMax($)",
]


def bill_grid(start, stop, step=25.0):
    """Monthly bills from start to stop inclusive, every `step` dollars."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    return np.round(np.arange(start, stop + step / 2, step), 2)


def sweep_monthly_bills(bills,
                        has_electric_vehicle=False,
                        assumptions=DEFAULT_ASSUMPTIONS):
    """
    Runs the estimate for every bill and returns one row per bill that
    produced a result. Bills <= 0 don't produce a row.
    """
    results = []
    for bill in bills:
        # ZIP and utility only gate the form, any valid pair will do here
        result = estimate(
            EstimateInput(
                zip_code="00000",
                utility_provider=UtilityProvider.OTHER,
                monthly_bill_usd=float(bill),
                has_electric_vehicle=has_electric_vehicle,
            ),
            assumptions,
        )
        if not isinstance(result, Computed):
            continue
        out = result.output
        results.append((
            float(bill), out.system_size_kw,
            out.price_range_usd.min, out.price_range_usd.max,
            out.lifetime_savings_usd.min, out.lifetime_savings_usd.max,
            out.home_value_increase_usd.min, out.home_value_increase_usd.max,
        ))
    df_sweep = pd.DataFrame(results, columns=SWEEP_COLUMNS)
    return df_sweep
