# models/assumptions.py
"""
Industry-average coefficients behind the solar estimate.

Every number the estimator uses lives here. Change a value in
EstimatorAssumptions (or pass a tuned copy to estimate()) to re-run the
whole calculation on different assumptions.
"""
from __future__ import annotations

from dataclasses import dataclass

# Usage
AVG_ELECTRICITY_RATE_USD_PER_KWH = 0.25  # flat retail rate, same for every ZIP/utility
EV_MONTHLY_USAGE_KWH = 400               # added to household usage when an EV is charged at home
MONTHS_PER_YEAR = 12

# Sizing
PRODUCTION_KWH_PER_KW_MONTH = 130  # monthly output of 1 kW installed, regional/seasonal average
WATTS_PER_KW = 1000

# Price per watt bracket (installed cost)
PRICE_PER_WATT_MIN_USD = 2.50
PRICE_PER_WATT_MAX_USD = 4.00

# Savings horizon, flat rate (no escalation compounding)
LIFETIME_YEARS_MIN = 20  # conservative
LIFETIME_YEARS_MAX = 25  # optimistic

# Home value increase (solar adds ~4.1% to home values)
HOME_VALUE_SIZE_CAP_KW = 8             # systems at or above this size get the top of the range
HOME_VALUE_INCREASE_MIN_USD = 39500
HOME_VALUE_INCREASE_MAX_USD = 79000
HOME_VALUE_INCREASE_FLOOR_USD = 45000  # lowest allowed upper bound


@dataclass(frozen=True)
class EstimatorAssumptions:
    avg_rate_usd_per_kwh: float = AVG_ELECTRICITY_RATE_USD_PER_KWH
    ev_monthly_usage_kwh: float = EV_MONTHLY_USAGE_KWH
    months_per_year: int = MONTHS_PER_YEAR
    production_kwh_per_kw_month: float = PRODUCTION_KWH_PER_KW_MONTH
    watts_per_kw: int = WATTS_PER_KW
    price_per_watt_min_usd: float = PRICE_PER_WATT_MIN_USD
    price_per_watt_max_usd: float = PRICE_PER_WATT_MAX_USD
    lifetime_years_min: int = LIFETIME_YEARS_MIN
    lifetime_years_max: int = LIFETIME_YEARS_MAX
    home_value_size_cap_kw: float = HOME_VALUE_SIZE_CAP_KW
    home_value_min_usd: int = HOME_VALUE_INCREASE_MIN_USD
    home_value_max_usd: int = HOME_VALUE_INCREASE_MAX_USD
    home_value_floor_usd: int = HOME_VALUE_INCREASE_FLOOR_USD


DEFAULT_ASSUMPTIONS = EstimatorAssumptions()
