# models/estimate_model.py
"""
Residential solar estimate: system size, installed price, lifetime savings
and home value increase from a ZIP code, a utility, the average monthly bill
and whether the household charges an EV.

estimate() never raises on bad form input. It returns either Computed(output)
or INCOMPLETE, and callers keep whatever result they showed before when they
get INCOMPLETE.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from models.assumptions import DEFAULT_ASSUMPTIONS, EstimatorAssumptions

log = logging.getLogger(__name__)


class UtilityProvider(Enum):
    SCE = "sce"
    LADWP = "ladwp"
    SDGE = "sdge"
    PGE = "pge"
    OTHER = "others"

    @property
    def label(self) -> str:
        return UTILITY_LABELS[self]

    @classmethod
    def coerce(cls, value) -> Optional["UtilityProvider"]:
        """Provider for an enum member, a form value ("sce") or a name ("SCE"); None if unset or unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return cls.__members__.get(value.upper())


UTILITY_LABELS = {
    UtilityProvider.SCE: "SCE",
    UtilityProvider.LADWP: "LADWP",
    UtilityProvider.SDGE: "SDG&E",
    UtilityProvider.PGE: "PG&E",
    UtilityProvider.OTHER: "Others",
}


@dataclass
class EstimateInput:
    """One submission of the calculator form. Fields may still be blank."""
    zip_code: str = ""
    utility_provider: Union[UtilityProvider, str, None] = None
    monthly_bill_usd: Union[float, str, None] = None
    has_electric_vehicle: bool = False


@dataclass(frozen=True)
class UsdRange:
    min: int
    max: int


@dataclass(frozen=True)
class EstimateOutput:
    system_size_kw: float
    price_range_usd: UsdRange
    lifetime_savings_usd: UsdRange
    home_value_increase_usd: UsdRange


@dataclass(frozen=True)
class Computed:
    output: EstimateOutput


@dataclass(frozen=True)
class Incomplete:
    """Result for a form that is missing a field or has a bill <= 0."""


INCOMPLETE = Incomplete()

EstimateResult = Union[Computed, Incomplete]


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ties toward +infinity (0.5 -> 1, 2.5 -> 3), unlike the built-in round()."""
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def _round_usd(value: float) -> int:
    return int(round_half_up(value))


BILL_TEXT_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_monthly_bill(value) -> Optional[float]:
    """
    Bill amount from a number or form text such as "150", "150.25" or "$1,200".
    Text must be plain decimal dollars; "1_000", "1e3", "nan" and the like are
    rejected. Any non-text real number (int, numpy scalar, Decimal) is accepted.
    Returns None for blanks, booleans, unparseable values, NaN and infinities.
    The sign is not checked here.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip().replace(",", "")
        if text.startswith("$"):
            text = text[1:]
        if not BILL_TEXT_PATTERN.fullmatch(text):
            return None
        amount = float(text)
    else:
        try:
            amount = float(value)
        except (TypeError, ValueError, OverflowError):
            return None
    if not math.isfinite(amount):
        return None
    return amount


def has_zip_code(zip_code) -> bool:
    """ZIP codes are text; anything else counts as not entered."""
    return isinstance(zip_code, str) and bool(zip_code.strip())


def has_electric_vehicle(flag) -> bool:
    """Only a real boolean True turns on the EV load; "false", 1 and other truthy values don't."""
    return isinstance(flag, bool) and flag


def is_complete(estimate_input: EstimateInput) -> bool:
    """True when the form has every field the estimate needs and a bill > 0."""
    bill = parse_monthly_bill(estimate_input.monthly_bill_usd)
    return (
        has_zip_code(estimate_input.zip_code)
        and UtilityProvider.coerce(estimate_input.utility_provider) is not None
        and bill is not None
        and bill > 0
    )


def estimate(estimate_input: EstimateInput,
             assumptions: EstimatorAssumptions = DEFAULT_ASSUMPTIONS) -> EstimateResult:
    if not is_complete(estimate_input):
        return INCOMPLETE

    a = assumptions
    bill = parse_monthly_bill(estimate_input.monthly_bill_usd)

    monthly_usage = bill / a.avg_rate_usd_per_kwh
    has_ev = has_electric_vehicle(estimate_input.has_electric_vehicle)
    ev_usage = a.ev_monthly_usage_kwh if has_ev else 0
    total_monthly_usage = monthly_usage + ev_usage
    annual_usage = total_monthly_usage * a.months_per_year

    system_size = round_half_up(total_monthly_usage / a.production_kwh_per_kw_month, 1)

    price_min = _round_usd(system_size * a.watts_per_kw * a.price_per_watt_min_usd)
    price_max = _round_usd(system_size * a.watts_per_kw * a.price_per_watt_max_usd)

    # flat rate, no escalation
    annual_savings = annual_usage * a.avg_rate_usd_per_kwh
    savings_min = _round_usd(annual_savings * a.lifetime_years_min)
    savings_max = _round_usd(annual_savings * a.lifetime_years_max)

    # smaller systems sit toward the low end of the home value range
    size_ratio = min(system_size / a.home_value_size_cap_kw, 1)
    home_value_min = a.home_value_min_usd
    home_value_max = _round_usd(
        a.home_value_min_usd + (a.home_value_max_usd - a.home_value_min_usd) * size_ratio
    )
    home_value_max = max(home_value_max, a.home_value_floor_usd)

    output = EstimateOutput(
        system_size_kw=system_size,
        price_range_usd=UsdRange(price_min, price_max),
        lifetime_savings_usd=UsdRange(savings_min, savings_max),
        home_value_increase_usd=UsdRange(home_value_min, home_value_max),
    )
    log.debug("Estimate for bill=%.2f ev=%s: %s", bill, has_ev, output)
    return Computed(output)
