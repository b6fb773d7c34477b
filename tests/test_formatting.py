import pytest

from models.estimate_model import UsdRange
from utils.formatting import format_currency, format_system_size, format_usd_range


@pytest.mark.parametrize("amount, expected", [
    (12345, "$12,345"),
    (0, "$0"),
    (999, "$999"),
    (1000, "$1,000"),
    (1234567.5, "$1,234,568"),
    (12.49, "$12"),
    (-12345, "-$12,345"),
    (-0.4, "$0"),
])
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_usd_range():
    assert format_usd_range(UsdRange(11500, 18400)) == "$11,500 - $18,400"


@pytest.mark.parametrize("size_kw, expected", [
    (4.6, "4.6 kW"),
    (7.7, "7.7 kW"),
    (8.0, "8 kW"),
    (30.8, "30.8 kW"),
    (100.0, "100 kW"),
    (0.0, "0 kW"),
])
def test_format_system_size(size_kw, expected):
    assert format_system_size(size_kw) == expected
