import io
import logging

import pytest

from services import bill_parsing
from services.bill_parsing import find_bill_amount, parse_utility_bill_pdf


class FakePage:
    def __init__(self, text):
        self.text = text

    def extract_text(self):
        return self.text


class FakeReader:
    pages_text = []

    def __init__(self, stream):
        self.pages = [FakePage(t) for t in self.pages_text]


@pytest.fixture
def fake_pdf(monkeypatch):
    def _install(*pages_text):
        monkeypatch.setattr(FakeReader, "pages_text", list(pages_text))
        monkeypatch.setattr(bill_parsing.PyPDF2, "PdfReader", FakeReader)
    return _install


@pytest.mark.parametrize("text, expected", [
    ("Total Cost: $123.45", 123.45),
    ("Account 42\nTotal Usage: 640\nTotal Cost:   1,204.50\n", 1204.5),
    ("Total Cost: $98", 98.0),
    ("Amount Due: $123.45", None),
    ("", None),
    (None, None),
])
def test_find_bill_amount(text, expected):
    assert find_bill_amount(text) == expected


def test_pdf_total_cost_on_later_page(fake_pdf):
    fake_pdf("Page one, usage summary", None, "Total Cost: $187.20")
    assert parse_utility_bill_pdf(io.BytesIO(b"%PDF")) == pytest.approx(187.2)


def test_pdf_without_total_cost(fake_pdf, caplog):
    fake_pdf("Total Usage: 640")
    with caplog.at_level(logging.INFO, logger="services.bill_parsing"):
        assert parse_utility_bill_pdf(io.BytesIO(b"%PDF")) is None
    assert "No 'Total Cost' line" in caplog.text


def test_unreadable_pdf(caplog):
    with caplog.at_level(logging.WARNING, logger="services.bill_parsing"):
        assert parse_utility_bill_pdf(io.BytesIO(b"this is not a pdf")) is None
    assert "Could not read bill PDF" in caplog.text
