# services/bill_parsing.py
import logging
import re

import PyPDF2
from PyPDF2.errors import PdfReadError

from models.estimate_model import parse_monthly_bill

log = logging.getLogger(__name__)

TOTAL_COST_PATTERN = re.compile(r"Total Cost:\s+\$?([\d,]+(?:\.\d+)?)")


def find_bill_amount(text):
    """
    Amount on the first 'Total Cost: $123.45' line of bill text, or None.
    """
    match = TOTAL_COST_PATTERN.search(text or "")
    if not match:
        return None
    return parse_monthly_bill(match.group(1))


def parse_utility_bill_pdf(uploaded_file):
    """
    Pulls the monthly bill amount out of an uploaded PDF utility bill.
    Reads every page and looks for a line like 'Total Cost: $123.45'.
    Returns the amount, or None when the PDF can't be read or has no such line.
    """
    try:
        reader = PyPDF2.PdfReader(uploaded_file)
        full_text = ""
        for page in reader.pages:
            full_text += page.extract_text() or ""
    except PdfReadError as e:
        log.warning("Could not read bill PDF: %s", e)
        return None

    amount = find_bill_amount(full_text)
    if amount is None:
        log.info("No 'Total Cost' line found in bill PDF")
    return amount
