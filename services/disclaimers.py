# services/disclaimers.py
from __future__ import annotations

from typing import Dict, List

# Shown under the calculator, in this order


def estimate_disclaimers() -> List[Dict[str, str]]:
    return [
        {
            "title": "Estimates Only",
            "body": "All calculations provided are estimates based on industry-standard formulas and "
                    "assumptions. Actual results may vary significantly based on specific site conditions, "
                    "local regulations, equipment selection, installation quality, weather patterns, and "
                    "individual usage habits.",
        },
        {
            "title": "Professional Consultation Required",
            "body": "These estimates should not be used as the sole basis for investment decisions. "
                    "Professional site assessment, detailed engineering analysis, and consultation with "
                    "certified solar installers are essential before making any solar investment.",
        },
        {
            "title": "Financial Assumptions",
            "body": "Savings calculations assume current electricity rates, system performance, and various "
                    "market conditions that may change over time. Federal, state, and local incentives are "
                    "subject to change and may affect actual costs and savings.",
        },
        {
            "title": "No Warranty",
            "body": "This calculator provides general estimates only and comes with no warranty, express or "
                    "implied. We disclaim all liability for decisions made based on these estimates.",
        },
        {
            "title": "Actual Performance Varies",
            "body": "Solar system performance depends on numerous factors including but not limited to: roof "
                    "orientation, shading, local weather conditions, system maintenance, equipment "
                    "degradation, and changes in electricity usage patterns.",
        },
        {
            "title": "Home Value Estimates",
            "body": "Home value increase calculations are based on industry studies showing solar "
                    "installations typically add 4.1% to home values. Actual home value impact varies "
                    "significantly by location, local market conditions, home characteristics, system "
                    "quality, age of installation, and buyer preferences. Real estate appraisals may differ "
                    "from these estimates.",
        },
    ]
