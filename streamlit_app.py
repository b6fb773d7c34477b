import logging
import os

import matplotlib.pyplot as plt
import streamlit as st

# Import from our local modules
from models.estimate_model import (
    Computed, EstimateInput, UtilityProvider, estimate
)
from services.bill_parsing import (
    parse_utility_bill_pdf
)
from services.disclaimers import (
    estimate_disclaimers
)
from utils.formatting import (
    format_system_size, format_usd_range
)
from utils.param_sweep import (
    bill_grid, sweep_monthly_bills
)

log = logging.getLogger(__name__)

# Constants shared in app
DEFAULT_LOG_LEVEL = logging.INFO
ZIP_CODE_MAX_CHARS = 5
SWEEP_SPAN_USD = 150.0
SWEEP_STEP_USD = 10.0


def log_level(name=None):
    """Level for SOLAR_ESTIMATOR_LOG_LEVEL, falling back to INFO for unknown names."""
    if name is None:
        name = os.getenv("SOLAR_ESTIMATOR_LOG_LEVEL", "INFO")
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def prefill_bill_from_pdf(uploaded_file):
    # Only parse each upload once so later edits to the bill field stick
    upload_key = (uploaded_file.name, uploaded_file.size)
    if st.session_state.get("prefilled_from") == upload_key:
        return
    st.session_state["prefilled_from"] = upload_key

    amount = parse_utility_bill_pdf(uploaded_file)
    if amount is None:
        st.warning("Couldn't find a 'Total Cost' amount in that bill.")
        return
    st.session_state["monthly_bill"] = amount
    st.success(f"Monthly bill set to ${amount:,.2f} from your bill.")


def show_results(output):
    st.markdown("---")
    st.subheader("Estimated Results")
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Estimated System Size", format_system_size(output.system_size_kw))
    col2.metric("Estimated Price Range", format_usd_range(output.price_range_usd))
    col3.metric("Estimated Lifetime Savings", format_usd_range(output.lifetime_savings_usd))
    col4.metric("Estimated Home Value Increase", format_usd_range(output.home_value_increase_usd))


def show_bill_sweep(monthly_bill, has_ev):
    with st.expander("How the estimate changes with your bill"):
        bills = bill_grid(max(SWEEP_STEP_USD, monthly_bill - SWEEP_SPAN_USD),
                          monthly_bill + SWEEP_SPAN_USD,
                          SWEEP_STEP_USD)
        df_sweep = sweep_monthly_bills(bills, has_electric_vehicle=has_ev)

        fig, ax = plt.subplots()
        ax.fill_between(df_sweep["MonthlyBill($)"], df_sweep["PriceMin($)"], df_sweep["PriceMax($)"],
                        alpha=0.3, label="Installed price")
        ax.fill_between(df_sweep["MonthlyBill($)"], df_sweep["LifetimeSavingsMin($)"],
                        df_sweep["LifetimeSavingsMax($)"], alpha=0.3, label="Lifetime savings")
        ax.axvline(monthly_bill, color="gray", linestyle="--", label="Your bill")
        ax.set_xlabel("Average monthly bill ($)")
        ax.set_ylabel("USD")
        ax.legend()
        st.pyplot(fig)
        plt.close(fig)

        st.dataframe(df_sweep, hide_index=True)


def main():
    logging.basicConfig(level=log_level(), format="%(levelname)s %(name)s: %(message)s")

    st.title("☀️ Solar Savings Calculator")
    st.caption("Get an estimate of your potential solar savings and system requirements")

    # === Home & Utility Info ===
    col_zip, col_utility = st.columns(2)
    zip_code = col_zip.text_input("ZIP Code", max_chars=ZIP_CODE_MAX_CHARS)
    utility = col_utility.selectbox(
        "Utility Company",
        list(UtilityProvider),
        index=None,
        format_func=lambda p: p.label,
        placeholder="Select your utility",
    )

    uploaded_bill = st.file_uploader("Prefill from a utility bill (optional)", type="pdf")
    if uploaded_bill is not None:
        prefill_bill_from_pdf(uploaded_bill)

    # A prefilled bill already sits in session state under the widget key
    bill_default = {} if "monthly_bill" in st.session_state else {"value": None}
    monthly_bill = st.number_input(
        "Average Monthly Electric Bill ($)",
        min_value=0.0,
        step=0.01,
        key="monthly_bill",
        **bill_default,
    )
    has_ev = st.checkbox("I have an electric vehicle", value=False)

    form_filled = bool(zip_code) and utility is not None and monthly_bill is not None

    # === Calculation trigger ===
    if st.button("Calculate Solar Savings", disabled=not form_filled, use_container_width=True):
        result = estimate(EstimateInput(
            zip_code=zip_code,
            utility_provider=utility,
            monthly_bill_usd=monthly_bill,
            has_electric_vehicle=has_ev,
        ))
        # Incomplete input leaves the previous results on screen
        if isinstance(result, Computed):
            st.session_state["estimate_output"] = result.output
            st.session_state["estimate_bill"] = (monthly_bill, has_ev)

    if "estimate_output" in st.session_state:
        show_results(st.session_state["estimate_output"])
        sweep_bill, sweep_ev = st.session_state["estimate_bill"]
        show_bill_sweep(sweep_bill, sweep_ev)

    st.markdown("---")

    # --- Disclaimers ---
    st.subheader("Important Disclaimers")
    for item in estimate_disclaimers():
        st.caption(f"**{item['title']}:** {item['body']}")


if __name__=="__main__":
    main()
