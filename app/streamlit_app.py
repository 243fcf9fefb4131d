"""
mathkit — Gaussian Model Explorer
=================================

Interactive view of a GaussianModel:
  1. Model summary:        mean, stdev, variance, peak density
  2. Curves:               density and series-approximated cumulative
  3. Interval calculator:  P(min <= X <= max)
  4. Empirical Rule:       68-95-99.7 reference vs. the approximation

Run: streamlit run app/streamlit_app.py   (or: mathkit-dashboard)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import DEFAULTS
from core.exceptions import InvalidParameterError
from core.logging_config import setup_logging

from distributions.gaussian import GaussianModel, reliable_abs_z
from distributions.curves import density_curve
from distributions.empirical import empirical_rule_table

# `streamlit run` executes this file as __main__; keep it under the app namespace
logger = logging.getLogger("app.streamlit_app")


def _fmt_pct(val):
    return f"{val * 100:.4f}%"


def _sidebar_model() -> tuple:
    """Read model parameters and series terms from the sidebar."""
    st.sidebar.header("Distribution")
    mean = st.sidebar.number_input("Mean", value=float(DEFAULTS.mean), step=0.5)
    stdev = st.sidebar.number_input("Standard deviation", value=float(DEFAULTS.stdev), step=0.1)
    terms = st.sidebar.slider(
        "Series terms",
        min_value=0,
        max_value=400,
        value=DEFAULTS.cumulative_terms,
        help="Number of odd-power terms in the cumulative approximation.",
    )
    return mean, stdev, int(terms)


def render() -> None:
    st.set_page_config(page_title="Gaussian Model Explorer", layout="wide")
    st.title("Gaussian Model Explorer")

    mean, stdev, terms = _sidebar_model()
    try:
        model = GaussianModel(mean, stdev)
    except InvalidParameterError as exc:
        st.error(str(exc))
        return
    logger.debug("Rendering explorer for %s (terms=%d)", model, terms)

    st.markdown("#### Model")
    st.dataframe(model.summary(), hide_index=True)

    st.markdown("#### Curves")
    curve = density_curve(model, terms=terms).set_index("x")
    col_pdf, col_cdf = st.columns(2)
    with col_pdf:
        st.caption("Density")
        st.line_chart(curve["density"], height=280)
    with col_cdf:
        st.caption("Cumulative (series approximation)")
        st.line_chart(curve["cumulative"], height=280)

    st.markdown("#### Interval probability")
    col_min, col_max = st.columns(2)
    with col_min:
        lower = st.number_input("min", value=model.mean - model.stdev)
    with col_max:
        upper = st.number_input("max", value=model.mean + model.stdev)
    probability = model.evaluate_interval_probability(lower, upper, terms)
    st.metric("P(min ≤ X ≤ max)", _fmt_pct(probability))
    bound = reliable_abs_z(terms)
    if max(abs(model.standardize(lower)), abs(model.standardize(upper))) > bound:
        st.warning(
            f"A bound lies more than {bound:.3g} standard deviations "
            "from the mean; the series approximation is unreliable there."
        )

    st.markdown("#### Empirical Rule")
    st.dataframe(empirical_rule_table(model, terms=terms), hide_index=True)


def main() -> None:
    """Console entry point: hand this file to `streamlit run`."""
    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(Path(__file__).resolve())]
    sys.exit(stcli.main())


if __name__ == "__main__":
    setup_logging(level=logging.INFO)
    render()
