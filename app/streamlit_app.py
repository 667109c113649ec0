"""
Cafe Partner Projections — Dashboard
====================================

Four sections:
  1. Projections:        KPIs, scenario chart, month-12 comparison
  2. Product Economics:  Bulk bag and retail pouch pricing / margins
  3. Cafe Tiers:         Consumption + stocking profile per partner tier
  4. Scenarios:          Growth / churn / mix assumptions (up to 5)

Every rerun recomputes all tier economics and all projections from the
current session snapshot.

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import DEFAULT_CONFIG
from core.logging_setup import configure_logging
from core.schema import TierRole

from economics.products import product_economics_frame
from economics.tiers import compute_all_tier_economics, compute_tier_economics

from engine.runner import run_projections

from inputs.defaults import (
    DEFAULT_BULK_PRODUCTS,
    DEFAULT_RETAIL_PRODUCTS,
    DEFAULT_SCENARIOS,
    DEFAULT_TIERS,
)
from inputs.editing import add_scenario, remove_at, replace_at
from inputs.validators import check_inputs, check_scenario_mix

from reporting.chart import METRIC_SUFFIX, chart_frame, metric_columns
from reporting.formatting import fmt_compact, fmt_count, fmt_full
from reporting.kpis import (
    compute_headline_kpis,
    revenue_split,
    scenario_summary,
    tier_economics_frame,
)

configure_logging()
logger = logging.getLogger(__name__)

SECTIONS = ["Projections", "Product Economics", "Cafe Tiers", "Scenarios"]
METRIC_TABS = {
    "revenue": "Revenue",
    "profit": "Gross Profit",
    "partners": "Partners",
    "cumRev": "Cumulative Rev",
}

# ---------------------------------------------------------------------------
# Session state defaults
# ---------------------------------------------------------------------------
STATE_DEFAULTS = {
    "bulk_products": DEFAULT_BULK_PRODUCTS,
    "retail_products": DEFAULT_RETAIL_PRODUCTS,
    "tiers": DEFAULT_TIERS,
    "scenarios": DEFAULT_SCENARIOS,
}


def _init_state() -> None:
    for key, val in STATE_DEFAULTS.items():
        if key not in st.session_state:
            st.session_state[key] = val


def _edit(collection: str, index: int, **changes) -> None:
    """Replace one record in a session collection if any field changed."""
    current = st.session_state[collection][index]
    if any(getattr(current, k) != v for k, v in changes.items()):
        st.session_state[collection] = replace_at(st.session_state[collection], index, **changes)


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_scenarios(projections, metric: str, height: int = 340) -> None:
    df = chart_frame(projections, horizon_months=DEFAULT_CONFIG.horizon_months)
    cols = [c for c in metric_columns(projections, metric) if c in df.columns]
    if df.empty or not cols:
        st.info("No data to plot.")
        return
    fig = go.Figure()
    for proj, col in zip(projections, cols):
        fig.add_trace(go.Scatter(
            x=df["label"], y=df[col], name=proj.scenario.name,
            mode="lines", line=dict(color=proj.scenario.color, width=2),
        ))
    fig.update_layout(height=height, margin=dict(l=10, r=10, t=10, b=0), hovermode="x unified")
    st.plotly_chart(fig, use_container_width=True)


def _plot_revenue_split(kpis, height: int = 280) -> None:
    split = revenue_split(kpis)
    if split["value"].sum() <= 0:
        st.info("No month-12 revenue yet.")
        return
    fig = px.pie(split, names="stream", values="value", hole=0.55)
    fig.update_layout(height=height, margin=dict(l=0, r=0, t=0, b=0))
    st.plotly_chart(fig, use_container_width=True)


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------
def _render_projections(projections, tier_econ) -> None:
    if not projections:
        st.info("Add a scenario to see projections.")
        return

    primary = projections[0]
    kpis = compute_headline_kpis(primary.months)

    k1, k2, k3, k4, k5 = st.columns(5)
    k1.metric("M12 Monthly Revenue", fmt_compact(kpis.m12_revenue),
              f"{fmt_compact(kpis.m12_annualized_revenue)} annualized", delta_color="off")
    k2.metric("M12 Gross Profit", fmt_compact(kpis.m12_profit),
              f"{kpis.m12_margin_pct:g}% margin", delta_color="off")
    k3.metric("M12 Partners", fmt_count(kpis.m12_partners),
              f"{fmt_count(kpis.m12_small)}S / {fmt_count(kpis.m12_medium)}M / {fmt_count(kpis.m12_large)}L",
              delta_color="off")
    k4.metric("Year 1 Total Revenue", fmt_compact(kpis.year1_revenue),
              f"{fmt_compact(kpis.year1_profit)} profit", delta_color="off")
    k5.metric("M6 Revenue", fmt_compact(kpis.m6_revenue), "Halfway checkpoint", delta_color="off")

    metric = st.radio(
        "Chart metric", list(METRIC_SUFFIX), horizontal=True,
        format_func=lambda k: METRIC_TABS[k], label_visibility="collapsed",
    )
    left, right = st.columns([3, 1])
    with left:
        _plot_scenarios(projections, metric)
    with right:
        st.markdown(f"**M12 Revenue Split — {primary.scenario.name}**")
        _plot_revenue_split(kpis)

    st.markdown("**Scenario Summary at Month 12**")
    summary = scenario_summary(projections)
    display = summary.assign(
        partners=summary["partners"].map(fmt_count),
        monthly_revenue=summary["monthly_revenue"].map(fmt_full),
        monthly_profit=summary["monthly_profit"].map(fmt_full),
        margin_pct=summary["margin_pct"].map(lambda v: f"{v:g}%"),
        year1_revenue=summary["year1_revenue"].map(fmt_compact),
        year1_profit=summary["year1_profit"].map(fmt_compact),
    )
    st.dataframe(display, use_container_width=True, hide_index=True)

    st.markdown("**Partner Economics by Tier**")
    st.dataframe(
        tier_economics_frame(st.session_state["tiers"], tier_econ),
        use_container_width=True, hide_index=True,
    )

    with st.expander(f"Monthly detail — {primary.scenario.name}", expanded=False):
        st.dataframe(primary.to_dataframe(), use_container_width=True, hide_index=True)


def _render_products() -> None:
    st.markdown("**Bulk (Cafe Bags)**")
    for i, p in enumerate(st.session_state["bulk_products"]):
        c0, c1, c2, c3 = st.columns([3, 1, 1, 1])
        c0.markdown(f"{p.name}")
        servings = c1.number_input("Servings", value=float(p.servings_per_unit), min_value=0.0, key=f"bulk_srv_{p.id}")
        wholesale = c2.number_input("Wholesale $", value=float(p.wholesale_price), min_value=0.0, key=f"bulk_ws_{p.id}")
        cogs = c3.number_input("COGS $", value=float(p.cogs), min_value=0.0, key=f"bulk_cogs_{p.id}")
        _edit("bulk_products", i, servings_per_unit=servings, wholesale_price=wholesale, cogs=cogs)

    st.markdown("**Retail (Pouches)**")
    for i, p in enumerate(st.session_state["retail_products"]):
        c0, c1, c2, c3 = st.columns([3, 1, 1, 1])
        c0.markdown(f"{p.name}")
        retail = c1.number_input("Retail $", value=float(p.retail_price), min_value=0.0, key=f"ret_rp_{p.id}")
        wholesale = c2.number_input("Wholesale $", value=float(p.wholesale_price), min_value=0.0, key=f"ret_ws_{p.id}")
        cogs = c3.number_input("COGS $", value=float(p.cogs), min_value=0.0, key=f"ret_cogs_{p.id}")
        _edit("retail_products", i, retail_price=retail, wholesale_price=wholesale, cogs=cogs)

    st.dataframe(
        product_economics_frame(st.session_state["bulk_products"], st.session_state["retail_products"]),
        use_container_width=True, hide_index=True,
    )


def _render_tiers() -> None:
    bulk = st.session_state["bulk_products"]
    retail = st.session_state["retail_products"]
    bulk_names = {p.id: p.name for p in bulk}
    retail_names = {p.id: p.name for p in retail}
    roles = [None] + [r for r in TierRole]

    for i, t in enumerate(st.session_state["tiers"]):
        with st.container(border=True):
            st.markdown(f"**{t.label}**")
            c1, c2, c3, c4 = st.columns(4)
            drinks = c1.number_input("Drinks / day", value=float(t.drinks_per_day), min_value=0.0, key=f"tier_dpd_{t.id}")
            per_serving = c2.number_input("Units / drink", value=float(t.units_per_serving), min_value=0.0, key=f"tier_ups_{t.id}")
            days = c3.number_input("Days / month", value=float(t.days_per_month), min_value=0.0, key=f"tier_dpm_{t.id}")
            retail_units = c4.number_input("Retail units / month", value=float(t.retail_units_per_month), min_value=0.0, key=f"tier_rum_{t.id}")
            bulk_ids = st.multiselect(
                "Bulk products", list(bulk_names), default=[x for x in t.bulk_product_ids if x in bulk_names],
                format_func=bulk_names.get, key=f"tier_bulk_{t.id}",
            )
            retail_ids = st.multiselect(
                "Retail products", list(retail_names), default=[x for x in t.retail_product_ids if x in retail_names],
                format_func=retail_names.get, key=f"tier_ret_{t.id}",
            )
            role = st.selectbox(
                "Cohort role", roles, index=roles.index(t.role) if t.role in roles else 0,
                format_func=lambda r: "by position" if r is None else r.value, key=f"tier_role_{t.id}",
            )
            _edit(
                "tiers", i,
                drinks_per_day=drinks, units_per_serving=per_serving, days_per_month=days,
                retail_units_per_month=retail_units, bulk_product_ids=tuple(bulk_ids),
                retail_product_ids=tuple(retail_ids), role=role,
            )
            edited = st.session_state["tiers"][i]
            econ = compute_tier_economics(edited, bulk, retail)
            st.dataframe(
                tier_economics_frame([edited], {edited.id: econ}),
                use_container_width=True, hide_index=True,
            )


def _render_scenarios() -> None:
    scenarios = st.session_state["scenarios"]
    if st.button("+ Add Scenario", disabled=len(scenarios) >= DEFAULT_CONFIG.max_scenarios):
        st.session_state["scenarios"] = add_scenario(scenarios)
        st.rerun()

    for i, s in enumerate(st.session_state["scenarios"]):
        uid = s.uid or f"pos{i}"
        with st.container(border=True):
            head, remove = st.columns([5, 1])
            name = head.text_input("Name", value=s.name, key=f"scn_name_{uid}")
            if remove.button("Remove", key=f"scn_rm_{uid}"):
                st.session_state["scenarios"] = remove_at(st.session_state["scenarios"], i)
                st.rerun()
            c1, c2, c3 = st.columns(3)
            starting = c1.number_input("Starting partners", value=float(s.starting_partners), min_value=0.0, key=f"scn_start_{uid}")
            new = c2.number_input("New partners / month", value=float(s.new_partners_per_month), min_value=0.0, key=f"scn_new_{uid}")
            churn = c3.slider("Monthly churn %", 0.0, 20.0, float(s.monthly_churn_pct), 0.5, key=f"scn_churn_{uid}")
            m1, m2, m3, m4 = st.columns(4)
            small = m1.slider("% Small", 0.0, 100.0, float(s.pct_small), key=f"scn_small_{uid}")
            medium = m2.slider("% Medium", 0.0, 100.0, float(s.pct_medium), key=f"scn_med_{uid}")
            large = m3.slider("% Large", 0.0, 100.0, float(s.pct_large), key=f"scn_large_{uid}")
            attach = m4.slider("% Partners Stocking Retail", 0.0, 100.0, float(s.retail_attach_pct), key=f"scn_attach_{uid}")
            _edit(
                "scenarios", i, name=name, starting_partners=starting, new_partners_per_month=new,
                monthly_churn_pct=churn, pct_small=small, pct_medium=medium, pct_large=large,
                retail_attach_pct=attach,
            )
            warning = check_scenario_mix(st.session_state["scenarios"][i])
            if warning:
                st.warning(warning)


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Cafe Partner Projections", layout="wide")
_init_state()

st.markdown("## Cafe Partner Projections")
st.caption("12-month partner growth, revenue and gross profit by scenario")

section = st.radio("Section", SECTIONS, horizontal=True, label_visibility="collapsed", key="section")
st.divider()

if section == "Product Economics":
    _render_products()
elif section == "Cafe Tiers":
    _render_tiers()
elif section == "Scenarios":
    _render_scenarios()

bulk_products = st.session_state["bulk_products"]
retail_products = st.session_state["retail_products"]
tiers = st.session_state["tiers"]
scenarios = st.session_state["scenarios"]

tier_econ = compute_all_tier_economics(tiers, bulk_products, retail_products)
projections = run_projections(scenarios, tiers, bulk_products, retail_products)
logger.debug("Recomputed %d tier(s), %d projection(s)", len(tier_econ), len(projections))

if section == "Projections":
    _render_projections(projections, tier_econ)

checks = check_inputs(bulk_products, retail_products, tiers, scenarios)
if not checks.is_clean:
    with st.expander(f"Input warnings ({len(checks.warnings)})", expanded=False):
        for w in checks.warnings:
            st.warning(w)
