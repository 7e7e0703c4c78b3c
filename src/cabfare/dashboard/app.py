"""Cab fare estimator — Streamlit page.

Layout: sidebar inputs (route, cab, trip type) → main area with the
distance verdict, headline price metrics, the all-inclusive waterfall and
a side-by-side table for every cab category.

Run with:
    streamlit run src/cabfare/dashboard/app.py
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from cabfare.api.narrative import generate_quote_narrative
from cabfare.config import CITY_COORDINATES, CabProfile, DEFAULT_TARIFF, load_tariff
from cabfare.engine.distance import build_distance_matrix
from cabfare.engine.quote import compare_cabs, quote_trip
from cabfare.settings import get_settings

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Cab Fare Estimator", page_icon="🚕", layout="wide")

_settings = get_settings()
tariff = load_tariff(_settings.tariff_path) if _settings.tariff_path else DEFAULT_TARIFF

_CITIES = sorted(CITY_COORDINATES)
_CATEGORIES = list(tariff.category_rates_per_km)
_TRIP_TYPES = {"One way": "oneWay", "Round trip": "roundTrip"}

_CHART_LAYOUT = dict(
    height=320,
    margin=dict(l=20, r=20, t=30, b=20),
    showlegend=False,
    plot_bgcolor="rgba(0,0,0,0)",
    paper_bgcolor="rgba(0,0,0,0)",
)

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
st.sidebar.header("Trip")

with st.sidebar.expander("Route", expanded=True):
    from_city = st.selectbox("From", _CITIES, index=_CITIES.index("rajkot"), format_func=str.title)
    to_city = st.selectbox("To", _CITIES, index=_CITIES.index("ahmedabad"), format_func=str.title)
    other_to = st.text_input("…or another destination", "", help="Unknown cities use a placeholder distance")
    override_km = st.number_input("Distance override (km, 0 = resolve)", 0, 5000, 0, 10)

with st.sidebar.expander("Cab", expanded=True):
    category = st.selectbox("Category", _CATEGORIES, format_func=str.title)
    trip_label = st.radio("Trip type", list(_TRIP_TYPES), horizontal=True)
    is_fixed = st.checkbox("Fixed-route cab")
    fixed_price = st.number_input("Fixed price ₹", 0, 200_000, 0, 100, disabled=not is_fixed)

destination = other_to.strip() or to_city
cab = CabProfile(
    name=category.title(),
    category=category,
    is_fixed_route=is_fixed,
    fixed_price=float(fixed_price) if is_fixed else None,
)
trip_type = _TRIP_TYPES[trip_label]
distance_km = float(override_km) if override_km else None

quote = quote_trip(from_city, destination, cab, trip_type, distance_km, tariff)
b = quote.breakdown

# ---------------------------------------------------------------------------
# Main area
# ---------------------------------------------------------------------------
st.title("Cab Fare Estimator")

if quote.distance.source == "fallback":
    st.warning(
        f"No distance data for {quote.distance.from_city.title()} → "
        f"{quote.distance.to_city.title()}; using a {quote.distance.distance_km} km placeholder."
    )

c1, c2, c3, c4 = st.columns(4)
c1.metric("Distance", f"{quote.distance.distance_km} km", quote.distance.source, delta_color="off")
c2.metric("Travel time", f"{b.estimated_time_hours} h")
c3.metric("Best price", f"₹{b.best_price:,}", f"-{b.best_discount_pct}%" if b.best_discount_pct else None)
c4.metric("All-inclusive", f"₹{b.all_inclusive_price:,}")

col_chart, col_text = st.columns([0.6, 0.4])

with col_chart:
    st.markdown("**All-inclusive price build-up**")
    fig = go.Figure(go.Waterfall(
        x=["Best price", "GST", "Toll", "State tax", "All-inclusive"],
        measure=["absolute", "relative", "relative", "relative", "total"],
        y=[b.best_price, b.gst_amount, b.toll_tax_amount, b.state_tax_amount, 0],
        text=[f"₹{v:,}" for v in (b.best_price, b.gst_amount, b.toll_tax_amount,
                                   b.state_tax_amount, b.all_inclusive_price)],
        textposition="outside",
    ))
    fig.update_layout(yaxis_title="₹", **_CHART_LAYOUT)
    st.plotly_chart(fig, use_container_width=True)

with col_text:
    st.markdown("**Quote**")
    st.code(generate_quote_narrative(quote), language=None)

# ── Every category on the same route ──
st.markdown("**All categories**")
quotes = compare_cabs(
    from_city, destination,
    [CabProfile(name=c.title(), category=c) for c in _CATEGORIES],
    trip_type, distance_km, tariff,
)
rows = pd.DataFrame([
    {
        "Cab": q.cab_name,
        "₹/km": q.breakdown.per_km_rate,
        "Base": q.breakdown.base_price,
        f"Discounted (-{q.breakdown.discount_pct}%)": q.breakdown.discounted_price,
        "Best": q.breakdown.best_price,
        "GST": q.breakdown.gst_amount,
        "Toll": q.breakdown.toll_tax_amount,
        "State tax": q.breakdown.state_tax_amount,
        "All-inclusive": q.breakdown.all_inclusive_price,
    }
    for q in quotes
])
st.dataframe(rows, use_container_width=True, hide_index=True)

with st.expander("Distance matrix (known cities)"):
    st.dataframe(build_distance_matrix(), use_container_width=True)
