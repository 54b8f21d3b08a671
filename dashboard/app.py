"""Streamlit dashboard for the HMPI Water Quality Dashboard."""

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from src.hmpi.engine import (
    categorize,
    category_color,
    category_recommendation,
    compute_index,
    format_concentration,
    metal_breakdown,
    risk_percentage,
)
from src.hmpi.errors import ScoringError
from src.hmpi.models import WaterSample
from src.hmpi.report import (
    ScoringRun,
    format_sample_summary,
    generate_alerts,
    samples_to_dataframe,
    score_samples,
    summarize_samples,
)
from src.utils.config import (
    CATEGORY_COLORS,
    DEFAULT_SAMPLE_RECORDS,
    HMPI_WEIGHTS,
    METAL_NAMES,
    METALS,
    MODERATE_THRESHOLD,
    RISK_DISPLAY_MAX,
    SAFE_THRESHOLD,
    STANDARD_PRESETS,
)
from src.utils.logging_config import configure_logging
from src.validation.sample_validator import validate_sample_record

st.set_page_config(
    page_title="HMPI Water Quality Dashboard",
    page_icon="💧",
    layout="wide",
    initial_sidebar_state="expanded",
)

configure_logging(level="WARNING")


@st.cache_data
def load_samples() -> list[WaterSample]:
    """Load the demo dataset, dropping records that fail validation."""
    return [
        WaterSample.model_validate(record)
        for record in DEFAULT_SAMPLE_RECORDS
        if validate_sample_record(record)[0]
    ]


def render_sidebar() -> tuple[str, list[str]]:
    """Render sidebar controls."""
    st.sidebar.title("💧 HMPI Monitor")
    st.sidebar.markdown("---")

    preset = st.sidebar.selectbox(
        "Reference Standard",
        options=list(STANDARD_PRESETS.keys()),
    )

    categories = st.sidebar.multiselect(
        "Categories",
        options=list(CATEGORY_COLORS.keys()),
        default=list(CATEGORY_COLORS.keys()),
    )

    st.sidebar.markdown("---")
    st.sidebar.markdown(
        """
        **Index:** HMPI = Σ(Wi × Qi)
        **Quality rating:** Qi = (Ci / Si) × 100
        """
    )

    return preset, categories


def render_rejections(run: ScoringRun) -> None:
    """Show samples that could not be scored."""
    for r in run.rejected:
        st.error(f"Sample {r.sample_id} rejected ({r.kind.value}): {r.message}")


def render_overview_tab(run: ScoringRun) -> None:
    """Render the overview tab."""
    summary = summarize_samples(run.scored)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Total Samples", summary["total_samples"])
    with col2:
        st.metric("Safe Water", summary["safe_water"])
    with col3:
        st.metric("Polluted Water", summary["polluted_water"])
    with col4:
        st.metric("Average HMPI", f"{summary['average_hmpi']:.1f}")

    st.markdown("---")

    if not run.scored:
        st.info("No samples match the current filters.")
        return

    df = samples_to_dataframe(run.scored)

    col1, col2 = st.columns([2, 1])

    with col1:
        st.subheader("HMPI Distribution")
        fig = px.bar(
            df,
            x="location",
            y="hmpi_value",
            color="category",
            color_discrete_map=CATEGORY_COLORS,
        )
        fig.add_hline(y=SAFE_THRESHOLD, line_dash="dash", line_color=CATEGORY_COLORS["Safe"])
        fig.add_hline(y=MODERATE_THRESHOLD, line_dash="dash", line_color=CATEGORY_COLORS["High"])
        fig.update_layout(xaxis_title="", yaxis_title="HMPI", height=400)
        st.plotly_chart(fig, use_container_width=True)

    with col2:
        st.subheader("Category Split")
        dist = summary["category_distribution"]
        fig = px.pie(
            names=list(dist.keys()),
            values=list(dist.values()),
            color=list(dist.keys()),
            color_discrete_map=CATEGORY_COLORS,
        )
        fig.update_layout(height=400)
        st.plotly_chart(fig, use_container_width=True)

    st.subheader("Sampling Sites")
    map_df = df.rename(columns={"lng": "lon"})
    map_df["color"] = map_df["category"].map(CATEGORY_COLORS)
    st.map(map_df, latitude="lat", longitude="lon", color="color")


def render_samples_tab(run: ScoringRun) -> None:
    """Render the sample table."""
    df = samples_to_dataframe(run.scored)
    if df.empty:
        st.info("No samples match the current filters.")
        return

    for metal in METALS:
        df[metal] = df[metal].map(format_concentration)
    df = df.rename(columns={metal: METAL_NAMES[metal] for metal in METALS})
    df["risk_percentage"] = df["risk_percentage"].map(lambda v: f"{v:.0f}%")

    st.dataframe(df, use_container_width=True, hide_index=True)


def render_breakdown_tab(run: ScoringRun, standards: dict[str, float]) -> None:
    """Render per-metal contributions for a selected sample."""
    if not run.scored:
        st.info("No samples match the current filters.")
        return

    options = {f"{s.location} (HMPI: {s.hmpi_value})": s for s in run.scored}
    sample = options[st.selectbox("Select Sample", options=list(options.keys()))]

    contributions = metal_breakdown(sample.metals, standards=standards)
    breakdown_df = pd.DataFrame([
        {
            "Metal": c.name,
            "Concentration": format_concentration(c.concentration),
            "Standard": format_concentration(c.standard),
            "Weight": f"{c.weight * 100:.0f}%",
            "Quality Rating": round(c.quality_rating, 1),
            "Contribution": round(c.weighted_rating, 2),
        }
        for c in contributions
    ])

    col1, col2 = st.columns([2, 1])

    with col1:
        fig = px.bar(breakdown_df, x="Metal", y="Contribution")
        fig.update_layout(height=350)
        st.plotly_chart(fig, use_container_width=True)
        st.dataframe(breakdown_df, use_container_width=True, hide_index=True)

    with col2:
        fig = go.Figure(go.Indicator(
            mode="gauge+number",
            value=risk_percentage(sample.hmpi_value),
            number={"suffix": "%"},
            gauge={
                "axis": {"range": [0, 100]},
                "bar": {"color": category_color(sample.category)},
                "steps": [
                    {"range": [0, SAFE_THRESHOLD / RISK_DISPLAY_MAX * 100], "color": "#dcfce7"},
                    {
                        "range": [
                            SAFE_THRESHOLD / RISK_DISPLAY_MAX * 100,
                            MODERATE_THRESHOLD / RISK_DISPLAY_MAX * 100,
                        ],
                        "color": "#fef3c7",
                    },
                    {"range": [MODERATE_THRESHOLD / RISK_DISPLAY_MAX * 100, 100], "color": "#fee2e2"},
                ],
            },
            title={"text": f"Risk Level - {sample.category.value}"},
        ))
        fig.update_layout(height=300)
        st.plotly_chart(fig, use_container_width=True)
        st.info(category_recommendation(sample.category))

    with st.expander("Text Report"):
        st.code(format_sample_summary(sample, standards=standards), language=None)


def render_alerts_tab(run: ScoringRun) -> None:
    """Render pollution alerts."""
    alerts = generate_alerts(run.scored)
    if not alerts:
        st.success("No pollution alerts.")
        return

    for alert in alerts:
        text = f"**{alert.location}** - {alert.message} (HMPI {alert.hmpi_value:.2f})"
        if alert.severity == "high":
            st.error(text)
        else:
            st.warning(text)


def render_calculator_tab(standards: dict[str, float]) -> None:
    """Score a manually entered sample (simulated upload)."""
    st.subheader("Score a Sample")

    cols = st.columns(len(METALS))
    panel = {}
    for col, metal in zip(cols, METALS):
        with col:
            panel[metal] = st.number_input(
                f"{METAL_NAMES[metal]} (mg/L)",
                min_value=0.0,
                value=0.0,
                step=0.001,
                format="%.3f",
            )

    try:
        index = compute_index(panel, standards=standards)
    except ScoringError as e:
        st.error(f"Sample rejected: {e}")
        return

    category = categorize(index)
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("HMPI", f"{index:.2f}")
    with col2:
        st.metric("Category", category.value)
    with col3:
        st.metric("Risk Level", f"{risk_percentage(index):.0f}%")
    st.progress(risk_percentage(index) / 100)


def main():
    """Main dashboard entry point."""
    st.title("HMPI Water Quality Dashboard")
    st.markdown("Heavy Metal Pollution Index across monitored water sources")

    preset, categories = render_sidebar()
    standards = STANDARD_PRESETS[preset]

    run = score_samples(load_samples(), weights=HMPI_WEIGHTS, standards=standards)
    render_rejections(run)
    run.scored = [s for s in run.scored if s.category.value in categories]

    tab1, tab2, tab3, tab4, tab5 = st.tabs([
        "📊 Overview",
        "📋 Samples",
        "🧪 Metal Breakdown",
        "🚨 Alerts",
        "🧮 Calculator",
    ])

    with tab1:
        render_overview_tab(run)

    with tab2:
        render_samples_tab(run)

    with tab3:
        render_breakdown_tab(run, standards)

    with tab4:
        render_alerts_tab(run)

    with tab5:
        render_calculator_tab(standards)


if __name__ == "__main__":
    main()
