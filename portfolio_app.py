"""
Agent Portfolio Planner — Streamlit UI
Single page: preview the portfolio, quick wins and roadmap, then download
the workbook (.xlsx) or the Google Sheets batchUpdate body (.json).
"""

import sys
from pathlib import Path

import streamlit as st
import plotly.graph_objects as go

sys.path.insert(0, str(Path(__file__).resolve().parent))

from portfolio_config import COLORS, COMPLEXITY_RULES, IMPACT_RULES
from portfolio_defaults import agent_force_baseline
from portfolio_model import agents_frame, quick_wins, roadmap_frame, summarize
from build_excel_workbook import DEFAULT_FILENAME, workbook_bytes
from build_sheets_requests import payload_json

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
PURPLE = "#" + COLORS["purpleGrad"]
DARK = "#" + COLORS["darkGray"]
GREY = "#" + COLORS["gray700"]
WHITE = "#" + COLORS["white"]


def _hex(key: str) -> str:
    return "#" + COLORS[key]


# ---------------------------------------------------------------------------
# Page config & CSS
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Agent Portfolio Planner",
    page_icon="\U0001f916",
    layout="wide",
    initial_sidebar_state="collapsed",
)

st.markdown(f"""
<style>
    .main .block-container {{ padding-top: 1.5rem; max-width: 1200px; }}
    [data-testid="collapsedControl"] {{ display: none; }}

    .ap-header {{
        background: {PURPLE}; color: white;
        padding: 1.6rem 2rem; border-radius: 8px; margin-bottom: 1.2rem;
    }}
    .ap-header h1 {{ margin: 0; font-size: 1.5rem; font-weight: 600; }}
    .ap-header p {{ margin: 0.3rem 0 0 0; font-size: 0.82rem; opacity: 0.8; white-space: pre-line; }}

    .kpi-row {{ display: flex; gap: 1rem; margin-bottom: 1.5rem; }}
    .kpi-card {{
        flex: 1; background: {WHITE}; border: 1px solid #E0E4E8;
        border-radius: 8px; padding: 1.1rem 1.4rem;
    }}
    .kpi-card .kpi-label {{
        font-size: 0.7rem; font-weight: 500; color: {GREY};
        text-transform: uppercase; letter-spacing: 0.05em; margin-bottom: 0.3rem;
    }}
    .kpi-card .kpi-value {{ font-size: 1.5rem; font-weight: 700; color: {DARK}; }}
    .kpi-card .kpi-sub {{ font-size: 0.75rem; color: {GREY}; margin-top: 0.15rem; }}

    .phase {{
        color: white; padding: 0.7rem 1rem; border-radius: 6px;
        margin-bottom: 0.6rem; white-space: pre-line; font-weight: 600;
    }}
</style>
""", unsafe_allow_html=True)

cfg = agent_force_baseline()
summary = summarize(cfg)
frame = agents_frame(cfg)


def _render_header():
    title = cfg.title.replace("\n", " ")
    st.markdown(f"""
    <div class="ap-header">
        <h1>{title}</h1>
        <p>{cfg.subtitle}</p>
    </div>
    """, unsafe_allow_html=True)


def _bar(x, y, colors, y_title):
    fig = go.Figure(go.Bar(x=x, y=y, marker_color=colors))
    fig.update_layout(
        height=340,
        margin=dict(l=20, r=20, t=30, b=20),
        plot_bgcolor=WHITE, paper_bgcolor=WHITE,
        font=dict(size=12, color=DARK),
        xaxis=dict(title=""),
        yaxis=dict(gridcolor="#E8EAED", title=y_title, dtick=1),
    )
    return fig


_render_header()

st.markdown(f"""
<div class="kpi-row">
    <div class="kpi-card">
        <div class="kpi-label">Candidate agents</div>
        <div class="kpi-value">{summary.total_agents}</div>
        <div class="kpi-sub">Across {len(cfg.categories)} categories</div>
    </div>
    <div class="kpi-card">
        <div class="kpi-label">Quick wins</div>
        <div class="kpi-value">{summary.quick_wins}</div>
        <div class="kpi-sub">High impact, fast to build</div>
    </div>
    <div class="kpi-card">
        <div class="kpi-label">Quick-win time saved</div>
        <div class="kpi-value">{cfg.quick_win_hours}</div>
        <div class="kpi-sub">of {cfg.total_hours} possible</div>
    </div>
</div>
""", unsafe_allow_html=True)

tab_portfolio, tab_quick, tab_roadmap, tab_charts = st.tabs([
    "Agent Portfolio", "Quick Wins", "Build Roadmap", "Charts",
])

with tab_portfolio:
    st.caption(cfg.instructions)
    for cat in cfg.categories:
        st.markdown(f"#### {cat.label}")
        st.dataframe(
            frame[frame["Category"] == cat.label].drop(columns=["Category", "Priority"]),
            use_container_width=True, hide_index=True,
        )

with tab_quick:
    qw = quick_wins(cfg)
    if not qw:
        st.info("No agents are flagged as quick wins.")
    else:
        st.dataframe(
            frame[frame["Quick Win?"]].drop(columns=["Priority", "Quick Win?"]),
            use_container_width=True, hide_index=True,
        )

with tab_roadmap:
    for i, phase in enumerate(cfg.roadmap_phases):
        st.markdown(
            f'<div class="phase" style="background:#{phase.color}">{phase.label}</div>',
            unsafe_allow_html=True,
        )
        if i == 0:
            st.dataframe(roadmap_frame(cfg), use_container_width=True, hide_index=True)
    st.caption(f"The workbook's top {cfg.top_picks} picks fill in from the Priority ratings once it is opened.")

with tab_charts:
    st.markdown("#### Agents per category")
    cat_colors = ["#" + c.color for c in cfg.categories]
    st.plotly_chart(
        _bar(list(summary.by_category), list(summary.by_category.values()), cat_colors, "Agents"),
        use_container_width=True,
    )

    c1, c2 = st.columns(2)
    with c1:
        st.markdown("#### Build complexity")
        fills = {text: _hex(fill) for text, fill, _, _ in COMPLEXITY_RULES}
        st.plotly_chart(
            _bar(list(summary.by_complexity), list(summary.by_complexity.values()),
                 [fills.get(k, GREY) for k in summary.by_complexity], "Agents"),
            use_container_width=True,
        )
    with c2:
        st.markdown("#### Business impact")
        fills = {text: _hex(fill) for text, fill, _, _ in IMPACT_RULES}
        st.plotly_chart(
            _bar(list(summary.by_impact), list(summary.by_impact.values()),
                 [fills.get(k, GREY) for k in summary.by_impact], "Agents"),
            use_container_width=True,
        )

# ── Downloads ──
st.divider()
dc1, dc2 = st.columns(2)
with dc1:
    st.download_button(
        "Download workbook (.xlsx)",
        data=workbook_bytes(cfg),
        file_name=DEFAULT_FILENAME,
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        use_container_width=True,
    )
with dc2:
    st.download_button(
        "Download Google Sheets requests (.json)",
        data=payload_json(cfg).encode("utf-8"),
        file_name="agent_portfolio_requests.json",
        mime="application/json",
        use_container_width=True,
    )
