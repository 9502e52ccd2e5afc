"""
Portfolio layout and summary helpers.
Plans where every record lands on the portfolio sheet so both renderers
(openpyxl workbook and Sheets API requests) write identical grids.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterator, List

import pandas as pd
from openpyxl.utils import get_column_letter

from portfolio_config import (
    COMPLEXITY_OPTIONS,
    HEADERS,
    IMPACT_OPTIONS,
    ROADMAP_HEADERS,
    STATUS_OPTIONS,
    AgentIdea,
    LayoutRow,
    PortfolioConfig,
    PortfolioLayout,
    PortfolioSummary,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def plan_layout(cfg: PortfolioConfig) -> PortfolioLayout:
    """Category header, its agents, then a spacer row between categories."""
    rows: List[LayoutRow] = []
    r = cfg.first_data_row
    last_agent_row = r - 1

    for ci, cat in enumerate(cfg.categories):
        if ci > 0:
            rows.append(LayoutRow(row=r, kind="spacer"))
            r += 1
        rows.append(LayoutRow(row=r, kind="category", category=cat))
        r += 1
        for agent in cat.agents:
            rows.append(LayoutRow(row=r, kind="agent", category=cat, agent=agent))
            last_agent_row = r
            r += 1

    last = max(last_agent_row, cfg.first_data_row)
    logger.debug("Planned %d rows, data range %d-%d", len(rows), cfg.first_data_row, last)
    return PortfolioLayout(rows=rows, first_data_row=cfg.first_data_row, last_data_row=last)


def column_range(col: int, first: int, last: int, sheet: str | None = None) -> str:
    letter = get_column_letter(col)
    ref = f"{letter}{first}:{letter}{last}"
    if sheet:
        return f"'{sheet}'!{ref}"
    return ref


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

def iter_agents(cfg: PortfolioConfig) -> Iterator[AgentIdea]:
    for cat in cfg.categories:
        yield from cat.agents


def quick_wins(cfg: PortfolioConfig) -> List[AgentIdea]:
    return [a for a in iter_agents(cfg) if a.quick_win]


def agents_frame(cfg: PortfolioConfig) -> pd.DataFrame:
    records = []
    for cat in cfg.categories:
        for agent in cat.agents:
            rec = {"Category": cat.label}
            rec.update(zip(HEADERS, agent.as_row()))
            records.append(rec)
    if not records:
        return pd.DataFrame(columns=["Category"] + HEADERS)
    return pd.DataFrame(records)


def roadmap_frame(cfg: PortfolioConfig) -> pd.DataFrame:
    """First roadmap phase seeded with the quick wins; scheduling columns stay blank."""
    if not cfg.roadmap_phases:
        return pd.DataFrame(columns=ROADMAP_HEADERS)
    phase = cfg.roadmap_phases[0].label.split(":")[0].title()
    records = [
        {
            "Phase": phase,
            "Agent Name": a.name,
            "Priority Score": a.priority,
            "Time Saved": a.time_saved,
        }
        for a in quick_wins(cfg)
    ]
    return pd.DataFrame(records, columns=ROADMAP_HEADERS).fillna("")


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

def _ordered_counts(values, options) -> dict:
    counts = Counter(values)
    out = {opt: counts.get(opt, 0) for opt in options}
    for k, v in counts.items():
        if k not in out:
            out[k] = v
    return out


def summarize(cfg: PortfolioConfig) -> PortfolioSummary:
    agents = list(iter_agents(cfg))
    return PortfolioSummary(
        total_agents=len(agents),
        quick_wins=sum(1 for a in agents if a.quick_win),
        by_complexity=_ordered_counts((a.complexity for a in agents), COMPLEXITY_OPTIONS),
        by_impact=_ordered_counts((a.impact for a in agents), IMPACT_OPTIONS),
        by_status=_ordered_counts((a.status for a in agents), STATUS_OPTIONS),
        by_category={cat.label: len(cat.agents) for cat in cfg.categories},
    )
