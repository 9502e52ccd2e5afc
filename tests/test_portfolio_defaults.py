import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from portfolio_config import COLORS, COMPLEXITY_OPTIONS, IMPACT_OPTIONS, STATUS_OPTIONS
from portfolio_defaults import agent_force_baseline
from portfolio_model import iter_agents


def test_categories_in_presentation_order():
    labels = [c.label.split(" ", 1)[1] for c in agent_force_baseline().categories]
    assert labels == [
        "STRATEGIC INTELLIGENCE",
        "INVESTOR RELATIONS",
        "RESEARCH OVERSIGHT",
        "TEAM MANAGEMENT",
        "BUSINESS DEVELOPMENT",
        "COMMUNICATIONS & ADMIN",
        "FINANCIAL OPERATIONS",
        "REGULATORY & COMPLIANCE",
        "PERSONAL PRODUCTIVITY",
    ]


def test_financial_header_uses_dark_text():
    cats = {c.label: c for c in agent_force_baseline().categories}
    fin = next(c for label, c in cats.items() if "FINANCIAL" in label)
    assert fin.color == COLORS["yellow"]
    assert fin.font_color == COLORS["black"]
    others = [c for c in cats.values() if c is not fin]
    assert all(c.font_color == COLORS["white"] for c in others)


def test_records_use_known_enumerations():
    for agent in iter_agents(agent_force_baseline()):
        assert agent.impact in IMPACT_OPTIONS
        assert agent.complexity in COMPLEXITY_OPTIONS
        assert agent.status in STATUS_OPTIONS
        assert agent.priority == ""
        assert agent.notes == ""


def test_time_saved_stays_free_text():
    agents = list(iter_agents(agent_force_baseline()))
    assert agents[0].time_saved == "3 hours"
    assert {a.time_saved for a in agents} <= {"1 hour", "2 hours", "3 hours", "4 hours", "5 hours"}


def test_as_row_matches_header_order():
    agent = next(iter_agents(agent_force_baseline()))
    row = agent.as_row()
    assert len(row) == 10
    assert row[1] == "Strategic Intelligence"
    assert row[2] == "Competitive Intelligence Agent"
    assert row[5:8] == ["HIGH", "Medium", "Not Started"]
    assert row[9] is True


def test_roadmap_phases():
    phases = agent_force_baseline().roadmap_phases
    assert [p.row for p in phases] == [4, 10, 16]
    assert phases[0].label.startswith("PHASE 1: FOUNDATIONS")
    assert [p.color for p in phases] == [COLORS["blue"], COLORS["cyan"], COLORS["green"]]


def test_headline_figures_are_static_text():
    cfg = agent_force_baseline()
    assert cfg.quick_win_hours == "25 hrs/week"
    assert cfg.total_hours == "67 hrs/week"
    assert "67 hours/week" in cfg.subtitle
