from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

# ── Sheet names ──────────────────────────────────────────────────────────
SHEET_MAIN = "Agent Portfolio"
SHEET_QUICK = "Quick Wins"
SHEET_ROADMAP = "Build Roadmap"

# ── Palette (hex, no leading #) ──────────────────────────────────────────
COLORS = {
    "purpleGrad": "8B5CF6",
    "lightPurple": "F3E8FF",
    "lightBlue": "DBEAFE",
    "darkGray": "374151",
    "white": "FFFFFF",
    "purple": "A78BFA",
    "blue": "60A5FA",
    "green": "34D399",
    "orange": "FB923C",
    "cyan": "22D3EE",
    "pink": "F472B6",
    "yellow": "FBBF24",
    "red": "EF4444",
    "indigo": "6366F1",
    "lightGray": "E5E7EB",
    "black": "000000",
    "amber": "F59E0B",
    "gray700": "6B7280",
    "blue500": "3B82F6",
    "green500": "10B981",
    "red600": "DC2626",
}

FONT_FAMILY = "Arial"

# ── Column tables ────────────────────────────────────────────────────────
HEADERS = [
    "Priority", "Area", "Agent Name", "What It Does", "Time Saved/Week",
    "Business Impact", "Build Complexity", "Status", "Your Notes", "Quick Win?",
]
ROADMAP_HEADERS = [
    "Phase", "Agent Name", "Priority Score", "Time Saved", "Build Time",
    "Dependencies", "Start Date", "Launch Date", "Owner",
]

# xlsx widths are in character units, Sheets widths in pixels
COLUMN_WIDTHS = [10, 20, 25, 45, 15, 15, 15, 13, 32, 10]
COLUMN_WIDTHS_PX = [80, 150, 200, 350, 120, 120, 120, 100, 250, 80]
ROADMAP_WIDTHS = [15, 38, 18, 15, 15, 28, 15, 15, 20]
ROADMAP_WIDTHS_PX = [120, 300, 140, 120, 120, 220, 120, 120, 160]
DASHBOARD_WIDTHS = {"L": 18, "M": 25, "N": 15}

# 1-based column numbers
CENTERED_COLUMNS = (1, 5, 6, 7, 8, 10)
WRAPPED_COLUMNS = (4, 9)
LEFT_COLUMNS = (2, 3, 4, 9)

COL_PRIORITY = 1
COL_NAME = 3
COL_IMPACT = 6
COL_COMPLEXITY = 7
COL_STATUS = 8
COL_QUICK_WIN = 10

# ── Dropdown options ─────────────────────────────────────────────────────
PRIORITY_OPTIONS = ["5 - Critical", "4 - High", "3 - Medium", "2 - Low", "1 - Not Now"]
IMPACT_OPTIONS = ["HIGH", "MEDIUM", "LOW"]
COMPLEXITY_OPTIONS = ["Low", "Medium", "High"]
STATUS_OPTIONS = ["Not Started", "Planning", "In Progress", "Complete"]

# ── Conditional format tables: (match text, fill, font colour, bold) ─────
PRIORITY_RULES = [
    ("5", "red600", "white", True),
    ("4", "amber", "white", True),
    ("3", "blue500", "white", False),
    ("2", "green500", "white", False),
    ("1", "gray700", "white", False),
]
IMPACT_RULES = [
    ("HIGH", "green500", "white", True),
    ("MEDIUM", "amber", "black", False),
    ("LOW", "gray700", "white", False),
]
COMPLEXITY_RULES = [
    ("Low", "green500", "white", False),
    ("Medium", "amber", "black", False),
    ("High", "red", "white", False),
]
STATUS_RULES = [
    ("Complete", "green500", "white", True),
    ("In Progress", "blue500", "white", True),
    ("Planning", "amber", "black", False),
    ("Not Started", "lightGray", "black", False),
]


@dataclass(frozen=True)
class AgentIdea:
    """One candidate agent, written once as a row of the portfolio table."""

    area: str
    name: str
    description: str
    time_saved: str
    impact: str
    complexity: str
    status: str = "Not Started"
    notes: str = ""
    quick_win: bool = False
    priority: str = ""

    def as_row(self) -> list:
        return [
            self.priority, self.area, self.name, self.description, self.time_saved,
            self.impact, self.complexity, self.status, self.notes, self.quick_win,
        ]


@dataclass
class Category:
    """A presentational group of agents with its header colour."""

    label: str
    color: str
    agents: List[AgentIdea] = field(default_factory=list)
    font_color: str = COLORS["white"]


@dataclass
class RoadmapPhase:
    row: int
    label: str
    color: str


@dataclass
class PortfolioConfig:
    """Everything the workbook renderers need."""

    title: str
    subtitle: str
    instructions: str
    quick_win_hours: str
    total_hours: str

    quick_wins_title: str = "⚡ QUICK WIN AGENTS\nHigh Impact + Fast to Build"
    roadmap_title: str = "\U0001f680 AGENT BUILD ROADMAP"
    dashboard_title: str = "\U0001f4ca SUMMARY DASHBOARD"

    sheet_main: str = SHEET_MAIN
    sheet_quick: str = SHEET_QUICK
    sheet_roadmap: str = SHEET_ROADMAP

    first_data_row: int = 7
    top_picks: int = 5

    categories: List[Category] = field(default_factory=list)
    roadmap_phases: List[RoadmapPhase] = field(default_factory=list)


@dataclass
class LayoutRow:
    """Planned placement of one row of the portfolio table."""

    row: int
    kind: str  # "category", "agent" or "spacer"
    category: Optional[Category] = None
    agent: Optional[AgentIdea] = None


@dataclass
class PortfolioLayout:
    rows: List[LayoutRow]
    first_data_row: int
    last_data_row: int

    def of_kind(self, kind: str) -> List[LayoutRow]:
        return [r for r in self.rows if r.kind == kind]


@dataclass
class PortfolioSummary:
    """Counts shown in the preview; no ranking is computed."""

    total_agents: int
    quick_wins: int
    by_complexity: Dict[str, int]
    by_impact: Dict[str, int]
    by_status: Dict[str, int]
    by_category: Dict[str, int]
