"""
Build the standalone Agent Portfolio workbook (.xlsx).
Run this script to generate sheets/Agent_Portfolio.xlsx.

Three sheets: Agent Portfolio (table + summary dashboard), Quick Wins
(static copy of the flagged agents) and Build Roadmap (phase bands).
Aggregates are spreadsheet formulas, evaluated by Excel when the file opens.
"""

import argparse
import io
import logging
import os
import sys

from openpyxl import Workbook
from openpyxl.formatting.rule import CellIsRule, FormulaRule
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.datavalidation import DataValidation

from portfolio_config import (
    CENTERED_COLUMNS,
    COL_COMPLEXITY,
    COL_IMPACT,
    COL_NAME,
    COL_PRIORITY,
    COL_STATUS,
    COLORS,
    COLUMN_WIDTHS,
    COMPLEXITY_OPTIONS,
    COMPLEXITY_RULES,
    DASHBOARD_WIDTHS,
    FONT_FAMILY,
    HEADERS,
    IMPACT_OPTIONS,
    IMPACT_RULES,
    LEFT_COLUMNS,
    PRIORITY_OPTIONS,
    PRIORITY_RULES,
    ROADMAP_HEADERS,
    ROADMAP_WIDTHS,
    STATUS_OPTIONS,
    STATUS_RULES,
    WRAPPED_COLUMNS,
    PortfolioConfig,
    PortfolioLayout,
)
from portfolio_defaults import agent_force_baseline
from portfolio_model import column_range, plan_layout, quick_wins

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "./sheets"
DEFAULT_FILENAME = "Agent_Portfolio.xlsx"

# ── Styles ───────────────────────────────────────────────────────────────
def _fill(key_or_hex):
    color = COLORS.get(key_or_hex, key_or_hex)
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def _font(size=10, bold=False, italic=False, color=None):
    if color is not None:
        color = COLORS.get(color, color)
    return Font(name=FONT_FAMILY, size=size, bold=bold, italic=italic, color=color)


hdr_fill = _fill("darkGray")
hdr_font = _font(size=11, bold=True, color="white")
body_font = _font(size=10)
bold_font = _font(size=10, bold=True)

align_banner = Alignment(horizontal="center", vertical="center", wrap_text=True)
align_center = Alignment(horizontal="center", vertical="center")
align_wrap = Alignment(horizontal="left", vertical="top", wrap_text=True)
align_left = Alignment(horizontal="left", vertical="center")


def _banner(ws, ref, value, fill, font, height=None, alignment=align_banner):
    ws.merge_cells(ref)
    anchor = ws[ref.split(":")[0]]
    anchor.value = value
    anchor.font = font
    anchor.fill = fill
    anchor.alignment = alignment
    if height:
        ws.row_dimensions[anchor.row].height = height
    return anchor


def _header_row(ws, row, headers, font=hdr_font):
    for c, header in enumerate(headers, 1):
        cell = ws.cell(row=row, column=c, value=header)
        cell.font = font
        cell.fill = hdr_fill
        cell.alignment = align_center


def _set_widths(ws, widths):
    for c, width in enumerate(widths, 1):
        ws.column_dimensions[get_column_letter(c)].width = width


def _agent_row(ws, row, values):
    for c, value in enumerate(values, 1):
        cell = ws.cell(row=row, column=c, value=value)
        cell.font = body_font
        if c in WRAPPED_COLUMNS:
            cell.alignment = align_wrap
        elif c in CENTERED_COLUMNS:
            cell.alignment = align_center
        elif c in LEFT_COLUMNS:
            cell.alignment = align_left


def _list_validation(ws, options, ref):
    dv = DataValidation(type="list", formula1='"' + ",".join(options) + '"', allow_blank=True)
    ws.add_data_validation(dv)
    dv.add(ref)
    return dv


def _add_rules(ws, ref, rules, contains=False):
    """Attach colour rules to a single-column range; `contains` matches substrings."""
    top_left = ref.split(":")[0]
    for text, fill, color, bold in rules:
        font = Font(color=COLORS[color], bold=bold)
        if contains:
            rule = FormulaRule(
                formula=[f'NOT(ISERROR(SEARCH("{text}",{top_left})))'],
                fill=_fill(fill), font=font,
            )
        else:
            rule = CellIsRule(operator="equal", formula=[f'"{text}"'], fill=_fill(fill), font=font)
        ws.conditional_formatting.add(ref, rule)


# ═════════════════════════════════════════════════════════════════════════
# SHEET: AGENT PORTFOLIO
# Rows 1-5 = banners, Row 6 = headers, Rows 7+ = categories and agents
# Summary dashboard sits in L1:N20
# ═════════════════════════════════════════════════════════════════════════
def build_portfolio_sheet(wb, cfg: PortfolioConfig, layout: PortfolioLayout):
    ws = wb.create_sheet(cfg.sheet_main, 0)
    ws.sheet_properties.tabColor = COLORS["purpleGrad"]

    _banner(ws, "A1:J1", cfg.title, _fill("purpleGrad"),
            _font(size=24, bold=True, color="white"), height=72)
    _banner(ws, "A2:J2", cfg.subtitle, _fill("lightPurple"), _font(size=14), height=60)
    # Row 3 spacing
    _banner(ws, "A4:J4", cfg.instructions, _fill("lightBlue"), _font(size=12, italic=True))
    # Row 5 spacing

    _header_row(ws, 6, HEADERS)
    ws.freeze_panes = "A7"
    _set_widths(ws, COLUMN_WIDTHS)

    for lr in layout.rows:
        if lr.kind == "category":
            cat = lr.category
            _banner(ws, f"A{lr.row}:J{lr.row}", cat.label, _fill(cat.color),
                    _font(size=12, bold=True, color=cat.font_color), alignment=align_left)
        elif lr.kind == "agent":
            _agent_row(ws, lr.row, lr.agent.as_row())

    first, last = layout.first_data_row, layout.last_data_row

    # ── Dropdowns ──
    _list_validation(ws, PRIORITY_OPTIONS, column_range(COL_PRIORITY, first, last))
    _list_validation(ws, IMPACT_OPTIONS, column_range(COL_IMPACT, first, last))
    _list_validation(ws, COMPLEXITY_OPTIONS, column_range(COL_COMPLEXITY, first, last))
    _list_validation(ws, STATUS_OPTIONS, column_range(COL_STATUS, first, last))

    # ── Conditional formatting ──
    _add_rules(ws, column_range(COL_PRIORITY, first, last), PRIORITY_RULES, contains=True)
    _add_rules(ws, column_range(COL_IMPACT, first, last), IMPACT_RULES)
    _add_rules(ws, column_range(COL_COMPLEXITY, first, last), COMPLEXITY_RULES)
    _add_rules(ws, column_range(COL_STATUS, first, last), STATUS_RULES)

    build_dashboard(ws, cfg, layout)
    logger.debug("Portfolio sheet written, data rows %d-%d", first, last)
    return ws


def build_dashboard(ws, cfg: PortfolioConfig, layout: PortfolioLayout):
    first, last = layout.first_data_row, layout.last_data_row
    names = column_range(COL_NAME, first, last)
    prio = column_range(COL_PRIORITY, first, last)
    cplx = column_range(COL_COMPLEXITY, first, last)

    _banner(ws, "L1:N1", cfg.dashboard_title, hdr_fill,
            _font(size=14, bold=True, color="white"), alignment=align_center)

    cells = [
        ("L3", "Total Agents:", "M3", f"=COUNTA({names})"),
        ("L5", "Rated by You:", "M5", f"=COUNTA({prio})"),
        ("L6", "Avg Priority:", "M6", f"=AVERAGE({prio})"),
        ("L8", "TIME SAVINGS:", None, None),
        ("L9", "Quick Wins:", "M9", cfg.quick_win_hours),
        ("L10", "Total Possible:", "M10", cfg.total_hours),
        ("L12", "COMPLEXITY:", None, None),
        ("L13", "Low:", "M13", f'=COUNTIF({cplx},"Low")'),
        ("L14", "Medium:", "M14", f'=COUNTIF({cplx},"Medium")'),
        ("L15", "High:", "M15", f'=COUNTIF({cplx},"High")'),
        ("L17", "TOP 5 PRIORITIES:", None, None),
        ("L18", "1.", "M18", f'=IFERROR(INDEX({names}, MATCH(MAX({prio}), {prio}, 0)), "")'),
        ("L19", "2.", "M19", f'=IFERROR(INDEX({names}, MATCH(LARGE({prio},2), {prio}, 0)), "")'),
        ("L20", "3.", "M20", f'=IFERROR(INDEX({names}, MATCH(LARGE({prio},3), {prio}, 0)), "")'),
    ]
    for lref, label, vref, value in cells:
        ws[lref] = label
        ws[lref].font = body_font if vref else bold_font
        if vref:
            ws[vref] = value
            ws[vref].font = body_font

    for letter, width in DASHBOARD_WIDTHS.items():
        ws.column_dimensions[letter].width = width


# ═════════════════════════════════════════════════════════════════════════
# SHEET: QUICK WINS
# ═════════════════════════════════════════════════════════════════════════
def build_quick_wins_sheet(wb, cfg: PortfolioConfig):
    ws = wb.create_sheet(cfg.sheet_quick, 1)
    ws.sheet_properties.tabColor = COLORS["amber"]

    _banner(ws, "A1:J1", cfg.quick_wins_title, _fill("amber"),
            _font(size=24, bold=True, color="white"), height=72)
    _header_row(ws, 3, HEADERS)
    ws.freeze_panes = "A4"
    _set_widths(ws, COLUMN_WIDTHS)

    row = 4
    for agent in quick_wins(cfg):
        _agent_row(ws, row, agent.as_row())
        row += 1

    if row > 4:
        _add_rules(ws, column_range(COL_PRIORITY, 4, row - 1), PRIORITY_RULES, contains=True)
        _add_rules(ws, column_range(COL_STATUS, 4, row - 1), STATUS_RULES)

    logger.debug("Quick Wins sheet written with %d agents", row - 4)
    return ws


# ═════════════════════════════════════════════════════════════════════════
# SHEET: BUILD ROADMAP
# Row 3 = headers, phase bands merged across A:I, B5:B9 = top picks
# ═════════════════════════════════════════════════════════════════════════
def build_roadmap_sheet(wb, cfg: PortfolioConfig, layout: PortfolioLayout):
    ws = wb.create_sheet(cfg.sheet_roadmap, 2)
    ws.sheet_properties.tabColor = COLORS["purpleGrad"]

    _banner(ws, "A1:I1", cfg.roadmap_title, _fill("purpleGrad"),
            _font(size=24, bold=True, color="white"), alignment=align_center)
    _header_row(ws, 3, ROADMAP_HEADERS, font=_font(size=10, bold=True, color="white"))
    ws.freeze_panes = "A4"

    for phase in cfg.roadmap_phases:
        _banner(ws, f"A{phase.row}:I{phase.row}", phase.label, _fill(phase.color),
                _font(size=10, bold=True, color="white"),
                alignment=Alignment(vertical="center", wrap_text=True))

    first, last = layout.first_data_row, layout.last_data_row
    names = column_range(COL_NAME, first, last, sheet=cfg.sheet_main)
    prio = column_range(COL_PRIORITY, first, last, sheet=cfg.sheet_main)
    for k in range(1, cfg.top_picks + 1):
        cell = ws.cell(row=4 + k, column=2)
        cell.value = f'=IFERROR(INDEX({names}, MATCH(LARGE({prio},{k}), {prio}, 0)), "")'
        cell.font = body_font

    _set_widths(ws, ROADMAP_WIDTHS)
    return ws


# ═════════════════════════════════════════════════════════════════════════
# WORKBOOK
# ═════════════════════════════════════════════════════════════════════════
def build_workbook(cfg: PortfolioConfig = None) -> Workbook:
    cfg = cfg or agent_force_baseline()
    layout = plan_layout(cfg)

    wb = Workbook()
    wb.remove(wb.active)

    build_portfolio_sheet(wb, cfg, layout)
    build_quick_wins_sheet(wb, cfg)
    build_roadmap_sheet(wb, cfg, layout)
    wb.active = 0
    return wb


def workbook_bytes(cfg: PortfolioConfig = None) -> bytes:
    buf = io.BytesIO()
    build_workbook(cfg).save(buf)
    return buf.getvalue()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate the Agent Portfolio workbook (.xlsx)")
    parser.add_argument("--output-dir", default=DEFAULT_OUTPUT_DIR, help="Directory to write into")
    parser.add_argument("--filename", default=DEFAULT_FILENAME, help="Workbook file name")
    parser.add_argument("--verbose", action="store_true", help="Log layout details")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("Building Agent Portfolio workbook...")
    wb = build_workbook()

    out_path = os.path.join(args.output_dir, args.filename)
    try:
        os.makedirs(args.output_dir, exist_ok=True)
        wb.save(out_path)
    except OSError as e:
        print(f"Error: could not write {out_path}: {e}")
        return 1

    print(f"\nSaved to: {os.path.abspath(out_path)}")
    print("Open it and rate each agent in the Priority column.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
