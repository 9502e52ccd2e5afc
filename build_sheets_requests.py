"""
Build the Agent Portfolio as a Google Sheets API v4 batchUpdate body.
Run this script to generate sheets/agent_portfolio_requests.json, then POST it to
spreadsheets/{spreadsheetId}:batchUpdate (or pass it to any Sheets client).

Same three sheets and data as the .xlsx workbook, but using the host's own
features: checkboxes on Quick Win?, a live FILTER on the Quick Wins sheet and
SORT/FILTER top picks on the roadmap.

Grid ranges are zero-based and end-exclusive; helpers below take 1-based,
inclusive rows and columns like the A1 notation used everywhere else.
"""

import argparse
import json
import logging
import os
import sys

from portfolio_config import (
    CENTERED_COLUMNS,
    COL_COMPLEXITY,
    COL_IMPACT,
    COL_NAME,
    COL_PRIORITY,
    COL_QUICK_WIN,
    COL_STATUS,
    COLORS,
    COLUMN_WIDTHS_PX,
    COMPLEXITY_OPTIONS,
    COMPLEXITY_RULES,
    FONT_FAMILY,
    HEADERS,
    IMPACT_OPTIONS,
    IMPACT_RULES,
    PRIORITY_OPTIONS,
    PRIORITY_RULES,
    ROADMAP_HEADERS,
    ROADMAP_WIDTHS_PX,
    STATUS_OPTIONS,
    STATUS_RULES,
    WRAPPED_COLUMNS,
    PortfolioConfig,
    PortfolioLayout,
)
from portfolio_defaults import agent_force_baseline
from portfolio_model import column_range, plan_layout

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "./sheets/agent_portfolio_requests.json"

SHEET_ID_MAIN = 1001
SHEET_ID_QUICK = 1002
SHEET_ID_ROADMAP = 1003

QUICK_WIN_FORMAT_ROWS = 1000
ROADMAP_FORMAT_ROWS = 30
DASHBOARD_ROWS = 20
N_COLS = len(HEADERS)
N_ROADMAP_COLS = len(ROADMAP_HEADERS)


# ---------------------------------------------------------------------------
# Low-level request builders
# ---------------------------------------------------------------------------

def _rgb(key_or_hex):
    h = COLORS.get(key_or_hex, key_or_hex).lstrip("#")
    return {
        "red": int(h[0:2], 16) / 255,
        "green": int(h[2:4], 16) / 255,
        "blue": int(h[4:6], 16) / 255,
    }


def grid(sheet_id, row, col, end_row=None, end_col=None):
    end_row = row if end_row is None else end_row
    end_col = col if end_col is None else end_col
    return {
        "sheetId": sheet_id,
        "startRowIndex": row - 1,
        "endRowIndex": end_row,
        "startColumnIndex": col - 1,
        "endColumnIndex": end_col,
    }


def open_column(sheet_id, row, col):
    """Column from `row` to the bottom of the sheet (A4:A)."""
    return {
        "sheetId": sheet_id,
        "startRowIndex": row - 1,
        "startColumnIndex": col - 1,
        "endColumnIndex": col,
    }


def _cell_value(value):
    if isinstance(value, bool):
        return {"boolValue": value}
    if isinstance(value, (int, float)):
        return {"numberValue": value}
    if isinstance(value, str) and value.startswith("="):
        return {"formulaValue": value}
    return {"stringValue": "" if value is None else str(value)}


def write_rows(sheet_id, row, col, rows):
    return {
        "updateCells": {
            "start": {"sheetId": sheet_id, "rowIndex": row - 1, "columnIndex": col - 1},
            "rows": [
                {"values": [{"userEnteredValue": _cell_value(v)} for v in values]}
                for values in rows
            ],
            "fields": "userEnteredValue",
        }
    }


def write_cell(sheet_id, row, col, value):
    return write_rows(sheet_id, row, col, [[value]])


def cell_format(bg=None, fg=None, size=None, bold=None, italic=None, family=None,
                h_align=None, v_align=None, wrap=None):
    fmt = {}
    text = {}
    if bg is not None:
        fmt["backgroundColor"] = _rgb(bg)
    if fg is not None:
        text["foregroundColor"] = _rgb(fg)
    if size is not None:
        text["fontSize"] = size
    if bold is not None:
        text["bold"] = bold
    if italic is not None:
        text["italic"] = italic
    if family is not None:
        text["fontFamily"] = family
    if text:
        fmt["textFormat"] = text
    if h_align is not None:
        fmt["horizontalAlignment"] = h_align
    if v_align is not None:
        fmt["verticalAlignment"] = v_align
    if wrap is not None:
        fmt["wrapStrategy"] = "WRAP" if wrap else "OVERFLOW_CELL"
    return fmt


def _fields_mask(fmt):
    paths = []
    for key, val in fmt.items():
        if key == "textFormat":
            paths.extend(f"userEnteredFormat.textFormat.{k}" for k in val)
        else:
            paths.append(f"userEnteredFormat.{key}")
    return ",".join(paths)


def repeat_format(grid_range, fmt):
    return {
        "repeatCell": {
            "range": grid_range,
            "cell": {"userEnteredFormat": fmt},
            "fields": _fields_mask(fmt),
        }
    }


def merge(grid_range):
    return {"mergeCells": {"range": grid_range, "mergeType": "MERGE_ALL"}}


def _dimension(sheet_id, dimension, index, pixels):
    return {
        "updateDimensionProperties": {
            "range": {
                "sheetId": sheet_id,
                "dimension": dimension,
                "startIndex": index - 1,
                "endIndex": index,
            },
            "properties": {"pixelSize": pixels},
            "fields": "pixelSize",
        }
    }


def column_widths(sheet_id, widths):
    return [_dimension(sheet_id, "COLUMNS", i, w) for i, w in enumerate(widths, 1)]


def row_height(sheet_id, row, pixels):
    return _dimension(sheet_id, "ROWS", row, pixels)


def list_validation(grid_range, options):
    return {
        "setDataValidation": {
            "range": grid_range,
            "rule": {
                "condition": {
                    "type": "ONE_OF_LIST",
                    "values": [{"userEnteredValue": o} for o in options],
                },
                "showCustomUi": True,
                "strict": False,
            },
        }
    }


def checkbox_validation(grid_range):
    return {
        "setDataValidation": {
            "range": grid_range,
            "rule": {"condition": {"type": "BOOLEAN"}},
        }
    }


def conditional_rules(grid_range, rules, start_index, contains=False):
    """One addConditionalFormatRule per entry, indexed in insertion order."""
    requests = []
    for offset, (text, fill, color, bold) in enumerate(rules):
        fmt = {"backgroundColor": _rgb(fill), "textFormat": {"foregroundColor": _rgb(color)}}
        if bold:
            fmt["textFormat"]["bold"] = True
        requests.append({
            "addConditionalFormatRule": {
                "rule": {
                    "ranges": [grid_range],
                    "booleanRule": {
                        "condition": {
                            "type": "TEXT_CONTAINS" if contains else "TEXT_EQ",
                            "values": [{"userEnteredValue": text}],
                        },
                        "format": fmt,
                    },
                },
                "index": start_index + offset,
            }
        })
    return requests


def _banner(sheet_id, row, n_cols, value, fmt):
    rng = grid(sheet_id, row, 1, row, n_cols)
    return [merge(rng), write_cell(sheet_id, row, 1, value), repeat_format(rng, fmt)]


# ---------------------------------------------------------------------------
# Sheets
# ---------------------------------------------------------------------------

def add_sheets(cfg: PortfolioConfig):
    specs = [
        (SHEET_ID_MAIN, cfg.sheet_main, 6),
        (SHEET_ID_QUICK, cfg.sheet_quick, 3),
        (SHEET_ID_ROADMAP, cfg.sheet_roadmap, 3),
    ]
    return [
        {
            "addSheet": {
                "properties": {
                    "sheetId": sid,
                    "title": title,
                    "index": i,
                    "gridProperties": {"frozenRowCount": frozen},
                }
            }
        }
        for i, (sid, title, frozen) in enumerate(specs)
    ]


def portfolio_requests(cfg: PortfolioConfig, layout: PortfolioLayout):
    sid = SHEET_ID_MAIN
    first, last = layout.first_data_row, layout.last_data_row
    reqs = []

    # ── Banners (rows 1-5) ──
    reqs += _banner(sid, 1, N_COLS, cfg.title, cell_format(
        bg="purpleGrad", fg="white", size=24, bold=True, family=FONT_FAMILY,
        h_align="CENTER", v_align="MIDDLE", wrap=True))
    reqs.append(row_height(sid, 1, 72))
    reqs += _banner(sid, 2, N_COLS, cfg.subtitle, cell_format(
        bg="lightPurple", size=14, family=FONT_FAMILY,
        h_align="CENTER", v_align="MIDDLE", wrap=True))
    reqs.append(row_height(sid, 2, 60))
    reqs += _banner(sid, 4, N_COLS, cfg.instructions, cell_format(
        bg="lightBlue", size=12, italic=True, family=FONT_FAMILY,
        h_align="CENTER", v_align="MIDDLE", wrap=True))

    # ── Headers (row 6) ──
    reqs.append(write_rows(sid, 6, 1, [HEADERS]))
    reqs.append(repeat_format(grid(sid, 6, 1, 6, N_COLS), cell_format(
        bg="darkGray", fg="white", size=11, bold=True, family=FONT_FAMILY,
        h_align="CENTER", v_align="MIDDLE")))
    reqs += column_widths(sid, COLUMN_WIDTHS_PX)

    # ── Table body ──
    reqs.append(repeat_format(grid(sid, first, 1, last, N_COLS),
                              cell_format(size=10, family=FONT_FAMILY)))

    for cat in layout.of_kind("category"):
        rng = grid(sid, cat.row, 1, cat.row, N_COLS)
        reqs.append(merge(rng))
        reqs.append(write_cell(sid, cat.row, 1, cat.category.label))
        reqs.append(repeat_format(rng, cell_format(
            bg=cat.category.color, fg=cat.category.font_color, size=12, bold=True,
            h_align="LEFT", v_align="MIDDLE")))

    agent_rows = layout.of_kind("agent")
    reqs += [write_rows(sid, lr.row, 1, [lr.agent.as_row()]) for lr in agent_rows]
    for start, end in _contiguous([lr.row for lr in agent_rows]):
        for col in WRAPPED_COLUMNS:
            reqs.append(repeat_format(grid(sid, start, col, end, col),
                                      cell_format(h_align="LEFT", wrap=True)))
        for col in CENTERED_COLUMNS:
            reqs.append(repeat_format(grid(sid, start, col, end, col),
                                      cell_format(h_align="CENTER")))
        for col in (2, 3):
            reqs.append(repeat_format(grid(sid, start, col, end, col),
                                      cell_format(h_align="LEFT")))

    # ── Dropdowns and checkbox ──
    reqs.append(list_validation(grid(sid, first, COL_PRIORITY, last, COL_PRIORITY), PRIORITY_OPTIONS))
    reqs.append(list_validation(grid(sid, first, COL_IMPACT, last, COL_IMPACT), IMPACT_OPTIONS))
    reqs.append(list_validation(grid(sid, first, COL_COMPLEXITY, last, COL_COMPLEXITY), COMPLEXITY_OPTIONS))
    reqs.append(list_validation(grid(sid, first, COL_STATUS, last, COL_STATUS), STATUS_OPTIONS))
    reqs.append(checkbox_validation(grid(sid, first, COL_QUICK_WIN, last, COL_QUICK_WIN)))

    # ── Conditional formatting ──
    idx = 0
    for col, rules, contains in (
        (COL_PRIORITY, PRIORITY_RULES, True),
        (COL_IMPACT, IMPACT_RULES, False),
        (COL_COMPLEXITY, COMPLEXITY_RULES, False),
        (COL_STATUS, STATUS_RULES, False),
    ):
        reqs += conditional_rules(grid(sid, first, col, last, col), rules, idx, contains=contains)
        idx += len(rules)

    reqs += dashboard_requests(cfg, layout)
    return reqs


def dashboard_requests(cfg: PortfolioConfig, layout: PortfolioLayout):
    sid = SHEET_ID_MAIN
    first, last = layout.first_data_row, layout.last_data_row
    names = column_range(COL_NAME, first, last)
    prio = column_range(COL_PRIORITY, first, last)
    cplx = column_range(COL_COMPLEXITY, first, last)
    L, M = 12, 13

    reqs = [repeat_format(grid(sid, 1, L, DASHBOARD_ROWS, L + 2), cell_format(family=FONT_FAMILY))]
    rng = grid(sid, 1, L, 1, L + 2)
    reqs += [
        merge(rng),
        write_cell(sid, 1, L, cfg.dashboard_title),
        repeat_format(rng, cell_format(bg="darkGray", fg="white", size=14, bold=True, h_align="CENTER")),
    ]

    entries = [
        (3, "Total Agents:", f"=COUNTA({names})"),
        (5, "Rated by You:", f"=COUNTA({prio})"),
        (6, "Avg Priority:", f"=AVERAGE({prio})"),
        (8, "TIME SAVINGS:", None),
        (9, "Quick Wins:", cfg.quick_win_hours),
        (10, "Total Possible:", cfg.total_hours),
        (12, "COMPLEXITY:", None),
        (13, "Low:", f'=COUNTIF({cplx},"Low")'),
        (14, "Medium:", f'=COUNTIF({cplx},"Medium")'),
        (15, "High:", f'=COUNTIF({cplx},"High")'),
        (17, "TOP 5 PRIORITIES:", None),
        (18, "1.", f"=INDEX({names}, MATCH(MAX({prio}), {prio}, 0))"),
        (19, "2.", f"=INDEX({names}, MATCH(LARGE({prio},2), {prio}, 0))"),
        (20, "3.", f"=INDEX({names}, MATCH(LARGE({prio},3), {prio}, 0))"),
    ]
    for row, label, value in entries:
        if value is None:
            reqs.append(write_cell(sid, row, L, label))
            reqs.append(repeat_format(grid(sid, row, L), cell_format(bold=True)))
        else:
            reqs.append(write_rows(sid, row, L, [[label, value]]))
    return reqs


def quick_wins_requests(cfg: PortfolioConfig, layout: PortfolioLayout):
    sid = SHEET_ID_QUICK
    first, last = layout.first_data_row, layout.last_data_row
    reqs = _banner(sid, 1, N_COLS, cfg.quick_wins_title, cell_format(
        bg="amber", fg="white", size=24, bold=True,
        h_align="CENTER", v_align="MIDDLE", wrap=True))
    reqs.append(row_height(sid, 1, 72))

    reqs.append(write_rows(sid, 3, 1, [HEADERS]))
    reqs.append(repeat_format(grid(sid, 3, 1, 3, N_COLS), cell_format(
        bg="darkGray", fg="white", size=11, bold=True, h_align="CENTER")))
    reqs += column_widths(sid, COLUMN_WIDTHS_PX)

    table = f"'{cfg.sheet_main}'!A{first}:J{last}"
    flags = column_range(COL_QUICK_WIN, first, last, sheet=cfg.sheet_main)
    reqs.append(write_cell(sid, 4, 1, f"=FILTER({table}, {flags}=TRUE)"))

    reqs += conditional_rules(open_column(sid, 4, COL_PRIORITY), PRIORITY_RULES, 0, contains=True)
    reqs += conditional_rules(open_column(sid, 4, COL_STATUS), STATUS_RULES, len(PRIORITY_RULES))

    reqs.append(repeat_format(grid(sid, 4, 1, QUICK_WIN_FORMAT_ROWS, N_COLS),
                              cell_format(size=10, family=FONT_FAMILY)))
    return reqs


def roadmap_requests(cfg: PortfolioConfig, layout: PortfolioLayout):
    sid = SHEET_ID_ROADMAP
    first, last = layout.first_data_row, layout.last_data_row
    reqs = _banner(sid, 1, N_ROADMAP_COLS, cfg.roadmap_title, cell_format(
        bg="purpleGrad", fg="white", size=24, bold=True, h_align="CENTER"))

    reqs.append(repeat_format(grid(sid, 3, 1, ROADMAP_FORMAT_ROWS, N_ROADMAP_COLS),
                              cell_format(size=10, family=FONT_FAMILY)))
    reqs.append(write_rows(sid, 3, 1, [ROADMAP_HEADERS]))
    reqs.append(repeat_format(grid(sid, 3, 1, 3, N_ROADMAP_COLS),
                              cell_format(bg="darkGray", fg="white", bold=True)))

    for phase in cfg.roadmap_phases:
        reqs += _banner(sid, phase.row, N_ROADMAP_COLS, phase.label,
                        cell_format(bg=phase.color, fg="white", bold=True, wrap=True))

    names = column_range(COL_NAME, first, last, sheet=cfg.sheet_main)
    prio = column_range(COL_PRIORITY, first, last, sheet=cfg.sheet_main)
    rated = f'FILTER({names}, {prio}<>""), FILTER({prio}, {prio}<>"")'
    for k in range(1, cfg.top_picks + 1):
        reqs.append(write_cell(sid, 4 + k, 2, f"=INDEX(SORT({rated}, FALSE), {k})"))

    reqs += column_widths(sid, ROADMAP_WIDTHS_PX)
    return reqs


def _contiguous(rows):
    """Collapse sorted row numbers into inclusive (start, end) runs."""
    runs = []
    for r in rows:
        if runs and r == runs[-1][1] + 1:
            runs[-1][1] = r
        else:
            runs.append([r, r])
    return [tuple(run) for run in runs]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_requests(cfg: PortfolioConfig = None, replace_sheet_ids=()):
    """All batchUpdate requests in execution order.

    `replace_sheet_ids` are existing sheets to delete first so the three
    sheets are recreated cleanly; the spreadsheet must keep one other sheet.
    """
    cfg = cfg or agent_force_baseline()
    layout = plan_layout(cfg)

    reqs = [{"deleteSheet": {"sheetId": sid}} for sid in replace_sheet_ids]
    reqs += add_sheets(cfg)
    reqs += portfolio_requests(cfg, layout)
    reqs += quick_wins_requests(cfg, layout)
    reqs += roadmap_requests(cfg, layout)
    logger.debug("Built %d batchUpdate requests", len(reqs))
    return reqs


def build_payload(cfg: PortfolioConfig = None, replace_sheet_ids=()):
    return {"requests": build_requests(cfg, replace_sheet_ids)}


def payload_json(cfg: PortfolioConfig = None, replace_sheet_ids=()) -> str:
    return json.dumps(build_payload(cfg, replace_sheet_ids), ensure_ascii=False, indent=2)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate the Agent Portfolio Sheets batchUpdate body")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="JSON file to write")
    parser.add_argument("--replace-sheet-id", type=int, action="append", default=[],
                        help="Existing sheet id to delete before recreating (repeatable)")
    parser.add_argument("--verbose", action="store_true", help="Log request counts")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("Building Sheets batchUpdate requests...")
    body = payload_json(replace_sheet_ids=args.replace_sheet_id)

    out_dir = os.path.dirname(args.output)
    try:
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(body)
    except OSError as e:
        print(f"Error: could not write {args.output}: {e}")
        return 1

    print(f"\nSaved to: {os.path.abspath(args.output)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
