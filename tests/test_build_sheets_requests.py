import json
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from build_sheets_requests import (
    SHEET_ID_MAIN,
    SHEET_ID_QUICK,
    SHEET_ID_ROADMAP,
    _rgb,
    build_payload,
    build_requests,
    cell_format,
    grid,
    main,
    open_column,
    payload_json,
    repeat_format,
    write_rows,
)
from portfolio_config import (
    COMPLEXITY_RULES,
    HEADERS,
    IMPACT_RULES,
    PRIORITY_RULES,
    STATUS_RULES,
)


@pytest.fixture(scope="module")
def requests():
    return build_requests()


def _of_type(requests, kind):
    return [r[kind] for r in requests if kind in r]


def _written(requests, sheet_id):
    """Map (row, col) 1-based -> userEnteredValue for every updateCells request."""
    cells = {}
    for uc in _of_type(requests, "updateCells"):
        start = uc["start"]
        if start["sheetId"] != sheet_id:
            continue
        for ri, row in enumerate(uc["rows"]):
            for ci, cell in enumerate(row["values"]):
                cells[(start["rowIndex"] + ri + 1, start["columnIndex"] + ci + 1)] = cell["userEnteredValue"]
    return cells


def test_grid_is_zero_based_end_exclusive():
    assert grid(7, 6, 1, 6, 10) == {
        "sheetId": 7, "startRowIndex": 5, "endRowIndex": 6,
        "startColumnIndex": 0, "endColumnIndex": 10,
    }
    assert grid(7, 3, 2) == {
        "sheetId": 7, "startRowIndex": 2, "endRowIndex": 3,
        "startColumnIndex": 1, "endColumnIndex": 2,
    }
    assert "endRowIndex" not in open_column(7, 4, 1)


def test_write_rows_value_types():
    req = write_rows(1, 1, 1, [["text", "=SUM(A1)", True, 3]])["updateCells"]
    values = [c["userEnteredValue"] for c in req["rows"][0]["values"]]
    assert values == [
        {"stringValue": "text"},
        {"formulaValue": "=SUM(A1)"},
        {"boolValue": True},
        {"numberValue": 3},
    ]
    assert req["fields"] == "userEnteredValue"


def test_repeat_format_masks_only_given_fields():
    req = repeat_format(grid(1, 1, 1), cell_format(bg="white", bold=True))["repeatCell"]
    assert req["fields"] == "userEnteredFormat.backgroundColor,userEnteredFormat.textFormat.bold"
    assert req["cell"]["userEnteredFormat"]["backgroundColor"] == {"red": 1.0, "green": 1.0, "blue": 1.0}


def test_adds_three_sheets_first(requests):
    added = [r["addSheet"]["properties"] for r in requests[:3]]
    assert [p["title"] for p in added] == ["Agent Portfolio", "Quick Wins", "Build Roadmap"]
    assert [p["sheetId"] for p in added] == [SHEET_ID_MAIN, SHEET_ID_QUICK, SHEET_ID_ROADMAP]
    assert [p["gridProperties"]["frozenRowCount"] for p in added] == [6, 3, 3]


def test_replace_sheet_ids_delete_before_adding():
    reqs = build_requests(replace_sheet_ids=[11, 12])
    assert reqs[0] == {"deleteSheet": {"sheetId": 11}}
    assert reqs[1] == {"deleteSheet": {"sheetId": 12}}
    assert "addSheet" in reqs[2]


def test_portfolio_cells(requests):
    cells = _written(requests, SHEET_ID_MAIN)
    assert [cells[(6, c)]["stringValue"] for c in range(1, 11)] == HEADERS
    assert cells[(7, 1)]["stringValue"].endswith("STRATEGIC INTELLIGENCE")
    assert cells[(8, 3)] == {"stringValue": "Competitive Intelligence Agent"}
    assert cells[(8, 10)] == {"boolValue": True}
    assert cells[(62, 3)] == {"stringValue": "Travel Coordinator"}
    assert (12, 1) not in cells


def test_portfolio_merges(requests):
    merged = [m["range"] for m in _of_type(requests, "mergeCells") if m["range"]["sheetId"] == SHEET_ID_MAIN]
    rows = sorted(m["startRowIndex"] + 1 for m in merged if m["startColumnIndex"] == 0)
    assert rows[:3] == [1, 2, 4]
    assert len(rows) == 3 + 9
    assert any(m["startColumnIndex"] == 11 and m["endColumnIndex"] == 14 for m in merged)


def test_dashboard_formulas(requests):
    cells = _written(requests, SHEET_ID_MAIN)
    assert cells[(3, 13)] == {"formulaValue": "=COUNTA(C7:C62)"}
    assert cells[(6, 13)] == {"formulaValue": "=AVERAGE(A7:A62)"}
    assert cells[(14, 13)] == {"formulaValue": '=COUNTIF(G7:G62,"Medium")'}
    assert cells[(18, 13)] == {"formulaValue": "=INDEX(C7:C62, MATCH(MAX(A7:A62), A7:A62, 0))"}
    assert cells[(10, 13)] == {"stringValue": "67 hrs/week"}


def test_validations(requests):
    rules = [v for v in _of_type(requests, "setDataValidation") if v["range"]["sheetId"] == SHEET_ID_MAIN]
    by_col = {v["range"]["startColumnIndex"] + 1: v for v in rules}
    assert set(by_col) == {1, 6, 7, 8, 10}
    priority = by_col[1]
    assert priority["range"]["startRowIndex"] == 6
    assert priority["range"]["endRowIndex"] == 62
    assert [o["userEnteredValue"] for o in priority["rule"]["condition"]["values"]][0] == "5 - Critical"
    assert by_col[10]["rule"]["condition"]["type"] == "BOOLEAN"


def test_dropdowns_accept_typed_ratings(requests):
    # Typed 1-5 ratings are accepted alongside the list values
    lists = [v for v in _of_type(requests, "setDataValidation")
             if v["rule"]["condition"]["type"] == "ONE_OF_LIST"]
    assert len(lists) == 4
    for v in lists:
        assert v["rule"]["strict"] is False
        assert v["rule"]["showCustomUi"] is True


def _expected_rule(text, fill, color, bold, cond_type):
    fmt = {"backgroundColor": _rgb(fill), "textFormat": {"foregroundColor": _rgb(color)}}
    if bold:
        fmt["textFormat"]["bold"] = True
    return {
        "condition": {"type": cond_type, "values": [{"userEnteredValue": text}]},
        "format": fmt,
    }


def _rules_for(requests, sheet_id, col):
    return [
        r["rule"] for r in _of_type(requests, "addConditionalFormatRule")
        if r["rule"]["ranges"][0]["sheetId"] == sheet_id
        and r["rule"]["ranges"][0]["startColumnIndex"] == col - 1
    ]


@pytest.mark.parametrize("col, table, cond_type", [
    (1, PRIORITY_RULES, "TEXT_CONTAINS"),
    (6, IMPACT_RULES, "TEXT_EQ"),
    (7, COMPLEXITY_RULES, "TEXT_EQ"),
    (8, STATUS_RULES, "TEXT_EQ"),
])
def test_portfolio_colour_rules(requests, col, table, cond_type):
    rules = _rules_for(requests, SHEET_ID_MAIN, col)
    assert [r["booleanRule"] for r in rules] == [_expected_rule(*entry, cond_type) for entry in table]
    for r in rules:
        assert r["ranges"] == [grid(SHEET_ID_MAIN, 7, col, 62, col)]


@pytest.mark.parametrize("col, table, cond_type", [
    (1, PRIORITY_RULES, "TEXT_CONTAINS"),
    (8, STATUS_RULES, "TEXT_EQ"),
])
def test_quick_wins_colour_rules(requests, col, table, cond_type):
    rules = _rules_for(requests, SHEET_ID_QUICK, col)
    assert [r["booleanRule"] for r in rules] == [_expected_rule(*entry, cond_type) for entry in table]
    for r in rules:
        assert r["ranges"] == [open_column(SHEET_ID_QUICK, 4, col)]


def test_colour_rule_examples(requests):
    critical = _rules_for(requests, SHEET_ID_MAIN, 1)[0]["booleanRule"]
    assert critical["condition"]["values"] == [{"userEnteredValue": "5"}]
    assert critical["format"]["backgroundColor"] == _rgb("DC2626")
    assert critical["format"]["textFormat"]["bold"] is True
    not_started = _rules_for(requests, SHEET_ID_MAIN, 8)[-1]["booleanRule"]
    assert not_started["condition"]["values"] == [{"userEnteredValue": "Not Started"}]
    assert not_started["format"]["backgroundColor"] == _rgb("E5E7EB")
    assert "bold" not in not_started["format"]["textFormat"]


def test_conditional_rule_indexes_are_sequential_per_sheet(requests):
    rules = _of_type(requests, "addConditionalFormatRule")
    main_rules = [r for r in rules if r["rule"]["ranges"][0]["sheetId"] == SHEET_ID_MAIN]
    quick_rules = [r for r in rules if r["rule"]["ranges"][0]["sheetId"] == SHEET_ID_QUICK]
    assert [r["index"] for r in main_rules] == list(range(16))
    assert [r["index"] for r in quick_rules] == list(range(9))
    assert main_rules[0]["rule"]["booleanRule"]["condition"]["type"] == "TEXT_CONTAINS"
    assert main_rules[5]["rule"]["booleanRule"]["condition"] == {
        "type": "TEXT_EQ", "values": [{"userEnteredValue": "HIGH"}],
    }
    assert "endRowIndex" not in quick_rules[0]["rule"]["ranges"][0]


def test_quick_wins_filter(requests):
    cells = _written(requests, SHEET_ID_QUICK)
    assert cells[(4, 1)] == {
        "formulaValue": "=FILTER('Agent Portfolio'!A7:J62, 'Agent Portfolio'!J7:J62=TRUE)"
    }
    assert (5, 1) not in cells


def test_roadmap_top_picks(requests):
    cells = _written(requests, SHEET_ID_ROADMAP)
    for k in range(1, 6):
        formula = cells[(4 + k, 2)]["formulaValue"]
        assert formula.startswith("=INDEX(SORT(FILTER('Agent Portfolio'!C7:C62")
        assert formula.endswith(f", FALSE), {k})")
    assert cells[(10, 1)]["stringValue"].startswith("PHASE 2")


def test_column_widths_in_pixels(requests):
    dims = [d for d in _of_type(requests, "updateDimensionProperties")
            if d["range"]["sheetId"] == SHEET_ID_MAIN and d["range"]["dimension"] == "COLUMNS"]
    assert [d["properties"]["pixelSize"] for d in dims] == [80, 150, 200, 350, 120, 120, 120, 100, 250, 80]


def test_payload_json_round_trips():
    assert json.loads(payload_json()) == build_payload()


def test_main_writes_json(tmp_path, capsys):
    out = tmp_path / "out" / "requests.json"
    assert main(["--output", str(out), "--replace-sheet-id", "5"]) == 0
    body = json.loads(out.read_text(encoding="utf-8"))
    assert body["requests"][0] == {"deleteSheet": {"sheetId": 5}}
    assert "Saved to:" in capsys.readouterr().out
