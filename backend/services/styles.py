"""
Position-dependent table styling.

Every rule is a plain function of (row, col, meta). For line rules the
"row" argument is a horizontal line index (0 is above the first row,
meta.row_count is below the last) and "col" is a vertical line index
(0 is left of the first column). Rules never keep state between calls.
"""

from enum import Enum
from typing import Callable, NamedTuple, Optional

HEADER_FILL = "#CCCCCC"
RULE_COLOR = "#AAAAAA"
LINE_COLOR = "#000000"
DASH = (2, 2)


class TableMeta(NamedTuple):
    row_count: int
    col_count: int


StyleRule = Callable[[int, int, TableMeta], object]


class LayoutPolicy(NamedTuple):
    h_line_width: StyleRule
    v_line_width: StyleRule
    h_line_color: StyleRule
    h_line_dash: StyleRule
    v_line_color: StyleRule
    fill_color: StyleRule
    padding_top: StyleRule
    padding_bottom: StyleRule


class TableLayout(str, Enum):
    PARTY = "party"
    TRACKING = "tracking"
    DETAILS = "details"
    FRAMED_DETAILS = "framed_details"
    DISPOSITION = "disposition"
    FOLLOWUP = "followup"


# ── Shared rules ─────────────────────────────────────────────────────────────

def no_line(row: int, col: int, meta: TableMeta) -> float:
    return 0


def solid(row: int, col: int, meta: TableMeta) -> Optional[tuple]:
    return None


def dashed(row: int, col: int, meta: TableMeta) -> Optional[tuple]:
    return DASH


def black(row: int, col: int, meta: TableMeta) -> str:
    return LINE_COLOR


def grey_rule(row: int, col: int, meta: TableMeta) -> str:
    return RULE_COLOR


def no_fill(row: int, col: int, meta: TableMeta) -> Optional[str]:
    return None


def header_fill(row: int, col: int, meta: TableMeta) -> Optional[str]:
    return HEADER_FILL if row == 0 else None


def lines_after_header(row: int, col: int, meta: TableMeta) -> float:
    return 1 if row > 1 else 0


def padding(value: float) -> StyleRule:
    def rule(row: int, col: int, meta: TableMeta) -> float:
        return value
    return rule


# ── Party / expedition tables ────────────────────────────────────────────────

def party_h_line_width(row: int, col: int, meta: TableMeta) -> float:
    # single thin rule between the header and the first data row
    return 0.5 if row == 1 else 0


def party_padding_top(row: int, col: int, meta: TableMeta) -> float:
    return 5 if row == 0 else 3


def party_padding_bottom(row: int, col: int, meta: TableMeta) -> float:
    return 4 if row == 0 else 2


# ── Tracking summary ─────────────────────────────────────────────────────────

def alternating_h_line(row: int, col: int, meta: TableMeta) -> float:
    return (row + 1) % 2


def alternating_v_line(row: int, col: int, meta: TableMeta) -> float:
    return (col + 1) % 2


# ── Report details (key/value) ───────────────────────────────────────────────

def bottom_rule(row: int, col: int, meta: TableMeta) -> float:
    return 1 if row == meta.row_count else 0


def framed_h_line(row: int, col: int, meta: TableMeta) -> float:
    """Double frame: thin outer lines, thick inner lines one blank row in."""
    last = meta.row_count - 1
    if row in (0, last):
        return 1
    if row in (1, last - 1):
        return 2
    return 0


def framed_padding_top(row: int, col: int, meta: TableMeta) -> float:
    return 5 if row == 2 else 1


def framed_padding_bottom(row: int, col: int, meta: TableMeta) -> float:
    return 4 if row == meta.row_count - 3 else 1


# ── Follow-ups (4 physical rows per record) ──────────────────────────────────

def block_h_line(row: int, col: int, meta: TableMeta) -> float:
    return 1 if row % 4 == 0 else 0


def block_padding_top(row: int, col: int, meta: TableMeta) -> float:
    return 4 if row % 4 == 0 else 0


def block_padding_bottom(row: int, col: int, meta: TableMeta) -> float:
    return 2 if row % 4 == 3 else 0


POLICIES: dict[TableLayout, LayoutPolicy] = {
    TableLayout.PARTY: LayoutPolicy(
        h_line_width=party_h_line_width,
        v_line_width=no_line,
        h_line_color=grey_rule,
        h_line_dash=solid,
        v_line_color=black,
        fill_color=header_fill,
        padding_top=party_padding_top,
        padding_bottom=party_padding_bottom,
    ),
    TableLayout.TRACKING: LayoutPolicy(
        h_line_width=alternating_h_line,
        v_line_width=alternating_v_line,
        h_line_color=black,
        h_line_dash=solid,
        v_line_color=black,
        fill_color=no_fill,
        padding_top=padding(3),
        padding_bottom=padding(0),
    ),
    TableLayout.DETAILS: LayoutPolicy(
        h_line_width=bottom_rule,
        v_line_width=no_line,
        h_line_color=black,
        h_line_dash=solid,
        v_line_color=black,
        fill_color=no_fill,
        padding_top=padding(1),
        padding_bottom=padding(1),
    ),
    TableLayout.FRAMED_DETAILS: LayoutPolicy(
        h_line_width=framed_h_line,
        v_line_width=no_line,
        h_line_color=black,
        h_line_dash=solid,
        v_line_color=black,
        fill_color=no_fill,
        padding_top=framed_padding_top,
        padding_bottom=framed_padding_bottom,
    ),
    TableLayout.DISPOSITION: LayoutPolicy(
        h_line_width=lines_after_header,
        v_line_width=no_line,
        h_line_color=grey_rule,
        h_line_dash=dashed,
        v_line_color=black,
        fill_color=header_fill,
        padding_top=padding(5),
        padding_bottom=padding(2),
    ),
    TableLayout.FOLLOWUP: LayoutPolicy(
        h_line_width=block_h_line,
        v_line_width=no_line,
        h_line_color=grey_rule,
        h_line_dash=solid,
        v_line_color=black,
        fill_color=no_fill,
        padding_top=block_padding_top,
        padding_bottom=block_padding_bottom,
    ),
}
