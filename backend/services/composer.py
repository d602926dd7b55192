"""
Assembles a report into the document tree consumed by the PDF renderer.
"""

from typing import Optional

from .classifier import select
from .config import Institution
from .document import DocumentTree, PageSetup, TableBlock, TextBlock, TextStyle
from .kinds import KINDS, ReportKind, Section, SectionContent
from .models import Report
from .rows import (
    detail_rows,
    disposition_rows,
    followup_rows,
    party_rows,
    tracking_rows,
)
from .styles import TableLayout

PAGE = PageSetup(size="A4", orientation="portrait", font="Helvetica", line_height=1.15)

STYLES = {
    "header": TextStyle(font_size=14, bold=True, alignment="center"),
    "subheader": TextStyle(font_size=14, bold=True, alignment="center"),
    "contact": TextStyle(font_size=10, italics=True, alignment="center", margin=(0, 0, 0, 20)),
    "section": TextStyle(font_size=12, bold=True, underline=True),
}

# Column widths in points; "auto" fits the content, "*" fills the rest.
PARTY_WIDTHS = ("auto", "auto", "*", "auto")
DISPOSITION_WIDTHS = (100, "*", 75)
FOLLOWUP_WIDTHS = ("auto", "*", "auto")
TRACKING_WIDTHS = ("auto", "auto", "auto", "auto", "auto", "*")
DETAIL_WIDTHS = (90, "auto", "*")

TABLE_MARGIN = (0, 5, 0, 15)


def _freeze(rows) -> tuple:
    return tuple(tuple(row) for row in rows)


def _letterhead(report: Report, kind: ReportKind, institution: Institution) -> list:
    return [
        TextBlock(text=f"{kind.title_prefix}{report.header.title}", style="header"),
        TextBlock(text=institution.name, style="subheader"),
        TextBlock(text=institution.contact, style="contact"),
    ]


def _tracking(report: Report) -> list:
    tracking = report.tracking
    return [
        TextBlock(text=f"ID: {tracking.document_id}"),
        TableBlock(
            widths=TRACKING_WIDTHS,
            rows=_freeze(tracking_rows(tracking)),
            layout=TableLayout.TRACKING,
            margin=(0, 2, 0, 15),
        ),
    ]


def _details(report: Report, kind: ReportKind) -> TableBlock:
    framed = kind.framed_details
    return TableBlock(
        widths=DETAIL_WIDTHS,
        rows=_freeze(detail_rows(report.header, kind.detail_labels, framed)),
        layout=TableLayout.FRAMED_DETAILS if framed else TableLayout.DETAILS,
        margin=(0, 10, 0, 10) if framed else (0, 5, 0, 20),
    )


def _section_table(report: Report, kind: ReportKind, section: Section) -> TableBlock:
    if section.content == SectionContent.DISPOSITIONS:
        return TableBlock(
            widths=DISPOSITION_WIDTHS,
            rows=_freeze(disposition_rows(report.dispositions)),
            layout=TableLayout.DISPOSITION,
            margin=TABLE_MARGIN,
        )
    if section.content == SectionContent.FOLLOWUPS:
        return TableBlock(
            widths=FOLLOWUP_WIDTHS,
            rows=_freeze(followup_rows(report.followups)),
            layout=TableLayout.FOLLOWUP,
            margin=TABLE_MARGIN,
        )
    entries = select(report.expeditions, section.party_type, kind.separate_parties)
    return TableBlock(
        widths=PARTY_WIDTHS[:len(section.header)],
        rows=_freeze(party_rows(entries, section.header)),
        layout=TableLayout.PARTY,
        margin=TABLE_MARGIN,
    )


def compose(report: Report, institution: Institution,
            kind: Optional[ReportKind] = None) -> DocumentTree:
    """Build the document tree for *report*.

    Order: title, institution name, contact line, tracking summary (kinds
    that track receipt), report details, then each section label followed
    by its table.
    """
    kind = kind or KINDS[report.kind]
    content: list = _letterhead(report, kind, institution)
    if kind.has_tracking and report.tracking is not None:
        content += _tracking(report)
    content.append(_details(report, kind))

    for section in kind.rendered_sections():
        size = section.label_size if section.label_size != STYLES["section"].font_size else None
        content.append(TextBlock(text=section.label, style="section", font_size=size))
        content.append(_section_table(report, kind, section))

    return DocumentTree(page=PAGE, styles=dict(STYLES), content=tuple(content))
