"""
PDF report generation using ReportLab.
Renders a composed DocumentTree onto A4 pages with the platypus engine:
text blocks become Paragraphs, table blocks become Tables styled by the
position rules in styles.py.
"""

import io
import logging
from typing import Any
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT, TA_RIGHT
from reportlab.lib.pagesizes import A4, landscape, portrait
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .adapter import adapt
from .composer import compose
from .config import Institution
from .document import Cell, DocumentTree, TableBlock, TextBlock, TextStyle
from .errors import RenderError
from .kinds import ReportKind
from .styles import POLICIES, TableMeta

logger = logging.getLogger(__name__)

# ── Page setup ───────────────────────────────────────────────────────────────
PAGE_SIZES = {"A4": A4}
PAGE_MARGIN = 40            # points, all four sides
CELL_PADDING_X = 4
MIN_STAR_WIDTH = 20

# Standard PDF fonts need no registration; map each family to its variants.
FONTS = {
    "Helvetica": {
        "normal": "Helvetica",
        "bold": "Helvetica-Bold",
        "italics": "Helvetica-Oblique",
        "bolditalics": "Helvetica-BoldOblique",
    },
}

ALIGNMENTS = {"left": TA_LEFT, "center": TA_CENTER, "right": TA_RIGHT}

READ_YES = "Ya"
READ_NO = "Belum"


# ── Text helpers ─────────────────────────────────────────────────────────────

def font_name(family: str, bold: bool = False, italics: bool = False) -> str:
    variants = FONTS.get(family, FONTS["Helvetica"])
    if bold and italics:
        return variants["bolditalics"]
    if bold:
        return variants["bold"]
    if italics:
        return variants["italics"]
    return variants["normal"]


def cell_text(value: Any) -> str:
    """Printable text for a cell value; read flags print as Ya/Belum."""
    if isinstance(value, Cell):
        return cell_text(value.text)
    if value is None:
        return ""
    if isinstance(value, bool):
        return READ_YES if value else READ_NO
    return str(value)


def make_styles(tree: DocumentTree) -> dict:
    """ParagraphStyles for every named text style plus body and cell styles."""
    base = getSampleStyleSheet()
    page = tree.page

    def build(name: str, style: TextStyle) -> ParagraphStyle:
        left, top, right, bottom = style.margin
        return ParagraphStyle(
            name, parent=base["Normal"],
            fontName=font_name(page.font, style.bold, style.italics),
            fontSize=style.font_size, leading=style.font_size * page.line_height,
            alignment=ALIGNMENTS[style.alignment],
            leftIndent=left, rightIndent=right, spaceBefore=top, spaceAfter=bottom,
        )

    styles = {name: build(name, style) for name, style in tree.styles.items()}
    styles["body"] = build("body", TextStyle(font_size=page.font_size))
    styles["cell"] = build("cell", TextStyle(font_size=page.font_size))
    styles["cell_bold"] = build("cell_bold", TextStyle(font_size=page.font_size, bold=True))
    return styles


def _paragraph(block: TextBlock, tree: DocumentTree, styles: dict) -> Paragraph:
    named = tree.styles.get(block.style) if block.style else None
    style = styles[block.style] if named else styles["body"]
    if block.font_size is not None:
        style = ParagraphStyle(
            f"{style.name}_{block.font_size:g}", parent=style,
            fontSize=block.font_size, leading=block.font_size * tree.page.line_height,
        )
    text = escape(block.text)
    if named and named.underline:
        text = f"<u>{text}</u>"
    return Paragraph(text, style)


# ── Tables ───────────────────────────────────────────────────────────────────

def _cell(value: Any, styles: dict) -> Paragraph:
    if isinstance(value, Cell):
        style = styles["cell_bold"] if value.bold else styles["cell"]
        if value.margin is not None:
            left, top, right, bottom = value.margin
            style = ParagraphStyle(
                f"{style.name}_m", parent=style,
                leftIndent=left, rightIndent=right, spaceBefore=top, spaceAfter=bottom,
            )
        return Paragraph(escape(cell_text(value)), style)
    return Paragraph(escape(cell_text(value)), styles["cell"])


def _covered(rows) -> set:
    """(row, col) positions hidden under a column span."""
    covered = set()
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            if isinstance(value, Cell) and value.col_span > 1:
                covered.update((r, c + k) for k in range(1, value.col_span))
    return covered


def column_widths(block: TableBlock, available: float, font: str, size: float) -> list:
    """Resolve "auto" and "*" widths to points.

    Auto columns that would push the table past *available* are shrunk in
    proportion so the cells wrap instead of running off the page.
    """
    covered = _covered(block.rows)
    widths: list = []
    autos: list = []
    for c, width in enumerate(block.widths):
        if width != "auto":
            widths.append(width)
            continue
        autos.append(c)
        measured = 0.0
        for r, row in enumerate(block.rows):
            if c >= len(row) or (r, c) in covered:
                continue
            value = row[c]
            if isinstance(value, Cell) and value.col_span > 1:
                continue
            bold = isinstance(value, Cell) and value.bold
            measured = max(measured, stringWidth(cell_text(value), font_name(font, bold), size))
        widths.append(measured + 2 * CELL_PADDING_X + 1)

    stars = [i for i, w in enumerate(widths) if w == "*"]
    fixed = sum(w for i, w in enumerate(widths) if w != "*" and i not in autos)
    auto_total = sum(widths[i] for i in autos)
    room = available - fixed - MIN_STAR_WIDTH * len(stars)
    if auto_total > room and auto_total > 0:
        scale = max(room, 0) / auto_total
        for i in autos:
            widths[i] *= scale

    if stars:
        used = sum(w for w in widths if w != "*")
        share = max((available - used) / len(stars), MIN_STAR_WIDTH)
        for i in stars:
            widths[i] = share
    return widths


def table_style_commands(block: TableBlock) -> list:
    """TableStyle commands from the block's layout policy and cell spans."""
    rows = len(block.rows)
    cols = len(block.widths)
    meta = TableMeta(row_count=rows, col_count=cols)
    policy = POLICIES[block.layout]

    commands: list = [
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("LEFTPADDING", (0, 0), (-1, -1), CELL_PADDING_X),
        ("RIGHTPADDING", (0, 0), (-1, -1), CELL_PADDING_X),
    ]

    for r, row in enumerate(block.rows):
        for c, value in enumerate(row):
            if isinstance(value, Cell) and value.col_span > 1:
                commands.append(("SPAN", (c, r), (c + value.col_span - 1, r)))

    for r in range(rows):
        for c in range(cols):
            fill = policy.fill_color(r, c, meta)
            if fill:
                commands.append(("BACKGROUND", (c, r), (c, r), colors.HexColor(fill)))
            commands.append(("TOPPADDING", (c, r), (c, r), policy.padding_top(r, c, meta)))
            commands.append(("BOTTOMPADDING", (c, r), (c, r), policy.padding_bottom(r, c, meta)))

    # horizontal line i sits above row i; the last one sits below the last row
    for i in range(rows + 1):
        for c in range(cols):
            width = policy.h_line_width(i, c, meta)
            if not width:
                continue
            color = colors.HexColor(policy.h_line_color(i, c, meta))
            dash = policy.h_line_dash(i, c, meta)
            if i < rows:
                commands.append(("LINEABOVE", (c, i), (c, i), width, color, 1, dash))
            else:
                commands.append(("LINEBELOW", (c, rows - 1), (c, rows - 1), width, color, 1, dash))

    for r in range(rows):
        for j in range(cols + 1):
            width = policy.v_line_width(r, j, meta)
            if not width:
                continue
            color = colors.HexColor(policy.v_line_color(r, j, meta))
            if j < cols:
                commands.append(("LINEBEFORE", (j, r), (j, r), width, color))
            else:
                commands.append(("LINEAFTER", (cols - 1, r), (cols - 1, r), width, color))
    return commands


def _table(block: TableBlock, tree: DocumentTree, styles: dict, available: float) -> list:
    left, top, right, bottom = block.margin
    widths = column_widths(block, available - left - right, tree.page.font, tree.page.font_size)
    data = [[_cell(value, styles) for value in row] for row in block.rows]
    table = Table(data, colWidths=widths, hAlign="LEFT")
    table.setStyle(TableStyle(table_style_commands(block)))
    return [Spacer(1, top), table, Spacer(1, bottom)]


# ── Main report builder ──────────────────────────────────────────────────────

def build_story(tree: DocumentTree, available: float) -> list:
    styles = make_styles(tree)
    story: list = []
    for block in tree.content:
        if isinstance(block, TextBlock):
            story.append(_paragraph(block, tree, styles))
        elif block.rows:
            story += _table(block, tree, styles, available)
        else:
            # platypus refuses empty tables
            logger.debug("Skipping empty %s table", block.layout.value)
    return story


def render_pdf(tree: DocumentTree) -> bytes:
    """Render *tree* to PDF bytes. Any renderer failure raises RenderError."""
    size = PAGE_SIZES[tree.page.size]
    pagesize = landscape(size) if tree.page.orientation == "landscape" else portrait(size)
    buffer = io.BytesIO()
    try:
        doc = SimpleDocTemplate(
            buffer,
            pagesize=pagesize,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN,
            leftMargin=PAGE_MARGIN,
            rightMargin=PAGE_MARGIN,
        )
        doc.build(build_story(tree, doc.width))
    except Exception as exc:
        logger.error("PDF rendering failed: %s", exc, exc_info=True)
        raise RenderError(f"Failed to render PDF: {exc}") from exc
    return buffer.getvalue()


def generate_pdf_report(kind: ReportKind, payload: Any, institution: Institution) -> bytes:
    """Validate *payload*, compose its document tree and render it."""
    report = adapt(kind, payload)
    tree = compose(report, institution, kind)
    pdf = render_pdf(tree)
    logger.info("Rendered %s report %s (%d bytes)", kind.slug, report.header.ref_number, len(pdf))
    return pdf
