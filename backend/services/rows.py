"""
Table row builders. Each builder is a pure function from canonical entities
to a list of rows; a row is a list of cell values (plain text/number, a read
flag, or an annotated Cell).
"""

from typing import Iterable, Sequence

from .classifier import Entry
from .document import Cell, CellValue
from .models import DispositionRecord, FollowupRecord, ReportHeader, TrackingBlock

Row = list[CellValue]

PARTY_HEADER = ("No", "Tgl Kirim", "Penerima", "Dibaca")
SENDER_HEADER = ("No", "Tgl Kirim", "Pengirim")
DISPOSITION_HEADER = ("Diteruskan Ke", "Isi Disposisi", "Tanggal")
FOLLOWUP_NOTE_LABEL = "Isi Tindak Lanjut:"

FOLLOWUP_ROWS_PER_RECORD = 4


def party_rows(entries: Iterable[Entry], header: Sequence[str] = PARTY_HEADER) -> list[Row]:
    """Header plus one row per (display number, record) entry.

    Each row carries number, date, name and read flag, cut to the width of
    *header*; a 3-column header leaves read-state out.
    """
    width = len(header)
    rows: list[Row] = [list(header)]
    rows.extend([index, record.date, record.name, record.read][:width] for index, record in entries)
    return rows


def disposition_rows(records: Iterable[DispositionRecord]) -> list[Row]:
    rows: list[Row] = [list(DISPOSITION_HEADER)]
    rows.extend([r.name, r.note, r.date] for r in records)
    return rows


def followup_rows(records: Iterable[FollowupRecord]) -> list[Row]:
    rows: list[Row] = []
    for seq, record in enumerate(records, 1):
        rows.append([seq, Cell(text=record.name, col_span=2, bold=True), ""])
        rows.append(["", f"Tgl. Kirim {record.date}", record.read])
        rows.append(["", Cell(text=FOLLOWUP_NOTE_LABEL, col_span=2, margin=(0, 5, 0, 0)), ""])
        rows.append(["", Cell(text=record.note, col_span=2), ""])
    return rows


def tracking_rows(tracking: TrackingBlock) -> list[Row]:
    return [
        [
            "Tgl Terima", f": {tracking.received}",
            "Target Selesai", f": {tracking.deadline}",
            "Arsip", f": {_plain(tracking.archive)}",
        ],
        [
            "No Agenda", f": {tracking.agenda}",
            "Nama File", f": {tracking.filename}",
            "Kode", f": {tracking.archive_code}",
        ],
    ]


def detail_rows(header: ReportHeader, labels, framed: bool = False) -> list[Row]:
    """Key/value rows for the report details table.

    The framed variant pads the rows with two blank rows on each side; the
    frame lines are drawn on those blank rows.
    """
    rows: list[Row] = [[label, ":", getattr(header, attr)] for label, attr in labels]
    if framed:
        blank = ["", "", ""]
        rows = [list(blank), list(blank), *rows, list(blank), list(blank)]
    return rows


def _plain(value) -> str:
    if isinstance(value, bool):
        return "Ya" if value else "Tidak"
    return str(value)
