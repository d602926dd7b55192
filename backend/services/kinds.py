"""
Report kind descriptors.

Each correspondence type (incoming mail, internal memo, general letter,
special letter) prints the same skeleton with different labels and sections.
A ReportKind describes those differences so a single composer can build
every report.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .models import PartyType
from .rows import PARTY_HEADER, SENDER_HEADER


class SectionContent(str, Enum):
    DISPOSITIONS = "dispositions"
    FOLLOWUPS = "followups"
    PARTIES = "parties"


class Section(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: SectionContent
    label: str
    party_type: Optional[PartyType] = None  # parties only
    header: tuple[str, ...] = PARTY_HEADER  # parties only: column labels, read-state last
    label_size: float = 12


class ReportKind(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title_prefix: str = ""
    detail_labels: tuple[tuple[str, str], ...]  # (printed label, ReportHeader attribute)
    framed_details: bool = False
    has_tracking: bool = True
    separate_parties: bool = False
    sections: tuple[Section, ...] = ()

    def rendered_sections(self) -> tuple[Section, ...]:
        """Sections in print order.

        With separate_parties off, party records are shown in one combined
        table, so only the first party section is kept.
        """
        out = []
        seen_party = False
        for section in self.sections:
            if section.content == SectionContent.PARTIES:
                if seen_party and not self.separate_parties:
                    continue
                seen_party = True
            out.append(section)
        return tuple(out)


_LETTER_LABELS = (
    ("Nomor Surat", "ref_number"),
    ("Tanggal Surat", "sent"),
    ("Pengirim", "sender"),
    ("Perihal", "subject"),
)

SURAT_MASUK = ReportKind(
    slug="suratmasuk",
    detail_labels=_LETTER_LABELS,
    separate_parties=True,
    sections=(
        Section(content=SectionContent.DISPOSITIONS, label="Disposisi"),
        Section(content=SectionContent.PARTIES, label="Ekspedisi Ekstern",
                party_type=PartyType.EXTERNAL, header=SENDER_HEADER),
        Section(content=SectionContent.PARTIES, label="Ekspedisi Intern",
                party_type=PartyType.INTERNAL),
    ),
)

MEMO_INTERN = ReportKind(
    slug="memointern",
    detail_labels=(
        ("Nomor Memo", "ref_number"),
        ("Tanggal Memo", "sent"),
        ("Pengirim", "sender"),
        ("Jabatan", "function"),
        ("Perihal", "subject"),
    ),
    framed_details=True,
    sections=(
        Section(content=SectionContent.DISPOSITIONS, label="Disposisi"),
        Section(content=SectionContent.FOLLOWUPS, label="Tindak Lanjut"),
        Section(content=SectionContent.PARTIES, label="Ekspedisi",
                party_type=PartyType.INTERNAL),
    ),
)

SURAT_UMUM = ReportKind(
    slug="suratumum",
    detail_labels=_LETTER_LABELS,
    sections=(
        Section(content=SectionContent.PARTIES, label="Hasil Disposisi",
                party_type=PartyType.EXTERNAL, label_size=13),
        Section(content=SectionContent.PARTIES, label="Hasil Disposisi Intern",
                party_type=PartyType.INTERNAL),
    ),
)

SURAT_KHUSUS = ReportKind(
    slug="suratkhusus",
    title_prefix="LEMBAR PENGIRIMAN ",
    detail_labels=(
        ("No Dokumen", "ref_number"),
        ("Tanggal Kirim", "sent"),
        ("Penyusun", "sender"),
        ("Judul", "subject"),
    ),
    has_tracking=False,
    sections=(
        Section(content=SectionContent.PARTIES, label="Ekspedisi Intern",
                party_type=PartyType.INTERNAL),
    ),
)

KINDS = {kind.slug: kind for kind in (SURAT_MASUK, MEMO_INTERN, SURAT_UMUM, SURAT_KHUSUS)}
