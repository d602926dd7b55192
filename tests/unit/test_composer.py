"""Tests for document tree composition and per-kind layout."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from services.adapter import adapt
from services.composer import PAGE, compose
from services.document import TableBlock, TextBlock
from services.kinds import KINDS, MEMO_INTERN, SURAT_KHUSUS, SURAT_MASUK, SURAT_UMUM
from services.rows import PARTY_HEADER, SENDER_HEADER
from services.styles import TableLayout


def _tables(tree) -> list[TableBlock]:
    return [b for b in tree.content if isinstance(b, TableBlock)]


def _labels(tree) -> list[str]:
    return [b.text for b in tree.content if isinstance(b, TextBlock) and b.style == "section"]


class TestLetterhead:
    def test_fixed_order(self, letter_payload, institution) -> None:
        tree = compose(adapt(SURAT_UMUM, letter_payload), institution)
        first = tree.content[:4]
        assert first[0] == TextBlock(text="LEMBAR DISPOSISI SURAT UMUM", style="header")
        assert first[1] == TextBlock(text="RUMAH SAKIT UJI", style="subheader")
        assert first[2] == TextBlock(text="Jl. Contoh No. 1, Telp. 0322-000000", style="contact")
        assert first[3] == TextBlock(text="ID: 1021")
        assert tree.content[4].layout == TableLayout.TRACKING
        assert tree.content[5].layout == TableLayout.DETAILS

    def test_page_metadata(self, letter_payload, institution) -> None:
        tree = compose(adapt(SURAT_UMUM, letter_payload), institution)
        assert tree.page == PAGE
        assert tree.page.size == "A4"
        assert tree.page.orientation == "portrait"
        assert tree.page.font == "Helvetica"
        assert tree.page.line_height == 1.15
        assert {"header", "subheader", "contact"} <= set(tree.styles)
        assert tree.styles["header"].alignment == "center"

    def test_institution_is_injected(self, letter_payload, institution) -> None:
        other = institution.model_copy(update={"name": "KLINIK LAIN"})
        tree = compose(adapt(SURAT_UMUM, letter_payload), other)
        assert tree.content[1].text == "KLINIK LAIN"

    def test_special_letter_has_no_tracking(self, letter_payload, institution) -> None:
        tree = compose(adapt(SURAT_KHUSUS, letter_payload), institution)
        assert tree.content[0].text == "LEMBAR PENGIRIMAN LEMBAR DISPOSISI SURAT UMUM"
        layouts = [t.layout for t in _tables(tree)]
        assert TableLayout.TRACKING not in layouts
        assert not any(isinstance(b, TextBlock) and b.text.startswith("ID:") for b in tree.content)


class TestSectionsPerKind:
    def test_incoming_mail_separates_parties(self, letter_payload, institution) -> None:
        tree = compose(adapt(SURAT_MASUK, letter_payload), institution)
        assert _labels(tree) == ["Disposisi", "Ekspedisi Ekstern", "Ekspedisi Intern"]
        external, internal = _tables(tree)[-2:]
        assert external.rows[0] == tuple(SENDER_HEADER)
        assert [row[2] for row in external.rows[1:]] == ["Bagian Umum", "Komite Medik"]
        assert [row[0] for row in external.rows[1:]] == [1, 2]
        assert internal.rows[1:] == ((1, "03-10-2026", "Direktur", "04-10-2026"),)

    def test_general_letter_combined_table(self, letter_payload, institution) -> None:
        tree = compose(adapt(SURAT_UMUM, letter_payload), institution)
        assert _labels(tree) == ["Hasil Disposisi"]
        parties = _tables(tree)[-1]
        assert parties.rows[0] == tuple(PARTY_HEADER)
        assert [row[:3] for row in parties.rows[1:]] == [
            (1, "03-10-2026", "Bagian Umum"),
            (2, "03-10-2026", "Direktur"),
            (3, "04-10-2026", "Komite Medik"),
        ]

    def test_general_letter_label_size(self, letter_payload, institution) -> None:
        tree = compose(adapt(SURAT_UMUM, letter_payload), institution)
        label = next(b for b in tree.content if isinstance(b, TextBlock) and b.style == "section")
        assert label.font_size == 13

    def test_memo_sections(self, memo_payload, institution) -> None:
        tree = compose(adapt(MEMO_INTERN, memo_payload), institution)
        assert _labels(tree) == ["Disposisi", "Tindak Lanjut", "Ekspedisi"]
        details, dispositions, followups, parties = _tables(tree)[1:]
        assert details.layout == TableLayout.FRAMED_DETAILS
        assert details.rows[5] == ("Jabatan", ":", "Kepala Instalasi Rawat Inap")
        assert dispositions.layout == TableLayout.DISPOSITION
        assert len(dispositions.rows) == 3
        assert followups.layout == TableLayout.FOLLOWUP
        assert len(followups.rows) == 4
        assert [row[0] for row in parties.rows[1:]] == [1, 2]

    def test_special_letter_single_party_table(self, letter_payload, institution) -> None:
        tree = compose(adapt(SURAT_KHUSUS, letter_payload), institution)
        assert _labels(tree) == ["Ekspedisi Intern"]
        assert len(_tables(tree)[-1].rows) == 4

    @pytest.mark.parametrize(
        "slug, separate",
        [("suratmasuk", True), ("memointern", False), ("suratumum", False), ("suratkhusus", False)],
    )
    def test_separate_flag_per_kind(self, slug, separate) -> None:
        assert KINDS[slug].separate_parties is separate

    def test_party_headers_come_from_section(self) -> None:
        sections = [s for s in SURAT_MASUK.sections if s.party_type is not None]
        assert [s.header for s in sections] == [SENDER_HEADER, PARTY_HEADER]

    def test_party_table_widths_follow_header(self, letter_payload, institution) -> None:
        tree = compose(adapt(SURAT_MASUK, letter_payload), institution)
        external, internal = _tables(tree)[-2:]
        assert external.widths == ("auto", "auto", "*")
        assert internal.widths == ("auto", "auto", "*", "auto")


class TestEdgeCases:
    def test_empty_lists(self, memo_payload, institution) -> None:
        for key in ("dispositions", "followups", "expeditions"):
            memo_payload[key] = []
        tree = compose(adapt(MEMO_INTERN, memo_payload), institution)
        dispositions, followups, parties = _tables(tree)[-3:]
        assert len(dispositions.rows) == 1
        assert followups.rows == ()
        assert len(parties.rows) == 1

    def test_unknown_party_type_not_printed(self, letter_payload, institution) -> None:
        letter_payload["expeditions"].append(
            {"date": "05-10-2026", "name": "Tidak Dikenal", "type": 7}
        )
        tree = compose(adapt(SURAT_MASUK, letter_payload), institution)
        names = [row[2] for t in _tables(tree)[-2:] for row in t.rows[1:]]
        assert "Tidak Dikenal" not in names
        assert len(names) == 3


class TestDeterminism:
    def test_same_payload_same_tree(self, memo_payload, institution) -> None:
        first = compose(adapt(MEMO_INTERN, memo_payload), institution)
        second = compose(adapt(MEMO_INTERN, memo_payload), institution)
        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_tree_is_frozen(self, letter_payload, institution) -> None:
        tree = compose(adapt(SURAT_UMUM, letter_payload), institution)
        with pytest.raises(PydanticValidationError):
            tree.content = ()
        assert isinstance(tree.content, tuple)
