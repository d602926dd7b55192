"""Shared fixtures for report service tests."""

from __future__ import annotations

import pytest

from services.config import Institution


@pytest.fixture
def institution() -> Institution:
    return Institution(
        name="RUMAH SAKIT UJI",
        address="Jl. Contoh No. 1",
        phone="Telp. 0322-000000",
    )


@pytest.fixture
def letter_payload() -> dict:
    """General letter with tracking info and a mixed expedition list."""
    return {
        "title": "LEMBAR DISPOSISI SURAT UMUM",
        "refNumber": "045/RS/X/2026",
        "sent": "01-10-2026",
        "sender": "Dinas Kesehatan",
        "subject": "Undangan rapat koordinasi",
        "id": 1021,
        "received": "02-10-2026",
        "deadline": "09-10-2026",
        "archive": True,
        "agenda": "AG-77",
        "filename": "surat-045.pdf",
        "archiveCode": "UM-01",
        "expeditions": [
            {"date": "03-10-2026", "name": "Bagian Umum", "type": 1, "read": True},
            {"date": "03-10-2026", "name": "Direktur", "type": 2, "read": "04-10-2026"},
            {"date": "04-10-2026", "name": "Komite Medik", "type": 1, "read": False},
        ],
    }


@pytest.fixture
def memo_payload() -> dict:
    """Internal memo with dispositions, follow-ups and expeditions."""
    return {
        "title": "LEMBAR DISPOSISI MEMO INTERN",
        "refNumber": "M-12/2026",
        "sent": "05-10-2026",
        "sender": "Kepala Ruang",
        "function": "Kepala Instalasi Rawat Inap",
        "subject": "Permintaan tambahan tenaga",
        "id": "M12",
        "received": "05-10-2026",
        "deadline": "12-10-2026",
        "archive": "Ya",
        "agenda": 12,
        "filename": "memo-12.pdf",
        "archiveCode": "MI-03",
        "dispositions": [
            {"name": "Wadir Umum", "note": "Mohon ditindaklanjuti", "date": "06-10-2026"},
            {"name": "SDM", "note": "Siapkan analisis beban kerja", "date": "07-10-2026"},
        ],
        "followups": [
            {"name": "SDM", "date": "08-10-2026", "read": True, "note": "Analisis selesai"},
        ],
        "expeditions": [
            {"date": "06-10-2026", "name": "Wadir Umum", "type": 2, "read": True},
            {"date": "07-10-2026", "name": "SDM", "type": 2, "read": False},
        ],
    }
