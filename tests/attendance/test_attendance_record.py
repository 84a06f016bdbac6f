import pytest

from src.assistance_register.assistance_register.attendance.model import AttendanceRecord
from src.assistance_register.assistance_register.resolver.model import Resolved


def test_unresolved_keeps_scanned_code_and_fills_null():
    rec = AttendanceRecord.unresolved("https://x/bad-code")

    assert rec.to_row() == ("https://x/bad-code", "null", "null", "null", "null", "null")


def test_resolution_missing_fields_become_null():
    rec = AttendanceRecord.from_resolution("https://x/1", Resolved(name="Ana", email="a@b.com"))

    assert rec.to_line() == "https://x/1,a@b.com,null,null,Ana,null"


def test_manual_record_uses_manual_marker():
    rec = AttendanceRecord.manual(
        email="a@b.com",
        registered_at="2025-01-01 10:00:00",
        external_id="123",
        name="Ana",
        role="Docente ISTER",
    )

    assert rec.source == "MANUAL"
    assert rec.to_row()[2] == "2025-01-01 10:00:00"


def test_from_row_rejects_wrong_width():
    with pytest.raises(ValueError):
        AttendanceRecord.from_row(["a", "b", "c"])
