from __future__ import annotations

from datetime import datetime

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 1, 10, 0, 0)


@pytest.fixture
def ledger_path(tmp_path):
    return tmp_path / "data" / "assistance_data.csv"
