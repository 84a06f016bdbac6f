"""Copy the attendance ledger to the export directory.

Note: The copy gets a timestamped name and never replaces an earlier export.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.assistance_register.assistance_register.core.exceptions import PersistenceError
from src.assistance_register.assistance_register.ledger.csv_ledger import CsvLedger


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    settings = importlib.import_module(get_settings_module())

    ledger = CsvLedger(Path(settings.LEDGER_PATH))
    destination = Path(argv[0]) if argv else Path(settings.EXPORT_DIR)

    try:
        target = ledger.export_copy(destination)
    except PersistenceError as e:
        raise SystemExit(str(e))
    print(f"OK: Ledger exported: {target}")


if __name__ == "__main__":
    main()
