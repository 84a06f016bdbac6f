"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

LEDGER_HEADER = ("URL", "Correo", "FechaRegistro", "Identificacion", "Nombre", "Rol")
LEDGER_COLUMNS = len(LEDGER_HEADER)

# Stored verbatim for any field the remote service did not return.
NULL_SENTINEL = "null"
MANUAL_SOURCE = "MANUAL"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

EXPORT_PREFIX = "assistance_data"

DEFAULT_COOLDOWN_SECONDS = 0.5
DEFAULT_RESOLVER_TIMEOUT_SECONDS = 10.0
DEFAULT_MAX_CAPTURE_FAILURES = 3
DEFAULT_NOTICE_LIMIT = 50

DEFAULT_ROLES = (
    "Público Externo",
    "Estudiante ISTER",
    "Docente ISTER",
    "Administrativo ISTER",
)
