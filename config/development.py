import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Credential directory (POST {"url": <code>})
RESOLVER_URL = os.getenv("RESOLVER_URL", "http://3.148.205.45/")
RESOLVER_TIMEOUT_SECONDS = float(os.getenv("RESOLVER_TIMEOUT_SECONDS", "10"))
RESOLVER_WORKERS = int(os.getenv("RESOLVER_WORKERS", "2"))

LEDGER_PATH = os.getenv("LEDGER_PATH", "data/assistance_data.csv")
EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

SCAN_COOLDOWN_SECONDS = float(os.getenv("SCAN_COOLDOWN_SECONDS", "0.5"))
MAX_CAPTURE_FAILURES = int(os.getenv("MAX_CAPTURE_FAILURES", "3"))

# Comma-separated override, e.g. ROLES="Docente,Estudiante"
ROLES = tuple(r.strip() for r in os.getenv("ROLES", "").split(",") if r.strip()) or (
    "Público Externo",
    "Estudiante ISTER",
    "Docente ISTER",
    "Administrativo ISTER",
)

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
