import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

RESOLVER_URL = os.getenv("RESOLVER_URL", "http://3.148.205.45/")
RESOLVER_TIMEOUT_SECONDS = float(os.getenv("RESOLVER_TIMEOUT_SECONDS", "10"))
RESOLVER_WORKERS = int(os.getenv("RESOLVER_WORKERS", "2"))

LEDGER_PATH = os.getenv("LEDGER_PATH", "/var/lib/assistance-register/assistance_data.csv")
EXPORT_DIR = os.getenv("EXPORT_DIR", "/var/lib/assistance-register/exports")

SCAN_COOLDOWN_SECONDS = float(os.getenv("SCAN_COOLDOWN_SECONDS", "1.0"))
MAX_CAPTURE_FAILURES = int(os.getenv("MAX_CAPTURE_FAILURES", "3"))

ROLES = tuple(r.strip() for r in os.getenv("ROLES", "").split(",") if r.strip()) or (
    "Público Externo",
    "Estudiante ISTER",
    "Docente ISTER",
    "Administrativo ISTER",
)

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
