import os
import tempfile

SECRET_KEY = "test-secret"

RESOLVER_URL = os.getenv("RESOLVER_URL", "http://resolver.test/")
RESOLVER_TIMEOUT_SECONDS = 2.0
RESOLVER_WORKERS = 1

_tmp = os.path.join(tempfile.gettempdir(), "assistance-register-test")
LEDGER_PATH = os.getenv("LEDGER_PATH", os.path.join(_tmp, "assistance_data.csv"))
EXPORT_DIR = os.getenv("EXPORT_DIR", os.path.join(_tmp, "exports"))

SCAN_COOLDOWN_SECONDS = 0.0
MAX_CAPTURE_FAILURES = 3

ROLES = (
    "Público Externo",
    "Estudiante ISTER",
    "Docente ISTER",
    "Administrativo ISTER",
)

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
