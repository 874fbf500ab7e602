# IN THIS FILE: ALL CONSTANTS (OVERRIDABLE FROM THE ENVIRONMENT)

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env (in the working directory) if present
load_dotenv(os.getenv("CLEANER_ENV_FILE", ".env"))

# -----------------------------------------------------------------------------
# 1. SERVER
# -----------------------------------------------------------------------------
HOST = os.getenv("CLEANER_HOST", "0.0.0.0")
PORT = int(os.getenv("CLEANER_PORT", "5000"))
LOG_LEVEL = os.getenv("CLEANER_LOG_LEVEL", "INFO").upper()

# Every endpoint except /status lives under this prefix
API_PREFIX = "/tibber-developer-test"

# Where execution reports are kept:
#   "memory"                   -> in-process only
#   "postgres"                 -> connection built from the POSTGRES_* settings below
#   "postgresql://user@host/db" -> explicit connection URL
STORE_URL = os.getenv("CLEANER_STORE_URL", "memory")

# -----------------------------------------------------------------------------
# 2. REQUEST LIMITS
# -----------------------------------------------------------------------------
# Upper bounds on a single path request. Step counts are not limited by the
# path algorithm itself, only kept sane for the HTTP surface.
MAX_COMMANDS = int(os.getenv("MAX_COMMANDS", "10000"))
MAX_STEPS = int(os.getenv("MAX_STEPS", "100000"))

# -----------------------------------------------------------------------------
# 3. CLIENT
# -----------------------------------------------------------------------------
DEFAULT_SERVER_URL = os.getenv("CLEANER_SERVER_URL", f"http://localhost:{PORT}")
TIMEOUT = 60  # HTTP request timeout in seconds
MAX_RETRIES = 3
RETRY_DELAY = 0.3


# -----------------------------------------------------------------------------
# 4. DATABASE
# -----------------------------------------------------------------------------
def get_postgres_settings() -> dict:
    """
    Postgres connection settings, read from the environment at call time.

    HOSTNAME, POSTGRES_USER and POSTGRES_DB name the server, user and
    database. The password is read from the file named by
    POSTGRES_PASSWORD_FILE (a mounted secret), falling back to
    POSTGRES_PASSWORD.
    """
    password_file = os.getenv("POSTGRES_PASSWORD_FILE")
    if password_file:
        password = Path(password_file).read_text().strip()
    else:
        password = os.getenv("POSTGRES_PASSWORD", "")

    return {
        "host": os.getenv("HOSTNAME", "localhost"),
        "user": os.getenv("POSTGRES_USER", "postgres"),
        "password": password,
        "dbname": os.getenv("POSTGRES_DB", "postgres"),
    }
