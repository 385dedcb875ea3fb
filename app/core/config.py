"""
Configuración central. Carga las variables del archivo .env y las expone
como constantes tipadas.
"""

import os
import urllib.parse

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "si", "on")


# ── SQL Server (opcional) ─────────────────────────────────
DB_SERVER: str = os.getenv("DB_SERVER", "")
DB_PORT: int = int(os.getenv("DB_PORT", "1433"))
DB_NAME: str = os.getenv("DB_NAME", "AutogestionSena")
DB_USER: str = os.getenv("DB_USER", "")
DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
DB_DRIVER: str = os.getenv("DB_DRIVER", "ODBC Driver 18 for SQL Server")


def build_mssql_url() -> str:
    """URL de SQLAlchemy para SQL Server vía pyodbc."""
    params = urllib.parse.quote_plus(
        f"DRIVER={{{DB_DRIVER}}};"
        f"SERVER={DB_SERVER},{DB_PORT};"
        f"DATABASE={DB_NAME};"
        f"UID={DB_USER};"
        f"PWD={DB_PASSWORD};"
        "TrustServerCertificate=yes;"
    )
    return f"mssql+pyodbc:///?odbc_connect={params}"


# ── Base de datos ─────────────────────────────────────────
# DATABASE_URL tiene prioridad; si no existe y hay DB_SERVER se usa SQL Server.
DATABASE_URL: str = os.getenv("DATABASE_URL") or (
    build_mssql_url() if DB_SERVER else "sqlite:///./autogestion.db"
)
SQL_ECHO: bool = _as_bool(os.getenv("SQL_ECHO", "false"))

# ── API ───────────────────────────────────────────────────
API_TITLE: str = os.getenv("API_TITLE", "Autogestión SENA API")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

_raw_origins = os.getenv("CORS_ORIGINS", "*")
CORS_ORIGINS: list[str] = [o.strip() for o in _raw_origins.split(",") if o.strip()]

# ── Reportes ──────────────────────────────────────────────
EXPORT_BATCH_SIZE: int = int(os.getenv("EXPORT_BATCH_SIZE", "1000"))
PDF_MAX_ROWS: int = int(os.getenv("PDF_MAX_ROWS", "1000"))
