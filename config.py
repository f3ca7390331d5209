"""
config.py
---------
Central configuration. Loads environment variables from the .env file
and exposes them as typed constants.
"""
import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
     return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


# Database
DB_SERVER = os.getenv("DB_SERVER")
DB_PORT = os.getenv("DB_PORT", "1433")
DB_USER = os.getenv("DB_USER")
DB_PASS = os.getenv("DB_PASS")
DB_NAME = os.getenv("DB_NAME")


def build_database_url() -> str:
     """
     Resolve the SQLAlchemy URL.

     DATABASE_URL wins when set. Otherwise an MS SQL Server URL is built
     from the DB_* variables when DB_SERVER is present, and a local SQLite
     file is used as the fallback.
     """
     explicit = os.getenv("DATABASE_URL")
     if explicit:
          return explicit
     if DB_SERVER:
          safe_user = quote_plus(DB_USER or "")
          safe_pass = quote_plus(DB_PASS or "")
          return f"mssql+pymssql://{safe_user}:{safe_pass}@{DB_SERVER}:{DB_PORT}/{DB_NAME}"
     return "sqlite:///./catalog.db"


DATABASE_URL: str = build_database_url()
SQL_ECHO: bool = _env_flag("SQL_ECHO", "false")
AUTO_CREATE_TABLES: bool = _env_flag("AUTO_CREATE_TABLES", "true")
SEED_ON_STARTUP: bool = _env_flag("SEED_ON_STARTUP", "false")

# HTTP
CORS_ORIGINS: list[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
PORT: int = int(os.getenv("PORT", "10000"))

# Uploads
MAX_UPLOAD_BYTES: int = int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))

# Property search
PROPERTY_NAME_CASE_SENSITIVE: bool = _env_flag("PROPERTY_NAME_CASE_SENSITIVE", "true")

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
