from dataclasses import dataclass
import getpass
import os
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()

DEFAULT_MAPPING_PATH = Path(__file__).resolve().parent / "field_mappings.json"


@dataclass(frozen=True)
class Settings:
    database_url: str
    db_user: str
    db_password: str
    db_schema: str | None
    output_dir: str
    mapping_path: str
    log_level: str


def _getenv(name: str, default: str) -> str:
    # Blank values count as unset.
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value


def _default_db_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ""


def _schema_from_env() -> str | None:
    # Blank DB_SCHEMA targets databases without schemas, such as SQLite.
    value = os.getenv("DB_SCHEMA")
    if value is None:
        return "verafin_standard"
    return value.strip() or None


def get_settings() -> Settings:
    return Settings(
        database_url=_getenv("DB_URL", "postgresql+psycopg://localhost:5432/verafin_demo"),
        db_user=_getenv("DB_USER", _default_db_user()),
        db_password=_getenv("DB_PASS", ""),
        db_schema=_schema_from_env(),
        output_dir=_getenv("OUTPUT_DIR", "./data/output"),
        mapping_path=_getenv("FIELD_MAPPINGS_PATH", str(DEFAULT_MAPPING_PATH)),
        log_level=_getenv("LOG_LEVEL", "INFO"),
    )
