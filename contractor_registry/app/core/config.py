"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service can start without any configuration at all; in that case the
contractor list is kept in a SQLite file next to the package.
"""

import os
from dataclasses import dataclass
from pathlib import Path

# Project root (the directory containing the ``contractor_registry`` package)
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Contractor Registry")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Where the contractor list lives.  ``sqlite`` keeps the slot in a
    # key/value table, ``file`` writes one JSON file per slot under
    # ``data_dir`` and ``memory`` keeps it only for the lifetime of the
    # process.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "sqlite")

    # Name of the slot holding the serialized contractor list.  The
    # browser version of the registry used the same key in localStorage.
    storage_key: str = os.getenv("STORAGE_KEY", "contractors")

    # Path to the SQLite database used by the ``sqlite`` backend.  A
    # relative path is resolved against the project root.
    database_url: str = os.getenv("DATABASE_URL", "contractors.db")

    # Directory used by the ``file`` backend.
    data_dir: str = os.getenv("DATA_DIR", "data")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


def resolve_path(value: str) -> Path:
    """Return ``value`` as an absolute path, relative paths anchored at the project root."""
    path = Path(value)
    if path.is_absolute():
        return path
    return (BASE_DIR / path).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
