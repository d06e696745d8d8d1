from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from PySide6.QtCore import QStandardPaths

from db.schema import CURRENT_DB_VERSION, DEFAULT_BINDER_COUNT

APP_NAME = "ChoirBinderManager"
DB_FILE_NAME = "binders.sqlite3"
LOG_FILE_NAME = "binders.log"


def get_app_data_dir() -> str:
    return QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)


@dataclass(frozen=True)
class AppConfig:
    """Startup configuration, built once in main.py and handed to the storage layer."""

    data_dir: str
    db_file_name: str = DB_FILE_NAME
    schema_version: int = CURRENT_DB_VERSION
    seed_binder_count: int = DEFAULT_BINDER_COUNT
    debug_schema: bool = False
    log_level: str = "INFO"

    @property
    def db_path(self) -> str:
        if self.db_file_name == ":memory:":
            return self.db_file_name
        return os.path.join(self.data_dir, self.db_file_name)

    @property
    def log_path(self) -> str:
        return os.path.join(self.data_dir, LOG_FILE_NAME)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if environ is None else environ
        data_dir = env.get("BINDERS_DATA_DIR") or get_app_data_dir()
        return cls(
            data_dir=os.path.expanduser(data_dir),
            debug_schema=env.get("BINDERS_DEBUG_SCHEMA") == "1",
            log_level=(env.get("BINDERS_LOG_LEVEL") or "INFO").upper(),
        )
