import logging
import os
import sys
from pathlib import Path

from PySide6.QtCore import QCoreApplication

ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from core.config import APP_NAME, AppConfig
from core.controller import ViewController
from core.state import AppState
from db.database import Database
from db.errors import StorageError
from ui.main_window import MainWindow

logger = logging.getLogger("binders")


def configure_logging(config: AppConfig) -> None:
    # The terminal belongs to the UI, so logs only go to a file.
    if config.data_dir:
        os.makedirs(config.data_dir, exist_ok=True)
    logging.basicConfig(
        filename=config.log_path,
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def debug_log_schema(db: Database) -> None:
    for table in ("binders", "songs", "binder_songs"):
        logger.info("[%s table schema]", table)
        for name, col_type in db.table_info(table):
            logger.info("- %s (%s)", name, col_type)


def init_app_state() -> AppState:
    # QStandardPaths needs the application name before the data dir is resolved.
    QCoreApplication.setApplicationName(APP_NAME)
    return AppState(AppConfig.from_env())


def main() -> int:
    qt_app = QCoreApplication(sys.argv)  # noqa: F841

    app_state = init_app_state()
    config = app_state.config

    try:
        configure_logging(config)
    except OSError as e:
        print(f"{APP_NAME}: cannot write to data directory {config.data_dir}: {e}", file=sys.stderr)
        return 1
    logger.info("Starting %s (data dir %s)", APP_NAME, config.data_dir)

    try:
        with Database.open(config) as db:
            app_state.db = db
            if config.debug_schema:
                debug_log_schema(db)

            controller = ViewController(app_state, db)
            MainWindow(app_state, controller).run()
    except StorageError as e:
        logger.exception("Storage failure")
        print(f"{APP_NAME}: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
