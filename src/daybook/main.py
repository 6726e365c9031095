"""
The main file that starts the Daybook PyQt6 application
"""

import logging
import sys

from PyQt6.QtWidgets import QApplication, QMessageBox

from daybook.config import settings
from daybook.logger import configure_logging
from daybook.models import Database, EntryStore, StorageUnavailable
from daybook.ui.main_window import MainWindow
from daybook.ui.tray_icon import DiaryTrayIcon


def main() -> int:
    configure_logging(settings.LOGGING_DIR_PATH)
    logging.debug("Starting the application...")

    app = QApplication(sys.argv)

    store = EntryStore(Database(settings.DATABASE_FILE_PATH))
    try:
        store.initialize()
    except StorageUnavailable as e:
        logging.getLogger("MainWindow").critical("%s", e)
        _ = QMessageBox.critical(None, "Error", str(e))
        return 1

    try:
        main_window = MainWindow(store)
        tray_icon: DiaryTrayIcon | None = None
        if DiaryTrayIcon.is_supported():
            tray_icon = DiaryTrayIcon(main_window)
            tray_icon.show()
        main_window.show()
        return app.exec()
    finally:
        store.shutdown()
        logging.debug("Application closed")


if __name__ == "__main__":
    sys.exit(main())
