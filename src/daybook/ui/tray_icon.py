"""System tray presence for the diary window"""

import logging

from PyQt6.QtWidgets import (
    QApplication,
    QMenu,
    QStyle,
    QSystemTrayIcon,
    QWidget,
)

from daybook.config import settings


class DiaryTrayIcon(QSystemTrayIcon):
    """Tray icon that shows/hides the window on double-click"""

    logger: logging.Logger = logging.getLogger("Tray")

    def __init__(self, window: QWidget):
        super().__init__(window)
        self.main_window: QWidget = window

        style = QApplication.style()
        if style is not None:
            self.setIcon(
                style.standardIcon(QStyle.StandardPixmap.SP_FileDialogDetailedView)
            )
        self.setToolTip(settings.WINDOW_TITLE)

        self.menu = QMenu(window)
        show_action = self.menu.addAction("Show")
        quit_action = self.menu.addAction("Quit")
        if show_action is not None:
            _ = show_action.triggered.connect(self.show_window)
        if quit_action is not None:
            _ = quit_action.triggered.connect(QApplication.quit)
        self.setContextMenu(self.menu)

        _ = self.activated.connect(self._on_activated)

    @staticmethod
    def is_supported() -> bool:
        return settings.TRAY_ENABLED and QSystemTrayIcon.isSystemTrayAvailable()

    def show_window(self):
        self.main_window.show()
        self.main_window.raise_()
        self.main_window.activateWindow()

    def toggle_window(self):
        if self.main_window.isVisible():
            self.logger.debug("Hiding the window")
            self.main_window.hide()
        else:
            self.logger.debug("Showing the window")
            self.show_window()

    def _on_activated(self, reason: QSystemTrayIcon.ActivationReason):
        if reason == QSystemTrayIcon.ActivationReason.DoubleClick:
            self.toggle_window()
