# gui/app.py
import sys

from PySide6.QtWidgets import QApplication

from restaurant_manager.gui.main_window import MainWindow
from restaurant_manager.logic.records import RecordService


def run_gui(service: RecordService) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    win = MainWindow(service)
    win.show()
    return app.exec()
