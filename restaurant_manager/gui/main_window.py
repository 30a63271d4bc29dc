# gui/main_window.py
import logging
import sqlite3

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QToolBar, QLabel, QMessageBox,
    QSplitter, QFileDialog
)

from restaurant_manager.data.importer import import_records
from restaurant_manager.data.repo import Repo
from restaurant_manager.gui.dish_manager import DishPanel
from restaurant_manager.gui.employee_manager import EmployeePanel
from restaurant_manager.gui.payroll_dialog import PayrollDialog
from restaurant_manager.logic.payroll import payroll_from_rows, payroll_report
from restaurant_manager.logic.records import RecordService

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, service: RecordService):
        super().__init__()
        self.service = service
        self._owned_repo = None  # repo opened from this window; closed by it
        self.setWindowTitle(f"Restaurant Manager - {service.restaurant.name}")
        self.resize(1100, 700)

        self._build_ui()
        self.refresh()

    # ---------------- UI ----------------
    def _build_ui(self):
        tb = QToolBar()
        tb.setMovable(False)
        self.addToolBar(tb)

        act_load = QAction("Load file...", self)
        act_load.triggered.connect(self.load_file)
        tb.addAction(act_load)

        act_db = QAction("Open database...", self)
        act_db.triggered.connect(self.open_database)
        tb.addAction(act_db)

        tb.addSeparator()

        self.act_open_late = QAction("Open late", self)
        self.act_open_late.setCheckable(True)
        self.act_open_late.setChecked(self.service.restaurant.is_open_late())
        self.act_open_late.toggled.connect(self.set_open_late)
        tb.addAction(self.act_open_late)

        act_payroll = QAction("Payroll report", self)
        act_payroll.triggered.connect(self.show_payroll)
        tb.addAction(act_payroll)

        act_refresh = QAction("Refresh", self)
        act_refresh.triggered.connect(self.reload)
        tb.addAction(act_refresh)

        self.title_label = QLabel("")
        self.title_label.setStyleSheet("font-weight:600; padding:0 8px;")
        tb.addSeparator()
        tb.addWidget(self.title_label)

        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)

        splitter = QSplitter(Qt.Horizontal)
        root.addWidget(splitter)
        self.emp_panel = EmployeePanel(self.service)
        self.dish_panel = DishPanel(self.service)
        splitter.addWidget(self.emp_panel)
        splitter.addWidget(self.dish_panel)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)

        self.emp_panel.changed.connect(self.refresh)
        self.dish_panel.changed.connect(self.refresh)

        self.status = self.statusBar()

    # ---------------- state ----------------
    def refresh(self):
        r = self.service.restaurant
        self.emp_panel.refresh()
        self.dish_panel.refresh()
        late = "Open Late" if r.is_open_late() else "Closes Early"
        self.title_label.setText(f"{r.name}  ({late})")
        storage = self.service.repo.db_path if self.service.persistent else "in memory"
        self.status.showMessage(
            f"{len(r.employees)} employees, {len(r.dishes)} dishes, "
            f"payroll ${r.total_payroll():.2f}  |  {storage}"
        )

    def reload(self):
        self.service.reload()
        self.refresh()

    def set_open_late(self, checked: bool):
        self.service.set_open_late(checked)
        self.refresh()

    # ---------------- actions ----------------
    def load_file(self):
        path, _ = QFileDialog.getOpenFileName(self, "Load records", "", "Text files (*.txt *.csv);;All files (*)")
        if not path:
            return
        summary = import_records(self.service, path)
        self.refresh()
        text = summary.text()
        if summary.messages:
            text += "\n\n" + "\n".join(summary.messages[:20])
        QMessageBox.information(self, "Load complete", text)

    def open_database(self):
        path, _ = QFileDialog.getSaveFileName(
            self, "Open or create database", "restaurant.sqlite3",
            "SQLite (*.sqlite3 *.db);;All files (*)",
            options=QFileDialog.Option.DontConfirmOverwrite,
        )
        if not path:
            return
        try:
            repo = Repo(path)
        except (sqlite3.Error, OSError, ValueError) as e:
            logger.error("cannot open database %s: %s", path, e)
            QMessageBox.critical(self, "Connection failed", str(e))
            return
        self.service.detach()
        self._close_owned_repo()
        self._owned_repo = repo
        emp_n, dish_n = self.service.attach(repo)
        self.refresh()
        QMessageBox.information(self, "Connected", f"{path}\n\nLoaded {emp_n} employees and {dish_n} dishes.")

    def show_payroll(self):
        if self.service.persistent:
            lines = payroll_from_rows(self.service.repo.payroll_rows())
            source = self.service.repo.db_path
        else:
            lines = payroll_report(self.service.restaurant.employees)
            source = "in memory"
        PayrollDialog(self, lines, source).exec()

    def _close_owned_repo(self):
        if self._owned_repo is not None:
            self._owned_repo.close()
            self._owned_repo = None

    def closeEvent(self, event):
        if self.service.repo is self._owned_repo:
            self.service.detach()
        self._close_owned_repo()
        super().closeEvent(event)
