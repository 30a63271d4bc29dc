# gui/employee_manager.py
from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QGroupBox, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QLineEdit,
    QPushButton, QTableWidget, QTableWidgetItem, QMessageBox, QAbstractItemView
)

from restaurant_manager.logic.records import RecordService
from restaurant_manager.utils.parse_utils import parse_number

COLUMNS = ["ID", "Name", "Rate", "Hours", "Weekly Pay"]


class EmployeePanel(QGroupBox):
    """
    Top: edit form (name / hourly rate / hours worked) + buttons
    Bottom: roster table in insertion order
    """
    changed = Signal()

    def __init__(self, service: RecordService, parent=None):
        super().__init__("Employees", parent)
        self.service = service
        self._build_ui()
        self.refresh()

    # ---------- UI ----------
    def _build_ui(self):
        root = QVBoxLayout(self)

        form = QGridLayout()
        r = 0
        self.txt_name = QLineEdit()
        self.txt_name.setPlaceholderText("Letters and spaces only")
        form.addWidget(QLabel("Name*"), r, 0); form.addWidget(self.txt_name, r, 1); r += 1

        self.txt_rate = QLineEdit()
        self.txt_rate.setPlaceholderText("e.g. 15.50")
        form.addWidget(QLabel("Hourly rate"), r, 0); form.addWidget(self.txt_rate, r, 1); r += 1

        self.txt_hours = QLineEdit()
        self.txt_hours.setPlaceholderText("0 - 168")
        form.addWidget(QLabel("Hours worked"), r, 0); form.addWidget(self.txt_hours, r, 1); r += 1
        root.addLayout(form)

        btn_row = QHBoxLayout()
        self.btn_add = QPushButton("+ Add")
        self.btn_update = QPushButton("Update")
        self.btn_remove = QPushButton("Remove")
        self.btn_clear = QPushButton("Clear")
        for b in (self.btn_add, self.btn_update, self.btn_remove, self.btn_clear):
            btn_row.addWidget(b)
        root.addLayout(btn_row)

        self.table = QTableWidget(0, len(COLUMNS))
        self.table.setHorizontalHeaderLabels(COLUMNS)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        root.addWidget(self.table)

        self.table.itemSelectionChanged.connect(self._on_selection_changed)
        self.btn_add.clicked.connect(self._on_add)
        self.btn_update.clicked.connect(self._on_update)
        self.btn_remove.clicked.connect(self._on_remove)
        self.btn_clear.clicked.connect(self._clear_form)

    # ---------- data ----------
    def refresh(self):
        self.table.setRowCount(0)
        for e in self.service.restaurant.employees:
            r = self.table.rowCount()
            self.table.insertRow(r)
            cells = [str(e.id), e.name, f"${e.hourly_rate:.2f}",
                     f"{e.hours_worked:.1f}", f"${e.weekly_pay:.2f}"]
            for c, text in enumerate(cells):
                item = QTableWidgetItem(text)
                if c != 1:
                    item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
                self.table.setItem(r, c, item)
        self.table.resizeColumnsToContents()

    def _on_selection_changed(self):
        row = self.table.currentRow()
        if row < 0:
            return
        item = self.table.item(row, 1)
        if item is None:
            return
        emp = self.service.restaurant.find_employee(item.text())
        if emp is None:
            return
        self.txt_name.setText(emp.name)
        self.txt_rate.setText(f"{emp.hourly_rate:g}")
        self.txt_hours.setText(f"{emp.hours_worked:g}")

    def _clear_form(self):
        self.txt_name.clear()
        self.txt_rate.clear()
        self.txt_hours.clear()
        self.table.clearSelection()
        self.txt_name.setFocus()

    def _read_numbers(self):
        try:
            return parse_number(self.txt_rate.text()), parse_number(self.txt_hours.text())
        except ValueError:
            QMessageBox.warning(self, "Check input", "Please enter numbers for rate and hours.")
            return None

    def _report(self, result, title: str):
        if result:
            self.changed.emit()
            self._clear_form()
            QMessageBox.information(self, title, result.message)
        else:
            detail = "\n\n" + "\n".join(result.errors) if result.errors else ""
            if result.errors:
                # partial update: some values were applied
                self.changed.emit()
            QMessageBox.warning(self, title, result.message + detail)

    # ---------- buttons ----------
    def _on_add(self):
        nums = self._read_numbers()
        if nums is None:
            return
        self._report(self.service.add_employee(self.txt_name.text(), *nums), "Add employee")

    def _on_update(self):
        nums = self._read_numbers()
        if nums is None:
            return
        self._report(self.service.update_employee(self.txt_name.text(), *nums), "Update employee")

    def _on_remove(self):
        name = self.txt_name.text().strip()
        if name and QMessageBox.question(self, "Confirm", f"Remove employee [{name}]?") != QMessageBox.Yes:
            return
        self._report(self.service.remove_employee(name), "Remove employee")
