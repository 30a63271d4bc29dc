# gui/dish_manager.py
from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QGroupBox, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QLineEdit,
    QPushButton, QTableWidget, QTableWidgetItem, QMessageBox, QAbstractItemView
)

from restaurant_manager.logic.records import RecordService
from restaurant_manager.utils.parse_utils import parse_number

COLUMNS = ["ID", "Dish", "Price"]


class DishPanel(QGroupBox):
    changed = Signal()

    def __init__(self, service: RecordService, parent=None):
        super().__init__("Menu", parent)
        self.service = service
        self._build_ui()
        self.refresh()

    def _build_ui(self):
        root = QVBoxLayout(self)

        form = QGridLayout()
        self.txt_name = QLineEdit()
        form.addWidget(QLabel("Dish name*"), 0, 0); form.addWidget(self.txt_name, 0, 1)
        self.txt_price = QLineEdit()
        self.txt_price.setPlaceholderText("e.g. 9.95")
        form.addWidget(QLabel("Price"), 1, 0); form.addWidget(self.txt_price, 1, 1)
        root.addLayout(form)

        btn_row = QHBoxLayout()
        self.btn_add = QPushButton("+ Add")
        self.btn_update = QPushButton("Update price")
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

    def refresh(self):
        self.table.setRowCount(0)
        for d in self.service.restaurant.dishes:
            r = self.table.rowCount()
            self.table.insertRow(r)
            self.table.setItem(r, 0, QTableWidgetItem(str(d.id)))
            self.table.setItem(r, 1, QTableWidgetItem(d.name))
            price = QTableWidgetItem(f"${d.price:.2f}")
            price.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
            self.table.setItem(r, 2, price)
        self.table.resizeColumnsToContents()

    def _on_selection_changed(self):
        row = self.table.currentRow()
        if row < 0:
            return
        item = self.table.item(row, 1)
        if item is None:
            return
        dish = self.service.restaurant.find_dish(item.text())
        if dish is None:
            return
        self.txt_name.setText(dish.name)
        self.txt_price.setText(f"{dish.price:g}")

    def _clear_form(self):
        self.txt_name.clear()
        self.txt_price.clear()
        self.table.clearSelection()
        self.txt_name.setFocus()

    def _read_price(self):
        try:
            return parse_number(self.txt_price.text())
        except ValueError:
            QMessageBox.warning(self, "Check input", "Please enter a number for price.")
            return None

    def _report(self, result, title: str):
        if result:
            self.changed.emit()
            self._clear_form()
            QMessageBox.information(self, title, result.message)
        else:
            QMessageBox.warning(self, title, result.message)

    def _on_add(self):
        price = self._read_price()
        if price is None:
            return
        self._report(self.service.add_dish(self.txt_name.text(), price), "Add dish")

    def _on_update(self):
        price = self._read_price()
        if price is None:
            return
        self._report(self.service.update_dish(self.txt_name.text(), price), "Update dish")

    def _on_remove(self):
        name = self.txt_name.text().strip()
        if name and QMessageBox.question(self, "Confirm", f"Remove dish [{name}]?") != QMessageBox.Yes:
            return
        self._report(self.service.remove_dish(name), "Remove dish")
