# gui/payroll_dialog.py
from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QLabel, QTableWidget, QTableWidgetItem,
    QDialogButtonBox, QAbstractItemView, QHeaderView
)

from restaurant_manager.logic.payroll import PayrollLine, payroll_total


class PayrollDialog(QDialog):
    """Read-only weekly payroll: one row per employee + total."""

    def __init__(self, parent, lines: list[PayrollLine], source: str = "in memory"):
        super().__init__(parent)
        self.setWindowTitle("Payroll Report")
        self.resize(520, 420)

        root = QVBoxLayout(self)
        root.addWidget(QLabel(f"Source: {source}"))

        table = QTableWidget(len(lines), 4)
        table.setHorizontalHeaderLabels(["Name", "Hours", "Rate", "Pay"])
        table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        table.verticalHeader().setVisible(False)
        table.horizontalHeader().setSectionResizeMode(0, QHeaderView.Stretch)
        for r, ln in enumerate(lines):
            cells = [ln.name, f"{ln.hours:.2f}", f"${ln.rate:.2f}", f"${ln.pay:.2f}"]
            for c, text in enumerate(cells):
                item = QTableWidgetItem(text)
                if c:
                    item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
                table.setItem(r, c, item)
        root.addWidget(table)

        total = QLabel(f"Total Payroll: ${payroll_total(lines):.2f}")
        total.setStyleSheet("font-weight:600;")
        root.addWidget(total)

        btns = QDialogButtonBox(QDialogButtonBox.Close)
        btns.rejected.connect(self.reject)
        root.addWidget(btns)
