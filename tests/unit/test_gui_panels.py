from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from restaurant_manager.gui.dish_manager import DishPanel  # noqa: E402
from restaurant_manager.gui.employee_manager import EmployeePanel  # noqa: E402
from restaurant_manager.logic.records import RecordService  # noqa: E402
from restaurant_manager.models.restaurant import Restaurant  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def service() -> RecordService:
    service = RecordService(Restaurant("Cafe"))
    service.add_employee("Sam", 10, 20)
    service.add_dish("Soup", 5)
    return service


@pytest.mark.parametrize("panel_cls", [EmployeePanel, DishPanel])
def test_selecting_a_row_without_items_is_ignored(qapp, service: RecordService, panel_cls) -> None:
    panel = panel_cls(service)
    panel.table.setRowCount(0)
    panel.table.insertRow(0)
    panel.table.setCurrentCell(0, 0)

    panel._on_selection_changed()
    assert panel.txt_name.text() == ""


def test_selecting_a_row_fills_the_form(qapp, service: RecordService) -> None:
    panel = EmployeePanel(service)
    panel.refresh()
    panel.table.setCurrentCell(0, 1)
    panel._on_selection_changed()
    assert panel.txt_name.text() == "Sam"
    assert panel.txt_rate.text() == "10"
