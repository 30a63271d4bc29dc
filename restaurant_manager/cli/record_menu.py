# cli/record_menu.py
from typing import List

from restaurant_manager.logic.records import RecordService
from restaurant_manager.models.restaurant import Restaurant
from restaurant_manager.utils.input_handler import get_input, get_number


def _choose_kind(action: str) -> str:
    print(f"{action} (1) Employee or (2) Dish?")
    return get_input("Choice")


def display_all_lines(restaurant: Restaurant) -> List[str]:
    lines = [
        f"Restaurant: {restaurant.name}",
        "Status: " + ("Open Late" if restaurant.is_open_late() else "Closes Early"),
        "------------------------------------",
    ]
    employees = restaurant.employee_display_strings()
    if not employees:
        lines.append("No employees to display.")
    else:
        lines.append("")
        lines.append("Employees:")
        lines.append("ID | Name            | Rate      | Hours    | Weekly Pay")
        lines.extend(employees)

    menu = restaurant.menu_display_strings()
    if not menu:
        lines.append("Menu is empty.")
    else:
        lines.append("")
        lines.append("Menu:")
        lines.append("[ID] Dish Name            | Price")
        lines.extend(menu)
    return lines


def payroll_text(restaurant: Restaurant) -> str:
    return f"Total weekly payroll: ${restaurant.total_payroll():.2f}"


def add_record(service: RecordService) -> str:
    kind = _choose_kind("Add")
    if kind == "1":
        name = get_input("Employee name")
        try:
            rate = get_number("Hourly rate")
            hours = get_number("Hours worked")
        except ValueError:
            return "Invalid input; please enter numbers for rate/hours."
        result = service.add_employee(name, rate, hours)
        return result.message if result else f"Failed to add employee: {result.message}"
    if kind == "2":
        name = get_input("Dish name")
        try:
            price = get_number("Price")
        except ValueError:
            return "Invalid input; please enter a number for price."
        result = service.add_dish(name, price)
        return result.message if result else f"Failed to add dish: {result.message}"
    return "Invalid selection."


def remove_record(service: RecordService) -> str:
    kind = _choose_kind("Remove")
    if kind == "1":
        return service.remove_employee(get_input("Employee name to remove")).message
    if kind == "2":
        return service.remove_dish(get_input("Dish name to remove")).message
    return "Invalid selection."


def update_record(service: RecordService) -> str:
    kind = _choose_kind("Update")
    if kind == "1":
        name = get_input("Employee name to update")
        emp = service.restaurant.find_employee(name)
        if emp is None:
            return "Employee not found."
        try:
            rate = get_number("New hourly rate")
            hours = get_number("New hours worked")
        except ValueError:
            return "Invalid input; please enter numeric values."
        result = service.update_employee(name, rate, hours)
        if result.errors:
            return f"{result.message} ({'; '.join(result.errors)})"
        return result.message
    if kind == "2":
        name = get_input("Dish name to update")
        if service.restaurant.find_dish(name) is None:
            return "Dish not found."
        try:
            price = get_number("New price")
        except ValueError:
            return "Invalid input; please enter a number for price."
        return service.update_dish(name, price).message
    return "Invalid selection."
