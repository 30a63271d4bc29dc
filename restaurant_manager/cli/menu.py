# cli/menu.py
import logging
import sqlite3

from restaurant_manager.cli.record_menu import (
    add_record, display_all_lines, payroll_text, remove_record, update_record
)
from restaurant_manager.data.importer import import_records
from restaurant_manager.exceptions import CancelAction, GoBackAction
from restaurant_manager.logic.payroll import format_payroll_report, payroll_report
from restaurant_manager.logic.records import RecordService
from restaurant_manager.utils.input_handler import get_input

logger = logging.getLogger(__name__)

MENU_TEXT = """
--- Restaurant Manager ---
1. Load data from file
2. Display all data
3. Add new record
4. Remove record
5. Update record
6. Calculate total payroll
7. Exit
8. Toggle open late status"""


def main_menu(service: RecordService):
    restaurant = service.restaurant
    while True:
        print(MENU_TEXT)

        try:
            choice = get_input("Enter your choice")
            if choice == "1":
                path = get_input("Enter full file path")
                summary = import_records(service, path)
                for msg in summary.messages:
                    print(msg)
                print(summary.text())
            elif choice == "2":
                for line in display_all_lines(restaurant):
                    print(line)
            elif choice == "3":
                print(add_record(service))
            elif choice == "4":
                print(remove_record(service))
            elif choice == "5":
                print(update_record(service))
            elif choice == "6":
                for line in format_payroll_report(payroll_report(restaurant.employees))[:-1]:
                    print(line)
                print(payroll_text(restaurant))
            elif choice == "7":
                print("Exiting the program. Goodbye!")
                break
            elif choice == "8":
                state = service.toggle_open_late()
                print("Open late is now " + ("on." if state else "off."))
            else:
                print("Invalid option. Please select 1-8.")
        except GoBackAction:
            print("Back to the main menu.")
        except CancelAction:
            print("Cancelled.")
        except sqlite3.Error as e:
            logger.error("storage error in menu: %s", e)
            print(f"Storage error: {e}")
        except EOFError:
            # stdin closed (piped input ran out)
            logger.info("input closed, leaving menu")
            break
