# utils/input_handler.py
from restaurant_manager.exceptions import CancelAction, GoBackAction
from restaurant_manager.utils.parse_utils import parse_number


def get_input(prompt: str, allow_empty: bool = False, default: str | None = None) -> str:
    label = prompt
    if default is not None:
        label += f" [{default}]"
    label += ": "

    while True:
        v = input(label).strip()

        low = v.lower()
        if low == "cancel":
            raise CancelAction()
        if low == "back":
            raise GoBackAction()

        if not v and default is not None:
            return default
        if not v and allow_empty:
            return ""
        if not v:
            print("Enter a value, or 'cancel' / 'back'.")
            continue
        return v


def get_number(prompt: str) -> float:
    """ValueError on non-numeric input; callers turn it into a message."""
    return parse_number(get_input(prompt))
