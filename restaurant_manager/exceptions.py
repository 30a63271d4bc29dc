# exceptions.py
class ValidationError(ValueError):
    """Raised when an entity would be constructed with invalid values."""


class CancelAction(Exception):
    """User typed 'cancel' at a prompt: abandon the current flow."""


class GoBackAction(Exception):
    """User typed 'back' at a prompt: return to the previous menu."""
