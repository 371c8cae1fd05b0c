"""Custom exceptions for jsondelta."""


class JsonDeltaError(Exception):
    """Base exception for jsondelta errors."""
    pass


class InvalidJsonInput(JsonDeltaError):
    """Raised when one or both documents cannot be parsed as JSON.

    Each side is reported independently: ``left_error`` / ``right_error``
    hold the parser message for that side, or ``None`` when it was valid.
    """
    def __init__(self, left_error: str = None, right_error: str = None):
        sides = []
        if left_error:
            sides.append(f"left: {left_error}")
        if right_error:
            sides.append(f"right: {right_error}")
        message = "Invalid JSON input (" + "; ".join(sides) + ")" if sides else "Invalid JSON input"
        super().__init__(message)
        self.message = message
        self.left_error = left_error
        self.right_error = right_error

    @property
    def details(self) -> dict:
        return {"left": self.left_error, "right": self.right_error}


class SettingsError(JsonDeltaError):
    """Raised when a diff settings file cannot be parsed."""
    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.message = message
        self.path = path
