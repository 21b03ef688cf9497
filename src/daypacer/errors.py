class DayPacerError(Exception):
    """Base class for daypacer errors."""


class UnknownProfileError(DayPacerError, KeyError):
    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown focus profile: {self.key!r}"


class EmptyTitleError(DayPacerError, ValueError):
    """Raised when a task is added without a title."""


class StateFileError(DayPacerError):
    """Raised when a saved planner state cannot be read."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path
