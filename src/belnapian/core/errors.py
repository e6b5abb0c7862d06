from typing import Any


class NotRepresentableError(ValueError):
    """Raised when a truth value has no counterpart in the target type."""

    def __init__(self, value: Any, target: str):
        self.value = value
        self.target = target
        super().__init__(f"{value!r} is not representable as {target}")
