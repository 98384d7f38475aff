"""Base component shared by Scratchpad classes."""

from typing import Any

from scratchpad.utils.logger import get_logger


class BaseComponent:
    """Base class that provides a structured logger to subclasses."""

    def __init__(self) -> None:
        """Initialize the component logger."""
        self.logger: Any = get_logger(
            type(self).__module__,
            component=type(self).__name__,
        )
