"""Abstract base class for Scratchpad interfaces."""

from abc import ABC, abstractmethod

from scratchpad.base import BaseComponent


class BaseInterface(BaseComponent, ABC):
    """Interface that can be started from the program entry point."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the interface name."""

    @abstractmethod
    def run(self) -> None:
        """Run the interface."""
