"""Base reporter interface."""

from abc import ABC, abstractmethod


class Reporter(ABC):
    """Abstract base class for run diagnostics and outputs.

    Concrete reporters decide where messages go. The base class keeps
    track of whether a failure has been signalled.
    """

    def __init__(self):
        self.failed = False

    @abstractmethod
    def info(self, message: str) -> None:
        """Informational line."""
        pass

    @abstractmethod
    def warning(self, message: str) -> None:
        """Non-blocking warning."""
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        """Error line. Does not change the run status by itself."""
        pass

    @abstractmethod
    def set_output(self, name: str, value: str) -> None:
        """Publish a named result value. Later calls overwrite earlier ones."""
        pass

    def set_failed(self, message: str) -> None:
        """Mark the run as failed and report why."""
        self.failed = True
        self.error(message)
