"""Interface contract for output sinks."""

from abc import ABC, abstractmethod


class OutputSink(ABC):
    """Defines where dispatched lines are written."""

    @abstractmethod
    def log(self, text: str) -> None:
        """Write one line of text to the sink."""
        raise NotImplementedError
