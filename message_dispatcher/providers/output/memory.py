"""In-memory output sink implementation."""

from message_dispatcher.interfaces.output_sink import OutputSink


class MemoryOutputSink(OutputSink):
    """Collects lines in order so callers can return or inspect them."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def log(self, text: str) -> None:
        self.lines.append(text)
