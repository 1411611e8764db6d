"""Console output sink implementation."""

import sys
from typing import TextIO

from message_dispatcher.interfaces.output_sink import OutputSink


class ConsoleOutputSink(OutputSink):
    """Writes each line to standard output."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def log(self, text: str) -> None:
        print(text, file=self._stream or sys.stdout)
