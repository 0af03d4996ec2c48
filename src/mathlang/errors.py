"""Error types with formatted source context."""

from __future__ import annotations

from mathlang.tokens import Position


class MalformedInputError(Exception):
    """Raised when source text cannot be scanned.

    ``position`` is where the offending construct starts. For an unterminated
    string that is the opening quote, and the rendered snippet underlines
    everything from there to the end of the line.
    """

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def source_line(self) -> str:
        """The line holding the error position, without its line terminator."""
        offset = self.position.offset
        start = self.source.rfind("\n", 0, offset) + 1
        end = self.source.find("\n", offset)
        if end == -1:
            end = len(self.source)
        return self.source[start:end].rstrip("\r")

    def format(self, filename: str = "input.mlang") -> str:
        line = self.source_line()
        col = self.position.column
        width = max(1, len(line) - col + 1)

        number = str(self.position.line)
        gutter = " " * len(number)

        return "\n".join(
            [
                f"error: {self.message}",
                f"{gutter}--> {filename}:{number}:{col}",
                f"{gutter} |",
                f"{number} | {line}",
                f"{gutter} | {' ' * (col - 1)}{'^' * width}",
            ]
        )
