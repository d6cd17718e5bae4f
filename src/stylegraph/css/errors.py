"""CSS parser error types."""


class ParseError(Exception):
    """Raised when CSS source cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        file: str | None = None,
    ):
        self.line = line
        self.column = column
        self.file = file
        super().__init__(message)
