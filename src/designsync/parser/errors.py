"""Parser error types."""


class ParseError(Exception):
    """Raised when a class token cannot be parsed."""

    def __init__(self, message: str, token: str = "", column: int | None = None):
        self.token = token
        self.column = column
        super().__init__(message)
