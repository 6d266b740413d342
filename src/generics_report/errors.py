class SourceReadError(OSError):
    """The input file is missing, unreadable or not valid text."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to read source file {path}: {reason}")
        self.path = path
        self.reason = reason


class SourceParseError(ValueError):
    """The input is not syntactically valid for the parser's grammar."""

    def __init__(self, detail: str, line: int, column: int) -> None:
        super().__init__(f"{line}:{column}: {detail}")
        self.detail = detail
        self.line = line
        self.column = column
