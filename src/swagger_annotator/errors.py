class AnnotatorError(Exception):
    """Base class for errors raised by swagger-annotator."""


class GoSyntaxError(AnnotatorError):
    def __init__(self, row: int, column: int) -> None:
        self.row = row
        self.column = column
        super().__init__(f"syntax error at line {row + 1}, column {column + 1}")


class FileProcessingError(AnnotatorError):
    """Reading, parsing or writing one source file failed."""


class GitStatusError(AnnotatorError):
    """The working tree status could not be determined."""
