"""
Exception types raised by quizanalyze.

Lookup misses are NOT errors: AnswerTable.find_question returns None.
"""


class QuizAnalyzeError(Exception):
    """Base class for all quizanalyze errors."""
    pass


class AnswerParseError(QuizAnalyzeError):
    """Raised when a survey export cannot be turned into an AnswerTable."""
    pass


class EmptyInputError(AnswerParseError):
    """Raised when there is no header line to read."""

    def __init__(self, message: str = "first line missing"):
        super().__init__(message)


class FieldCountMismatchError(AnswerParseError):
    """Raised when a reply has a different number of fields than the header."""

    def __init__(self, line_number: int, expected: int, actual: int):
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"replies are not the same size as labels: line {line_number} "
            f"has {actual} fields, expected {expected}"
        )


class ConfigError(QuizAnalyzeError):
    """Raised when command-line arguments or a mapping string are invalid."""
    pass


class AnalysisError(QuizAnalyzeError):
    """Raised when statistics cannot be computed from the parsed answers."""
    pass


__all__ = [
    "QuizAnalyzeError",
    "AnswerParseError",
    "EmptyInputError",
    "FieldCountMismatchError",
    "ConfigError",
    "AnalysisError",
]
