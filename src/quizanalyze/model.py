"""
Answer Table Model Objects

Defines the parsed form of a survey export:
    - Records (one row of fields, each field a tuple of choices)
    - Questions (a column gathered across every reply)
    - AnswerTable (labels + replies, root container)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about statistics or printing
        - Are immutable
        - Own every string they expose (no views into the input text)
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from .errors import FieldCountMismatchError
from .scanner import Field

Record = Tuple[Field, ...]


@dataclass(frozen=True)
class Question:
    """
    One column of the table, gathered across every reply.

    Properties:
        label: Header text of the column
        index: Column position in labels and in every record
        choices: Every choice given in this column, in reply order then
            choice order within the reply
    """

    label: str
    index: int
    choices: Tuple[str, ...] = ()


@dataclass(frozen=True)
class AnswerTable:
    """
    Root container for a parsed survey export.

    Properties:
        labels:
            Question labels from the header line, one per column

        replies:
            One Record per respondent line, in file order

    INVARIANTS:
        - Every reply has exactly len(labels) fields
        - Checked once, at construction; a table is never inconsistent
    """

    labels: Tuple[str, ...] = ()
    replies: Tuple[Record, ...] = field(default_factory=tuple)

    def __post_init__(self):
        for number, record in enumerate(self.replies, start=2):
            if len(record) != len(self.labels):
                raise FieldCountMismatchError(number, len(self.labels), len(record))

    def __len__(self) -> int:
        return len(self.replies)

    def reply(self, index: int) -> Optional[Record]:
        """
        Retrieve a reply by position.

        Args:
            index: Zero-based reply index

        Returns:
            Record or None if out of range (negative indexes included)
        """
        if 0 <= index < len(self.replies):
            return self.replies[index]
        return None

    def find_question(self, name: str) -> Optional[Question]:
        """Gather the first column whose label contains `name`."""
        return self._find(lambda label: name in label)

    def find_question_exact(self, name: str) -> Optional[Question]:
        """Gather the first column whose label equals `name`."""
        return self._find(lambda label: label == name)

    def column(self, index: int) -> Question:
        """Gather every choice of column `index` across all replies."""
        choices = tuple(
            choice
            for record in self.replies
            for choice in record[index]
        )
        return Question(label=self.labels[index], index=index, choices=choices)

    def _find(self, match: Callable[[str], bool]) -> Optional[Question]:
        for index, label in enumerate(self.labels):
            if match(label):
                return self.column(index)
        return None


__all__ = ["Record", "Question", "AnswerTable"]
