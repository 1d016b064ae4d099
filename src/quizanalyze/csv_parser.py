"""
CSV Parser for quizanalyze (Raw Input → AnswerTable).

Converts a survey export to an AnswerTable.

CSV Format:
    "question 1", "question 2", "question 3"
    "answer", "choice a;choice b", "answer"

Syntax Notes:
    - Only text inside double quotes is content
    - , separates fields outside quoted text
    - ; separates choices within a field, in or out of quoted text
    - Newlines inside quoted text do not end a record
    - No doubled-quote escaping: every " toggles quoted text
"""

import os
from typing import List, Optional

from quizanalyze.errors import EmptyInputError
from quizanalyze.model import AnswerTable, Record
from quizanalyze.scanner import INITIAL_STATE, QUOTE, finish, step

NEWLINE = '\n'


def split_lines(text: str) -> List[str]:
    """
    Split raw text into logical lines.

    A newline ends a line only outside quoted text. Each split happens AT
    the newline, so every line after the first starts with the newline that
    ended the previous one. The record scanner drops it, and joining the
    result gives back `text` unchanged.

    Args:
        text: Whole file contents

    Returns:
        Logical lines in file order; at least one (possibly empty) line
    """
    lines = []
    in_quoted_text = False
    last_split = 0

    for index, char in enumerate(text):
        if char == QUOTE:
            in_quoted_text = not in_quoted_text
        elif char == NEWLINE and not in_quoted_text:
            lines.append(text[last_split:index])
            last_split = index

    lines.append(text[last_split:])
    return lines


def parse_line(line: str) -> Record:
    """Parse one logical line into its fields."""
    state = INITIAL_STATE
    fields = []

    for char in line:
        state, field = step(state, char)
        if field is not None:
            fields.append(field)

    fields.append(finish(state))
    return tuple(fields)


def _collapse_label(field) -> str:
    return field[0] if field else ""


def parse_answers_string(text: str) -> AnswerTable:
    """
    Parse survey export text into an AnswerTable.

    Args:
        text: Whole export as a string

    Returns:
        AnswerTable with labels from the first line and one reply per
        following line

    Blank lines at the end of the text are ignored. In a single-column
    export this also drops a trailing empty reply: one header line, one
    answer line and a final newline give one reply, not two.

    Raises:
        EmptyInputError: If there is no header line
        FieldCountMismatchError: If any reply's field count differs from the
            header's
    """
    if not text.strip():
        raise EmptyInputError()

    header, *rest = split_lines(text)

    # A file's final newline leaves a blank tail line; it is not a reply.
    while rest and not rest[-1].strip():
        rest.pop()

    labels = tuple(_collapse_label(field) for field in parse_line(header))
    replies = tuple(parse_line(line) for line in rest)

    return AnswerTable(labels=labels, replies=replies)


def parse_answers_file(filepath: str, encoding: Optional[str] = "utf-8") -> AnswerTable:
    """
    Parse a survey export file into an AnswerTable.

    Args:
        filepath: Path to the export
        encoding: Text encoding of the file

    Returns:
        AnswerTable

    Raises:
        FileNotFoundError: If file doesn't exist
        AnswerParseError: If parsing fails
    """
    if not os.path.isfile(filepath):
        raise FileNotFoundError(f"answer file not found: {filepath}")

    with open(filepath, 'r', encoding=encoding, newline='') as f:
        content = f.read()

    return parse_answers_string(content)


__all__ = [
    "split_lines",
    "parse_line",
    "parse_answers_string",
    "parse_answers_file",
]
