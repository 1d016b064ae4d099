"""
Record scanner: the character-level state machine behind the record parser.

One logical line is consumed one character at a time by `step`, a pure
transition function:

    step(state, char) -> (new_state, emitted_field or None)

Character classes:
    "   toggles quoted text, never content
    ,   field boundary (only outside quoted text)
    ;   choice boundary (in or out of quoted text)
    *   content while inside quoted text, dropped otherwise

Only quoted text is content. Unquoted whitespace and stray characters between
delimiters are discarded.

`finish` plays the role of the comma that a record's last cell never has.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

QUOTE = '"'
FIELD_SEPARATOR = ','
CHOICE_SEPARATOR = ';'

Field = Tuple[str, ...]


@dataclass(frozen=True)
class ScanState:
    """
    Scanner state between two characters.

    Properties:
        in_quoted_text: True between an opening and a closing quote
        choice: text of the choice currently being collected
        choices: finished choices of the field currently being collected
    """

    in_quoted_text: bool = False
    choice: str = ""
    choices: Field = ()


INITIAL_STATE = ScanState()


def is_field_boundary(state: ScanState, char: str) -> bool:
    return char == FIELD_SEPARATOR and not state.in_quoted_text


def is_choice_boundary(state: ScanState, char: str) -> bool:
    """
    Semicolons split choices in any quote state, so `state` is unused. It is
    kept so both boundary tests share the signature of `is_field_boundary`.
    """
    return char == CHOICE_SEPARATOR


def step(state: ScanState, char: str) -> Tuple[ScanState, Optional[Field]]:
    """
    Advance the scanner by one character.

    Args:
        state: State before `char`
        char: Single character of the line

    Returns:
        (new_state, field) where field is the completed Field when `char`
        closed one, otherwise None
    """
    field_boundary = is_field_boundary(state, char)
    choice_boundary = is_choice_boundary(state, char)

    choice = state.choice
    if state.in_quoted_text and char != QUOTE and char != CHOICE_SEPARATOR:
        choice += char

    in_quoted_text = state.in_quoted_text
    if char == QUOTE:
        in_quoted_text = not in_quoted_text

    choices = state.choices
    if choice_boundary or field_boundary:
        choices = choices + (choice,)
        choice = ""

    if field_boundary:
        return ScanState(in_quoted_text=in_quoted_text), choices

    return ScanState(in_quoted_text=in_quoted_text, choice=choice, choices=choices), None


def finish(state: ScanState) -> Field:
    """
    Close the last field of a line.

    Behaves like a comma outside quoted text, whatever the quote state is, so
    unbalanced quoting still yields the field collected so far.
    """
    _, field = step(replace(state, in_quoted_text=False), FIELD_SEPARATOR)
    return field


def scan(chars: Iterable[str], state: ScanState = INITIAL_STATE) -> ScanState:
    """Fold `step` over `chars`, discarding emitted fields."""
    for char in chars:
        state, _ = step(state, char)
    return state


__all__ = [
    "QUOTE",
    "FIELD_SEPARATOR",
    "CHOICE_SEPARATOR",
    "Field",
    "ScanState",
    "INITIAL_STATE",
    "is_field_boundary",
    "is_choice_boundary",
    "step",
    "finish",
    "scan",
]
