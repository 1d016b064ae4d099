"""
Example survey export for demonstrations and tests.

A small course-feedback export with a respondent id column, a multi-choice
question (semicolon separated) and a free-text question whose quoted answer
spans two lines.
"""
from quizanalyze.csv_parser import parse_answers_string
from quizanalyze.model import AnswerTable

EXAMPLE_EXPORT = '''"Respondent", "How clear were the lectures?", "Which topics did you enjoy?", "Any other comments?"
"alice", "Very clear", "Parsing;Testing", "None"
"bob", "Somewhat clear", "Testing", "Slides were good,
but the pace was fast"
"carol", "Very clear", "Parsing;Packaging;Testing", ""
'''

EXAMPLE_MAPPINGS = {
    "Very clear": 2,
    "Somewhat clear": 1,
    "Not clear": 0,
}


def build_example_table() -> AnswerTable:
    return parse_answers_string(EXAMPLE_EXPORT)
