"""
quizanalyze — survey export reader and answer statistics.

Reads a quoted, comma-separated survey export where one cell may hold several
semicolon-separated choices, and answers "what did respondents say to
question X".

ARCHITECTURAL GUARANTEE:
------------------------
The parsing core (scanner, csv_parser, model) contains ZERO knowledge of:
    - Command-line arguments
    - Statistics
    - Printing or output formats

It turns text into an AnswerTable and nothing else.

All analysis and rendering happens in outer layers.
"""

__version__ = "0.1.0"
