"""
Test the bundled example export.

Validates that the example parses into the expected labels and replies,
including a quoted answer that spans two lines.
"""

from quizanalyze.examples import EXAMPLE_EXPORT, build_example_table


def test_example_table_structure():
    table = build_example_table()

    assert table.labels == (
        "Respondent",
        "How clear were the lectures?",
        "Which topics did you enjoy?",
        "Any other comments?",
    )
    # The final newline does not add a reply
    assert len(table) == 3
    assert EXAMPLE_EXPORT.endswith("\n")

    bob = table.reply(1)
    assert bob[0] == ("bob",)
    assert bob[3] == ("Slides were good,\nbut the pace was fast",)

    carol = table.reply(2)
    assert carol[2] == ("Parsing", "Packaging", "Testing")
    assert carol[3] == ("",)
