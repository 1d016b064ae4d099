"""
Tests for serialization and deserialization of quizanalyze objects.

These tests ensure lossless JSON/YAML round-trip of AnswerTable using the
explicit serialization functions in `quizanalyze.serialization`.
"""

import json

import pytest
import yaml

from quizanalyze.analyzer import QuestionReport, RankedQuestion
from quizanalyze.errors import FieldCountMismatchError
from quizanalyze.examples import build_example_table
from quizanalyze.serialization import (
    report_to_dict,
    reports_to_json,
    reports_to_yaml,
    table_from_dict,
    table_from_json,
    table_from_yaml,
    table_to_dict,
    table_to_json,
    table_to_yaml,
)


def test_table_to_dict_uses_lists():
    d = table_to_dict(build_example_table())
    assert d["labels"][0] == "Respondent"
    assert d["replies"][0][2] == ["Parsing", "Testing"]


def test_json_roundtrip():
    table = build_example_table()
    restored = table_from_json(table_to_json(table))
    assert restored == table


def test_yaml_roundtrip():
    table = build_example_table()
    restored = table_from_yaml(table_to_yaml(table))
    assert restored == table


def test_from_dict_checks_field_count():
    with pytest.raises(FieldCountMismatchError):
        table_from_dict({"labels": ["a", "b"], "replies": [[["x"]]]})


def test_report_to_dict():
    report = QuestionReport(label="q", mode="yes", replies=["yes"])
    assert report_to_dict(report) == {
        "label": "q",
        "mode": "yes",
        "replies": ["yes"],
        "average": None,
        "median": None,
    }


def test_report_to_dict_rejects_other_types():
    with pytest.raises(TypeError):
        report_to_dict(build_example_table())


def test_reports_to_json_and_yaml():
    reports = [RankedQuestion(label="a", average=1.5), RankedQuestion(label="b", average=0.0)]
    assert json.loads(reports_to_json(reports)) == [
        {"label": "a", "average": 1.5},
        {"label": "b", "average": 0.0},
    ]
    assert yaml.safe_load(reports_to_yaml(reports))[0] == {"label": "a", "average": 1.5}
