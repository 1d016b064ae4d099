"""
Serialization helpers for quizanalyze objects (AnswerTable, reports).

Provides lossless JSON/YAML round-trip of AnswerTable via intermediate dict
representation, and one-way dict conversion of analyzer reports for
structured command-line output.
"""
from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict, List, Union

import yaml

from quizanalyze.analyzer import QuestionReport, RankedQuestion, RespondentReport
from quizanalyze.model import AnswerTable, Record

Report = Union[QuestionReport, RespondentReport, RankedQuestion]


def record_to_list(r: Record) -> List[List[str]]:
    return [list(f) for f in r]


def record_from_list(d: List[List[str]]) -> Record:
    return tuple(tuple(f) for f in d)


def table_to_dict(t: AnswerTable) -> Dict[str, Any]:
    return {
        "labels": list(t.labels),
        "replies": [record_to_list(r) for r in t.replies],
    }


def table_from_dict(d: Dict[str, Any]) -> AnswerTable:
    return AnswerTable(
        labels=tuple(d.get("labels", [])),
        replies=tuple(record_from_list(r) for r in d.get("replies", [])),
    )


def table_to_json(t: AnswerTable) -> str:
    return json.dumps(table_to_dict(t), sort_keys=True)


def table_from_json(s: str) -> AnswerTable:
    d = json.loads(s)
    return table_from_dict(d)


def table_to_yaml(t: AnswerTable) -> str:
    return yaml.safe_dump(table_to_dict(t), allow_unicode=True)


def table_from_yaml(s: str) -> AnswerTable:
    d = yaml.safe_load(s)
    return table_from_dict(d)


def report_to_dict(r: Report) -> Dict[str, Any]:
    if isinstance(r, (QuestionReport, RespondentReport, RankedQuestion)):
        return asdict(r)
    raise TypeError(f"Unsupported report type: {type(r)}")


def reports_to_json(reports: List[Report]) -> str:
    return json.dumps([report_to_dict(r) for r in reports], indent=2, ensure_ascii=False)


def reports_to_yaml(reports: List[Report]) -> str:
    return yaml.safe_dump([report_to_dict(r) for r in reports], allow_unicode=True, sort_keys=False)


__all__ = [
    "table_to_dict",
    "table_from_dict",
    "table_to_json",
    "table_from_json",
    "table_to_yaml",
    "table_from_yaml",
    "report_to_dict",
    "reports_to_json",
    "reports_to_yaml",
]
