"""
Answer Analyzer — aggregate statistics over a parsed AnswerTable.

This module provides lightweight summaries:
    - Most popular choice (mode)
    - Average and median of mapped choices
    - Per-respondent summaries keyed by a unique id question
    - Ranking of every question by mapped average

IMPORTANT: This layer does NOT modify the table.
It only produces read-only reports.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from quizanalyze.errors import AnalysisError
from quizanalyze.model import AnswerTable, Question

logger = logging.getLogger(__name__)


# =========================================================================
# STATISTICS
# =========================================================================

def mode(choices: Iterable[str]) -> Optional[str]:
    """Most frequent non-empty choice; ties go to the first one seen."""
    counts = Counter(choice for choice in choices if choice)
    if not counts:
        return None
    return counts.most_common(1)[0][0]


def map_choices(choices: Iterable[str], mappings: Mapping[str, int]) -> List[int]:
    """Numbers for the mapped choices; unmapped choices are left out."""
    return [mappings[choice] for choice in choices if choice in mappings]


def sort_choices(choices: Iterable[str], mappings: Mapping[str, int]) -> List[str]:
    """Stable ascending sort by mapped value, unmapped choices first."""
    return sorted(choices, key=lambda choice: (choice in mappings, mappings.get(choice, 0)))


def median(values: Sequence[int]) -> float:
    if not values:
        return 0.0

    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2.0
    return float(ordered[middle])


def average(values: Sequence[int]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


# =========================================================================
# REPORTS
# =========================================================================

@dataclass
class QuestionReport:
    """Summary of one question across all replies."""
    label: str
    mode: str
    replies: List[str] = field(default_factory=list)
    average: Optional[float] = None
    median: Optional[float] = None

    @property
    def is_sorted(self) -> bool:
        return self.average is not None


@dataclass
class RespondentReport:
    """Summary of every answer a single respondent gave."""
    uid: str
    mode: str
    average: Optional[float] = None
    median: Optional[float] = None


@dataclass
class RankedQuestion:
    """A question's mapped average across all replies."""
    label: str
    average: float


def summarize_question(question: Question, mappings: Optional[Mapping[str, int]] = None) -> QuestionReport:
    """
    Summarize every reply given to one question.

    Args:
        question: Column gathered from the table
        mappings: Optional choice → number mapping; enables average, median
            and sorted replies

    Returns:
        QuestionReport

    Raises:
        AnalysisError: If no respondent gave a non-empty answer
    """
    popular = mode(question.choices)
    if popular is None:
        raise AnalysisError("no replies given")

    replies = [choice for choice in question.choices if choice]
    report = QuestionReport(label=question.label, mode=popular, replies=replies)

    if mappings:
        mapped = map_choices(question.choices, mappings)
        report.average = average(mapped)
        report.median = median(mapped)
        report.replies = sort_choices(replies, mappings)

    return report


def summarize_respondents(
    table: AnswerTable,
    question: Question,
    mappings: Optional[Mapping[str, int]] = None,
) -> List[RespondentReport]:
    """
    Summarize each respondent, using `question` as the respondent id column.

    The n-th choice of the id column names the n-th reply.

    Raises:
        AnalysisError: If there are more ids than replies
    """
    reports = []

    for index, uid in enumerate(question.choices):
        record = table.reply(index)
        if record is None:
            raise AnalysisError("uid amount doesnt match to replies")

        choices = [choice for field_ in record for choice in field_]
        popular = mode(choices)
        if popular is None:
            logger.debug("Skipping respondent %r: no answers", uid)
            continue

        report = RespondentReport(uid=uid.strip(), mode=popular)
        if mappings:
            mapped = map_choices(choices, mappings)
            report.average = average(mapped)
            report.median = median(mapped)
        reports.append(report)

    return reports


def rank_questions(table: AnswerTable, mappings: Mapping[str, int]) -> List[RankedQuestion]:
    """
    Rank every question by the mapped average of its replies.

    The first column identifies the respondent and is not ranked. Unmapped
    choices count as 0. Ties keep column order.
    """
    if not mappings:
        logger.warning("Ranking without mappings: every question averages 0")

    scale = len(table.replies)
    sums: Dict[int, int] = {index: 0 for index in range(len(table.labels))}

    for record in table.replies:
        for index, field_ in enumerate(record):
            sums[index] += sum(mappings.get(choice, 0) for choice in field_)

    ranked = [
        RankedQuestion(label=label, average=sums[index] / scale if scale else 0.0)
        for index, label in enumerate(table.labels)
    ][1:]

    ranked.sort(key=lambda item: item.average, reverse=True)
    return ranked


__all__ = [
    "mode",
    "map_choices",
    "sort_choices",
    "median",
    "average",
    "QuestionReport",
    "RespondentReport",
    "RankedQuestion",
    "summarize_question",
    "summarize_respondents",
    "rank_questions",
]
