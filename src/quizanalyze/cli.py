#!/usr/bin/env python3
"""
Command-line entry point: survey export → AnswerTable → report → stdout.

Exit codes:
    0  success
    1  invalid arguments
    2  application error (unreadable file, malformed export, no match)
"""

import logging
import os
import sys
from typing import List, Optional, Sequence

from quizanalyze.analyzer import (
    QuestionReport,
    RankedQuestion,
    RespondentReport,
    rank_questions,
    summarize_question,
    summarize_respondents,
)
from quizanalyze.config import Config, build_config, build_parser
from quizanalyze.csv_parser import parse_answers_file
from quizanalyze.errors import AnalysisError, ConfigError, QuizAnalyzeError
from quizanalyze.serialization import reports_to_json, reports_to_yaml

logger = logging.getLogger(__name__)


def format_question(report: QuestionReport) -> str:
    lines = [report.label, f"most popular: {report.mode}"]
    if report.is_sorted:
        lines.append(f"average: {report.average:.2f}, median: {report.median:.2f}")
        lines.append(f"sorted replies: {', '.join(report.replies)}")
    else:
        lines.append(f"all replies: {', '.join(report.replies)}")
    return "\n".join(lines)


def format_respondent(report: RespondentReport) -> str:
    lines = [f"{report.uid}:", "{", f"    most popular: {report.mode}"]
    if report.average is not None:
        lines.append(f"    average: {report.average:.2f}, median: {report.median:.2f}")
    lines.append("}\n")
    return "\n".join(lines)


def format_ranked(report: RankedQuestion) -> str:
    return f"{report.label}: average {report.average:.2f}"


def build_reports(config: Config) -> list:
    """Read the export named by `config` and run the selected analysis."""
    table = parse_answers_file(config.filepath)
    logger.info("Loaded %d questions and %d replies from %s",
                len(table.labels), len(table), config.filepath)

    if config.rank:
        return rank_questions(table, config.mappings)

    if config.exact:
        question = table.find_question_exact(config.search)
    else:
        question = table.find_question(config.search)

    if question is None:
        raise AnalysisError(f"cant find {config.search}")
    logger.debug("Matched question %r at column %d", question.label, question.index)

    if config.unique:
        return summarize_respondents(table, question, config.mappings)
    return [summarize_question(question, config.mappings)]


def render(reports: list, output_format: str) -> str:
    if output_format == "json":
        return reports_to_json(reports)
    if output_format == "yaml":
        return reports_to_yaml(reports).rstrip("\n")

    formatted: List[str] = []
    for report in reports:
        if isinstance(report, QuestionReport):
            formatted.append(format_question(report))
        elif isinstance(report, RespondentReport):
            formatted.append(format_respondent(report))
        else:
            formatted.append(format_ranked(report))
    return "\n".join(formatted)


def run(config: Config) -> None:
    output = render(build_reports(config), config.output_format)
    if output:
        print(output)


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "quizanalyze"

    try:
        config = build_config(argv, prog=prog)
    except ConfigError as e:
        print(f"error parsing args: {e}", file=sys.stderr)
        print(build_parser(prog).format_usage(), file=sys.stderr, end="")
        return 1

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run(config)
    except (QuizAnalyzeError, OSError, UnicodeDecodeError) as e:
        print(f"application error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
