"""
Command-line configuration.

    quizanalyze -s "search string" [args] /path/to/file

Mappings turn choices into numbers for averages, medians and ranking. The
first character of a mapping string is its separator:

    -m ",Agree,2,Neutral,1,Disagree,0"
"""

import argparse
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from quizanalyze.errors import ConfigError

OUTPUT_FORMATS = ("text", "json", "yaml")

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Options whose value is always the next token, even when it starts with "-"
_VALUE_OPTIONS = {
    "-s": "--search",
    "--search": "--search",
    "-m": "--mapping",
    "--mapping": "--mapping",
}


@dataclass
class Config:
    """
    Settings for one run.

    Properties:
        filepath: Survey export to read
        search: Question to look up (ignored when ranking)
        rank: Rank every question by mapped average
        unique: The searched question holds a unique respondent id
        exact: Match the label exactly instead of by substring
        mappings: choice → number
        output_format: One of OUTPUT_FORMATS
        verbose: Debug logging
    """

    filepath: str
    search: str = ""
    rank: bool = False
    unique: bool = False
    exact: bool = False
    mappings: Dict[str, int] = field(default_factory=dict)
    output_format: str = "text"
    verbose: bool = False


def parse_mappings(mapping: str) -> Dict[str, int]:
    """
    Parse a separator-prefixed mapping string.

    Args:
        mapping: e.g. "|yes|1|no|0"; the first character is the separator

    Returns:
        Dict of choice → number

    Raises:
        ConfigError: If the string is empty, a key has no value, or a value
            is not an integer
    """
    if not mapping:
        raise ConfigError("no splitter")

    splitter = mapping[0]
    parts = mapping.split(splitter)[1:]

    mappings = {}
    for key, value in zip(parts[::2], parts[1::2]):
        if not _INTEGER_RE.fullmatch(value):
            raise ConfigError(f"invalid digit in mapping for {key}: {value!r}")
        mappings[key] = int(value)

    if len(parts) % 2:
        raise ConfigError(f"{parts[-1]} has no matching value")

    return mappings


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ConfigError instead of exiting."""

    def error(self, message):
        raise ConfigError(message)


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=prog,
        description="Summarize what respondents answered in a survey export.",
    )
    parser.add_argument('filepath', help="path to the survey export")
    parser.add_argument('-s', '--search', default="", help="question to search")
    parser.add_argument('-m', '--mapping', help="map choices to numbers (<split character>choice<split character>number)")
    parser.add_argument('-r', '--rank', action='store_true', help="ranks all the questions by mapping")
    parser.add_argument('-u', '--unique', action='store_true', help="the question is an uid")
    parser.add_argument('-e', '--exact', action='store_true', help="only include exact matches")
    parser.add_argument('--format', dest='output_format', choices=OUTPUT_FORMATS, default="text", help="output format")
    parser.add_argument('-v', '--verbose', action='store_true', help="debug logging to stderr")
    return parser


def _attach_option_values(argv: Sequence[str]) -> List[str]:
    """
    Rewrite "-m VALUE" as "--mapping=VALUE" (and likewise for search).

    argparse reads a separate token starting with "-" as an option, but a
    mapping separator or a search term may be "-".
    """
    attached = []
    tokens = iter(argv)
    for token in tokens:
        option = _VALUE_OPTIONS.get(token)
        if option is None:
            attached.append(token)
            continue
        value = next(tokens, None)
        if value is None:
            attached.append(token)
        else:
            attached.append(f"{option}={value}")
    return attached


def build_config(argv: Sequence[str], prog: Optional[str] = None) -> Config:
    """
    Build a Config from command-line arguments.

    Args:
        argv: Arguments without the program name

    Raises:
        ConfigError: If the arguments are invalid
    """
    args = build_parser(prog).parse_args(_attach_option_values(argv))

    mappings = parse_mappings(args.mapping) if args.mapping is not None else {}

    if not args.rank and not args.search:
        raise ConfigError("no search string specified")

    return Config(
        filepath=args.filepath,
        search=args.search,
        rank=args.rank,
        unique=args.unique,
        exact=args.exact,
        mappings=mappings,
        output_format=args.output_format,
        verbose=args.verbose,
    )


__all__ = [
    "OUTPUT_FORMATS",
    "Config",
    "parse_mappings",
    "build_parser",
    "build_config",
]
