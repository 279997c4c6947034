"""
Template scanner: rewrites named placeholders into positional ones.

A template such as ``"User {UserId} logged in"`` becomes the canonical text
``"User {0} logged in"`` plus the ordered name list ``("UserId",)``.
Alignment and format-string text after the name is copied untouched.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from lark import Lark, Token

logger = logging.getLogger("logvalues.scanner")

# Shorter templates cannot hold a placeholder and are returned as literals.
MIN_PLACEHOLDER_LENGTH = 3

_FORMAT_DELIMITERS = re.compile(r"[,:]")

# Lark grammar splitting a template into maximal brace runs and plain text
grammar = r"""
    template: (OPEN_RUN | CLOSE_RUN | TEXT)*

    OPEN_RUN: /\{+/
    CLOSE_RUN: /\}+/
    TEXT: /[^{}]+/
"""

run_parser = Lark(grammar, start="template", parser="lalr", lexer="basic")


class RunPick(Enum):
    """Which brace of an unescaped run acts as the boundary"""

    FIRST = "first"
    LAST = "last"


@dataclass(frozen=True)
class BraceRun:
    """A maximal sequence of one brace character, ``start`` inclusive, ``end`` exclusive"""

    brace: str
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class BracePolicy:
    """Decides whether a brace run is escaped and where its boundary lies.

    An even run is a sequence of escaped literal braces, unless it reaches the
    end of the template: parity is only decided on the character following a
    run, so a trailing run always yields a boundary.
    """

    brace: str
    pick: RunPick

    def boundary(self, run: BraceRun, text_length: int) -> Optional[int]:
        if len(run) % 2 == 0 and run.end < text_length:
            return None
        if self.pick is RunPick.LAST:
            return run.end - 1
        return run.start


# "{{{X}}}" is literal '{', placeholder X, literal '}'
OPEN_POLICY = BracePolicy("{", RunPick.LAST)
CLOSE_POLICY = BracePolicy("}", RunPick.FIRST)


@dataclass(frozen=True)
class ParsedTemplate:
    """Canonical positional text and the placeholder names, slot i <-> names[i]"""

    canonical: str
    names: Tuple[str, ...]


def brace_runs(text: str) -> List[BraceRun]:
    """Return the brace runs of ``text`` in order of appearance"""
    tree = run_parser.parse(text)
    runs: List[BraceRun] = []
    for token in tree.children:
        if not isinstance(token, Token) or token.type == "TEXT":
            continue
        runs.append(BraceRun(token.value[0], token.start_pos, token.end_pos))
    return runs


def find_boundary(
    runs: List[BraceRun], policy: BracePolicy, start: int, text_length: int
) -> Optional[int]:
    """Locate the first unescaped boundary for ``policy`` at or after ``start``"""
    for run in _runs_from(runs, policy.brace, start):
        index = policy.boundary(run, text_length)
        if index is not None:
            return index
    return None


def _runs_from(runs: List[BraceRun], brace: str, start: int) -> Iterator[BraceRun]:
    for run in runs:
        if run.brace == brace and run.start >= start:
            yield run


def parse_template(text: str) -> ParsedTemplate:
    """Scan ``text`` once and return its canonical form and placeholder names.

    Never raises on malformed input: unterminated or stray braces are kept as
    literal text.
    """
    if len(text) < MIN_PLACEHOLDER_LENGTH:
        return ParsedTemplate(text, ())

    runs = brace_runs(text)
    end = len(text)
    chunks: List[str] = []
    names: List[str] = []
    cursor = 0

    while cursor < end:
        opener = find_boundary(runs, OPEN_POLICY, cursor, end)
        closer = None
        if opener is not None:
            closer = find_boundary(runs, CLOSE_POLICY, opener + 1, end)

        if closer is None:
            chunks.append(text[cursor:])
            break

        # Format item syntax: {index[,alignment][:formatString]}
        match = _FORMAT_DELIMITERS.search(text, opener, closer)
        delimiter = match.start() if match else closer

        chunks.append(text[cursor : opener + 1])
        chunks.append(str(len(names)))
        names.append(text[opener + 1 : delimiter])
        chunks.append(text[delimiter : closer + 1])
        cursor = closer + 1

    parsed = ParsedTemplate("".join(chunks), tuple(names))
    logger.debug(
        "Parsed template %r into %r with %d placeholder(s)",
        text,
        parsed.canonical,
        len(parsed.names),
    )
    return parsed


__all__ = [
    "CLOSE_POLICY",
    "MIN_PLACEHOLDER_LENGTH",
    "OPEN_POLICY",
    "BracePolicy",
    "BraceRun",
    "ParsedTemplate",
    "RunPick",
    "brace_runs",
    "find_boundary",
    "parse_template",
]
