"""Comparison of generated regular expressions with those found in rule files."""

from __future__ import annotations

import sys
from itertools import zip_longest
from typing import TextIO

from crstoolchain.errors import ComparisonError
from crstoolchain.options import OutputType

MAX_GROUP_SPLITTING_DEPTH = 2


def _is_escaped(text: str, position: int) -> bool:
    """Whether the character at ``position`` is preceded by an odd number of backslashes."""
    backslashes = len(text[:position]) - len(text[:position].rstrip("\\"))
    return backslashes % 2 == 1


def split_by_groups(text: str) -> list[str]:
    """Split ``text`` into top-level parenthesised groups and the text between them."""
    depth = 0
    pieces: list[str] = []
    current: list[str] = []
    for position, char in enumerate(text):
        if char == "(" and not _is_escaped(text, position):
            depth += 1
            if depth == 1 and current:
                pieces.append("".join(current))
                current = []
            current.append(char)
        elif char == ")" and not _is_escaped(text, position):
            depth -= 1
            current.append(char)
            if depth <= 0:
                pieces.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        pieces.append("".join(current))

    if len(pieces) == 1 and pieces[0].startswith("(") and pieces[0].endswith(")"):
        inner = split_by_groups(pieces[0][1:-1])
        if not inner:
            return pieces
        inner[0] = "(" + inner[0]
        inner[-1] = inner[-1] + ")"
        return inner
    return pieces


def split_by_groups_up_to_depth(text: str, max_depth: int) -> list[str]:
    """Apply :func:`split_by_groups` repeatedly, ``max_depth`` times."""
    lines = [text]
    for _ in range(max_depth):
        lines = [piece for line in lines for piece in split_by_groups(line)]
    return lines


def compare_regex(
    rule_id: str,
    generated_regex: str,
    current_regex: str,
    output: OutputType = OutputType.TEXT,
    stream: TextIO | None = None,
) -> None:
    """Report whether the two expressions differ; raise :class:`ComparisonError` if they do."""
    out = sys.stdout if stream is None else stream
    if current_regex == generated_regex:
        out.write(f"Regex of {rule_id} has not changed\n")
        return
    if output is OutputType.GITHUB:
        raise ComparisonError()

    out.write(f"Regex of {rule_id} has changed!\n")

    generated_lines = split_by_groups_up_to_depth(generated_regex, MAX_GROUP_SPLITTING_DEPTH)
    current_lines = split_by_groups_up_to_depth(current_regex, MAX_GROUP_SPLITTING_DEPTH)
    skipped = 0
    for current_line, generated_line in zip_longest(current_lines, generated_lines):
        if (current_line or "") == (generated_line or ""):
            skipped += len(current_line or "")
            continue
        if skipped > 0:
            out.write(f"Skipped {skipped} identical characters\n\n")
        skipped = 0

        out.write("current:    ")
        out.write("---" if current_line is None else current_line)
        out.write("\n")
        out.write("generated:  ")
        out.write("---" if generated_line is None else generated_line)
        out.write("\n\n")

    raise ComparisonError()