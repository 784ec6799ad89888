"""Helpers for formatting regex-assembly files."""

from __future__ import annotations

import re

from crstoolchain.options import OutputType

REGEX_ASSEMBLY_STANDARD_HEADER = (
    "##! Please refer to the documentation at\n"
    "##! https://coreruleset.org/docs/development/regex_assembly/.\n"
)
SHOW_CHARS_AROUND = 20

_CHARACTER_CLASS = re.compile(r"(?:^|[^\\])\[.+?[^\\]\]")


def _is_escaped(text: str, position: int) -> bool:
    """Whether the character at ``position`` is preceded by an odd number of backslashes."""
    prefix = text[:position]
    return (len(prefix) - len(prefix.rstrip("\\"))) % 2 == 1


def format_end_of_file(lines: list[str]) -> list[str]:
    """Drop trailing empty lines and end with exactly one empty line (a final newline)."""
    if not lines:
        return ["", ""]
    end = len(lines)
    while end > 0 and lines[end - 1] == "":
        end -= 1
    return [*lines[:end], ""]


def check_standard_header(lines: list[str]) -> bool:
    """Whether the first three lines form the standard header."""
    return len(lines) >= 3 and "\n".join(lines[:3]) == REGEX_ASSEMBLY_STANDARD_HEADER


def find_uppercase_non_escaped(line: str) -> tuple[bool, int]:
    """Find an unescaped uppercase letter inside a character class.

    Returns whether one was found and its index in ``line`` (-1 if none).
    """
    for match in _CHARACTER_CLASS.finditer(line):
        start = match.start()
        # The match includes the character before the bracket unless at the start.
        if start > 0:
            start += 1
        segment = line[start:match.end()]
        for index, char in enumerate(segment):
            if "A" <= char <= "Z" and not _is_escaped(segment, index):
                return True, index + start
    return False, -1


def format_message(message: str, output: OutputType = OutputType.TEXT) -> str:
    """Decorate ``message`` for the chosen output format."""
    if output is OutputType.GITHUB:
        return f"::warning ::{message}\n"
    return message