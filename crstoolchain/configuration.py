"""Toolchain configuration read from a YAML file in the assembly directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

DEFAULT_DICTIONARY_COMMIT_REF = "refs/heads/master"


@dataclass
class Pattern:
    """A pattern with a Unix and a Windows flavour."""

    unix: str = ""
    windows: str = ""


@dataclass
class Patterns:
    """Anti-evasion patterns used by the regex processors."""

    anti_evasion: Pattern = field(default_factory=Pattern)
    anti_evasion_suffix: Pattern = field(default_factory=Pattern)
    anti_evasion_no_space_suffix: Pattern = field(default_factory=Pattern)


@dataclass
class EnglishDictionary:
    """Where the English dictionary is taken from."""

    commit_ref: str = ""
    was_commit_ref_set: bool = False


@dataclass
class Sources:
    """External data sources."""

    english_dictionary: EnglishDictionary = field(default_factory=EnglishDictionary)


@dataclass
class Configuration:
    """The complete toolchain configuration."""

    sources: Sources = field(default_factory=Sources)
    patterns: Patterns = field(default_factory=Patterns)


class _InvalidDocument(Exception):
    """Raised when the YAML document does not have the expected shape."""


def _section(document: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = document.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise _InvalidDocument(f"'{key}' must be a mapping")
    return value


def _text(document: Mapping[str, Any], key: str) -> str:
    value = document.get(key)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise _InvalidDocument(f"'{key}' must be a scalar")


def _pattern(document: Mapping[str, Any], key: str) -> Pattern:
    section = _section(document, key)
    return Pattern(
        unix=_text(section, "unix").strip(),
        windows=_text(section, "windows").strip(),
    )


def _build(document: Any) -> Configuration:
    if not isinstance(document, Mapping):
        raise _InvalidDocument("configuration must be a mapping")

    patterns_section = _section(document, "patterns")
    patterns = Patterns(
        anti_evasion=_pattern(patterns_section, "anti_evasion"),
        anti_evasion_suffix=_pattern(patterns_section, "anti_evasion_suffix"),
        anti_evasion_no_space_suffix=_pattern(patterns_section, "anti_evasion_no_space_suffix"),
    )

    dictionary_section = _section(_section(document, "sources"), "english_dictionary")
    commit_ref = _text(dictionary_section, "commit_ref").strip()
    if commit_ref:
        dictionary = EnglishDictionary(commit_ref=commit_ref, was_commit_ref_set=True)
    else:
        dictionary = EnglishDictionary(
            commit_ref=DEFAULT_DICTIONARY_COMMIT_REF, was_commit_ref_set=False
        )

    return Configuration(sources=Sources(english_dictionary=dictionary), patterns=patterns)


def load_configuration(directory: str | Path, filename: str) -> Configuration:
    """Read the configuration file; an unreadable or invalid file yields an empty configuration."""
    path = Path(directory) / filename
    try:
        with path.open(encoding="utf-8") as handle:
            document = yaml.safe_load(handle)
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        return Configuration()

    try:
        return _build(document)
    except _InvalidDocument:
        return Configuration()