# crstoolchain

A library of helpers for working in a Core Rule Set (CRS) checkout:
locating the CRS root, reading the toolchain configuration, checking
regex-assembly (`.ra`) files for formatting details, and comparing a
generated regular expression with the one stored in a rule.

Install with `pip install .` (add `.[test]` for the test dependencies).

## Finding the CRS root

A CRS root is the nearest directory, walking upwards from a starting
path, that contains a `regex-assembly` directory.

```python
from crstoolchain.options import find_root_directory, resolve_working_directory

root = find_root_directory("/path/to/crs/rules")
root = resolve_working_directory("../crs")  # made absolute first, then searched upwards
```

Both raise `FileNotFoundError("failed to find root directory")` when no
such directory exists above the starting path.

## Context and configuration

`Context` holds the root directory and a `Configuration`, and exposes the
standard locations as properties: `rules_dir`, `assembly_dir`,
`includes_dir`, `excludes_dir` and `regression_tests_dir`.

```python
from crstoolchain.context import Context
from crstoolchain.configuration import load_configuration

context = Context.from_root(root, "toolchain.yaml")  # reads <root>/regex-assembly/toolchain.yaml
print(context.rules_dir)

config = load_configuration(f"{root}/regex-assembly", "toolchain.yaml")
print(config.patterns.anti_evasion.unix)
print(config.sources.english_dictionary.commit_ref)
print(config.sources.english_dictionary.was_commit_ref_set)
```

The YAML file may contain a `patterns` section with `anti_evasion`,
`anti_evasion_suffix` and `anti_evasion_no_space_suffix`, each holding
`unix` and `windows` strings (surrounding white space is stripped), and a
`sources.english_dictionary.commit_ref` value. When `commit_ref` is
missing or blank it becomes `"refs/heads/master"` and
`was_commit_ref_set` is `False`.

A missing, unreadable or malformed file yields an empty
`Configuration()` rather than an error. `Context.with_configuration(root,
configuration)` builds a context around a configuration you already have.

## Output format and logging

```python
from crstoolchain.options import OutputType, LogLevel, configure_logging

output = OutputType.parse("github")          # "text" or "github"
logger = configure_logging(LogLevel.parse("debug"))
configure_logging("warn")                     # a level name is accepted too
```

Log levels are `trace`, `debug`, `info` (the default), `warn`, `error`,
`fatal`, `panic` and `disabled`, matched without regard to case.
`configure_logging` sends the `crstoolchain` logger's records to stderr.
Invalid names for either option raise `ValueError`.

## Comparing regular expressions

`compare_regex` writes `Regex of <id> has not changed` when the two
expressions are equal. Otherwise, with text output, it writes
`Regex of <id> has changed!` followed by the differing pieces (split with
`split_by_groups_up_to_depth` to depth 2) labelled `current:` and
`generated:`, and raises `ComparisonError`. With GitHub output a mismatch
raises `ComparisonError` without printing anything.

```python
import sys
from crstoolchain.compare import compare_regex, split_by_groups
from crstoolchain.errors import ComparisonError
from crstoolchain.options import OutputType

print(split_by_groups("a(b|c)d"))  # ['a', '(b|c)', 'd']

try:
    compare_regex("932100", "foo", "oldfoo", OutputType.TEXT, sys.stdout)
except ComparisonError:
    ...
```

## Checking regex-assembly files

```python
from crstoolchain.formatting import (
    REGEX_ASSEMBLY_STANDARD_HEADER,
    check_standard_header,
    find_uppercase_non_escaped,
    format_end_of_file,
    format_message,
)
from crstoolchain.options import OutputType

lines = format_end_of_file(["line1", "line2", "", ""])   # ['line1', 'line2', '']
has_header = check_standard_header(REGEX_ASSEMBLY_STANDARD_HEADER.split("\n"))
found, column = find_uppercase_non_escaped("[First] letter is uppercase")  # (True, 1)
print(format_message("123456.ra not properly formatted", OutputType.GITHUB))
```

`find_uppercase_non_escaped` only looks inside character classes and
ignores escaped letters such as `\W` or `\S`.

## Errors

All errors defined by the package derive from
`crstoolchain.errors.ToolchainError`: `ComparisonError`,
`UnformattedFileError` (whose `has_path_info()` tells whether it names a
file) and `MissingVersionError`.

## What this package does not do

It is a library only: there is no command-line program. It does not
assemble regular expressions from `.ra` files, rewrite whole `.ra` files,
update the regular expressions inside rule files, update copyright lines
or versions, renumber regression tests, or update itself.
`MissingVersionError` and `UnformattedFileError` are provided for callers
that build such workflows on top of these helpers.