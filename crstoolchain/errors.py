"""Errors raised by the toolchain commands."""

from __future__ import annotations


class ToolchainError(Exception):
    """Base class of the toolchain's own errors."""


class MissingVersionError(ToolchainError):
    """A copyright update was requested without a version."""

    def __init__(self) -> None:
        super().__init__(
            "version is needed to update the copyright. "
            "You can use 'git describe --tags' if using git"
        )


class UnformattedFileError(ToolchainError):
    """One or more regex-assembly files are not properly formatted."""

    def __init__(self, file_path: str = "") -> None:
        self.file_path = file_path
        if self.has_path_info():
            message = f"File not properly formatted: {file_path}"
        else:
            message = "One or more files are not properly formatted"
        super().__init__(message)

    def has_path_info(self) -> bool:
        """Whether the error names the offending file."""
        return self.file_path != ""


class ComparisonError(ToolchainError):
    """A generated regular expression differs from the one in the rule file."""

    def __init__(self) -> None:
        super().__init__("regular expressions did not match")