"""Locations of the directories that make up a rule set tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from crstoolchain.configuration import Configuration, load_configuration


@dataclass(frozen=True)
class Context:
    """The root of a rule set tree and its configuration."""

    root_dir: str
    configuration: Configuration = field(default_factory=Configuration)

    @classmethod
    def from_root(cls, root_dir: str, configuration_file_name: str) -> "Context":
        """Build a context, reading the configuration from the assembly directory."""
        configuration_directory = f"{root_dir}/regex-assembly"
        return cls.with_configuration(
            root_dir, load_configuration(configuration_directory, configuration_file_name)
        )

    @classmethod
    def with_configuration(cls, root_dir: str, configuration: Configuration) -> "Context":
        """Build a context around an existing configuration."""
        return cls(root_dir=root_dir, configuration=configuration)

    @property
    def rules_dir(self) -> str:
        return f"{self.root_dir}/rules"

    @property
    def assembly_dir(self) -> str:
        return f"{self.root_dir}/regex-assembly"

    @property
    def includes_dir(self) -> str:
        return f"{self.root_dir}/regex-assembly/include"

    @property
    def excludes_dir(self) -> str:
        return f"{self.root_dir}/regex-assembly/exclude"

    @property
    def regression_tests_dir(self) -> str:
        return f"{self.root_dir}/tests/regression/tests"