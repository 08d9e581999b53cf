"""
Value objects produced by the command-line model.
"""

from __future__ import annotations

from dataclasses import dataclass

from package_builder.constants import (
    DEFAULT_ASSEMBLY_VERSION_TYPE,
    WILDCARD,
    AssemblyVersionType,
)


@dataclass(frozen=True)
class CommandLineMetadata:
    """Package metadata overrides given with ``-metadata``."""

    id: str | None = None
    title: str | None = None
    description: str | None = None
    authors: str | None = None


@dataclass(frozen=True)
class ExplicitVersion:
    """A version given literally on the command line."""

    value: str


@dataclass(frozen=True)
class AssemblyVersionSource:
    """A version read from an assembly attribute.

    ``assembly`` may be the wildcard, meaning the assembly named after the
    module.
    """

    assembly: str
    version_type: AssemblyVersionType = DEFAULT_ASSEMBLY_VERSION_TYPE

    @property
    def is_wildcard(self) -> bool:
        return self.assembly == WILDCARD


VersionSource = ExplicitVersion | AssemblyVersionSource


@dataclass(frozen=True)
class CommandLineVersion:
    """Version settings given with ``-version``."""

    value: str | None = None
    assembly: str | None = None
    assembly_version_type: AssemblyVersionType = DEFAULT_ASSEMBLY_VERSION_TYPE

    @property
    def source(self) -> VersionSource:
        """Where the package version comes from.

        An explicit value wins over an assembly. Without either, the version
        is read from the assembly named after the module.
        """
        if self.value:
            return ExplicitVersion(self.value)
        return AssemblyVersionSource(
            self.assembly or WILDCARD, self.assembly_version_type
        )
