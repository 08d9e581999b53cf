from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from package_builder.core.command_line.command_line import CommandLine


@dataclass(frozen=True)
class ModulePackageResult:
    """Where a built package was written."""

    output_directory: str
    package_file_name: str


class IModulePackageBuilder(ABC):
    """Interface for the component that turns a parsed command line into a
    module package.

    Implementations resolve the module, expand wildcards (the NuSpec file and
    version assembly named after the module) and write the package.
    """

    @abstractmethod
    def build_package(self, command_line: CommandLine) -> ModulePackageResult:
        """Build the package described by ``command_line``.

        Raises:
            PackageBuildError: If the package cannot be built
        """
