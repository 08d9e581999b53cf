"""
The command-line argument model.

``CommandLineBuilder`` consumes argument tokens one at a time, validates them
and accumulates the recognized values; ``build()`` freezes the result into a
``CommandLine``. Any invalid argument aborts the build with a
``CommandLineArgumentError``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from package_builder.constants import WILDCARD, AssemblyVersionType
from package_builder.core.command_line import arguments as args
from package_builder.core.command_line.models import (
    CommandLineMetadata,
    CommandLineVersion,
)
from package_builder.core.command_line.parser import CommandLineParser
from package_builder.core.common.exceptions import (
    ArgumentErrorKind,
    CommandLineArgumentError,
    CommandLineArgumentPropertyError,
)

logger = logging.getLogger(__name__)


def _empty_properties() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class CommandLine:
    """
    Parsed, immutable command line.

    Attributes:
        help: Whether help was requested.
        debug: Whether error details should be written on failure.
        module: Code name of the module to package.
        nuspec_file: NuSpec file name, or the wildcard when ``-nuspec`` was
            given without a value.
        output_directory: Directory the package is written to.
        metadata: Metadata overrides, when ``-metadata`` was given.
        version: Version settings, when ``-version`` was given.
        properties: NuSpec replacement tokens, in command-line order.
    """

    help: bool = False
    debug: bool = False
    module: str | None = None
    nuspec_file: str | None = None
    output_directory: str | None = None
    metadata: CommandLineMetadata | None = None
    version: CommandLineVersion | None = None
    properties: Mapping[str, str] = field(default_factory=_empty_properties)

    @classmethod
    def parse(
        cls, command_line: str | None, parser: CommandLineParser | None = None
    ) -> CommandLine:
        """Parse a raw command line, e.g. ``-module:Custom.Module -nuspec``."""
        parser = parser or CommandLineParser()
        return cls.from_arguments(parser.parse_command_line(command_line), parser)

    @classmethod
    def from_arguments(
        cls, arguments: Iterable[str], parser: CommandLineParser | None = None
    ) -> CommandLine:
        """Build a command line from already separated argument tokens."""
        builder = CommandLineBuilder(parser)
        for argument in arguments:
            builder.add_argument(argument)
        return builder.build()

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> CommandLine:
        """Build a command line from a process argument vector.

        ``argv`` must not include the executable (pass ``sys.argv[1:]``).
        Each element is one argument: the shell has already split the
        command line and removed any quotes around it.
        """
        return cls.from_arguments(argv)

    @classmethod
    def current(cls) -> CommandLine:
        """Build a command line from the arguments of the running process."""
        return cls.from_argv(sys.argv[1:])


class CommandLineBuilder:
    """Accumulates argument tokens into a ``CommandLine``.

    Flags (``-help``, ``-debug``) may repeat; every other argument may be
    given at most once.
    """

    def __init__(self, parser: CommandLineParser | None = None) -> None:
        self._parser = parser or CommandLineParser()
        self._defined: set[str] = set()

        self.help = False
        self.debug = False
        self.module: str | None = None
        self.nuspec_file: str | None = None
        self.output_directory: str | None = None
        self.metadata: CommandLineMetadata | None = None
        self.version: CommandLineVersion | None = None
        self.properties: dict[str, str] | None = None

        self._handlers: dict[str, Callable[[str], None]] = {
            args.DEBUG: self._set_debug,
            args.MODULE: self._set_module,
            args.NUSPEC_FILE: self._set_nuspec_file,
            args.OUTPUT_DIRECTORY: self._set_output_directory,
            args.METADATA: self._set_metadata,
            args.PROPERTIES: self._set_properties,
            args.VERSION: self._set_version,
        }

    def add_argument(self, argument: str) -> CommandLineBuilder:
        """Apply one argument token.

        Raises:
            CommandLineArgumentError: If the argument is not recognized or is
                already defined.
            CommandLineArgumentPropertyError: If a property of a structured
                argument is invalid.
        """
        name, value = self._parser.parse_argument(argument)

        if name in args.HELP_ALIASES or name.lower() == args.HELP:
            self.help = True
            return self

        spec = args.find_argument(name)
        handler = self._handlers.get(spec.name) if spec else None
        if spec is None or handler is None:
            raise CommandLineArgumentError(
                name,
                f"The argument '{name}' is not recognized.",
                kind=ArgumentErrorKind.NOT_RECOGNIZED,
            )

        handler(value)
        return self

    def build(self) -> CommandLine:
        """Freeze the accumulated values."""
        command_line = CommandLine(
            help=self.help,
            debug=self.debug,
            module=self.module,
            nuspec_file=self.nuspec_file,
            output_directory=self.output_directory,
            metadata=self.metadata,
            version=self.version,
            properties=MappingProxyType(dict(self.properties or {})),
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Built command line: %s", command_line)
        return command_line

    # --- argument handlers ---

    def _define_once(self, argument_name: str) -> None:
        if argument_name in self._defined:
            raise CommandLineArgumentError(
                argument_name,
                f"The argument '{argument_name}' is already defined.",
                kind=ArgumentErrorKind.ALREADY_DEFINED,
            )
        self._defined.add(argument_name)

    def _set_debug(self, value: str) -> None:
        self.debug = True

    def _set_module(self, value: str) -> None:
        self._define_once(args.MODULE)
        self.module = self._parser.trim_quotes(value)

    def _set_nuspec_file(self, value: str) -> None:
        self._define_once(args.NUSPEC_FILE)
        self.nuspec_file = self._parser.trim_quotes(value) or WILDCARD

    def _set_output_directory(self, value: str) -> None:
        self._define_once(args.OUTPUT_DIRECTORY)
        self.output_directory = self._parser.trim_quotes(value)

    def _set_metadata(self, value: str) -> None:
        self._define_once(args.METADATA)
        fields: dict[str, str] = {}
        recognized = {
            args.METADATA_ID.lower(): "id",
            args.METADATA_TITLE.lower(): "title",
            args.METADATA_DESCRIPTION.lower(): "description",
            args.METADATA_AUTHORS.lower(): "authors",
        }

        properties = self._parser.parse_argument_properties(args.METADATA, value)
        for property_name, property_value in properties.items():
            field_name = recognized.get(property_name.lower())
            if field_name is None:
                raise CommandLineArgumentPropertyError(
                    args.METADATA,
                    property_name,
                    f"The property '{property_name}' is not recognized.",
                    kind=ArgumentErrorKind.PROPERTY_NOT_RECOGNIZED,
                )
            fields[field_name] = property_value

        self.metadata = CommandLineMetadata(**fields)

    def _set_properties(self, value: str) -> None:
        self._define_once(args.PROPERTIES)
        nuspec_properties: dict[str, str] = {}

        properties = self._parser.parse_argument_properties(args.PROPERTIES, value)
        for property_name, property_value in properties.items():
            if property_name not in nuspec_properties:
                nuspec_properties[property_name] = property_value

        self.properties = nuspec_properties

    def _set_version(self, value: str) -> None:
        self._define_once(args.VERSION)
        explicit_value: str | None = None
        assembly: str | None = None
        version_type: AssemblyVersionType | None = None

        properties = self._parser.parse_argument_properties(args.VERSION, value)
        for property_name, property_value in properties.items():
            folded = property_name.lower()

            if folded == args.VERSION_ASSEMBLY.lower():
                assembly = property_value or WILDCARD
            elif folded == args.VERSION_ASSEMBLY_ATTRIBUTE.lower():
                version_type = AssemblyVersionType.parse(property_value)
                if version_type is None:
                    raise CommandLineArgumentPropertyError(
                        args.VERSION,
                        property_name,
                        f"The value '{property_value}' is not recognized.",
                        kind=ArgumentErrorKind.PROPERTY_VALUE_NOT_RECOGNIZED,
                    )
            elif property_name and not property_value:
                # A bare word such as "1.2.3" is an explicit version
                if explicit_value is not None:
                    raise CommandLineArgumentPropertyError(
                        args.VERSION,
                        args.VERSION_VALUE,
                        f"The property '{args.VERSION_VALUE}' is already defined.",
                        kind=ArgumentErrorKind.PROPERTY_ALREADY_DEFINED,
                    )
                explicit_value = property_name
            else:
                raise CommandLineArgumentPropertyError(
                    args.VERSION,
                    property_name,
                    f"The property '{property_name}' is not recognized.",
                    kind=ArgumentErrorKind.PROPERTY_NOT_RECOGNIZED,
                )

        if version_type is None:
            self.version = CommandLineVersion(value=explicit_value, assembly=assembly)
        else:
            self.version = CommandLineVersion(
                value=explicit_value,
                assembly=assembly,
                assembly_version_type=version_type,
            )
