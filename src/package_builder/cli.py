"""
Console entry point.

Parses the process arguments, writes help or diagnostics and hands a valid
command line to the module package builder.
"""

from __future__ import annotations

import sys
import traceback
from collections.abc import Sequence

from package_builder import __version__
from package_builder.core.command_line import arguments as args
from package_builder.core.command_line.command_line import CommandLine
from package_builder.core.command_line.models import (
    AssemblyVersionSource,
    ExplicitVersion,
)
from package_builder.core.common.exceptions import (
    ArgumentErrorKind,
    CommandLineArgumentError,
    ConfigurationError,
)
from package_builder.core.common.logging_utils import (
    LogContext,
    configure_logging_with_environment_tagging,
    get_logger,
)
from package_builder.core.config.app_config import AppConfig, LogLevel, load_config
from package_builder.core.console.formatting import TableRow, format_table, wrap_message
from package_builder.core.console.help import HelpRenderer
from package_builder.core.console.writer import ConsoleWriter
from package_builder.core.interfaces.module_package_builder_interface import (
    IModulePackageBuilder,
)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

logger = get_logger(__name__)


def _configure_logging(config: AppConfig, debug: bool = False) -> None:
    level = LogLevel.DEBUG if debug else config.logging.level
    configure_logging_with_environment_tagging(
        level=level.to_logging_level(), log_file=config.logging.log_file
    )


def summary_rows(command_line: CommandLine) -> list[TableRow]:
    """Describe the parsed command line as table rows."""
    rows = [TableRow("Module", command_line.module or "")]

    if command_line.nuspec_file:
        rows.append(TableRow("NuSpec file", command_line.nuspec_file))
    if command_line.output_directory:
        rows.append(TableRow("Output directory", command_line.output_directory))

    if command_line.version is not None:
        source = command_line.version.source
        if isinstance(source, ExplicitVersion):
            rows.append(TableRow("Version", source.value))
        elif isinstance(source, AssemblyVersionSource):
            rows.append(
                TableRow(
                    "Version",
                    f"{source.version_type.value} of {source.assembly}",
                )
            )

    metadata = command_line.metadata
    if metadata is not None:
        for label, value in (
            ("Id", metadata.id),
            ("Title", metadata.title),
            ("Description", metadata.description),
            ("Authors", metadata.authors),
        ):
            if value:
                rows.append(TableRow(label, value))

    for name, value in command_line.properties.items():
        rows.append(TableRow(f"${name}$", value))

    return rows


def main(
    argv: Sequence[str] | None = None,
    *,
    config: AppConfig | None = None,
    builder: IModulePackageBuilder | None = None,
    writer: ConsoleWriter | None = None,
) -> int:
    """Run the package builder command line.

    Args:
        argv: Arguments without the executable; ``sys.argv[1:]`` if omitted
        config: Application configuration; loaded from file/environment if omitted
        builder: Package builder; without one the parsed command line is only
            summarized
        writer: Console writer

    Returns:
        The process exit code
    """
    writer = writer or ConsoleWriter()
    argv = list(sys.argv[1:] if argv is None else argv)

    if config is None:
        try:
            config = load_config()
        except ConfigurationError as exc:
            writer.write_error(f"{exc.message}: {exc.details}")
            return EXIT_FAILURE

    try:
        _configure_logging(config)
    except ConfigurationError as exc:
        writer.write_error(f"{exc.message}: {exc.details}")
        return EXIT_FAILURE

    console = config.console
    writer.write_message(f"{console.tool_name} {__version__}")

    if not argv:
        writer.write_lines(HelpRenderer(console).render())
        return EXIT_FAILURE

    debug = False
    try:
        command_line = CommandLine.from_argv(argv)
        debug = command_line.debug
        if debug:
            _configure_logging(config, debug=True)

        if command_line.help:
            writer.new_line()
            writer.write_lines(HelpRenderer(console).render())
            return EXIT_SUCCESS

        if not command_line.module:
            raise CommandLineArgumentError(
                args.MODULE,
                "The module code name is required.",
                kind=ArgumentErrorKind.REQUIRED,
            )

        with LogContext(logger, module=command_line.module) as log:
            log.debug("Command line parsed", arguments=argv)
            rows = summary_rows(command_line)

            if builder is not None:
                log.info("Building package")
                result = builder.build_package(command_line)
                rows.append(TableRow("Output directory", result.output_directory))
                rows.append(TableRow("Package name", result.package_file_name))
                log.info("Package built", package=result.package_file_name)

        writer.new_line()
        writer.write_lines(
            format_table(
                rows,
                console.width,
                indent=console.indent,
                column_spacing=console.column_spacing,
            )
        )
        return EXIT_SUCCESS

    except CommandLineArgumentError as exc:
        logger.debug("Invalid command line", **exc.to_dict()["error"])
        writer.new_line()
        for line in wrap_message(str(exc), console.width):
            writer.write_error(line)
        return EXIT_FAILURE

    except Exception as exc:
        logger.error("Package build failed", error=str(exc), exc_info=debug)
        writer.new_line()
        for line in wrap_message(str(exc), console.width):
            writer.write_error(line)

        if debug:
            writer.write_error_detail(f"\n--- {type(exc).__module__}.{type(exc).__qualname__} ---")
            for line in traceback.format_exception(exc):
                writer.write_error_detail(line.rstrip("\n"))

        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
