import pytest

from package_builder import __version__
from package_builder.cli import EXIT_FAILURE, EXIT_SUCCESS, main, summary_rows
from package_builder.core.command_line import CommandLine
from package_builder.core.common.exceptions import PackageBuildError
from package_builder.core.config import AppConfig, ConsoleConfig, LoggingConfig
from package_builder.core.console.formatting import TableRow
from package_builder.core.interfaces.module_package_builder_interface import (
    IModulePackageBuilder,
    ModulePackageResult,
)


class RecordingBuilder(IModulePackageBuilder):
    def __init__(self) -> None:
        self.command_lines: list[CommandLine] = []

    def build_package(self, command_line: CommandLine) -> ModulePackageResult:
        self.command_lines.append(command_line)
        return ModulePackageResult("Packages", f"{command_line.module}.1.2.3.nupkg")


class FailingBuilder(IModulePackageBuilder):
    def build_package(self, command_line: CommandLine) -> ModulePackageResult:
        raise PackageBuildError("The module was not found.", module_name=command_line.module)


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(console=ConsoleConfig(tool_name="pb"))


def test_no_arguments_shows_help_and_fails(config: AppConfig, capsys) -> None:
    assert main([], config=config) == EXIT_FAILURE

    out = capsys.readouterr().out
    assert out.splitlines()[0] == f"pb {__version__}"
    assert "Usage: pb -module:<codename> [options]" in out


@pytest.mark.parametrize("argument", ["-help", "-?", "/?", "?"])
def test_help_succeeds(config: AppConfig, capsys, argument: str) -> None:
    assert main([argument], config=config) == EXIT_SUCCESS

    assert "Usage: pb" in capsys.readouterr().out


def test_unknown_argument(config: AppConfig, capsys) -> None:
    assert main(["-module:Test", "-unknown=Test"], config=config) == EXIT_FAILURE

    err = capsys.readouterr().err
    assert "The argument '-unknown' is not recognized." in err
    assert "Argument name: -unknown" in err


def test_property_error(config: AppConfig, capsys) -> None:
    assert main(["-module:Test", "-metadata:unknown=1"], config=config) == EXIT_FAILURE

    err = capsys.readouterr().err
    assert "Argument name: -metadata" in err
    assert "Property name: unknown" in err


def test_module_is_required(config: AppConfig, capsys) -> None:
    assert main(["-nuspec"], config=config) == EXIT_FAILURE

    err = capsys.readouterr().err
    assert "The module code name is required." in err
    assert "Argument name: -module" in err


def test_summary_without_builder(config: AppConfig, capsys) -> None:
    result = main(["-module:Custom.Module", "-version:1.2.3"], config=config)

    assert result == EXIT_SUCCESS
    out = capsys.readouterr().out
    assert "Custom.Module" in out
    assert "1.2.3" in out


def test_builder_receives_command_line(config: AppConfig, capsys) -> None:
    builder = RecordingBuilder()

    result = main(
        ["-module:Custom.Module", "-properties:author=Someone"],
        config=config,
        builder=builder,
    )

    assert result == EXIT_SUCCESS
    assert [c.module for c in builder.command_lines] == ["Custom.Module"]
    assert dict(builder.command_lines[0].properties) == {"author": "Someone"}
    assert "Custom.Module.1.2.3.nupkg" in capsys.readouterr().out


def test_build_failure(config: AppConfig, capsys) -> None:
    result = main(["-module:Custom.Module"], config=config, builder=FailingBuilder())

    assert result == EXIT_FAILURE
    err = capsys.readouterr().err
    assert "The module was not found." in err
    assert "Traceback" not in err


def test_build_failure_with_debug_writes_details(config: AppConfig, capsys) -> None:
    result = main(
        ["-module:Custom.Module", "-debug"], config=config, builder=FailingBuilder()
    )

    assert result == EXIT_FAILURE
    err = capsys.readouterr().err
    assert "The module was not found." in err
    assert "PackageBuildError" in err
    assert "Traceback" in err


def test_invalid_configuration_file(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setenv("PACKAGE_BUILDER_CONFIG", str(tmp_path / "missing.yaml"))

    assert main(["-help"]) == EXIT_FAILURE

    assert "Configuration file not found" in capsys.readouterr().err


def test_summary_rows() -> None:
    command_line = CommandLine.parse(
        "-module:M -nuspec -version:assembly -metadata:title=T -properties:a=1"
    )

    assert summary_rows(command_line) == [
        TableRow("Module", "M"),
        TableRow("NuSpec file", "*"),
        TableRow("Version", "AssemblyFileVersion of *"),
        TableRow("Title", "T"),
        TableRow("$a$", "1"),
    ]


def test_shell_quoted_argument_keeps_commas(config: AppConfig, capsys) -> None:
    # What the shell passes for: "-metadata:authors='Person One, Person Two'"
    result = main(
        ["-module:Custom.Module", "-metadata:authors='Person One, Person Two'"],
        config=config,
    )

    assert result == EXIT_SUCCESS
    assert "Person One, Person Two" in capsys.readouterr().out


def test_unquoted_comma_splits_properties(config: AppConfig, capsys) -> None:
    # What the shell passes for: -metadata:authors='Person One, Person Two'
    result = main(
        ["-module:Custom.Module", "-metadata:authors=Person One, Person Two"],
        config=config,
    )

    assert result == EXIT_FAILURE
    assert "Property name:  Person Two" in capsys.readouterr().err


def test_help_explains_shell_quoting(config: AppConfig, capsys) -> None:
    main(["-help"], config=config)

    assert "\"-metadata:authors='A, B'\"" in capsys.readouterr().out


def test_unwritable_log_file(tmp_path, capsys) -> None:
    log_file = tmp_path / "missing" / "package-builder.log"
    config = AppConfig(logging=LoggingConfig(log_file=str(log_file)))

    assert main(["-module:Custom.Module"], config=config) == EXIT_FAILURE

    err = capsys.readouterr().err
    assert "Cannot open log file" in err
    assert str(log_file) in err
