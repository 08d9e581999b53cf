from package_builder.core.common.exceptions import (
    ArgumentErrorKind,
    CommandLineArgumentError,
    CommandLineArgumentPropertyError,
    ConfigurationError,
    PackageBuildError,
    PackageBuilderError,
)


def test_base_error_carries_details() -> None:
    error = PackageBuilderError("Something failed", {"key": "value"})

    assert str(error) == "Something failed"
    assert error.details == {"key": "value"}
    assert error.to_dict() == {
        "error": {
            "message": "Something failed",
            "type": "PackageBuilderError",
            "details": {"key": "value"},
        }
    }


def test_configuration_error_default_message() -> None:
    error = ConfigurationError()

    assert isinstance(error, PackageBuilderError)
    assert error.message == "Configuration error"
    assert error.details == {}


def test_argument_error() -> None:
    error = CommandLineArgumentError(
        "-module",
        "The module code name is required.",
        kind=ArgumentErrorKind.REQUIRED,
    )

    assert isinstance(error, PackageBuilderError)
    assert error.details == {"argument_name": "-module"}
    assert str(error) == "The module code name is required.\nArgument name: -module"
    assert error.to_dict()["error"]["kind"] == "required"


def test_argument_error_without_name() -> None:
    error = CommandLineArgumentError(None, "Invalid")

    assert str(error) == "Invalid"
    assert error.details == {}
    assert error.kind is ArgumentErrorKind.NOT_RECOGNIZED


def test_property_error_is_argument_error() -> None:
    error = CommandLineArgumentPropertyError("-version", "assemblyAttribute", "Bad value")

    assert isinstance(error, CommandLineArgumentError)
    assert error.details == {
        "argument_name": "-version",
        "property_name": "assemblyAttribute",
    }
    assert str(error).splitlines() == [
        "Bad value",
        "Argument name: -version",
        "Property name: assemblyAttribute",
    ]
    assert error.kind is ArgumentErrorKind.PROPERTY_NOT_RECOGNIZED


def test_details_are_not_mutated() -> None:
    details = {"hint": "check the name"}

    CommandLineArgumentError("-module", "Invalid", details=details)

    assert details == {"hint": "check the name"}


def test_package_build_error() -> None:
    error = PackageBuildError("Module not found", module_name="Custom.Module")

    assert error.details == {"module_name": "Custom.Module"}
    assert error.to_dict()["error"]["module_name"] == "Custom.Module"


def test_empty_names_are_still_reported() -> None:
    error = CommandLineArgumentPropertyError("", "", "Invalid")

    assert error.details == {"argument_name": "", "property_name": ""}
    assert str(error).splitlines() == ["Invalid", "Argument name: ", "Property name: "]
