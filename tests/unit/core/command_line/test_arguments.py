import pytest

from package_builder.core.command_line import arguments as args


@pytest.mark.parametrize(
    "name, expected",
    [
        ("-module", args.MODULE),
        ("-MODULE", args.MODULE),
        ("-Version", args.VERSION),
        ("-nuspec", args.NUSPEC_FILE),
        ("-unknown", None),
        ("module", None),
    ],
)
def test_find_argument(name: str, expected: str | None) -> None:
    spec = args.find_argument(name)

    assert (spec.name if spec else None) == expected


def test_usage_includes_value_name() -> None:
    assert args.find_argument("-module").usage == "-module:<codename>"
    assert args.find_argument("-debug").usage == "-debug"


def test_every_argument_is_registered_once() -> None:
    names = [spec.name.lower() for spec in args.ARGUMENTS]

    assert len(names) == len(set(names))
    assert set(names) == {
        args.HELP,
        args.DEBUG,
        args.MODULE,
        args.NUSPEC_FILE,
        args.OUTPUT_DIRECTORY,
        args.METADATA,
        args.PROPERTIES,
        args.VERSION,
    }
