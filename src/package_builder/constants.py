from enum import Enum

WILDCARD: str = "*"

DASH_CHAR: str = "-"
SINGLE_QUOTE_CHAR: str = "'"
DOUBLE_QUOTE_CHAR: str = '"'
QUOTE_CHARS: tuple[str, str] = (SINGLE_QUOTE_CHAR, DOUBLE_QUOTE_CHAR)
COMMA_CHAR: str = ","
EQUALS_CHAR: str = "="
SPACE_CHAR: str = " "
ARGUMENT_SEPARATORS: tuple[str, str] = (":", EQUALS_CHAR)

# Mongolian Todo soft hyphen, hyphen, non-breaking hyphen, figure dash,
# en dash, em dash, horizontal bar, minus sign
UNICODE_DASHES: frozenset[str] = frozenset(
    "\u1806\u2010\u2011\u2012\u2013\u2014\u2015\u2212"
)


class AssemblyVersionType(str, Enum):
    """Assembly attribute a module version can be read from."""

    ASSEMBLY_VERSION = "AssemblyVersion"
    ASSEMBLY_FILE_VERSION = "AssemblyFileVersion"
    ASSEMBLY_INFORMATIONAL_VERSION = "AssemblyInformationalVersion"

    @classmethod
    def parse(cls, value: str) -> "AssemblyVersionType | None":
        """Return the member named by ``value`` or None when there is none."""
        for member in cls:
            if member.value == value:
                return member
        return None


DEFAULT_ASSEMBLY_VERSION_TYPE = AssemblyVersionType.ASSEMBLY_FILE_VERSION
