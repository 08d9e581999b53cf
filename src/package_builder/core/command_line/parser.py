"""
Tokenizes raw command lines into arguments, argument names/values and
argument properties.

A single quote-aware scanner is reused at every level: spaces separate
arguments, commas separate properties and equals signs separate a property
name from its value. Delimiters inside a run of single or double quotes are
not boundaries.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, MutableMapping

from package_builder.constants import (
    ARGUMENT_SEPARATORS,
    COMMA_CHAR,
    DASH_CHAR,
    EQUALS_CHAR,
    QUOTE_CHARS,
    SPACE_CHAR,
    UNICODE_DASHES,
)
from package_builder.core.common.exceptions import (
    ArgumentErrorKind,
    CommandLineArgumentPropertyError,
)

logger = logging.getLogger(__name__)


class ArgumentProperties(MutableMapping[str, str]):
    """Insertion-ordered mapping with case-insensitive keys.

    The spelling of the first insertion is kept for iteration.
    """

    def __init__(self) -> None:
        self._items: dict[str, tuple[str, str]] = {}

    def __getitem__(self, key: str) -> str:
        return self._items[key.lower()][1]

    def __setitem__(self, key: str, value: str) -> None:
        folded = key.lower()
        original = self._items[folded][0] if folded in self._items else key
        self._items[folded] = (original, value)

    def __delitem__(self, key: str) -> None:
        del self._items[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._items

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self.items())!r})"


def smart_index_of(text: str, delimiter: str) -> int:
    """Return the index of the first ``delimiter`` outside any quote run.

    Quote characters are tracked on a stack: a quote opens a run unless it
    matches the innermost open run, in which case it closes it. A ``'`` never
    closes a ``"`` run and vice versa.

    Returns:
        The index of the delimiter, or -1 if every occurrence is quoted.
    """
    stack: list[str] = []
    for index, char in enumerate(text):
        if char == delimiter:
            if not stack:
                return index
        elif char in QUOTE_CHARS:
            if not stack or stack[-1] != char:
                stack.append(char)
            else:
                stack.pop()
    return -1


def normalize_dashes(text: str) -> str:
    """Replace a leading Unicode dash look-alike with an ASCII dash."""
    if text and text[0] in UNICODE_DASHES:
        return DASH_CHAR + text[1:]
    return text


def _is_surrounded_by(value: str, char: str) -> bool:
    return len(value) >= 2 and value.startswith(char) and value.endswith(char)


def trim_quotes(value: str | None) -> str | None:
    """Strip one matching pair of outer quotes.

    Only a single layer is removed per call: ``"''x''"`` becomes ``"'x'"``.
    Unbalanced or unquoted values are returned unchanged, as are None and
    the empty string.
    """
    if not value:
        return value

    for quote in QUOTE_CHARS:
        if _is_surrounded_by(value, quote):
            return value[1:-1]
    return value


class CommandLineParser:
    """Splits command lines into arguments and arguments into properties.

    The parser holds no state between calls; one instance can be shared
    freely.
    """

    def parse_command_line(self, command_line: str | None) -> list[str]:
        """Split a raw command line into argument tokens.

        Runs of spaces between arguments are collapsed; spaces inside quotes
        stay part of the argument.
        """
        arguments: list[str] = []
        if not command_line or not command_line.strip():
            return arguments

        block = command_line.strip()
        while True:
            index = smart_index_of(block, SPACE_CHAR)
            if index <= 0:
                break
            arguments.append(block[:index])
            block = block[index + 1 :].strip()

        if block:
            arguments.append(block)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Parsed %d command-line arguments: %s", len(arguments), arguments)
        return arguments

    def parse_argument(self, argument: str) -> tuple[str, str]:
        """Split an argument token into its name and raw value.

        The name ends at the first ``:`` or ``=``; names cannot contain
        quotes, so this search is not quote-aware. Without a separator the
        whole token is the name and the value is empty.
        """
        indexes = [argument.find(sep) for sep in ARGUMENT_SEPARATORS]
        found = [i for i in indexes if i != -1]
        if not found:
            return normalize_dashes(argument), ""

        separator_index = min(found)
        name = normalize_dashes(argument[:separator_index])
        value = argument[separator_index + 1 :]
        return name, value

    def parse_argument_properties(
        self, argument_name: str, argument_properties: str | None
    ) -> ArgumentProperties:
        """Parse a ``name[=value](,name[=value])*`` list.

        Property names and values are quote-trimmed. A missing or trailing
        ``=`` yields an empty value.

        Raises:
            CommandLineArgumentPropertyError: If a property name repeats
                (case-insensitively) within ``argument_properties``.
        """
        properties = ArgumentProperties()
        remaining = argument_properties

        while remaining:
            comma_index = smart_index_of(remaining, COMMA_CHAR)
            block = remaining[:comma_index] if comma_index != -1 else remaining
            equals_index = smart_index_of(block, EQUALS_CHAR)

            if equals_index == -1:
                property_name, property_value = block, ""
            else:
                property_name = block[:equals_index]
                property_value = block[equals_index + 1 :]

            property_name = trim_quotes(property_name) or ""
            property_value = trim_quotes(property_value) or ""

            if property_name in properties:
                raise CommandLineArgumentPropertyError(
                    argument_name,
                    property_name,
                    f"The property '{property_name}' is already defined.",
                    kind=ArgumentErrorKind.PROPERTY_ALREADY_DEFINED,
                )
            properties[property_name] = property_value

            if comma_index != -1 and comma_index < len(remaining) - 1:
                remaining = remaining[comma_index + 1 :]
            else:
                remaining = None

        return properties

    def trim_quotes(self, value: str | None) -> str | None:
        """Strip one matching pair of outer quotes. See :func:`trim_quotes`."""
        return trim_quotes(value)
