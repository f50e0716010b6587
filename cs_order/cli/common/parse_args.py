"""
Command line arguments of cs_order

Global options are parsed by getopt in cs_order.app and given to commands
wrapped in InputModifiers. A command gets the rest of the arguments, plain
values first, then name=value options.
"""

from typing import (
    Final,
    Iterable,
    Mapping,
    Optional,
)

from cs_order.cli.common.errors import CmdLineInputError
from cs_order.common.str_tools import (
    join_quoted,
    pluralize,
)

Argv = list[str]

DEBUG_OPTION: Final = "--debug"
OUTPUT_FORMAT_OPTION: Final = "--output-format"
SERVICE_OPTION: Final = "--service"
OUTPUT_FORMAT_VALUE_JSON: Final = "json"
OUTPUT_FORMAT_VALUE_TEXT: Final = "text"
OUTPUT_FORMAT_VALUES: Final = (
    OUTPUT_FORMAT_VALUE_JSON,
    OUTPUT_FORMAT_VALUE_TEXT,
)

# getopt format, -h stands for --help
CS_ORDER_SHORT_OPTIONS: Final = "h"
CS_ORDER_LONG_OPTIONS: Final = [
    DEBUG_OPTION[2:],
    "help",
    "version",
    f"{OUTPUT_FORMAT_OPTION[2:]}=",
    f"{SERVICE_OPTION[2:]}=",
]


def split_option(arg: str, allow_empty_value: bool = True) -> tuple[str, str]:
    """
    Split a name=value argument at the first '='
    """
    name, separator, value = arg.partition("=")
    if not separator:
        raise CmdLineInputError(f"missing value of '{arg}' option")
    if not name:
        raise CmdLineInputError(f"missing key in '{arg}' option")
    if not value and not allow_empty_value:
        raise CmdLineInputError(f"value of '{name}' option is empty")
    return name, value


def parse_options(
    option_args: Argv, allowed_names: Iterable[str]
) -> dict[str, str]:
    """
    Turn name=value arguments to a dict

    An option may be repeated as long as its value stays the same.
    """
    values: dict[str, set[str]] = {}
    for arg in option_args:
        name, value = split_option(arg)
        values.setdefault(name, set()).add(value)

    unknown = sorted(set(values) - set(allowed_names))
    if unknown:
        raise CmdLineInputError(
            f"Unknown {pluralize(unknown, 'option')} {join_quoted(unknown)}"
        )
    result = {}
    for name, name_values in values.items():
        if len(name_values) > 1:
            raise CmdLineInputError(
                f"duplicate option '{name}' with different values "
                f"{join_quoted(name_values)}"
            )
        result[name] = name_values.pop()
    return result


def split_args_and_options(argv: Argv) -> tuple[Argv, Argv]:
    """
    Split arguments to plain values and name=value options after them
    """
    first_option = next(
        (index for index, arg in enumerate(argv) if "=" in arg), len(argv)
    )
    args, options = argv[:first_option], argv[first_option:]
    misplaced = [arg for arg in options if "=" not in arg]
    if misplaced:
        raise CmdLineInputError(
            f"{join_quoted(misplaced)} must be specified before options"
        )
    return args, options


class InputModifiers:
    """
    Global options given to a command, getopt puts an empty string as a value
    of a flag
    """

    def __init__(self, options: Mapping[str, str]):
        self._options = dict(options)

    def is_specified(self, option: str) -> bool:
        return option in self._options

    @property
    def debug(self) -> bool:
        return self.is_specified(DEBUG_OPTION)

    @property
    def service(self) -> Optional[str]:
        if not self.is_specified(SERVICE_OPTION):
            return None
        if not self._options[SERVICE_OPTION]:
            raise CmdLineInputError(
                f"value of '{SERVICE_OPTION}' option is empty"
            )
        return self._options[SERVICE_OPTION]

    def get_output_format(self) -> str:
        output_format = self._options.get(
            OUTPUT_FORMAT_OPTION, OUTPUT_FORMAT_VALUE_TEXT
        )
        if output_format not in OUTPUT_FORMAT_VALUES:
            raise CmdLineInputError(
                f"Unknown value '{output_format}' for '{OUTPUT_FORMAT_OPTION}' "
                f"option. Supported values are: "
                f"{join_quoted(OUTPUT_FORMAT_VALUES)}"
            )
        return output_format

    def ensure_only_supported(
        self, *supported_options: str, output_format_supported: bool = False
    ) -> None:
        supported = {DEBUG_OPTION, *supported_options}
        if output_format_supported:
            supported.add(OUTPUT_FORMAT_OPTION)
        unsupported = sorted(set(self._options) - supported)
        if unsupported:
            raise CmdLineInputError(
                f"Specified {pluralize(unsupported, 'option')} "
                f"{join_quoted(unsupported)} {pluralize(unsupported, 'is')} "
                "not supported in this command"
            )
