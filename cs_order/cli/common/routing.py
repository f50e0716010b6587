from typing import (
    Any,
    Callable,
    Mapping,
    Optional,
)

from cs_order.cli.common.errors import CmdLineInputError
from cs_order.cli.common.parse_args import (
    Argv,
    InputModifiers,
)

CliCommand = Callable[[Any, Argv, InputModifiers], None]


def create_router(
    cmd_map: Mapping[str, CliCommand], default_cmd: Optional[str] = None
) -> CliCommand:
    """
    Create a command running one of cmd_map commands picked by the first
    argument
    """

    def _router(lib: Any, argv: Argv, modifiers: InputModifiers) -> None:
        sub_cmd = argv[0] if argv else default_cmd
        if sub_cmd is None:
            raise CmdLineInputError()
        if sub_cmd not in cmd_map:
            raise CmdLineInputError(f"Unknown command '{sub_cmd}'")
        cmd_map[sub_cmd](lib, argv[1:], modifiers)

    return _router
