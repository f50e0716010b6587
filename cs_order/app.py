import getopt
import logging
import sys

from cs_order import (
    log,
    settings,
    usage,
)
from cs_order.cli.common import (
    errors,
    parse_args,
    routing,
)
from cs_order.cli.common.env import Env
from cs_order.cli.common.lib_wrapper import Library
from cs_order.cli.order import command as order_command
from cs_order.cli.reports import (
    ReportProcessorToConsole,
    process_library_reports,
)
from cs_order.cli.reports.output import (
    error,
    print_to_stderr,
)
from cs_order.lib.errors import LibraryError


def _get_cli_env(modifiers: parse_args.InputModifiers) -> Env:
    env = Env()
    env.report_processor = ReportProcessorToConsole(debug=modifiers.debug)
    env.cluster_membership_service = modifiers.service
    return env


def main(argv=None):
    argv = argv if argv else sys.argv[1:]
    try:
        cs_order_options, argv = getopt.gnu_getopt(
            argv,
            parse_args.CS_ORDER_SHORT_OPTIONS,
            parse_args.CS_ORDER_LONG_OPTIONS,
        )
    except getopt.GetoptError as err:
        error(str(err))
        print_to_stderr(usage.main())
        sys.exit(1)

    options = {}
    for opt, val in cs_order_options:
        if opt in options:
            raise error(f"{opt} can only be used once")
        options[opt] = val

        if opt in ("-h", "--help"):
            print(usage.main())
            sys.exit()
        elif opt == "--version":
            print(settings.cs_order_version)
            sys.exit()
    modifiers = parse_args.InputModifiers(options)

    log.setup(logging.StreamHandler(sys.stderr))
    if modifiers.debug:
        log.enable_debug()

    cmd_map = {
        "declare": order_command.declare_cmd,
        "describe": order_command.describe_cmd,
        "help": lambda lib, argv, modifiers: print(usage.main()),
    }
    try:
        routing.create_router(cmd_map)(
            Library(_get_cli_env(modifiers)), argv, modifiers
        )
    except LibraryError as e:
        process_library_reports(list(e.args))
    except errors.CmdLineInputError as e:
        if e.message:
            error(e.message)
        else:
            print_to_stderr(usage.main())
        if e.hint:
            print_to_stderr(f"Hint: {e.hint}")
        sys.exit(1)
