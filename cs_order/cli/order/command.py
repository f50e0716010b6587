import json
from typing import Any

from cs_order.cli.common.errors import CmdLineInputError
from cs_order.cli.common.parse_args import (
    OUTPUT_FORMAT_VALUE_JSON,
    SERVICE_OPTION,
    Argv,
    InputModifiers,
    parse_options,
    split_args_and_options,
)
from cs_order.common.interface.dto import to_dict

from .output import (
    attributes_description_to_text,
    declaration_to_text,
)

# command line option name -> library attribute name
_OPTION_MAP = {
    "cib": "cib",
    "ensure": "ensure",
    "resources-type": "resources_type",
    "score": "score",
    "symmetrical": "symmetrical",
}


def declare_cmd(lib: Any, argv: Argv, modifiers: InputModifiers) -> None:
    """
    Options:
      * --output-format - supported formats: text, json
      * --service - cluster membership service the constraint depends on
    """
    modifiers.ensure_only_supported(
        SERVICE_OPTION, output_format_supported=True
    )
    output_format = modifiers.get_output_format()
    args, option_args = split_args_and_options(argv)
    if not args:
        raise CmdLineInputError()
    constraint_id, *resource_list = args

    options: dict[str, Any] = {
        _OPTION_MAP[name]: value
        for name, value in parse_options(option_args, _OPTION_MAP).items()
    }
    options["resources"] = resource_list

    declaration_dto = lib.constraint_order.declare(constraint_id, options)

    if output_format == OUTPUT_FORMAT_VALUE_JSON:
        print(json.dumps(to_dict(declaration_dto), indent=2))
        return
    print("\n".join(declaration_to_text(declaration_dto)))


def describe_cmd(lib: Any, argv: Argv, modifiers: InputModifiers) -> None:
    """
    Options:
      * --output-format - supported formats: text, json
    """
    modifiers.ensure_only_supported(output_format_supported=True)
    output_format = modifiers.get_output_format()
    if argv:
        raise CmdLineInputError()

    description_list = lib.constraint_order.describe()

    if output_format == OUTPUT_FORMAT_VALUE_JSON:
        print(
            json.dumps(
                [to_dict(description) for description in description_list],
                indent=2,
            )
        )
        return
    print("\n".join(attributes_description_to_text(description_list)))
