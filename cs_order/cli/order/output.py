import textwrap
from typing import (
    Sequence,
    Union,
)

from cs_order.common.pacemaker.constraint import (
    CibConstraintOrderAttributeDescriptionDto,
    CibConstraintOrderDeclarationDto,
)
from cs_order.common.str_tools import (
    indent,
    join_quoted,
)


def _value_to_text(value: Union[bool, str]) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _option_to_text(name: str, value: Union[bool, str]) -> str:
    text = _value_to_text(value)
    if not text or any(char in text for char in " ="):
        text = f'"{text}"'
    return f"{name}={text}"


def declaration_to_text(dto: CibConstraintOrderDeclarationDto) -> list[str]:
    attributes = dto.attributes
    options = [
        _option_to_text("ensure", attributes.ensure),
        _option_to_text("resources-type", attributes.resources_type),
        _option_to_text("score", attributes.score),
        _option_to_text("symmetrical", attributes.symmetrical),
    ]
    if attributes.cib is not None:
        options.insert(0, _option_to_text("cib", attributes.cib))
    return [
        f"Order Constraint: {attributes.constraint_id}",
        *indent(
            [
                "Resources: "
                + join_quoted(attributes.resources, sort=False),
                "Options: " + " ".join(options),
                "Requires:",
                *indent([str(edge) for edge in dto.autorequire]),
            ]
        ),
    ]


def attributes_description_to_text(
    dto_list: Sequence[CibConstraintOrderAttributeDescriptionDto],
) -> list[str]:
    lines: list[str] = []
    for dto in dto_list:
        flags = ["property" if dto.is_property else "parameter"]
        if dto.required:
            flags.append("required")
        lines.append(f"{dto.name} ({', '.join(flags)})")
        details = textwrap.wrap(dto.description, width=76)
        if dto.default is not None:
            details.append(f"Default: {_value_to_text(dto.default)}")
        if dto.allowed_values:
            details.append(
                f"Allowed values: {join_quoted(dto.allowed_values)}"
            )
        lines.extend(indent(details))
    return lines
