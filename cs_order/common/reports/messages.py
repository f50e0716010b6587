from dataclasses import dataclass
from typing import (
    List,
    Optional,
    Union,
)

from cs_order.common.str_tools import (
    join_quoted,
    pluralize,
)

from . import codes
from .item import ReportItemMessage


def _prefix(text: Optional[str]) -> str:
    return f"{text} " if text else ""


def _hint(allowed: Union[List[str], str]) -> str:
    if isinstance(allowed, str):
        return allowed
    return join_quoted(allowed)


@dataclass(frozen=True)
class RequiredOptionsAreMissing(ReportItemMessage):
    """
    Options without which a constraint cannot be declared were not given

    option_names -- names of the missing options
    option_type -- describes the options
    """

    option_names: List[str]
    option_type: Optional[str] = None
    _code = codes.REQUIRED_OPTIONS_ARE_MISSING

    @property
    def message(self) -> str:
        names = self.option_names
        return (
            f"required {_prefix(self.option_type)}"
            f"{pluralize(names, 'option')} {join_quoted(names)} "
            f"{pluralize(names, 'is')} missing"
        )


@dataclass(frozen=True)
class InvalidOptions(ReportItemMessage):
    """
    Options unknown to a constraint were given

    option_names -- names of the unknown options
    allowed -- names of all options the constraint knows
    option_type -- describes the options
    """

    option_names: List[str]
    allowed: List[str]
    option_type: Optional[str] = None
    _code = codes.INVALID_OPTIONS

    @property
    def message(self) -> str:
        if self.allowed:
            allowed = (
                f"known {pluralize(self.allowed, 'option')} "
                f"{pluralize(self.allowed, 'is')}: {join_quoted(self.allowed)}"
            )
        else:
            allowed = "no options are known"
        return (
            f"unknown {_prefix(self.option_type)}"
            f"{pluralize(self.option_names, 'option')} "
            f"{join_quoted(self.option_names)}, {allowed}"
        )


@dataclass(frozen=True)
class InvalidOptionType(ReportItemMessage):
    """
    A value is of a type the option does not accept

    allowed_types -- names of accepted types or their description
    """

    option_name: str
    allowed_types: Union[List[str], str]
    _code = codes.INVALID_OPTION_TYPE

    @property
    def message(self) -> str:
        return (
            f"value of {self.option_name} has a wrong type, "
            f"expected {_hint(self.allowed_types)}"
        )


@dataclass(frozen=True)
class InvalidOptionValue(ReportItemMessage):
    """
    A value is not acceptable for the option

    allowed_values -- accepted values or their description, may be empty
    cannot_be_empty -- the value is empty which the option does not accept
    """

    option_name: str
    option_value: str
    allowed_values: Union[List[str], str, None]
    cannot_be_empty: bool = False
    _code = codes.INVALID_OPTION_VALUE

    @property
    def message(self) -> str:
        if self.cannot_be_empty:
            text = f"{self.option_name} must not be empty"
        else:
            text = (
                f"{self.option_name} '{self.option_value}' is not acceptable"
            )
        if self.allowed_values:
            text += f", expected {_hint(self.allowed_values)}"
        return text


@dataclass(frozen=True)
class InvalidScore(ReportItemMessage):
    score: str
    _code = codes.INVALID_SCORE

    @property
    def message(self) -> str:
        return (
            f"score '{self.score}' is not an integer, INFINITY or -INFINITY"
        )


@dataclass(frozen=True)
class OrderConstraintNotEnoughResources(ReportItemMessage):
    """
    Fewer resources than an order constraint needs have been given

    resource_list -- the given resources
    min_count -- the least number of resources to put in order
    """

    resource_list: List[str]
    min_count: int
    _code = codes.ORDER_CONSTRAINT_NOT_ENOUGH_RESOURCES

    @property
    def message(self) -> str:
        given = self.resource_list
        text = (
            f"an order constraint needs {self.min_count} or more "
            f"{pluralize(self.min_count, 'resource')}, "
            f"{len(given)} {pluralize(given, 'was', 'were')} given"
        )
        if given:
            text += f": {join_quoted(given, sort=False)}"
        return text


@dataclass(frozen=True)
class OrderConstraintDeclared(ReportItemMessage):
    """
    An order constraint has been validated and its requirements collected

    requirement_list -- 'kind[name]' references of the requirements
    """

    constraint_id: str
    requirement_list: List[str]
    _code = codes.ORDER_CONSTRAINT_DECLARED

    @property
    def message(self) -> str:
        return (
            f"order constraint '{self.constraint_id}' requires "
            f"{join_quoted(self.requirement_list, sort=False)}"
        )
