"""
Validators of raw order constraint attributes

A validator takes a mapping of attribute names to raw values and returns a
list of report items, it does not raise. ValidatorAll collects reports of all
its validators. ValidatorFirstError stops at the first validator reporting an
error, so a type validator put first protects value validators from values
of unexpected shapes:

    >>> validator = ValidatorAll([
    ...     IsRequiredAll(["resources"]),
    ...     ValidatorFirstError([
    ...         ValueString("resources_type"),
    ...         ValueIn("resources_type", ["primitive", "group"]),
    ...     ]),
    ... ])
    >>> for report in validator.validate({"resources_type": "clone"}):
    ...     print(report.message.message)
    ...
    required option 'resources' is missing
    resources_type 'clone' is not acceptable, expected 'group', 'primitive'
"""

import re
from typing import (
    Any,
    Container,
    Iterable,
    List,
    Mapping,
    Optional,
)

from cs_order.common.reports import (
    ReportItem,
    ReportItemList,
    ReportItemMessage,
    ReportItemSeverity,
    has_errors,
)
from cs_order.common.reports.messages import (
    InvalidOptions,
    InvalidOptionType,
    InvalidOptionValue,
    InvalidScore,
    OrderConstraintNotEnoughResources,
    RequiredOptionsAreMissing,
)
from cs_order.common.reports.types import SeverityLevel
from cs_order.common.str_tools import join_quoted

OptionMap = Mapping[str, Any]

PCMK_TRUE_VALUES = frozenset(("1", "on", "true", "y", "yes"))
PCMK_FALSE_VALUES = frozenset(("0", "false", "n", "no", "off"))
_PCMK_SCORE = re.compile(r"[+-]?(INFINITY|[0-9]+)")


def pcmk_boolean(value: str) -> Optional[bool]:
    """
    Read a string the way pacemaker reads booleans, ignoring case

    Return None if the string is not a pacemaker boolean.
    """
    lowered = value.lower()
    if lowered in PCMK_TRUE_VALUES:
        return True
    if lowered in PCMK_FALSE_VALUES:
        return False
    return None


def is_pcmk_score(value: str) -> bool:
    return _PCMK_SCORE.fullmatch(value) is not None


class ValidatorInterface:
    def validate(self, option_dict: OptionMap) -> ReportItemList:
        raise NotImplementedError()


class ValidatorAll(ValidatorInterface):
    def __init__(self, validator_list: Iterable[ValidatorInterface]):
        self._validator_list = list(validator_list)

    def validate(self, option_dict: OptionMap) -> ReportItemList:
        return [
            report_item
            for validator in self._validator_list
            for report_item in validator.validate(option_dict)
        ]


class ValidatorFirstError(ValidatorAll):
    def validate(self, option_dict: OptionMap) -> ReportItemList:
        report_list: ReportItemList = []
        for validator in self._validator_list:
            current_reports = validator.validate(option_dict)
            report_list.extend(current_reports)
            if has_errors(current_reports):
                break
        return report_list


class IsRequiredAll(ValidatorInterface):
    def __init__(
        self, option_name_list: Iterable[str], option_type: Optional[str] = None
    ):
        self._option_name_list = list(option_name_list)
        self._option_type = option_type

    def validate(self, option_dict: OptionMap) -> ReportItemList:
        missing = sorted(set(self._option_name_list) - set(option_dict))
        if not missing:
            return []
        return [
            ReportItem.error(
                RequiredOptionsAreMissing(missing, self._option_type)
            )
        ]


class NamesIn(ValidatorInterface):
    def __init__(
        self, option_name_list: Iterable[str], option_type: Optional[str] = None
    ):
        self._option_name_list = sorted(option_name_list)
        self._option_type = option_type

    def validate(self, option_dict: OptionMap) -> ReportItemList:
        unknown = sorted(set(option_dict) - set(self._option_name_list))
        if not unknown:
            return []
        return [
            ReportItem.error(
                InvalidOptions(
                    unknown, self._option_name_list, self._option_type
                )
            )
        ]


class ValueValidator(ValidatorInterface):
    """
    Base of validators of a single option value; a missing option is not
    checked
    """

    def __init__(
        self,
        option_name: str,
        severity: SeverityLevel = ReportItemSeverity.ERROR,
    ):
        self._option_name = option_name
        self._severity = severity

    def validate(self, option_dict: OptionMap) -> ReportItemList:
        if self._option_name not in option_dict:
            return []
        value = option_dict[self._option_name]
        if self._is_valid(value):
            return []
        return [ReportItem(self._severity, self._get_message(value))]

    def _is_valid(self, value: Any) -> bool:
        raise NotImplementedError()

    def _get_message(self, value: Any) -> ReportItemMessage:
        raise NotImplementedError()


class _ValueType(ValueValidator):
    _allowed_types = ""

    def _get_message(self, value: Any) -> ReportItemMessage:
        return InvalidOptionType(self._option_name, self._allowed_types)


class ValueStringSequence(_ValueType):
    _allowed_types = "an array of strings"

    def _is_valid(self, value: Any) -> bool:
        return isinstance(value, (list, tuple)) and all(
            isinstance(item, str) for item in value
        )


class ValueString(_ValueType):
    """
    The value must be a string

    allow_none -- None is accepted as well
    allow_integer -- integers are accepted as well, booleans are not
    """

    def __init__(
        self,
        option_name: str,
        allow_none: bool = False,
        allow_integer: bool = False,
    ):
        super().__init__(option_name)
        self._allow_none = allow_none
        self._allow_integer = allow_integer
        self._allowed_types = (
            "a string or an integer" if allow_integer else "a string"
        )

    def _is_valid(self, value: Any) -> bool:
        if value is None:
            return self._allow_none
        if isinstance(value, bool):
            return False
        return isinstance(value, str) or (
            self._allow_integer and isinstance(value, int)
        )


class ValueBooleanLike(_ValueType):
    _allowed_types = "a boolean"

    def _is_valid(self, value: Any) -> bool:
        return isinstance(value, (bool, str))


class ValueIn(ValueValidator):
    def __init__(self, option_name: str, allowed_values: Container[str]):
        super().__init__(option_name)
        self._allowed_values = allowed_values

    def _is_valid(self, value: Any) -> bool:
        return value in self._allowed_values

    def _get_message(self, value: Any) -> ReportItemMessage:
        return InvalidOptionValue(
            self._option_name, value, list(self._allowed_values)  # type: ignore
        )


class ValueNotEmpty(ValueValidator):
    """
    The value must not be an empty string, None passes

    value_description -- tells a user what to put in the option
    """

    def __init__(self, option_name: str, value_description: str):
        super().__init__(option_name)
        self._value_description = value_description

    def _is_valid(self, value: Any) -> bool:
        return value != ""

    def _get_message(self, value: Any) -> ReportItemMessage:
        return InvalidOptionValue(
            self._option_name,
            value,
            self._value_description,
            cannot_be_empty=True,
        )


class ValuePcmkBoolean(ValueValidator):
    def _is_valid(self, value: Any) -> bool:
        return isinstance(value, bool) or pcmk_boolean(value) is not None

    def _get_message(self, value: Any) -> ReportItemMessage:
        return InvalidOptionValue(
            self._option_name,
            value,
            "a pacemaker boolean value: "
            + join_quoted(PCMK_TRUE_VALUES | PCMK_FALSE_VALUES),
        )


class ValueMinItems(ValueValidator):
    def __init__(self, option_name: str, min_items: int):
        super().__init__(option_name)
        self._min_items = min_items

    def _is_valid(self, value: Any) -> bool:
        return len(value) >= self._min_items

    def _get_message(self, value: Any) -> ReportItemMessage:
        return OrderConstraintNotEnoughResources(list(value), self._min_items)


class ValueScore(ValueValidator):
    """
    The value must be a pacemaker score, an integer is taken as its string
    form
    """

    def _is_valid(self, value: Any) -> bool:
        return is_pcmk_score(str(value))

    def _get_message(self, value: Any) -> ReportItemMessage:
        return InvalidScore(str(value))
