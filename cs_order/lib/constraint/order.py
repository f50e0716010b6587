"""
Order constraint declaration

Order constraints put a set of cluster resources in order. The resources
come into their desired state one after another and, unless the constraint
is not symmetrical, stop in the reverse order. Order constraints can be put
on primitives or on groups. See
http://www.clusterlabs.org/doc/en-US/Pacemaker/1.1/html/Clusters_from_Scratch/_controlling_resource_start_stop_ordering.html

Every attribute value is validated and normalized by a standalone function
first and only then stored in an OrderConstraint instance, so an instance
never holds an invalid value.
"""

from dataclasses import dataclass
from typing import (
    Any,
    Dict,
    List,
    Mapping,
    Optional,
    Union,
)

from cs_order import settings
from cs_order.common import reports
from cs_order.common.pacemaker.constraint import (
    CibConstraintOrderAttributeDescriptionDto,
    CibConstraintOrderAttributesDto,
    DependencyEdgeDto,
)
from cs_order.common.pacemaker.types import (
    OrderEnsure,
    OrderResourcesType,
)
from cs_order.common.reports import (
    ReportItemList,
    ReportItemSeverity,
)
from cs_order.lib import validate
from cs_order.lib.constraint import autorequire
from cs_order.lib.errors import (
    AttributeTypeError,
    ValidationError,
)

NAME = "name"
ENSURE = "ensure"
RESOURCES = "resources"
RESOURCES_TYPE = "resources_type"
CIB = "cib"
SCORE = "score"
SYMMETRICAL = "symmetrical"

VALID_ENSURE_VALUES = (OrderEnsure.PRESENT, OrderEnsure.ABSENT)
VALID_RESOURCES_TYPES = (OrderResourcesType.PRIMITIVE, OrderResourcesType.GROUP)

# Properties are compared to the current state of the cluster, parameters
# only steer how the constraint is declared.
PROPERTY_NAMES = (ENSURE, RESOURCES, SCORE, SYMMETRICAL)
OPTION_NAMES = (CIB, ENSURE, RESOURCES, RESOURCES_TYPE, SCORE, SYMMETRICAL)


@dataclass(frozen=True)
class _Attribute:
    name: str
    description: str
    required: bool = False
    default: Union[str, bool, None] = None
    allowed_values: Optional[tuple[str, ...]] = None

    @property
    def is_property(self) -> bool:
        return self.name in PROPERTY_NAMES


ATTRIBUTES = (
    _Attribute(
        NAME,
        "Name identifier of this ordering entry. The value needs to be unique "
        "across the entire cluster configuration since it does not have the "
        "concept of name spaces per type.",
        required=True,
    ),
    _Attribute(
        ENSURE,
        "Whether the order constraint should exist in the cluster "
        "configuration.",
        default=settings.default_ensure,
        allowed_values=VALID_ENSURE_VALUES,
    ),
    _Attribute(
        RESOURCES,
        "List of resources (primitives, master/slave resources, groups) to "
        "be started in the specified order. Must supply at least two "
        "resources.",
        required=True,
    ),
    _Attribute(
        RESOURCES_TYPE,
        "Which resource type the resources are, e.g. 'group' to order "
        "groups instead of primitives.",
        default=settings.default_resources_type,
        allowed_values=VALID_RESOURCES_TYPES,
    ),
    _Attribute(
        CIB,
        "Name of a shadow CIB to create the constraint in. Changes to a "
        "shadow CIB are applied to the cluster all at once, which allows to "
        "insert complex configurations correctly. A shadow CIB resource of "
        "the same name should be declared as well.",
    ),
    _Attribute(
        SCORE,
        "Priority of this ordered grouping. Resources can be a part of "
        "multiple order constraints, the score controls which resources get "
        "priority when forcing the order of state changes. An integer or "
        "INFINITY.",
        default=settings.default_score,
    ),
    _Attribute(
        SYMMETRICAL,
        "Whether the resources should stop in the reverse order.",
        default=settings.default_symmetrical,
    ),
)


def _raise_on_errors(report_list: ReportItemList) -> None:
    error_list = [
        report_item
        for report_item in report_list
        if report_item.is_error
    ]
    if not error_list:
        return
    if all(
        report_item.message.code == reports.codes.INVALID_OPTION_TYPE
        for report_item in error_list
    ):
        raise AttributeTypeError(*error_list)
    raise ValidationError(*error_list)


def _validate_value(
    validator: validate.ValidatorInterface, option_name: str, value: Any
) -> None:
    _raise_on_errors(validator.validate({option_name: value}))


def _get_validators() -> Dict[str, validate.ValidatorInterface]:
    return {
        NAME: validate.ValidatorFirstError(
            [
                validate.ValueString(NAME),
                validate.ValueNotEmpty(NAME, "a constraint name"),
            ]
        ),
        ENSURE: validate.ValidatorFirstError(
            [
                validate.ValueString(ENSURE),
                validate.ValueIn(ENSURE, list(VALID_ENSURE_VALUES)),
            ]
        ),
        RESOURCES: validate.ValidatorFirstError(
            [
                validate.ValueStringSequence(RESOURCES),
                validate.ValueMinItems(RESOURCES, settings.order_min_resources),
            ]
        ),
        RESOURCES_TYPE: validate.ValidatorFirstError(
            [
                validate.ValueString(RESOURCES_TYPE),
                validate.ValueIn(RESOURCES_TYPE, list(VALID_RESOURCES_TYPES)),
            ]
        ),
        CIB: validate.ValidatorFirstError(
            [
                validate.ValueString(CIB, allow_none=True),
                validate.ValueNotEmpty(CIB, "a shadow CIB name"),
            ]
        ),
        SCORE: validate.ValueString(SCORE, allow_integer=True),
        SYMMETRICAL: validate.ValidatorFirstError(
            [
                validate.ValueBooleanLike(SYMMETRICAL),
                validate.ValuePcmkBoolean(SYMMETRICAL),
            ]
        ),
    }


_VALIDATORS = _get_validators()


def validate_name(value: Any) -> str:
    _validate_value(_VALIDATORS[NAME], NAME, value)
    return value


def validate_ensure(value: Any) -> OrderEnsure:
    _validate_value(_VALIDATORS[ENSURE], ENSURE, value)
    return OrderEnsure(value)


def validate_and_normalize_resources(values: Any) -> List[str]:
    """
    Return resources sorted, so that the same set of resources specified in
    a different order compares equal
    """
    _validate_value(_VALIDATORS[RESOURCES], RESOURCES, values)
    return sorted(values)


def validate_resources_type(value: Any) -> OrderResourcesType:
    _validate_value(_VALIDATORS[RESOURCES_TYPE], RESOURCES_TYPE, value)
    return OrderResourcesType(value)


def validate_cib(value: Any) -> Optional[str]:
    _validate_value(_VALIDATORS[CIB], CIB, value)
    return value


def validate_and_normalize_score(value: Any) -> str:
    # The range of the score is checked by pacemaker when the constraint is
    # pushed to the cluster. See get_score_warnings.
    _validate_value(_VALIDATORS[SCORE], SCORE, value)
    return str(value)


def get_score_warnings(score: str) -> ReportItemList:
    return validate.ValueScore(
        SCORE, severity=ReportItemSeverity.WARNING
    ).validate({SCORE: score})


def validate_and_normalize_symmetrical(value: Any) -> bool:
    _validate_value(_VALIDATORS[SYMMETRICAL], SYMMETRICAL, value)
    if isinstance(value, bool):
        return value
    return bool(validate.pcmk_boolean(value))


class OrderConstraint:
    # pylint: disable=too-many-instance-attributes
    def __init__(
        self,
        name: str,
        resources: Any,
        resources_type: Any = settings.default_resources_type,
        cib: Any = None,
        score: Any = settings.default_score,
        symmetrical: Any = settings.default_symmetrical,
        ensure: Any = settings.default_ensure,
    ):
        # pylint: disable=too-many-arguments
        # pylint: disable=too-many-positional-arguments
        self._name = validate_name(name)
        self._report_list: ReportItemList = []
        self.set_ensure(ensure)
        self.set_resources(resources)
        self.set_resources_type(resources_type)
        self.set_cib(cib)
        self.set_score(score)
        self.set_symmetrical(symmetrical)

    @classmethod
    def from_options(
        cls, name: str, options: Mapping[str, Any]
    ) -> "OrderConstraint":
        """
        Create a constraint from attributes as a configuration compiler
        supplies them. All problems are reported at once.

        name -- name of the constraint
        options -- attribute names and their raw values
        """
        report_list = validate.ValidatorAll(
            [
                validate.NamesIn(OPTION_NAMES, option_type="order constraint"),
                validate.IsRequiredAll(
                    [RESOURCES], option_type="order constraint"
                ),
            ]
        ).validate(options)
        report_list.extend(
            validate.ValidatorAll(
                [_VALIDATORS[NAME]]
                + [
                    _VALIDATORS[option_name]
                    for option_name in OPTION_NAMES
                    if option_name in options
                ]
            ).validate({**options, NAME: name})
        )
        _raise_on_errors(report_list)
        return cls(name, **options)

    @property
    def name(self) -> str:
        return self._name

    @property
    def ensure(self) -> OrderEnsure:
        return self._ensure

    @property
    def resources(self) -> List[str]:
        return list(self._resources)

    @property
    def resources_type(self) -> OrderResourcesType:
        return self._resources_type

    @property
    def cib(self) -> Optional[str]:
        return self._cib

    @property
    def score(self) -> str:
        return self._score

    @property
    def symmetrical(self) -> bool:
        return self._symmetrical

    @property
    def report_list(self) -> ReportItemList:
        """
        Non-fatal reports produced while setting attribute values
        """
        return list(self._report_list)

    def set_ensure(self, value: Any) -> OrderEnsure:
        self._ensure = validate_ensure(value)
        return self._ensure

    def set_resources(self, values: Any) -> List[str]:
        self._resources = validate_and_normalize_resources(values)
        return self.resources

    def set_resources_type(self, value: Any) -> OrderResourcesType:
        self._resources_type = validate_resources_type(value)
        return self._resources_type

    def set_cib(self, value: Any) -> Optional[str]:
        self._cib = validate_cib(value)
        return self._cib

    def set_score(self, value: Any) -> str:
        self._score = validate_and_normalize_score(value)
        self._report_list = [
            report_item
            for report_item in self._report_list
            if report_item.message.code != reports.codes.INVALID_SCORE
        ] + get_score_warnings(self._score)
        return self._score

    def set_symmetrical(self, value: Any) -> bool:
        self._symmetrical = validate_and_normalize_symmetrical(value)
        return self._symmetrical

    def context_edges(self) -> List[DependencyEdgeDto]:
        return autorequire.context_edges(self._cib)

    def membership_edges(
        self, service_name: str = settings.cluster_membership_service
    ) -> List[DependencyEdgeDto]:
        return autorequire.membership_edges(service_name)

    def resource_edges(
        self, for_resources_type: Optional[OrderResourcesType] = None
    ) -> List[DependencyEdgeDto]:
        return autorequire.resource_edges(
            self._resources_type,
            self._resources,
            for_resources_type=for_resources_type,
        )

    def resource_edges_by_type(
        self,
    ) -> Dict[OrderResourcesType, List[DependencyEdgeDto]]:
        return autorequire.resource_edges_by_type(
            self._resources_type, self._resources
        )

    def autorequire(
        self, service_name: str = settings.cluster_membership_service
    ) -> List[DependencyEdgeDto]:
        return autorequire.all_edges(
            self._cib, self._resources_type, self._resources, service_name
        )

    def to_dto(self) -> CibConstraintOrderAttributesDto:
        return CibConstraintOrderAttributesDto(
            constraint_id=self._name,
            ensure=self._ensure,
            resources=self.resources,
            resources_type=self._resources_type,
            cib=self._cib,
            score=self._score,
            symmetrical=self._symmetrical,
        )

    def out_of_sync_properties(
        self, current: CibConstraintOrderAttributesDto
    ) -> List[str]:
        """
        Return names of properties which differ from the current state

        current -- attributes of the constraint as it exists in the cluster
        """
        if current.ensure != self._ensure:
            return [ENSURE]
        if self._ensure == OrderEnsure.ABSENT:
            return []
        out_of_sync = []
        if sorted(current.resources) != self._resources:
            out_of_sync.append(RESOURCES)
        if current.score != self._score:
            out_of_sync.append(SCORE)
        if current.symmetrical != self._symmetrical:
            out_of_sync.append(SYMMETRICAL)
        return sorted(out_of_sync)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderConstraint):
            return NotImplemented
        return self.to_dto() == other.to_dto()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self._name!r}, {self._resources!r}, "
            f"resources_type={self._resources_type!r})"
        )


def describe_attributes() -> List[CibConstraintOrderAttributeDescriptionDto]:
    return [
        CibConstraintOrderAttributeDescriptionDto(
            name=attribute.name,
            description=attribute.description,
            is_property=attribute.is_property,
            required=attribute.required,
            default=attribute.default,
            allowed_values=(
                list(attribute.allowed_values)
                if attribute.allowed_values is not None
                else None
            ),
        )
        for attribute in ATTRIBUTES
    ]
