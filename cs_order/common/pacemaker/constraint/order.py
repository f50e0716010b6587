from dataclasses import dataclass
from typing import (
    Optional,
    Sequence,
    Union,
)

from cs_order.common.interface.dto import DataTransferObject
from cs_order.common.pacemaker.types import (
    DependencyKind,
    OrderEnsure,
    OrderResourcesType,
)


@dataclass(frozen=True)
class CibConstraintOrderAttributesDto(DataTransferObject):
    constraint_id: str
    ensure: OrderEnsure
    resources: Sequence[str]
    resources_type: OrderResourcesType
    cib: Optional[str]
    score: str
    symmetrical: bool


@dataclass(frozen=True)
class DependencyEdgeDto(DataTransferObject):
    kind: DependencyKind
    name: str

    def __str__(self) -> str:
        return f"{self.kind}[{self.name}]"


@dataclass(frozen=True)
class CibConstraintOrderDeclarationDto(DataTransferObject):
    attributes: CibConstraintOrderAttributesDto
    autorequire: Sequence[DependencyEdgeDto]


@dataclass(frozen=True)
class CibConstraintOrderAttributeDescriptionDto(DataTransferObject):
    name: str
    description: str
    is_property: bool
    required: bool
    default: Union[str, bool, None]
    allowed_values: Optional[Sequence[str]]
