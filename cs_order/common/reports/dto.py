from dataclasses import dataclass
from typing import (
    Any,
    Mapping,
    Optional,
)

from cs_order.common.interface.dto import DataTransferObject

from .types import (
    MessageCode,
    SeverityLevel,
)


@dataclass(frozen=True)
class ReportItemMessageDto(DataTransferObject):
    code: MessageCode
    message: str
    payload: Mapping[str, Any]


@dataclass(frozen=True)
class ReportItemContextDto(DataTransferObject):
    constraint_id: str


@dataclass(frozen=True)
class ReportItemDto(DataTransferObject):
    severity: SeverityLevel
    message: ReportItemMessageDto
    context: Optional[ReportItemContextDto] = None
