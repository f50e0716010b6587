"""
Report items tell what a library command found out about an order
constraint. The library does not print anything, it hands report items over
to a ReportProcessor and raises LibraryError carrying the error items.
"""

from dataclasses import (
    dataclass,
    fields,
    replace,
)
from typing import (
    List,
    Optional,
)

from cs_order.common.interface.dto import ImplementsToDto

from .dto import (
    ReportItemContextDto,
    ReportItemDto,
    ReportItemMessageDto,
)
from .types import (
    MessageCode,
    SeverityLevel,
)


class ReportItemSeverity:
    # pylint: disable=too-few-public-methods
    ERROR = SeverityLevel("ERROR")
    WARNING = SeverityLevel("WARNING")
    INFO = SeverityLevel("INFO")
    DEBUG = SeverityLevel("DEBUG")


@dataclass(frozen=True, init=False)
class ReportItemMessage(ImplementsToDto):
    """
    Base of report messages; dataclass fields of a message form its payload
    """

    _code = MessageCode("")

    @property
    def code(self) -> MessageCode:
        return self._code

    @property
    def message(self) -> str:
        raise NotImplementedError()

    def to_dto(self) -> ReportItemMessageDto:
        return ReportItemMessageDto(
            code=self.code,
            message=self.message,
            payload={
                field.name: getattr(self, field.name) for field in fields(self)
            },
        )


@dataclass(frozen=True)
class ReportItemContext(ImplementsToDto):
    constraint_id: str

    def to_dto(self) -> ReportItemContextDto:
        return ReportItemContextDto(self.constraint_id)


@dataclass(frozen=True)
class ReportItem(ImplementsToDto):
    severity: SeverityLevel
    message: ReportItemMessage
    context: Optional[ReportItemContext] = None

    @classmethod
    def error(
        cls,
        message: ReportItemMessage,
        context: Optional[ReportItemContext] = None,
    ) -> "ReportItem":
        return cls(ReportItemSeverity.ERROR, message, context)

    @classmethod
    def warning(
        cls,
        message: ReportItemMessage,
        context: Optional[ReportItemContext] = None,
    ) -> "ReportItem":
        return cls(ReportItemSeverity.WARNING, message, context)

    @classmethod
    def info(
        cls,
        message: ReportItemMessage,
        context: Optional[ReportItemContext] = None,
    ) -> "ReportItem":
        return cls(ReportItemSeverity.INFO, message, context)

    @classmethod
    def debug(
        cls,
        message: ReportItemMessage,
        context: Optional[ReportItemContext] = None,
    ) -> "ReportItem":
        return cls(ReportItemSeverity.DEBUG, message, context)

    @property
    def is_error(self) -> bool:
        return self.severity == ReportItemSeverity.ERROR

    def with_context(self, context: ReportItemContext) -> "ReportItem":
        return replace(self, context=context)

    def to_dto(self) -> ReportItemDto:
        return ReportItemDto(
            severity=self.severity,
            message=self.message.to_dto(),
            context=None if self.context is None else self.context.to_dto(),
        )


ReportItemList = List[ReportItem]
