import abc
import logging
from typing import Optional

from .dto import ReportItemContextDto
from .item import (
    ReportItem,
    ReportItemList,
    ReportItemSeverity,
)

_LOG_LEVELS = {
    ReportItemSeverity.ERROR: logging.ERROR,
    ReportItemSeverity.WARNING: logging.WARNING,
    ReportItemSeverity.INFO: logging.INFO,
    ReportItemSeverity.DEBUG: logging.DEBUG,
}


def add_context_to_message(
    message: str, context: Optional[ReportItemContextDto]
) -> str:
    """
    Prefix a message with the id of the constraint it is about
    """
    if context is None:
        return message
    return f"{context.constraint_id}: {message}"


def has_errors(report_list: ReportItemList) -> bool:
    return any(report_item.is_error for report_item in report_list)


class ReportProcessor(abc.ABC):
    """
    Receives report items produced by library commands and remembers whether
    an error has been among them
    """

    def __init__(self) -> None:
        self._has_errors = False

    @property
    def has_errors(self) -> bool:
        return self._has_errors

    def report(self, report_item: ReportItem) -> "ReportProcessor":
        self._has_errors = self._has_errors or report_item.is_error
        self._do_report(report_item)
        return self

    def report_list(self, report_list: ReportItemList) -> "ReportProcessor":
        for report_item in report_list:
            self.report(report_item)
        return self

    @abc.abstractmethod
    def _do_report(self, report_item: ReportItem) -> None:
        raise NotImplementedError()


class ReportProcessorToLog(ReportProcessor):
    def __init__(self, logger: logging.Logger):
        super().__init__()
        self._logger = logger

    def _do_report(self, report_item: ReportItem) -> None:
        report_dto = report_item.to_dto()
        self._logger.log(
            _LOG_LEVELS[report_dto.severity],
            add_context_to_message(
                report_dto.message.message, report_dto.context
            ),
        )


class ReportProcessorInMemory(ReportProcessor):
    def __init__(self) -> None:
        super().__init__()
        self._reports: ReportItemList = []

    @property
    def reports(self) -> ReportItemList:
        return list(self._reports)

    def _do_report(self, report_item: ReportItem) -> None:
        self._reports.append(report_item)
