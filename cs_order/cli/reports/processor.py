from cs_order.common.reports import (
    ReportItem,
    ReportItemSeverity,
    ReportProcessor,
)

from .output import print_report


class ReportProcessorToConsole(ReportProcessor):
    """
    Print reports to stderr; info and debug reports are printed in debug
    mode only as stdout carries the result of a command
    """

    def __init__(self, debug: bool = False):
        super().__init__()
        self.debug = debug
        self._printed_severities = {
            ReportItemSeverity.ERROR,
            ReportItemSeverity.WARNING,
        }
        if debug:
            self._printed_severities |= {
                ReportItemSeverity.INFO,
                ReportItemSeverity.DEBUG,
            }

    def _do_report(self, report_item: ReportItem) -> None:
        if report_item.severity in self._printed_severities:
            print_report(report_item.to_dto())
