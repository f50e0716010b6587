import sys

from cs_order.common.reports import (
    ReportItemList,
    ReportItemSeverity,
    has_errors,
)
from cs_order.common.reports.dto import ReportItemDto
from cs_order.common.reports.processor import add_context_to_message


def print_to_stderr(text: str) -> None:
    print(text, file=sys.stderr, flush=True)


def warn(message: str) -> None:
    print_to_stderr(f"Warning: {message}")


def error(message: str) -> SystemExit:
    """
    Print an error; the caller raises the returned SystemExit if the error
    ends the program
    """
    print_to_stderr(f"Error: {message}")
    return SystemExit(1)


def print_report(report_dto: ReportItemDto) -> None:
    text = add_context_to_message(
        report_dto.message.message, report_dto.context
    )
    if report_dto.severity == ReportItemSeverity.ERROR:
        error(text)
    elif report_dto.severity == ReportItemSeverity.WARNING:
        warn(text)
    else:
        print_to_stderr(text)


def process_library_reports(
    report_item_list: ReportItemList,
    exit_on_error: bool = True,
    include_debug: bool = True,
) -> None:
    """
    Print reports a LibraryError carries and exit if any of them is an error

    An empty list means the reports have been printed by a report processor
    already.
    """
    if not report_item_list:
        raise error(
            "Errors have occurred, therefore cs_order is unable to continue"
        )
    for report_item in report_item_list:
        if not include_debug and (
            report_item.severity == ReportItemSeverity.DEBUG
        ):
            continue
        print_report(report_item.to_dto())
    if exit_on_error and has_errors(report_item_list):
        sys.exit(1)
