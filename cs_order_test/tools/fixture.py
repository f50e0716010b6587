from typing import (
    Any,
    Mapping,
    NamedTuple,
    Optional,
)

from cs_order.common import reports
from cs_order.common.reports.dto import ReportItemContextDto


class ReportItemFixture(NamedTuple):
    severity: reports.types.SeverityLevel
    code: reports.types.MessageCode
    payload: Mapping[str, Any]
    context: Optional[ReportItemContextDto] = None


def _fixture_factory(severity):
    def create(code, context=None, **payload):
        return ReportItemFixture(severity, code, payload, context)

    return create


error = _fixture_factory(reports.ReportItemSeverity.ERROR)
warn = _fixture_factory(reports.ReportItemSeverity.WARNING)
info = _fixture_factory(reports.ReportItemSeverity.INFO)
debug = _fixture_factory(reports.ReportItemSeverity.DEBUG)


def constraint_context(constraint_id):
    return ReportItemContextDto(constraint_id=constraint_id)


def report_not_enough_resources(resource_list, min_count=2):
    return error(
        reports.codes.ORDER_CONSTRAINT_NOT_ENOUGH_RESOURCES,
        resource_list=resource_list,
        min_count=min_count,
    )


def report_invalid_option_type(option_name, allowed_types):
    return error(
        reports.codes.INVALID_OPTION_TYPE,
        option_name=option_name,
        allowed_types=allowed_types,
    )
