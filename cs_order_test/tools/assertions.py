from cs_order.common.reports import ReportItemSeverity
from cs_order.lib.errors import LibraryError

from .fixture import ReportItemFixture


def _to_fixture(report_item):
    report_dto = report_item.to_dto()
    return ReportItemFixture(
        report_dto.severity,
        report_dto.message.code,
        report_dto.message.payload,
        report_dto.context,
    )


def assert_report_item_list_equal(real_report_item_list, expected_fixtures):
    """
    Compare report items to fixtures regardless of their order; debug
    reports with no fixture to match are ignored
    """
    missing = list(expected_fixtures)
    unexpected = []
    for report_item in real_report_item_list:
        real = _to_fixture(report_item)
        if real in missing:
            missing.remove(real)
        elif real.severity != ReportItemSeverity.DEBUG:
            unexpected.append(real)
    if missing or unexpected:
        raise AssertionError(
            "\n".join(
                ["Report items do not match the expected ones", "missing:"]
                + [f"  {fixture!r}" for fixture in missing]
                + ["unexpected:"]
                + [f"  {fixture!r}" for fixture in unexpected]
            )
        )


def assert_raise_library_error(callable_obj, *expected_fixtures):
    try:
        callable_obj()
    except LibraryError as e:
        assert_report_item_list_equal(e.args, expected_fixtures)
    else:
        raise AssertionError("LibraryError has not been raised")
