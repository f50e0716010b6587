from typing import Optional

from cs_order.common.reports import ReportProcessor


class Env:
    # pylint: disable=too-few-public-methods
    def __init__(self) -> None:
        self.report_processor: Optional[ReportProcessor] = None
        self.cluster_membership_service: Optional[str] = None
