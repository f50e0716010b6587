from logging import Logger
from typing import Optional

from cs_order import settings
from cs_order.common import reports
from cs_order.common.reports.processor import ReportProcessorToLog


class LibraryEnvironment:
    def __init__(
        self,
        logger: Logger,
        report_processor: Optional[reports.ReportProcessor] = None,
        cluster_membership_service: Optional[str] = None,
    ):
        """
        logger -- logger used by library commands
        report_processor -- receives reports, logs them by default
        cluster_membership_service -- name of the service every order
            constraint depends on, taken from settings by default
        """
        self._logger = logger
        self._report_processor = (
            report_processor
            if report_processor is not None
            else ReportProcessorToLog(logger)
        )
        self._cluster_membership_service = (
            cluster_membership_service
            if cluster_membership_service is not None
            else settings.cluster_membership_service
        )

    @property
    def logger(self) -> Logger:
        return self._logger

    @property
    def report_processor(self) -> reports.ReportProcessor:
        return self._report_processor

    @property
    def cluster_membership_service(self) -> str:
        return self._cluster_membership_service
