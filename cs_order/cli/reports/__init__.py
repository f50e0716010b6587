from . import output
from .output import process_library_reports
from .processor import ReportProcessorToConsole

__all__ = [
    "output",
    "process_library_reports",
    "ReportProcessorToConsole",
]
