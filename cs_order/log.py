import logging

from cs_order import settings

# pylint:disable=invalid-name
cs_order_logger = logging.getLogger(settings.logger_name)


class Formatter(logging.Formatter):
    """
    Ruby logger like lines: "I, [2024-01-31T10:20:30.123]     INFO -- name:"
    """

    default_time_format = "%Y-%m-%dT%H:%M:%S"
    default_msec_format = "%s.%03d"

    def __init__(self) -> None:
        super().__init__(
            fmt=(
                "{levelname[0]}, [{asctime}] {levelname:>8s} -- {name}: "
                "{message}"
            ),
            style="{",
        )


def setup(handler: logging.Handler) -> None:
    """
    Send cs_order log records to the handler at the warning level

    The handler is attached only if the logger has none yet, so the entry
    point may run more than once in a process.
    """
    if not cs_order_logger.handlers:
        handler.setFormatter(Formatter())
        cs_order_logger.addHandler(handler)
    cs_order_logger.setLevel(logging.WARNING)


def enable_debug() -> None:
    # handler levels do not matter while the logger level is higher
    cs_order_logger.setLevel(logging.DEBUG)
    for handler in cs_order_logger.handlers:
        handler.setLevel(logging.DEBUG)
