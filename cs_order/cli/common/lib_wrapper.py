"""
Library commands as the command line calls them, an environment built from
the command line is passed to them as the first argument
"""

import logging
from types import SimpleNamespace
from typing import (
    Any,
    Callable,
)

from cs_order import settings
from cs_order.cli.common.env import Env
from cs_order.lib.commands import order as constraint_order
from cs_order.lib.env import LibraryEnvironment


def cli_env_to_lib_env(cli_env: Env) -> LibraryEnvironment:
    return LibraryEnvironment(
        logging.getLogger(settings.logger_name),
        cli_env.report_processor,
        cluster_membership_service=cli_env.cluster_membership_service,
    )


class Library:
    def __init__(self, env: Env):
        self.env = env

    @property
    def constraint_order(self) -> SimpleNamespace:
        return SimpleNamespace(
            declare=self._bind(constraint_order.declare),
            describe=self._bind(constraint_order.describe),
        )

    def _bind(self, command: Callable[..., Any]) -> Callable[..., Any]:
        def run(*args: Any, **kwargs: Any) -> Any:
            return command(cli_env_to_lib_env(self.env), *args, **kwargs)

        return run
