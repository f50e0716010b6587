# pylint: disable=wildcard-import, unused-wildcard-import
from cs_order.settings_default import *  # noqa: F403
