from .types import MessageCode as M

INVALID_OPTION_TYPE = M("INVALID_OPTION_TYPE")
INVALID_OPTION_VALUE = M("INVALID_OPTION_VALUE")
INVALID_OPTIONS = M("INVALID_OPTIONS")
INVALID_SCORE = M("INVALID_SCORE")
ORDER_CONSTRAINT_DECLARED = M("ORDER_CONSTRAINT_DECLARED")
ORDER_CONSTRAINT_NOT_ENOUGH_RESOURCES = M(
    "ORDER_CONSTRAINT_NOT_ENOUGH_RESOURCES"
)
REQUIRED_OPTIONS_ARE_MISSING = M("REQUIRED_OPTIONS_ARE_MISSING")
