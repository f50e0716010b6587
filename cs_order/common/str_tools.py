"""
Text helpers shared by report messages and command line output
"""

from typing import (
    Iterable,
    List,
    Sized,
    Union,
)

_IRREGULAR_PLURALS = {"is": "are", "has": "have", "it": "they"}


def join_quoted(
    items: Iterable[str], sort: bool = True, separator: str = ", "
) -> str:
    """
    Put each item into single quotes and join them

    sort -- sort the items first, keep the given order otherwise
    """
    values = sorted(items) if sort else list(items)
    return separator.join(f"'{value}'" for value in values)


def pluralize(
    amount: Union[int, Sized], singular: str, plural: str = ""
) -> str:
    """
    Pick the form of a word which matches an amount

    amount -- a number, or a collection whose items are counted
    singular -- the word for exactly one item
    plural -- the word for any other amount, derived from singular if empty
    """
    count = amount if isinstance(amount, int) else len(amount)
    if count == 1:
        return singular
    if plural:
        return plural
    if singular in _IRREGULAR_PLURALS:
        return _IRREGULAR_PLURALS[singular]
    if singular.endswith(("s", "x", "sh", "ch")):
        return f"{singular}es"
    return f"{singular}s"


def indent(lines: Iterable[str], step: int = 2) -> List[str]:
    prefix = " " * step
    return [f"{prefix}{line}" if line else line for line in lines]
