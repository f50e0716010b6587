"""
Data transfer objects carry results of library commands to their callers.
They are frozen dataclasses holding primitive values, lists, mappings and
other data transfer objects, so they can be turned to JSON and back.
"""

from dataclasses import asdict
from typing import (
    Any,
    Dict,
    Mapping,
    Type,
    TypeVar,
)

import dacite

from cs_order.common.pacemaker import types

DtoPayload = Dict[str, Any]

# dacite builds str subclasses from plain strings only when they are listed
_STR_VALUE_TYPES = [
    types.DependencyKind,
    types.OrderEnsure,
    types.OrderResourcesType,
]


class PayloadConversionError(Exception):
    pass


class DataTransferObject:
    pass


class ImplementsToDto:
    def to_dto(self) -> Any:
        raise NotImplementedError()


_Dto = TypeVar("_Dto", bound=DataTransferObject)


def to_dict(dto: DataTransferObject) -> DtoPayload:
    return asdict(dto)  # type: ignore


def from_dict(
    cls: Type[_Dto], payload: Mapping[str, Any], strict: bool = False
) -> _Dto:
    """
    Build a data transfer object from its dict form, e.g. parsed JSON

    strict -- refuse keys the object does not define
    """
    try:
        return dacite.from_dict(
            data_class=cls,
            data=dict(payload),
            config=dacite.Config(cast=_STR_VALUE_TYPES, strict=strict),
        )
    except (dacite.DaciteError, TypeError, ValueError) as e:
        raise PayloadConversionError(str(e)) from e
