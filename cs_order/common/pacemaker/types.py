from typing import cast


class OrderEnsure(str):
    __slots__ = ()
    PRESENT = cast("OrderEnsure", "present")
    ABSENT = cast("OrderEnsure", "absent")


class OrderResourcesType(str):
    __slots__ = ()
    PRIMITIVE = cast("OrderResourcesType", "primitive")
    GROUP = cast("OrderResourcesType", "group")


class DependencyKind(str):
    __slots__ = ()
    SHADOW_CIB = cast("DependencyKind", "cs_shadow")
    SERVICE = cast("DependencyKind", "service")
    PRIMITIVE = cast("DependencyKind", "cs_primitive")
    GROUP = cast("DependencyKind", "cs_group")
