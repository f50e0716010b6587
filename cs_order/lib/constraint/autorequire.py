"""
Dependencies an order constraint declares on other resources of a
configuration run. An edge means the referenced resource has to be in its
desired state before the constraint is applied. Edges to resources which are
not declared anywhere are not an error here, resolving them is up to the
consumer of the dependency graph.
"""

from typing import (
    Dict,
    List,
    Optional,
    Sequence,
)

from cs_order.common.pacemaker.constraint import DependencyEdgeDto
from cs_order.common.pacemaker.types import (
    DependencyKind,
    OrderResourcesType,
)
from cs_order.lib.constraint.resource_name import normalize_resource_name

RESOURCES_TYPE_TO_DEPENDENCY_KIND: Dict[OrderResourcesType, DependencyKind] = {
    OrderResourcesType.PRIMITIVE: DependencyKind.PRIMITIVE,
    OrderResourcesType.GROUP: DependencyKind.GROUP,
}


def context_edges(cib: Optional[str]) -> List[DependencyEdgeDto]:
    """
    Depend on the shadow CIB the constraint is created in, if any
    """
    if cib is None:
        return []
    return [DependencyEdgeDto(DependencyKind.SHADOW_CIB, cib)]


def membership_edges(service_name: str) -> List[DependencyEdgeDto]:
    """
    Depend on the cluster membership service

    service_name -- name of the service running the cluster membership layer
    """
    return [DependencyEdgeDto(DependencyKind.SERVICE, service_name)]


def resource_edges(
    resources_type: OrderResourcesType,
    resources: Sequence[str],
    for_resources_type: Optional[OrderResourcesType] = None,
) -> List[DependencyEdgeDto]:
    """
    Depend on each ordered resource, in the order the resources are stored

    resources_type -- type of the resources the constraint puts in order
    resources -- resource references, possibly decorated
    for_resources_type -- if set, only produce edges when it matches
        resources_type
    """
    if (
        for_resources_type is not None
        and for_resources_type != resources_type
    ):
        return []
    kind = RESOURCES_TYPE_TO_DEPENDENCY_KIND[resources_type]
    return [
        DependencyEdgeDto(kind, normalize_resource_name(resource))
        for resource in resources
    ]


def resource_edges_by_type(
    resources_type: OrderResourcesType,
    resources: Sequence[str],
) -> Dict[OrderResourcesType, List[DependencyEdgeDto]]:
    return {
        possible_type: resource_edges(
            resources_type, resources, for_resources_type=possible_type
        )
        for possible_type in RESOURCES_TYPE_TO_DEPENDENCY_KIND
    }


def all_edges(
    cib: Optional[str],
    resources_type: OrderResourcesType,
    resources: Sequence[str],
    service_name: str,
) -> List[DependencyEdgeDto]:
    return (
        context_edges(cib)
        + membership_edges(service_name)
        + resource_edges(resources_type, resources)
    )
