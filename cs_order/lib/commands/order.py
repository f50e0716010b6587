from typing import (
    Any,
    List,
    Mapping,
)

from cs_order.common import reports
from cs_order.common.pacemaker.constraint import (
    CibConstraintOrderAttributeDescriptionDto,
    CibConstraintOrderDeclarationDto,
)
from cs_order.common.reports import (
    ReportItem,
    ReportItemContext,
)
from cs_order.lib.constraint.order import (
    OrderConstraint,
    describe_attributes,
)
from cs_order.lib.env import LibraryEnvironment
from cs_order.lib.errors import LibraryError


def declare(
    env: LibraryEnvironment, constraint_id: str, options: Mapping[str, Any]
) -> CibConstraintOrderDeclarationDto:
    """
    Validate an order constraint and collect resources it depends on

    env -- provides the report processor, the logger and the name of the
        cluster membership service
    constraint_id -- name of the constraint
    options -- raw attribute values of the constraint
    """
    context = ReportItemContext(str(constraint_id))
    try:
        constraint = OrderConstraint.from_options(constraint_id, options)
    except LibraryError as e:
        env.report_processor.report_list(
            [report_item.with_context(context) for report_item in e.args]
        )
        raise e.__class__() from e

    env.report_processor.report_list(
        [
            report_item.with_context(context)
            for report_item in constraint.report_list
        ]
    )
    edge_list = constraint.autorequire(env.cluster_membership_service)
    env.report_processor.report(
        ReportItem.info(
            reports.messages.OrderConstraintDeclared(
                constraint.name, [str(edge) for edge in edge_list]
            )
        )
    )
    edges_by_type = constraint.resource_edges_by_type()
    env.logger.debug(
        "Order constraint '%s' resources by type: %s",
        constraint.name,
        {
            resources_type: [edge.name for edge in edges]
            for resources_type, edges in edges_by_type.items()
        },
    )
    return CibConstraintOrderDeclarationDto(
        attributes=constraint.to_dto(),
        autorequire=edge_list,
    )


def describe(
    env: LibraryEnvironment,
) -> List[CibConstraintOrderAttributeDescriptionDto]:
    """
    Describe attributes of an order constraint

    env -- provides all for communication with externals
    """
    del env
    return describe_attributes()
