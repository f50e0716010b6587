from .order import (
    CibConstraintOrderAttributeDescriptionDto,
    CibConstraintOrderAttributesDto,
    CibConstraintOrderDeclarationDto,
    DependencyEdgeDto,
)
