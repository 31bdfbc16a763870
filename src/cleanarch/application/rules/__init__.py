"""Architecture rules evaluated against a DependencyGraph.

- LayerIsolationRule: access directives between layers
- EntityPurityRule, PrivateEntityConstructorRule: core package
- UseCaseIsolationRule, ContractOwnershipRule: use cases and their contracts
- CommunicationThroughInterfaceRule: port package holds interfaces only
- ContractNamingRule, ContractsAreRecordsRule: request/response shape
"""

from cleanarch.application.rules._base import BaseRule, is_platform_edge
from cleanarch.application.rules._registry import (
    clean_architecture_rules,
    entity_rules,
    layer_rules,
    other_rules,
    use_case_rules,
)
from cleanarch.application.rules.communication import CommunicationThroughInterfaceRule
from cleanarch.application.rules.entity import EntityPurityRule, PrivateEntityConstructorRule
from cleanarch.application.rules.layers import LayerIsolationRule, clean_architecture_layers
from cleanarch.application.rules.naming import ContractNamingRule, ContractsAreRecordsRule
from cleanarch.application.rules.use_case import ContractOwnershipRule, UseCaseIsolationRule

__all__ = [
    # Base
    "BaseRule",
    "is_platform_edge",
    # Rules
    "LayerIsolationRule",
    "EntityPurityRule",
    "PrivateEntityConstructorRule",
    "UseCaseIsolationRule",
    "ContractOwnershipRule",
    "CommunicationThroughInterfaceRule",
    "ContractNamingRule",
    "ContractsAreRecordsRule",
    # Layers
    "clean_architecture_layers",
    # Factory functions
    "clean_architecture_rules",
    "layer_rules",
    "entity_rules",
    "use_case_rules",
    "other_rules",
]
