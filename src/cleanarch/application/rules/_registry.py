"""Rule registry for the clean-architecture rule set.

Central, ordered list of rules with factory functions.
"""

from __future__ import annotations

from cleanarch.application.rules._base import BaseRule
from cleanarch.application.rules.communication import CommunicationThroughInterfaceRule
from cleanarch.application.rules.entity import EntityPurityRule, PrivateEntityConstructorRule
from cleanarch.application.rules.layers import LayerIsolationRule
from cleanarch.application.rules.naming import ContractNamingRule, ContractsAreRecordsRule
from cleanarch.application.rules.use_case import ContractOwnershipRule, UseCaseIsolationRule
from cleanarch.domain.model.configuration import CONTRACT_REQUEST, CONTRACT_RESPONSE


def layer_rules() -> tuple[BaseRule, ...]:
    """Layer isolation."""
    return (LayerIsolationRule(),)


def entity_rules() -> tuple[BaseRule, ...]:
    """Core package purity and construction."""
    return (EntityPurityRule(), PrivateEntityConstructorRule())


def use_case_rules() -> tuple[BaseRule, ...]:
    """Use-case isolation, contract ownership and ports."""
    return (
        UseCaseIsolationRule(),
        ContractOwnershipRule(CONTRACT_REQUEST),
        ContractOwnershipRule(CONTRACT_RESPONSE),
        CommunicationThroughInterfaceRule(),
    )


def other_rules() -> tuple[BaseRule, ...]:
    """Naming and shape of contracts."""
    return (
        ContractNamingRule(CONTRACT_REQUEST),
        ContractNamingRule(CONTRACT_RESPONSE),
        ContractsAreRecordsRule(),
    )


def clean_architecture_rules() -> tuple[BaseRule, ...]:
    """Full rule set in evaluation (and reporting) order.

    Returns:
        Fresh rule instances
    """
    return (*layer_rules(), *entity_rules(), *use_case_rules(), *other_rules())
