"""Tests for rules/_registry.py."""

from cleanarch.application.rules import (
    BaseRule,
    clean_architecture_rules,
    entity_rules,
    layer_rules,
    other_rules,
    use_case_rules,
)


class TestRegistry:
    """Tests for rule factory functions."""

    def test_full_set_order(self) -> None:
        names = [rule.name for rule in clean_architecture_rules()]
        assert names == [
            "layers_are_respected",
            "entity_does_not_depend_on_anyone",
            "private_entity_constructor",
            "use_cases_not_call_other_use_cases",
            "request_used_by_only_one_use_case",
            "response_used_by_only_one_use_case",
            "communication_with_external_through_interface",
            "request_objects_with_correct_name",
            "response_objects_with_correct_name",
            "requests_and_responses_are_records",
        ]

    def test_groups_partition_the_full_set(self) -> None:
        grouped = [*layer_rules(), *entity_rules(), *use_case_rules(), *other_rules()]
        assert [r.name for r in grouped] == [r.name for r in clean_architecture_rules()]

    def test_all_rules_are_base_rules(self) -> None:
        assert all(isinstance(rule, BaseRule) for rule in clean_architecture_rules())

    def test_fresh_instances(self) -> None:
        assert clean_architecture_rules()[0] is not clean_architecture_rules()[0]

    def test_repr(self) -> None:
        assert repr(layer_rules()[0]) == "LayerIsolationRule('layers_are_respected')"
