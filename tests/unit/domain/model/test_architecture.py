"""Tests for domain/model/architecture.py."""

import pytest

from cleanarch.domain.exceptions import ConfigurationError
from cleanarch.domain.model.architecture import (
    AccessDirective,
    DirectiveKind,
    Layer,
    LayeredArchitecture,
    LayeredArchitectureBuilder,
)


class TestLayer:
    """Tests for Layer."""

    def test_of_compiles_patterns(self) -> None:
        layer = Layer.of("core", "app.core..", "app.shared..")
        assert [str(p) for p in layer.patterns] == ["app.core..", "app.shared.."]

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="name must not be empty"):
            Layer.of("", "a..")

    def test_no_patterns_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="at least one package pattern"):
            Layer.of("core")


class TestAccessDirective:
    """Tests for AccessDirective."""

    def test_may_only_access_allows_listed(self) -> None:
        directive = AccessDirective("a", DirectiveKind.MAY_ONLY_ACCESS, frozenset({"b"}))
        assert directive.allows("b")
        assert not directive.allows("c")

    def test_any_layer_kinds_allow_nothing(self) -> None:
        directive = AccessDirective("a", DirectiveKind.MAY_NOT_ACCESS_ANY_LAYER)
        assert not directive.allows("b")

    def test_direction(self) -> None:
        assert DirectiveKind.MAY_ONLY_ACCESS.is_outgoing
        assert DirectiveKind.MAY_NOT_ACCESS_ANY_LAYER.is_outgoing
        assert not DirectiveKind.MAY_ONLY_BE_ACCESSED_BY.is_outgoing
        assert not DirectiveKind.MAY_NOT_BE_ACCESSED_BY_ANY_LAYER.is_outgoing

    def test_missing_layers_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="needs at least one layer"):
            AccessDirective("a", DirectiveKind.MAY_ONLY_BE_ACCESSED_BY)

    def test_unexpected_layers_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="takes no layers"):
            AccessDirective("a", DirectiveKind.MAY_NOT_ACCESS_ANY_LAYER, frozenset({"b"}))

    def test_str(self) -> None:
        directive = AccessDirective("a", DirectiveKind.MAY_ONLY_ACCESS, frozenset({"c", "b"}))
        assert str(directive) == "a may only access [b, c]"


class TestLayeredArchitecture:
    """Tests for LayeredArchitecture."""

    def test_duplicate_layers_raise(self) -> None:
        with pytest.raises(ConfigurationError, match="duplicate layers"):
            LayeredArchitecture("x", (Layer.of("a", "a.."), Layer.of("a", "b..")))

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            LayeredArchitecture("", ())

    def test_lookup(self) -> None:
        arch = LayeredArchitecture("x", (Layer.of("a", "a.."), Layer.of("b", "b..")))
        assert arch.layer_names == ("a", "b")
        assert arch.get_layer("b") is arch.layers[1]
        assert arch.get_layer("c") is None


class TestBuilder:
    """Tests for LayeredArchitectureBuilder."""

    def test_builds_layers_and_directives_in_order(self) -> None:
        arch = (
            LayeredArchitectureBuilder("clean")
            .layer("core", "app.core..")
            .layer("usecase", "app.usecase..")
            .where_layer("core")
            .may_not_access_any_layer()
            .where_layer("usecase")
            .may_only_access("core")
            .where_layer("core")
            .may_only_be_accessed_by("usecase")
            .build()
        )

        assert arch.layer_names == ("core", "usecase")
        assert [d.kind for d in arch.directives] == [
            DirectiveKind.MAY_NOT_ACCESS_ANY_LAYER,
            DirectiveKind.MAY_ONLY_ACCESS,
            DirectiveKind.MAY_ONLY_BE_ACCESSED_BY,
        ]
        assert len(arch.directives_on("core")) == 2

    def test_duplicate_layer_raises(self) -> None:
        builder = LayeredArchitectureBuilder("x").layer("a", "a..")
        with pytest.raises(ConfigurationError, match="already declared"):
            builder.layer("a", "b..")

    def test_keeps_dangling_directive(self) -> None:
        """Directives naming unknown layers are kept for the checker to report."""
        arch = (
            LayeredArchitectureBuilder("x")
            .layer("a", "a..")
            .where_layer("a")
            .may_only_access("ghost")
            .build()
        )
        assert len(arch.directives) == 1
