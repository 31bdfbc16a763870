"""Clean architecture configuration.

Package roots of the checked project, passed explicitly to every rule.
All roots are package patterns (see cleanarch.domain.patterns).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields

from cleanarch.domain.exceptions.configuration import ConfigurationError
from cleanarch.domain.patterns import PackagePattern, compile_pattern

DEFAULT_PLATFORM_PACKAGES: tuple[str, ...] = (
    "builtins",
    "typing..",
    "abc",
    "collections..",
    "dataclasses",
    "enum",
    "java..",
)
"""Language/runtime packages every unit may depend on."""

CONTRACT_REQUEST = "request"
CONTRACT_RESPONSE = "response"
CONTRACT_EXCEPTION = "exception"
ENUMS = "enums"


@dataclass(frozen=True, slots=True)
class CleanArchitectureConfig:
    """Package roots of a clean-architecture codebase.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        enterprise_business: Core/entity package pattern
        application_business: Use-case package pattern
        interface_adapters_controller: Controller adapters package pattern
        interface_adapters_presenter: Presenter adapters package pattern
        interface_adapters_infra: Infrastructure adapters package pattern
        communication_core_with_adapters: Port package pattern (interfaces only)
        accepted_entity_dependencies: Extra packages entities may depend on
        platform_packages: Language packages exempt from dependency rules
        main_project: Restricts analysis to units in this pattern. None = all units.
    """

    enterprise_business: str
    application_business: str
    interface_adapters_controller: str
    interface_adapters_presenter: str
    interface_adapters_infra: str
    communication_core_with_adapters: str
    accepted_entity_dependencies: tuple[str, ...] = ()
    platform_packages: tuple[str, ...] = DEFAULT_PLATFORM_PACKAGES
    main_project: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST.

        Every root must be a valid, non-empty pattern.
        """
        for name in _ROOT_FIELDS:
            value = getattr(self, name)
            if not value:
                raise ConfigurationError(name, "package root must not be empty")
            compile_pattern(value)

        for pattern in (*self.accepted_entity_dependencies, *self.platform_packages):
            compile_pattern(pattern)

        if self.main_project is not None:
            compile_pattern(self.main_project)

    @property
    def enterprise(self) -> PackagePattern:
        """Compiled core pattern."""
        return compile_pattern(self.enterprise_business)

    @property
    def application(self) -> PackagePattern:
        """Compiled use-case pattern."""
        return compile_pattern(self.application_business)

    @property
    def adapters(self) -> tuple[PackagePattern, ...]:
        """Compiled adapter patterns (controller, infrastructure, presenter)."""
        return (
            compile_pattern(self.interface_adapters_controller),
            compile_pattern(self.interface_adapters_infra),
            compile_pattern(self.interface_adapters_presenter),
        )

    @property
    def communication(self) -> PackagePattern:
        """Compiled port pattern."""
        return compile_pattern(self.communication_core_with_adapters)

    @property
    def platform(self) -> tuple[PackagePattern, ...]:
        """Compiled platform patterns."""
        return tuple(compile_pattern(p) for p in self.platform_packages)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> CleanArchitectureConfig:
        """Build config from a plain mapping (TOML table, ini values).

        Keys may use snake_case or kebab-case. List values become tuples.

        Args:
            data: Raw configuration values

        Returns:
            Validated config

        Raises:
            ConfigurationError: On unknown keys, missing roots or wrong types
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, object] = {}

        for raw_key, raw_value in data.items():
            key = raw_key.replace("-", "_")
            if key not in known:
                raise ConfigurationError(raw_key, "unknown configuration key")
            if key in _TUPLE_FIELDS:
                if isinstance(raw_value, str) or not isinstance(raw_value, (list, tuple)):
                    raise ConfigurationError(raw_key, "expected a list of package patterns")
                values[key] = tuple(str(v) for v in raw_value)
            elif raw_value is not None and not isinstance(raw_value, str):
                raise ConfigurationError(raw_key, "expected a package pattern string")
            else:
                values[key] = raw_value

        missing = [name for name in _ROOT_FIELDS if name not in values]
        if missing:
            raise ConfigurationError(", ".join(missing), "required package root missing")

        return cls(**values)  # type: ignore[arg-type]


_ROOT_FIELDS: tuple[str, ...] = (
    "enterprise_business",
    "application_business",
    "interface_adapters_controller",
    "interface_adapters_presenter",
    "interface_adapters_infra",
    "communication_core_with_adapters",
)

_TUPLE_FIELDS: frozenset[str] = frozenset({"accepted_entity_dependencies", "platform_packages"})
