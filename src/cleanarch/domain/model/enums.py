"""Domain enumerations."""

from enum import Enum, auto


class UnitKind(Enum):
    """Shape of a code unit."""

    CLASS = auto()
    INTERFACE = auto()
    RECORD_LIKE = auto()  # immutable value type with structural equality


class ConstructorVisibility(Enum):
    """Aggregated visibility of a unit's constructors."""

    PUBLIC = auto()
    PRIVATE = auto()
    MIXED = auto()  # some public, some private


class Severity(Enum):
    """Violation severity."""

    ERROR = auto()  # breaks a declared rule
    WARNING = auto()  # configuration diagnostic


class RuleCategory(Enum):
    """Architecture rule category."""

    BOUNDARIES = auto()  # layer isolation
    PURITY = auto()  # entity dependencies
    ISOLATION = auto()  # use case to use case calls
    CONTRACTS = auto()  # request/response ownership
    NAMING = auto()
    SHAPE = auto()  # interfaces, records, constructors
    CONFIGURATION = auto()


class Verdict(Enum):
    """Consolidated outcome of a check run."""

    PASS = auto()
    FAIL = auto()
