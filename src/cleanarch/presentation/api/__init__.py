"""Public API.

Public exports:
    CleanArchitecture: Facade over the clean-architecture rule set
"""

from cleanarch.presentation.api.facade import CleanArchitecture

__all__ = ["CleanArchitecture"]
