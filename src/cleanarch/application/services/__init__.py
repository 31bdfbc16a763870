"""Application services."""

from cleanarch.application.services.engine import ArchitectureEngine

__all__ = ["ArchitectureEngine"]
