"""Infrastructure adapters: graph snapshot and configuration loaders."""

from cleanarch.infrastructure.config_loader import load_config
from cleanarch.infrastructure.graph_loader import graph_from_dict, load_graph

__all__ = ["graph_from_dict", "load_config", "load_graph"]
