"""
Configuration layer for cyclegraph.

Configuration is explicit (passed, not global) and typed. ``load_config``
reads CYCLEGRAPH_* environment overrides on top of the packaged defaults.
"""

from cyclegraph.config.settings import (
    OwnershipStrategy,
    GraphConfig,
    TraversalConfig,
    CycleGraphConfig,
)
from cyclegraph.config.loader import load_config

__all__ = [
    "OwnershipStrategy",
    "GraphConfig",
    "TraversalConfig",
    "CycleGraphConfig",
    "load_config",
]
