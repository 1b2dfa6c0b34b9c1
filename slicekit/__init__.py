"""
slicekit

Declarative slices: action types, action creators, a reducer and root-aware
selectors derived from one configuration value.
"""

from .core import (
    Action,
    ActionCreator,
    ActionDef,
    RootReducer,
    Slice,
    SliceConfig,
    SliceConfigError,
    SliceError,
    SliceReducer,
    assign,
    build_slice,
    combine_slices,
    create_slice,
    identity,
)

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionCreator",
    "ActionDef",
    "RootReducer",
    "Slice",
    "SliceConfig",
    "SliceConfigError",
    "SliceError",
    "SliceReducer",
    "assign",
    "build_slice",
    "combine_slices",
    "create_slice",
    "identity",
]
