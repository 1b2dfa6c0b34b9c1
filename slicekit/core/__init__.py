"""
Core slice composition primitives.

- Action / ActionCreator: action records and their creators
- normalize: action definitions -> (create, reduce) pairs
- SliceReducer: dispatching reducer for one slice
- wrap_selector: root-aware selectors
- create_slice / build_slice: the entry point producing a Slice bundle
- combine_slices: several slices under one root reducer
"""

from .actions import Action, ActionCreator, action_type, read_action_field
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str, state_hash
from .combine import RootReducer, combine_slices
from .definitions import ActionDef, NormalizedAction, normalize
from .errors import (
    ActionLogError,
    PayloadShapeError,
    SliceConfigError,
    SliceError,
    StateShapeError,
)
from .helpers import assign, identity, merge
from .reducer import SliceReducer
from .selectors import select_slice, wrap_selector
from .slice import Registry, Slice, SliceConfig, build_slice, create_slice

__all__ = [
    "Action",
    "ActionCreator",
    "action_type",
    "read_action_field",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "state_hash",
    "RootReducer",
    "combine_slices",
    "ActionDef",
    "NormalizedAction",
    "normalize",
    "ActionLogError",
    "PayloadShapeError",
    "SliceConfigError",
    "SliceError",
    "StateShapeError",
    "assign",
    "identity",
    "merge",
    "SliceReducer",
    "select_slice",
    "wrap_selector",
    "Registry",
    "Slice",
    "SliceConfig",
    "build_slice",
    "create_slice",
]
