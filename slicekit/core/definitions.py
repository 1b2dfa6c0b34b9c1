"""
Action definitions and their normalization.

An action definition comes in two shapes:
- a callable (state, payload) -> new_state, used as the reducer
- a record with optional "create" and "reducer" entries (ActionDef or a mapping)

normalize() turns either shape into a NormalizedAction once, at build time,
so the reducer and creators never look at the original shape again.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union

from .errors import SliceConfigError
from .helpers import merge, passthrough

RECORD_KEYS = frozenset({"create", "reducer"})


@dataclass(frozen=True)
class ActionDef:
    """
    Record-style action definition.

    Fields:
        create: (*args, **kwargs) -> payload (default: first argument)
        reducer: (state, payload) -> new_state (default: shallow merge)
    """
    create: Optional[Callable[..., Any]] = None
    reducer: Optional[Callable[[Any, Any], Any]] = None


ActionDefinition = Union[Callable[[Any, Any], Any], ActionDef, Mapping[str, Any]]


@dataclass(frozen=True)
class NormalizedAction:
    """Canonical (create, reduce) pair for one action."""
    create: Callable[..., Any]
    reduce: Callable[[Any, Any], Any]


def _record_from_mapping(definition: Mapping[str, Any]) -> ActionDef:
    unknown = set(definition) - RECORD_KEYS
    if unknown:
        raise SliceConfigError(
            f"unknown action definition keys: {', '.join(sorted(map(str, unknown)))}"
        )
    return ActionDef(create=definition.get("create"), reducer=definition.get("reducer"))


def normalize(definition: ActionDefinition) -> NormalizedAction:
    """
    Normalize an action definition into a (create, reduce) pair.

    Args:
        definition: Callable updater, ActionDef, or mapping with create/reducer

    Returns:
        NormalizedAction with defaults filled in

    Raises:
        SliceConfigError: If the definition has any other shape
    """
    if callable(definition):
        return NormalizedAction(create=passthrough, reduce=definition)

    if isinstance(definition, Mapping):
        definition = _record_from_mapping(definition)

    if not isinstance(definition, ActionDef):
        raise SliceConfigError(
            "action definition must be a callable or a create/reducer record, "
            f"got {type(definition).__name__}"
        )

    for field, fn in (("create", definition.create), ("reducer", definition.reducer)):
        if fn is not None and not callable(fn):
            raise SliceConfigError(f"action definition {field!r} must be callable")

    return NormalizedAction(
        create=definition.create or passthrough,
        reduce=definition.reducer or merge,
    )
