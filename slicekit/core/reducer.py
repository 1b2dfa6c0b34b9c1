"""
SliceReducer: one dispatching reducer for a whole slice.

The reducer must be:
- Total (unknown action types return the state unchanged)
- Pure (no side effects, no I/O, no memory of prior calls)
- Self-starting (an omitted state begins at the slice's initial value)
"""

from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Tuple

from .actions import read_action_field

# Updater signature: (current_slice_state, payload) -> new_slice_state
Updater = Callable[[Any, Any], Any]


class _Missing:
    """Marker for a slice state that has never been set."""

    def __repr__(self) -> str:
        return "<missing>"


_MISSING: Any = _Missing()


class SliceReducer:
    """
    Dispatch table from type identifier to updater.

    Usage:
        reducer = SliceReducer(initial, {"counter/increment": add})
        state = reducer(action={})                         # initial
        state = reducer(state, increment(3))               # add(state, 3)
    """

    def __init__(self, initial: Any, handlers: Mapping[str, Updater]) -> None:
        self.initial = initial
        self._handlers: Dict[str, Updater] = dict(handlers)

    @property
    def handlers(self) -> Mapping[str, Updater]:
        """Read-only view of the dispatch table."""
        return MappingProxyType(self._handlers)

    @property
    def types(self) -> Tuple[str, ...]:
        """Type identifiers this reducer responds to."""
        return tuple(self._handlers)

    def handles(self, action_type: str) -> bool:
        return action_type in self._handlers

    def apply(self, state: Any = _MISSING, action: Any = None) -> Any:
        """
        Apply action to state.

        Args:
            state: Current slice state (omitted = initial; None is a real state)
            action: Action or mapping with "type" and optional "payload"

        Returns:
            New slice state, or the given state itself for unknown types
        """
        if state is _MISSING:
            state = self.initial

        action_type = read_action_field(action, "type")
        handler = self._handlers.get(action_type) if isinstance(action_type, str) else None
        if handler is None:
            return state
        return handler(state, read_action_field(action, "payload"))

    __call__ = apply

    def __repr__(self) -> str:
        return f"SliceReducer(types={list(self._handlers)!r})"
