"""
Root composition: several slices under one root reducer.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from ..logging_config import get_logger
from .errors import SliceConfigError, StateShapeError
from .slice import Slice
from .reducer import _MISSING, SliceReducer


class RootReducer:
    """
    Reducer over a root state keyed by slice name.

    Every action is offered to every slice; a slice ignores types it does
    not own. If no slice state changes (by identity) the given root state
    object is returned as-is.

    The root state must be a mapping. A slice whose key is absent starts
    from its initial state; a slice stored as None stays None.
    """

    def __init__(self, reducers: Mapping[str, SliceReducer]) -> None:
        self._reducers: Dict[str, SliceReducer] = dict(reducers)

    @property
    def reducers(self) -> Mapping[str, SliceReducer]:
        return MappingProxyType(self._reducers)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._reducers)

    @property
    def initial(self) -> Dict[str, Any]:
        return {name: reducer.initial for name, reducer in self._reducers.items()}

    def apply(self, state: Any = _MISSING, action: Any = None) -> Any:
        if state is _MISSING:
            state = {}
        if not isinstance(state, Mapping):
            raise StateShapeError(
                f"root state must be a mapping, got {type(state).__name__}"
            )

        changed = False
        next_state = dict(state)
        for name, reducer in self._reducers.items():
            previous = state.get(name, _MISSING)
            current = reducer(previous, action)
            next_state[name] = current
            if current is not previous or name not in state:
                changed = True

        return next_state if changed else state

    __call__ = apply

    def __repr__(self) -> str:
        return f"RootReducer(slices={list(self._reducers)!r})"


def combine_slices(*slices: Slice) -> RootReducer:
    """
    Combine slice bundles into one root reducer.

    Raises:
        SliceConfigError: If two slices share a name
    """
    reducers: Dict[str, SliceReducer] = {}
    for s in slices:
        if s.name in reducers:
            raise SliceConfigError(f"duplicate slice name: {s.name}")
        reducers[s.name] = s.reducer

    get_logger(__name__).debug("Combined slices: %s", list(reducers))
    return RootReducer(reducers)
