"""
Selector wrapping: slice-local selectors made callable on root state.
"""

from functools import wraps
from typing import Any, Callable, Mapping


def select_slice(root_state: Any, slice_name: str) -> Any:
    """
    Get one slice's state out of the root state.

    Returns:
        root_state[slice_name] for mappings, the attribute of the same name
        for other objects, None if the slice is absent
    """
    if root_state is None:
        return None
    if isinstance(root_state, Mapping):
        return root_state.get(slice_name)
    return getattr(root_state, slice_name, None)


def wrap_selector(slice_name: str, selector: Callable[..., Any]) -> Callable[..., Any]:
    """
    Wrap a (slice_state, *args) selector into a (root_state, *args) selector.

    No caching and no defaulting: a missing slice reaches the selector as None.
    """

    @wraps(selector)
    def wrapped(root_state: Any, *args: Any, **kwargs: Any) -> Any:
        return selector(select_slice(root_state, slice_name), *args, **kwargs)

    wrapped.slice_name = slice_name  # type: ignore[attr-defined]
    return wrapped
