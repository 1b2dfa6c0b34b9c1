"""
Primitive state helpers.

These work standalone and as values inside an action map:

    create_slice("user", {"avatar": None}, actions={"set_avatar": assign("avatar")})
"""

import dataclasses
from typing import Any, Callable, Mapping

from .errors import PayloadShapeError, StateShapeError

Updater = Callable[[Any, Any], Any]


def identity(x: Any) -> Any:
    """Return the argument unchanged."""
    return x


def passthrough(payload: Any = None, *args: Any, **kwargs: Any) -> Any:
    # Default creator: first positional argument becomes the payload.
    return payload


def _is_dataclass_instance(obj: Any) -> bool:
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type)


def _with_fields(state: Any, fields: Mapping[str, Any]) -> Any:
    """
    Return a copy of a record-shaped state with some fields replaced.

    Mappings produce a new dict, dataclass instances go through
    dataclasses.replace, None counts as an empty record.
    """
    if state is None:
        return dict(fields)
    if isinstance(state, Mapping):
        return {**state, **fields}
    if _is_dataclass_instance(state):
        return dataclasses.replace(state, **fields)
    raise StateShapeError(
        f"expected a mapping or dataclass state, got {type(state).__name__}"
    )


def merge(state: Any, payload: Any) -> Any:
    """
    Shallow-merge the payload's keys into the state.

    This is the reducer used for record-style action definitions that omit one.

    Raises:
        PayloadShapeError: If payload is not a mapping, or names a field the
            dataclass state does not have
        StateShapeError: If state is not record-shaped
    """
    if not isinstance(payload, Mapping):
        raise PayloadShapeError(
            f"merge payload must be a mapping, got {type(payload).__name__}"
        )
    try:
        return _with_fields(state, payload)
    except TypeError as ex:
        if isinstance(ex, StateShapeError):
            raise
        raise PayloadShapeError(str(ex)) from ex


def assign(key: str) -> Updater:
    """
    Build an updater that replaces one field with the payload verbatim.

    Args:
        key: Field to replace

    Returns:
        (state, payload) -> new state with state[key] == payload
    """

    def assign_updater(state: Any, payload: Any = None) -> Any:
        return _with_fields(state, {key: payload})

    assign_updater.__name__ = f"assign_{key}"
    return assign_updater
