"""
Action model, type derivation and action creators.

An action is the wire contract between creators and the reducer:
{"type": "<slice>/<action>", "payload": <anything>}.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

TYPE_SEPARATOR = "/"


def action_type(slice_name: str, action_name: str) -> str:
    """
    Derive the type identifier of an action.

    Args:
        slice_name: Name of the owning slice
        action_name: Name of the action within the slice

    Returns:
        "<slice_name>/<action_name>"
    """
    return f"{slice_name}{TYPE_SEPARATOR}{action_name}"


@dataclass(frozen=True)
class Action:
    """
    Immutable action record.

    Fields:
        type: Type identifier (see action_type)
        payload: Action-specific data, any shape
    """
    type: str
    payload: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "payload": self.payload}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Action":
        data = data or {}
        return Action(type=data.get("type"), payload=data.get("payload"))


def read_action_field(action: Any, field: str) -> Any:
    """
    Read "type" or "payload" from an Action or an action-shaped mapping.

    Returns None when the field (or the action itself) is missing.
    """
    if action is None:
        return None
    if isinstance(action, Mapping):
        return action.get(field)
    return getattr(action, field, None)


@dataclass(frozen=True)
class ActionCreator:
    """
    Callable that builds actions of a single type.

    The type identifier is readable without invoking the creator:

        increment = ActionCreator("counter/increment", identity)
        increment.type      # "counter/increment"
        increment(3)        # Action(type="counter/increment", payload=3)
    """
    type: str
    create: Callable[..., Any]
    name: Optional[str] = None

    def __call__(self, *args: Any, **kwargs: Any) -> Action:
        return Action(type=self.type, payload=self.create(*args, **kwargs))

    def __repr__(self) -> str:
        return f"ActionCreator(type={self.type!r})"
