"""
Slice composition: the single entry point.

build_slice() turns a SliceConfig into a Slice bundle in one synchronous
pass. Every function in the bundle is pure and independent of every other
bundle; nothing is registered globally.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, TypeVar

from ..logging_config import get_logger
from .actions import ActionCreator, action_type
from .definitions import ActionDefinition, normalize
from .errors import SliceConfigError
from .reducer import SliceReducer
from .selectors import wrap_selector

V = TypeVar("V")


class Registry(Mapping[str, V]):
    """
    Read-only name -> value mapping that also allows attribute access.

        counter.actions["increment"] is counter.actions.increment

    Names that collide with Mapping methods (keys, items, get, ...) are only
    reachable by item access.
    """

    def __init__(self, items: Mapping[str, V]) -> None:
        object.__setattr__(self, "_items", dict(items))

    def __getitem__(self, key: str) -> V:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getattr__(self, name: str) -> V:
        if name.startswith("__") or name == "_items":
            raise AttributeError(name)
        try:
            return self._items[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Registry is read-only")

    def __repr__(self) -> str:
        return f"Registry({list(self._items)!r})"


@dataclass(frozen=True)
class SliceConfig:
    """
    Slice configuration.

    Fields:
        name: Slice name, the key of this slice in the root state
        initial: Initial slice state
        actions: action name -> action definition (callable or create/reducer record)
        selectors: selector name -> (slice_state, *args) -> value
    """
    name: str
    initial: Any = None
    actions: Mapping[str, ActionDefinition] = field(default_factory=dict)
    selectors: Mapping[str, Callable[..., Any]] = field(default_factory=dict)

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "SliceConfig":
        """Build a config from a mapping keyed "slice" (or "name"), "initial", "actions", "selectors"."""
        data = data or {}
        return SliceConfig(
            name=data.get("slice", data.get("name")),
            initial=data.get("initial"),
            actions=dict(data.get("actions") or {}),
            selectors=dict(data.get("selectors") or {}),
        )

    def build(self) -> "Slice":
        return build_slice(self)


@dataclass(frozen=True)
class Slice:
    """
    Derived bundle for one slice.

    Fields:
        name: Slice name (echoed from config)
        initial: Initial state (echoed from config)
        actions: action name -> ActionCreator
        reducer: SliceReducer for the slice
        selectors: selector name -> (root_state, *args) -> value
    """
    name: str
    initial: Any
    actions: Registry[ActionCreator]
    reducer: SliceReducer
    selectors: Registry[Callable[..., Any]]

    @property
    def types(self) -> Dict[str, str]:
        """action name -> type identifier"""
        return {name: creator.type for name, creator in self.actions.items()}


def _check_name(kind: str, name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise SliceConfigError(f"{kind} name must be a non-empty string, got {name!r}")


def build_slice(config: SliceConfig) -> Slice:
    """
    Build the action creators, reducer and selectors for a slice.

    Args:
        config: Slice configuration

    Returns:
        Slice bundle

    Raises:
        SliceConfigError: If any part of the configuration is malformed
    """
    _check_name("slice", config.name)
    logger = get_logger(__name__, trace_id=config.name)

    creators: Dict[str, ActionCreator] = {}
    handlers = {}
    for action_name, definition in (config.actions or {}).items():
        _check_name("action", action_name)
        try:
            normalized = normalize(definition)
        except SliceConfigError as ex:
            raise SliceConfigError(f"{config.name}/{action_name}: {ex}") from ex

        type_id = action_type(config.name, action_name)
        creators[action_name] = ActionCreator(type=type_id, create=normalized.create, name=action_name)
        handlers[type_id] = normalized.reduce

    selectors = {}
    for selector_name, selector in (config.selectors or {}).items():
        _check_name("selector", selector_name)
        if not callable(selector):
            raise SliceConfigError(f"{config.name}: selector {selector_name!r} must be callable")
        selectors[selector_name] = wrap_selector(config.name, selector)

    logger.debug(
        "Built slice %s: types=%s selectors=%s",
        config.name,
        sorted(handlers),
        sorted(selectors),
    )

    return Slice(
        name=config.name,
        initial=config.initial,
        actions=Registry(creators),
        reducer=SliceReducer(config.initial, handlers),
        selectors=Registry(selectors),
    )


def create_slice(
    name: str,
    initial: Any = None,
    actions: Optional[Mapping[str, ActionDefinition]] = None,
    selectors: Optional[Mapping[str, Callable[..., Any]]] = None,
) -> Slice:
    """
    Shorthand for build_slice(SliceConfig(...)).

    Example:
        counter = create_slice(
            "counter",
            0,
            actions={"increment": lambda state, n: state + n},
            selectors={"value": identity},
        )
        counter.actions.increment.type                       # "counter/increment"
        counter.reducer(10, counter.actions.increment(3))    # 13
        counter.selectors.value({"counter": 5})              # 5
    """
    return build_slice(
        SliceConfig(
            name=name,
            initial=initial,
            actions=dict(actions or {}),
            selectors=dict(selectors or {}),
        )
    )
