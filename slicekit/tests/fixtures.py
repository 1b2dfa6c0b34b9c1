"""
Slices shared by the tests, importable by dotted path for the CLI.
"""

from dataclasses import dataclass
from typing import Optional

from slicekit.core import ActionDef, SliceConfig, assign, create_slice, identity


counter = create_slice(
    "counter",
    0,
    actions={
        "increment": lambda state, n: state + n,
        "reset": ActionDef(create=lambda: None, reducer=lambda state, _: 0),
    },
    selectors={
        "value": identity,
        "doubled": lambda state: state * 2,
    },
)


user = create_slice(
    "user",
    {"name": "a", "age": 1, "avatar": None},
    actions={
        "rename": {"create": lambda name: {"name": name}},
        "update": {},
        "set_avatar": assign("avatar"),
    },
    selectors={
        "name": lambda state: state["name"],
        "field": lambda state, key: state[key],
    },
)


@dataclass(frozen=True)
class Profile:
    handle: str = ""
    bio: Optional[str] = None


profile_config = SliceConfig(
    name="profile",
    initial=Profile(),
    actions={
        "edit": ActionDef(),
        "set_bio": assign("bio"),
    },
)

not_a_slice = {"slice": "counter"}

tags = create_slice(
    "tags",
    frozenset(),
    actions={"add": lambda state, tag: state | {tag}},
)
