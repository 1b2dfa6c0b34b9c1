"""
Replay runner: fold a reducer over a sequence of actions.

Replay is pure: the same actions always produce the same state.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from ..core.reducer import _MISSING


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Final state after applying actions
        applied: Number of actions applied
    """
    state: Any
    applied: int


def replay(
    reducer: Callable[[Any, Any], Any],
    actions: Iterable[Any],
    state: Any = _MISSING,
    limit: Optional[int] = None,
) -> ReplayResult:
    """
    Replay actions to reconstruct state.

    Args:
        reducer: SliceReducer, RootReducer or any (state, action) -> state
            whose state parameter defaults to the initial state
        actions: Actions (or action-shaped mappings) in dispatch order
        state: Starting state (omitted = the reducer's initial state)
        limit: Stop after this many actions (None = all)

    Returns:
        ReplayResult with final state and count
    """
    st = reducer(action=None) if state is _MISSING else state
    count = 0

    for action in actions:
        if limit is not None and count >= limit:
            break
        st = reducer(st, action)
        count += 1

    return ReplayResult(state=st, applied=count)
