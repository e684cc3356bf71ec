"""Punch lifecycle.

NOT_PUNCHED_IN -> PUNCHED_IN <-> ON_BREAK -> PUNCHED_OUT (terminal for that punch).
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.enums import PunchAction, PunchState
from ..core.exceptions import InvalidTimestamp, InvalidTransition
from .model import Punch

TRANSITIONS: dict[tuple[PunchState, PunchAction], PunchState] = {
    (PunchState.NOT_PUNCHED_IN, PunchAction.CLOCK_IN): PunchState.PUNCHED_IN,
    (PunchState.PUNCHED_OUT, PunchAction.CLOCK_IN): PunchState.PUNCHED_IN,
    (PunchState.PUNCHED_IN, PunchAction.BREAK_START): PunchState.ON_BREAK,
    (PunchState.ON_BREAK, PunchAction.BREAK_END): PunchState.PUNCHED_IN,
    (PunchState.PUNCHED_IN, PunchAction.CLOCK_OUT): PunchState.PUNCHED_OUT,
    (PunchState.ON_BREAK, PunchAction.CLOCK_OUT): PunchState.PUNCHED_OUT,
}

_REJECTIONS = {
    PunchAction.CLOCK_IN: "Already clocked in",
    PunchAction.BREAK_START: "No open punch to start a break on",
    PunchAction.BREAK_END: "No active break",
    PunchAction.CLOCK_OUT: "No open punch",
}


def punch_state(punch: Optional[Punch]) -> PunchState:
    if punch is None:
        return PunchState.NOT_PUNCHED_IN
    return punch.state


def next_state(current: PunchState, action: PunchAction) -> PunchState:
    """Target state of ``action``, or InvalidTransition if it is not allowed."""
    target = TRANSITIONS.get((current, action))
    if target is None:
        message = _REJECTIONS[action]
        if action == PunchAction.BREAK_START and current == PunchState.ON_BREAK:
            message = "Break already in progress"
        raise InvalidTransition(message)
    return target


def ensure_consistent(punch: Punch) -> None:
    """Reject punches whose instants break the record invariants."""
    if not isinstance(punch.clock_in, datetime):
        raise InvalidTimestamp(f"Punch {punch.punch_id} has no usable clock-in")
    if punch.clock_out is not None:
        if not isinstance(punch.clock_out, datetime):
            raise InvalidTimestamp(f"Punch {punch.punch_id} has an unusable clock-out")
        if punch.clock_out < punch.clock_in:
            raise InvalidTimestamp(f"Punch {punch.punch_id} clocks out before it clocks in")

    open_breaks = 0
    for brk in punch.breaks:
        if not isinstance(brk.start, datetime):
            raise InvalidTimestamp(f"Punch {punch.punch_id} has a break without a usable start")
        if brk.start < punch.clock_in:
            raise InvalidTimestamp(f"Punch {punch.punch_id} has a break starting before clock-in")
        if brk.end is None:
            open_breaks += 1
        elif not isinstance(brk.end, datetime) or brk.end < brk.start:
            raise InvalidTimestamp(f"Punch {punch.punch_id} has a break ending before it starts")
        # A break must fit inside the punch it belongs to.
        if punch.clock_out is not None and (brk.end or brk.start) > punch.clock_out:
            raise InvalidTimestamp(f"Punch {punch.punch_id} has a break ending after clock-out")
    if open_breaks > 1:
        raise InvalidTimestamp(f"Punch {punch.punch_id} has more than one open break")
