"""Door, error and calibration states shared by the garage door system."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

STATUS_TOPIC = "garage/door/status"
COMMAND_TOPIC = "garage/door/command"
RESPONSE_TOPIC = "garage/door/response"
REBOOT_MSG = "SYSTEM REBOOT"
SUCCESS_MSG = "SUCCESS"
STUCK_MSG = "DOOR STUCK"
NO_CALIB_MSG = "NOT CALIBRATED"

_UNKNOWN = "UNKNOWN"


class Command(IntEnum):
    """A command the door accepts."""

    OPEN = 0
    CLOSE = 1
    STOP = 2
    CALIB = 3
    NONE = 4


class DoorState(IntEnum):
    """Where the door is and what it is doing."""

    OPENING = 0
    OPENED = 1
    CLOSING = 2
    CLOSED = 3
    IDLE = 4


class ErrorState(IntEnum):
    """Whether the door is running normally or has got stuck."""

    NORMAL = 0
    STUCK = 1


class CalibState(IntEnum):
    """Whether the travel of the door has been calibrated."""

    UNCALIBRATED = 0
    CALIBRATED = 1


@dataclass
class Status:
    """The full status of the door system."""

    door_state: DoorState = DoorState.IDLE
    error_state: ErrorState = ErrorState.NORMAL
    calib_state: CalibState = CalibState.UNCALIBRATED
    moving: bool = False
    total_steps: int = 0


def _name_of(enum_type: type[IntEnum], state: object) -> str:
    try:
        return enum_type(state).name
    except (ValueError, TypeError):
        return _UNKNOWN


def door_state_string(state: object) -> str:
    """Return the name of a door state, or "UNKNOWN"."""
    return _name_of(DoorState, state)


def error_state_string(state: object) -> str:
    """Return the name of an error state, or "UNKNOWN"."""
    return _name_of(ErrorState, state)


def calib_state_string(state: object) -> str:
    """Return the name of a calibration state, or "UNKNOWN"."""
    return _name_of(CalibState, state)