"""Application state machine with a fixed table of allowed transitions."""

from __future__ import annotations

import enum
import logging

logger = logging.getLogger(__name__)


class State(enum.Enum):
    """States the application can be in."""

    STARTUP = enum.auto()
    PROFILE_CHECK = enum.auto()
    CALIBRATE = enum.auto()
    MENU = enum.auto()
    MODE_SELECTION = enum.auto()
    GENERATING_SESSION = enum.auto()
    ACTIVE_SESSION = enum.auto()
    POST_SESSION = enum.auto()
    ANALYSING = enum.auto()
    DATA_SAVING = enum.auto()
    EXIT = enum.auto()
    ERROR_RESOLVING = enum.auto()
    EXCEPTION_RESOLVING = enum.auto()


_ERRORS = frozenset({State.ERROR_RESOLVING, State.EXCEPTION_RESOLVING})

_TRANSITIONS: dict[State, frozenset[State]] = {
    State.STARTUP: frozenset({State.PROFILE_CHECK, State.EXIT}),
    State.PROFILE_CHECK: frozenset({State.CALIBRATE, State.MENU}),
    State.CALIBRATE: frozenset({State.MENU}),
    State.MENU: frozenset({State.MODE_SELECTION, State.EXIT}) | _ERRORS,
    State.MODE_SELECTION: frozenset({State.GENERATING_SESSION, State.MENU}),
    State.GENERATING_SESSION: frozenset({State.ACTIVE_SESSION}) | _ERRORS,
    State.ACTIVE_SESSION: frozenset({State.POST_SESSION}) | _ERRORS,
    State.POST_SESSION: frozenset({State.DATA_SAVING, State.ANALYSING, State.MENU}) | _ERRORS,
    State.DATA_SAVING: frozenset({State.MENU}) | _ERRORS,
    State.ANALYSING: frozenset({State.MENU}) | _ERRORS,
}


class InvalidTransitionError(Exception):
    """Raised when a transition is not allowed from the current state."""

    def __init__(self, current: State, target: State) -> None:
        super().__init__(f"cannot move from {current.name} to {target.name}")
        self.current = current
        self.target = target


class StateMachine:
    """Tracks the current state and the sequence of states entered."""

    def __init__(self, state: State = State.STARTUP) -> None:
        self._state = state
        self._history: list[State] = []

    @property
    def state(self) -> State:
        return self._state

    @property
    def history(self) -> tuple[State, ...]:
        """States entered through transitions, oldest first."""
        return tuple(self._history)

    def is_valid_transition(self, target: State) -> bool:
        return target in _TRANSITIONS.get(self._state, frozenset())

    def transit_to(self, target: State) -> None:
        """Move to ``target`` or raise InvalidTransitionError."""
        if not self.is_valid_transition(target):
            raise InvalidTransitionError(self._state, target)
        self._state = target
        self._history.append(target)
        logger.debug("state changed to %s", target.name)


_NAMES = {State.EXIT: "EXIT", State.STARTUP: "STARTUP"}


def state_name(state: State) -> str:
    """Display name of a state; states without one give "NO STATE"."""
    return _NAMES.get(state, "NO STATE")