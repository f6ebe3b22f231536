"""Open/closed state of a picklist.

The state is owned by the host application. It is handed to the picklist on
every render and handed back through the state-change callback.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class PicklistEvent(str, Enum):
    """Inputs that move a picklist between Closed and Open."""

    TOGGLE = "toggle"
    REQUEST_CLOSE = "request_close"


class PicklistState(BaseModel):
    """Transient UI state that is not part of the domain selection."""

    model_config = {"frozen": True}

    drop_down_open: bool = Field(default=False, description="Whether the overlay is shown")

    @property
    def is_open(self) -> bool:
        return self.drop_down_open

    def toggle(self) -> PicklistState:
        """Closed becomes Open, Open becomes Closed."""
        return self.model_copy(update={"drop_down_open": not self.drop_down_open})

    def request_close(self) -> PicklistState:
        """Always Closed. Already closed states come back unchanged."""
        if not self.drop_down_open:
            return self
        return self.model_copy(update={"drop_down_open": False})


def init() -> PicklistState:
    """Create the initial (Closed) state."""
    return PicklistState()


def update(state: PicklistState, event: PicklistEvent) -> PicklistState:
    """Apply an event to a state and return the resulting state."""
    if event is PicklistEvent.TOGGLE:
        return state.toggle()
    elif event is PicklistEvent.REQUEST_CLOSE:
        return state.request_close()
    return state
