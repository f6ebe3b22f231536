"""Toolkit-independent description of a rendered picklist.

``build_view_model`` is a pure function of the render inputs. The handlers on
the returned objects only invoke the caller's callbacks when the host fires
them; nothing is stored between renders.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, Sequence

from ..models.selection import Content, Option, TagT, is_selected, resolve_selection
from ..models.state import PicklistEvent, PicklistState, update

logger = logging.getLogger(__name__)


class RowKind(str, Enum):
    """Kinds of overlay rows."""

    CLEAR = "clear"
    OPTION = "option"


@dataclass
class OverlayRow(Generic[TagT]):
    """One activatable row of the open overlay."""

    kind: RowKind
    tag: TagT | None
    content: Content | None
    checked: bool
    on_activate: Callable[[], None]

    def activate(self) -> None:
        self.on_activate()


@dataclass
class PicklistViewModel(Generic[TagT]):
    """Everything the renderer needs for one render of a picklist."""

    content: Content | None
    is_open: bool
    on_toggle: Callable[[], None]
    on_focus_lost: Callable[[], None]
    rows: list[OverlayRow[TagT]] = field(default_factory=list)

    @property
    def shows_placeholder(self) -> bool:
        return self.content is None

    @property
    def has_clear_row(self) -> bool:
        return any(row.kind is RowKind.CLEAR for row in self.rows)

    def toggle(self) -> None:
        self.on_toggle()

    def focus_lost(self) -> None:
        self.on_focus_lost()


def build_view_model(
    state: PicklistState,
    on_state_change: Callable[[PicklistState], None],
    selected_tag: TagT | None,
    on_selection_change: Callable[[TagT | None], None],
    options: Sequence[Option],
) -> PicklistViewModel[TagT]:
    """Build the view model for the current render.

    Args:
        state: Open/closed state held by the caller
        on_state_change: Receives the next state after toggle or focus loss
        selected_tag: Current selection, or None
        on_selection_change: Receives the newly picked tag, or None to clear
        options: Ordered (tag, content) pairs

    Returns:
        PicklistViewModel with bound handlers
    """

    def dispatch(event: PicklistEvent) -> None:
        next_state = update(state, event)
        logger.debug(f"Picklist {event.value}: open={state.is_open} -> open={next_state.is_open}")
        on_state_change(next_state)

    rows: list[OverlayRow[TagT]] = []
    if state.is_open:
        rows = _build_rows(selected_tag, on_selection_change, options)

    return PicklistViewModel(
        content=resolve_selection(selected_tag, options),
        is_open=state.is_open,
        on_toggle=lambda: dispatch(PicklistEvent.TOGGLE),
        on_focus_lost=lambda: dispatch(PicklistEvent.REQUEST_CLOSE),
        rows=rows,
    )


def _build_rows(
    selected_tag: TagT | None,
    on_selection_change: Callable[[TagT | None], None],
    options: Sequence[Option],
) -> list[OverlayRow[TagT]]:
    """Build overlay rows: optional clear row, then one row per option."""

    def select(tag: TagT | None) -> None:
        logger.debug(f"Picklist selection requested: {tag!r}")
        on_selection_change(tag)

    rows: list[OverlayRow[TagT]] = []
    if selected_tag is not None:
        rows.append(
            OverlayRow(
                kind=RowKind.CLEAR,
                tag=None,
                content=None,
                checked=False,
                on_activate=lambda: select(None),
            )
        )

    for tag, content in options:
        rows.append(
            OverlayRow(
                kind=RowKind.OPTION,
                tag=tag,
                content=content,
                checked=is_selected(tag, selected_tag),
                on_activate=lambda tag=tag: select(tag),
            )
        )
    return rows
