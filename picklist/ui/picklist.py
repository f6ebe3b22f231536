"""Single-selection dropdown component."""

from __future__ import annotations

from typing import Callable, Generic, Sequence

from castella import Button, Column, Component, Row, Spacer, TextAlign, Widget
from castella.theme import ThemeManager

from ..config import PicklistSettings
from ..i18n import t
from ..models.selection import Content, Option, TagT
from ..models.state import PicklistState
from .view_model import OverlayRow, PicklistViewModel, RowKind, build_view_model


def bind_focus_lost(widget: Widget, handler: Callable[[], None]) -> Widget:
    """Call handler whenever the widget loses input focus.

    The widget's own unfocused() behavior (focus ring reset) still runs first.
    """
    default_unfocused = widget.unfocused

    def unfocused() -> None:
        default_unfocused()
        handler()

    widget.unfocused = unfocused
    return widget


class Picklist(Component, Generic[TagT]):
    """Dropdown showing the current selection and, when open, the options.

    The picklist keeps no state of its own. The caller stores the values
    passed to on_state_change and on_selection_change and builds a new
    Picklist with them on the next render.

    The overlay is laid out below the control, not floated over other
    widgets, so the host must size its slot with total_height().
    """

    def __init__(
        self,
        state: PicklistState,
        on_state_change: Callable[[PicklistState], None],
        selected_tag: TagT | None,
        on_selection_change: Callable[[TagT | None], None],
        options: Sequence[Option],
        *,
        settings: PicklistSettings | None = None,
        format_content: Callable[[Content], str] = str,
    ):
        super().__init__()
        self._picklist_state = state
        self._on_state_change = on_state_change
        self._selected_tag = selected_tag
        self._on_selection_change = on_selection_change
        self._options = options
        self._settings = settings or PicklistSettings()
        self._format_content = format_content

    def view_model(self) -> PicklistViewModel[TagT]:
        return build_view_model(
            self._picklist_state,
            self._on_state_change,
            self._selected_tag,
            self._on_selection_change,
            self._options,
        )

    def total_height(self) -> int:
        """Total height of the current view."""
        settings = self._settings
        if not self._picklist_state.is_open:
            return settings.height
        rows = len(self.view_model().rows)
        return settings.height + settings.overlay_gap + rows * settings.row_height

    def view(self):
        vm = self.view_model()
        control = self._build_control(vm)
        if not vm.is_open:
            return Column(control).fixed_size(self._settings.width, self.total_height())

        return Column(
            control,
            Spacer().fixed_height(self._settings.overlay_gap),
            self._build_overlay(vm.rows),
        ).fixed_size(self._settings.width, self.total_height())

    def _label(self, content: Content | None) -> str:
        return "" if content is None else self._format_content(content)

    def _build_control(self, vm: PicklistViewModel[TagT]) -> Row:
        """Build the closed control: current selection plus indicator icon."""
        theme = ThemeManager().current
        settings = self._settings

        if vm.shows_placeholder:
            label = (
                Button(t("picklist.placeholder"), align=TextAlign.LEFT, font_size=settings.font_size)
                .text_color(theme.colors.border_primary)
            )
        else:
            label = Button(
                self._label(vm.content),
                align=TextAlign.LEFT,
                font_size=settings.font_size,
            ).text_color(theme.colors.text_primary)

        indicator = Button(settings.indicator_icon, font_size=settings.font_size).fixed_width(settings.height)

        for button in (label, indicator):
            button.on_click(lambda _: vm.toggle())
            bind_focus_lost(button, vm.focus_lost)

        return Row(label.flex(1), indicator).fixed_height(settings.height)

    def _build_overlay(self, rows: list[OverlayRow[TagT]]) -> Column:
        """Build the overlay list shown below the control."""
        theme = ThemeManager().current
        return (
            Column(*[self._build_row(row) for row in rows])
            .fixed_height(len(rows) * self._settings.row_height)
            .bg_color(theme.colors.bg_overlay)
        )

    def _build_row(self, row: OverlayRow[TagT]) -> Button:
        theme = ThemeManager().current
        settings = self._settings

        if row.kind is RowKind.CLEAR:
            text = t("picklist.clear")
        else:
            # Unchecked rows are padded so labels line up with checked ones
            marker = settings.check_icon if row.checked else " " * len(settings.check_icon)
            text = f"{marker} {self._label(row.content)}"

        button = (
            Button(text, align=TextAlign.LEFT, font_size=settings.font_size)
            .on_click(lambda _: row.activate())
            .fixed_height(settings.row_height)
        )
        if row.checked:
            button = button.bg_color(theme.colors.bg_selected)
        return button
