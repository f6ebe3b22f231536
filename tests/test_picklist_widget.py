"""Tests for the Castella picklist component."""

from castella import Button, MouseEvent, Point

from picklist.config import PicklistSettings
from picklist.models.state import PicklistState, init
from picklist.ui.picklist import Picklist, bind_focus_lost

OPEN = PicklistState(drop_down_open=True)


def _click(button: Button) -> None:
    button.mouse_up(MouseEvent(pos=Point(x=0, y=0)))


def _control_buttons(root) -> list[Button]:
    control_row = list(root.get_children())[0]
    return list(control_row.get_children())


def _overlay_buttons(root) -> list[Button]:
    overlay = list(root.get_children())[2]
    return list(overlay.get_children())


class TestPicklistView:
    """Tests for Picklist.view()."""

    def test_closed_shows_placeholder(self, options, on_state_change, on_selection_change) -> None:
        picklist = Picklist(init(), on_state_change, None, on_selection_change, options)

        root = picklist.view()
        label, indicator = _control_buttons(root)

        assert label.get_label() == "Select an Option…"
        assert indicator.get_label() == "▾"
        assert len(list(root.get_children())) == 1

    def test_closed_shows_selected_content(self, options, on_state_change, on_selection_change) -> None:
        picklist = Picklist(init(), on_state_change, "B", on_selection_change, options)

        label, _ = _control_buttons(picklist.view())

        assert label.get_label() == "Beta"

    def test_format_content(self, on_state_change, on_selection_change) -> None:
        picklist = Picklist(
            init(),
            on_state_change,
            1,
            on_selection_change,
            [(1, {"name": "One"})],
            format_content=lambda content: content["name"],
        )

        label, _ = _control_buttons(picklist.view())

        assert label.get_label() == "One"

    def test_open_without_selection(self, options, on_state_change, on_selection_change) -> None:
        picklist = Picklist(OPEN, on_state_change, None, on_selection_change, options)

        rows = _overlay_buttons(picklist.view())

        assert [row.get_label() for row in rows] == ["  Alpha", "  Beta"]

    def test_open_with_selection(self, options, on_state_change, on_selection_change) -> None:
        picklist = Picklist(OPEN, on_state_change, "B", on_selection_change, options)

        rows = _overlay_buttons(picklist.view())

        assert [row.get_label() for row in rows] == ["Clear selection", "  Alpha", "✓ Beta"]

    def test_none_content_renders_empty(self, on_state_change, on_selection_change) -> None:
        options = [("N", None), ("A", "Alpha")]

        closed = Picklist(init(), on_state_change, "N", on_selection_change, options)
        opened = Picklist(OPEN, on_state_change, None, on_selection_change, options)

        label, _ = _control_buttons(closed.view())
        rows = _overlay_buttons(opened.view())

        assert label.get_label() == "Select an Option…"
        assert [row.get_label() for row in rows] == ["  ", "  Alpha"]

    def test_custom_check_icon(self, options, on_state_change, on_selection_change) -> None:
        settings = PicklistSettings(check_icon="*")
        picklist = Picklist(OPEN, on_state_change, "A", on_selection_change, options, settings=settings)

        rows = _overlay_buttons(picklist.view())

        assert [row.get_label() for row in rows][1:] == ["* Alpha", "  Beta"]


class TestPicklistEvents:
    """Tests for event bindings of the rendered widgets."""

    def test_click_label_toggles(self, options, on_state_change, on_selection_change) -> None:
        picklist = Picklist(init(), on_state_change, None, on_selection_change, options)
        label, _ = _control_buttons(picklist.view())

        _click(label)

        on_state_change.assert_called_once_with(OPEN)

    def test_click_indicator_toggles_closed(self, options, on_state_change, on_selection_change) -> None:
        picklist = Picklist(OPEN, on_state_change, None, on_selection_change, options)
        _, indicator = _control_buttons(picklist.view())

        _click(indicator)

        on_state_change.assert_called_once_with(init())

    def test_focus_loss_requests_close(self, options, on_state_change, on_selection_change) -> None:
        picklist = Picklist(OPEN, on_state_change, None, on_selection_change, options)
        label, _ = _control_buttons(picklist.view())

        label.unfocused()

        on_state_change.assert_called_once_with(init())

    def test_click_clear_row(self, options, on_state_change, on_selection_change) -> None:
        picklist = Picklist(OPEN, on_state_change, "B", on_selection_change, options)
        clear_row = _overlay_buttons(picklist.view())[0]

        _click(clear_row)

        on_selection_change.assert_called_once_with(None)
        on_state_change.assert_not_called()

    def test_click_option_row(self, options, on_state_change, on_selection_change) -> None:
        picklist = Picklist(OPEN, on_state_change, None, on_selection_change, options)
        beta_row = _overlay_buttons(picklist.view())[1]

        _click(beta_row)

        on_selection_change.assert_called_once_with("B")
        on_state_change.assert_not_called()


class TestPicklistHeight:
    """Tests for Picklist.total_height()."""

    def test_closed_height(self, options, on_state_change, on_selection_change) -> None:
        picklist = Picklist(init(), on_state_change, "A", on_selection_change, options)

        assert picklist.total_height() == 36

    def test_open_height_counts_clear_row(self, options, on_state_change, on_selection_change) -> None:
        settings = PicklistSettings(height=30, row_height=20, overlay_gap=2)
        picklist = Picklist(OPEN, on_state_change, "A", on_selection_change, options, settings=settings)

        assert picklist.total_height() == 30 + 2 + 3 * 20

    def test_view_reserves_total_height(self, options, on_state_change, on_selection_change) -> None:
        settings = PicklistSettings(height=30, row_height=20, overlay_gap=2)
        picklist = Picklist(OPEN, on_state_change, "A", on_selection_change, options, settings=settings)

        root = picklist.view()

        assert root.get_size().height == picklist.total_height()
        assert list(root.get_children())[2].get_size().height == 3 * 20


class TestBindFocusLost:
    """Tests for bind_focus_lost()."""

    def test_handler_runs_after_default(self) -> None:
        calls = []
        button = bind_focus_lost(Button("x"), lambda: calls.append("lost"))

        button.focused()
        button.unfocused()

        assert calls == ["lost"]
        assert button.state().is_focused() is False
