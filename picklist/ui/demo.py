"""Demo application hosting a picklist."""

from __future__ import annotations

import logging

from castella import Column, Component, Row, Spacer, State, Text
from castella.theme import ThemeManager

from ..config import PicklistConfig
from ..i18n import t
from ..models.state import PicklistState, init
from .picklist import Picklist

logger = logging.getLogger(__name__)


class PicklistDemo(Component):
    """Owns the picklist state and selection and feeds them back each render."""

    def __init__(self, config: PicklistConfig, selected_tag: str | None = None):
        super().__init__()
        self._config = config

        self._picklist_state = State(init())
        self._picklist_state.attach(self)

        self._selected_tag: State[str | None] = State(selected_tag)
        self._selected_tag.attach(self)

    @property
    def picklist_state(self) -> PicklistState:
        return self._picklist_state()

    @property
    def selected_tag(self) -> str | None:
        return self._selected_tag()

    def view(self):
        theme = ThemeManager().current
        settings = self._config.settings
        options = self._config.option_pairs()

        picklist = Picklist(
            state=self._picklist_state(),
            on_state_change=self._on_state_change,
            selected_tag=self._selected_tag(),
            on_selection_change=self._on_selection_change,
            options=options,
            settings=settings,
        )

        selected = self._selected_tag()
        value = selected if selected is not None else t("demo.none")

        return Column(
            Text(t("demo.title"), font_size=20).fixed_height(40),
            Spacer().fixed_height(12),
            Row(picklist, Spacer()).fixed_height(picklist.total_height()),
            Spacer().fixed_height(12),
            Text(t("demo.selected", value=value), font_size=12)
            .text_color(theme.colors.text_info)
            .fixed_height(24),
            Spacer(),
        ).bg_color(theme.colors.bg_primary)

    def _on_state_change(self, state: PicklistState):
        self._picklist_state.set(state)

    def _on_selection_change(self, tag: str | None):
        logger.info(f"Selection changed: {tag!r}")
        self._selected_tag.set(tag)
