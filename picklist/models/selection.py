"""Mapping a caller-held tag back to the content of its option."""

from __future__ import annotations

from typing import Any, Sequence, TypeVar

# Tags are caller values compared with ``==``. ``None`` means "nothing selected".
TagT = TypeVar("TagT")

Content = Any
Option = tuple[TagT, Content]


def is_selected(tag: TagT, selected_tag: TagT | None) -> bool:
    """Check whether an option tag matches the current selection."""
    if selected_tag is None:
        return False
    return tag == selected_tag


def resolve_selection(
    selected_tag: TagT | None,
    options: Sequence[Option],
) -> Content | None:
    """Find the content shown for the selected tag.

    Options are scanned in order and the first entry with an equal tag wins.
    A tag missing from the options resolves to None, the same as no selection.

    Args:
        selected_tag: Current selection, or None
        options: Ordered (tag, content) pairs

    Returns:
        Content of the matching option, or None
    """
    if selected_tag is None:
        return None
    for tag, content in options:
        if is_selected(tag, selected_tag):
            return content
    return None
