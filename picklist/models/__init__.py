"""State and selection models for the picklist."""

from .selection import Content, Option, TagT, is_selected, resolve_selection
from .state import PicklistEvent, PicklistState, init, update

__all__ = [
    "Content",
    "Option",
    "PicklistEvent",
    "PicklistState",
    "TagT",
    "init",
    "is_selected",
    "resolve_selection",
    "update",
]
