"""Castella UI for the picklist."""

from .demo import PicklistDemo
from .picklist import Picklist, bind_focus_lost
from .view_model import OverlayRow, PicklistViewModel, RowKind, build_view_model

__all__ = [
    "OverlayRow",
    "Picklist",
    "PicklistDemo",
    "PicklistViewModel",
    "RowKind",
    "bind_focus_lost",
    "build_view_model",
]
