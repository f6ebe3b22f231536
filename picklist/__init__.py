"""Single-selection dropdown (picklist) component for Castella."""

from .models import PicklistEvent, PicklistState, init, is_selected, resolve_selection, update
from .ui import Picklist, PicklistViewModel, build_view_model

__version__ = "0.1.0"

__all__ = [
    "Picklist",
    "PicklistEvent",
    "PicklistState",
    "PicklistViewModel",
    "build_view_model",
    "init",
    "is_selected",
    "resolve_selection",
    "update",
]
