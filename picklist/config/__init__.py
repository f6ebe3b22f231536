"""Configuration module for picklist."""

from .loader import ConfigLoader, load_config
from .models import DemoOption, PicklistConfig, PicklistSettings

__all__ = [
    "ConfigLoader",
    "DemoOption",
    "PicklistConfig",
    "PicklistSettings",
    "load_config",
]
