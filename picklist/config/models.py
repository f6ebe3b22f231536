"""Configuration models for picklist."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class PicklistSettings(BaseModel):
    """Sizes, glyphs and runtime settings for the picklist."""

    width: int = Field(default=240, gt=0, description="Width of the closed control")
    height: int = Field(default=36, gt=0, description="Height of the closed control")
    row_height: int = Field(default=32, gt=0, description="Height of one overlay row")
    overlay_gap: int = Field(default=4, ge=0, description="Space between control and overlay")
    indicator_icon: str = Field(default="▾", description="Trailing icon of the closed control")
    check_icon: str = Field(default="✓", description="Marker of the selected overlay row")
    font_size: int = Field(default=14, gt=0)
    locale: str = Field(default="auto", description="UI language (auto, en, ja)")
    log_level: LogLevel = Field(default="INFO", description="Logging level for the demo app")


class DemoOption(BaseModel):
    """Option entry shown by the demo application."""

    tag: str = Field(..., description="Value reported on selection")
    label: str = Field(..., description="Text shown for the option")


def _default_options() -> list[DemoOption]:
    return [
        DemoOption(tag="alpha", label="Alpha"),
        DemoOption(tag="beta", label="Beta"),
        DemoOption(tag="gamma", label="Gamma"),
    ]


class PicklistConfig(BaseModel):
    """Root configuration model."""

    version: int = Field(default=1)
    settings: PicklistSettings = Field(default_factory=PicklistSettings)
    options: list[DemoOption] = Field(default_factory=_default_options)

    def option_pairs(self) -> list[tuple[str, str]]:
        """Options as (tag, label) pairs."""
        return [(option.tag, option.label) for option in self.options]
