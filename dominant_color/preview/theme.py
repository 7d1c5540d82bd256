"""Styles used to show off a dominant colour in the preview panel."""

from __future__ import annotations

from dataclasses import dataclass

from dominant_color.imgproc.color_extract import RGBColor

PANEL_PADDING = "30px"
GLOW_RADIUS = "20px"


@dataclass(frozen=True, slots=True)
class ColorTheme:
    """CSS fragments for the tinted preview box."""

    label: str
    background_image: str
    box_shadow: str
    padding: str = PANEL_PADDING

    def as_style(self) -> dict[str, str]:
        return {
            "backgroundImage": self.background_image,
            "boxShadow": self.box_shadow,
            "padding": self.padding,
        }


def build_theme(color: RGBColor) -> ColorTheme:
    """Return a radial gradient and inset glow tinted with ``color``."""

    gradient = ", ".join(["farthest-corner at top left", color.rgba(0.3), color.rgba(0.5)])
    return ColorTheme(
        label=color.label,
        background_image=f"radial-gradient({gradient})",
        box_shadow=f"0 0 {GLOW_RADIUS} {color.rgba(1)} inset",
    )
