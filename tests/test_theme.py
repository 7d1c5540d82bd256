"""Tests for preview styling."""

from dominant_color import RGBColor
from dominant_color.preview.theme import build_theme


def test_theme_uses_gradient_and_inset_glow() -> None:
    theme = build_theme(RGBColor(200, 0, 0))

    assert theme.label == "200,0,0"
    assert theme.background_image == (
        "radial-gradient(farthest-corner at top left, rgba(200,0,0,0.3), rgba(200,0,0,0.5))"
    )
    assert theme.box_shadow == "0 0 20px rgba(200,0,0,1) inset"
    assert theme.as_style()["padding"] == "30px"
