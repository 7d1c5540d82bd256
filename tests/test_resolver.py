"""Tests for finding the image under the pointer."""

from __future__ import annotations

import pytest

from dominant_color.sampling import PointerTarget, resolve_image_url


def test_img_element_uses_src() -> None:
    target = PointerTarget(
        node_name="IMG",
        src="https://example.test/a.png",
        computed_style={"backgroundImage": 'url("https://example.test/bg.png")'},
    )

    assert resolve_image_url(target) == "https://example.test/a.png"


def test_xul_image_node_counts_as_image() -> None:
    target = PointerTarget(node_name="xul:image", src="chrome://icon.png")

    assert resolve_image_url(target) == "chrome://icon.png"


def test_src_of_non_image_element_is_ignored() -> None:
    target = PointerTarget(node_name="script", src="https://example.test/app.js")

    assert resolve_image_url(target) == ""


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ('url("https://example.test/bg.png")', "https://example.test/bg.png"),
        ("url(https://example.test/bg.png)", "https://example.test/bg.png"),
        ("none", ""),
        ('linear-gradient(red, blue), url("x.png")', ""),
    ],
)
def test_background_image_style(value: str, expected: str) -> None:
    target = PointerTarget(node_name="div", computed_style={"backgroundImage": value})

    assert resolve_image_url(target) == expected


def test_background_image_beats_list_style_image() -> None:
    target = PointerTarget(
        node_name="li",
        computed_style={
            "backgroundImage": 'url("bg.png")',
            "listStyleImage": 'url("bullet.png")',
        },
    )

    assert resolve_image_url(target) == "bg.png"


def test_list_style_image_used_when_no_background() -> None:
    target = PointerTarget(
        node_name="li",
        computed_style={"backgroundImage": "none", "listStyleImage": 'url("bullet.png")'},
    )

    assert resolve_image_url(target) == "bullet.png"


def test_tab_container_image_attribute_is_last_resort() -> None:
    target = PointerTarget(node_name="label", parent_attributes={"image": "https://example.test/favicon.ico"})

    assert resolve_image_url(target) == "https://example.test/favicon.ico"


def test_nothing_found() -> None:
    assert resolve_image_url(PointerTarget(node_name="span", parent_attributes={})) == ""
