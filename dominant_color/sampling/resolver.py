"""Figure out which image the pointer is resting on."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Mapping

_IMAGE_NODE = re.compile(r"(image|img)$", re.IGNORECASE)
_CSS_URL = re.compile(r'^url\("?([^)]+?)"?\)$')


@dataclass(slots=True)
class PointerTarget:
    """Snapshot of the element under the pointer."""

    node_name: str
    src: str = ""
    computed_style: Mapping[str, str] = field(default_factory=dict)
    parent_attributes: Mapping[str, str] | None = None


@dataclass(slots=True)
class PointerEvent:
    """A pointer move over ``target``, with the modifier key state."""

    target: PointerTarget
    shift_key: bool = False


def css_image_url(target: PointerTarget, style: str) -> str:
    """Return the url inside a computed ``url(...)`` style value, or ``""``."""

    value = target.computed_style.get(style) or ""
    match = _CSS_URL.match(value)
    return match.group(1) if match else ""


def resolve_image_url(target: PointerTarget) -> str:
    """Return the image url for ``target``; the first non-empty source wins."""

    image = ""
    if _IMAGE_NODE.search(target.node_name):
        image = target.src or ""

    image = image or css_image_url(target, "backgroundImage")
    image = image or css_image_url(target, "listStyleImage")

    # Tabs keep their icon on the container
    if not image and target.parent_attributes is not None:
        image = target.parent_attributes.get("image") or ""

    return image
