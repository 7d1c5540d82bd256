"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter, Gauge


extractions_total = Counter(
    "dominant_color_extractions_total",
    "Dominant colour extractions, by whether a colour was found.",
    ["outcome"],
)

pixels_scanned_total = Counter(
    "dominant_color_pixels_scanned_total",
    "Total number of pixel samples passed to the quantizer.",
)

preview_open = Gauge(
    "dominant_color_preview_open",
    "Whether the colour preview panel is currently shown.",
)
