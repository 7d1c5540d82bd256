"""Print the dominant colour of local images or image urls."""

from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

from dominant_color.imgproc.normalize import ImageDecodeError
from dominant_color.monitoring.logging import configure_logging
from dominant_color.sampling import ImageLoader, ImageLoadError
from dominant_color.services.extraction import DominantColorService, ExtractionResult


@dataclass(slots=True)
class SampleOutcome:
    source: str
    result: ExtractionResult | None = None
    error: str | None = None


def _format_outcome(outcome: SampleOutcome) -> str:
    if outcome.error is not None:
        return f"{outcome.source}: error: {outcome.error}"
    if outcome.result is None or outcome.result.color is None:
        return f"{outcome.source}: no dominant color"
    color = outcome.result.color
    return f"{outcome.source}: {color.label} ({color.hex})"


def print_outcomes(outcomes: Iterable[SampleOutcome]) -> None:
    for outcome in outcomes:
        print(_format_outcome(outcome))


async def sample_sources(sources: Sequence[str]) -> list[SampleOutcome]:
    """Load and sample each source in order."""

    service = DominantColorService()
    loader = ImageLoader()
    outcomes: list[SampleOutcome] = []
    try:
        for source in sources:
            try:
                image_bytes = await loader.load(source)
                outcomes.append(SampleOutcome(source, result=service.from_image(image_bytes)))
            except (ImageLoadError, ImageDecodeError) as exc:
                outcomes.append(SampleOutcome(source, error=str(exc)))
    finally:
        await loader.close()
    return outcomes


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("sources", nargs="+", metavar="SOURCE", help="image path, file://, data: or http(s) url")
    args = parser.parse_args(argv)

    configure_logging()
    outcomes = asyncio.run(sample_sources(args.sources))
    print_outcomes(outcomes)
    return 1 if any(outcome.error is not None for outcome in outcomes) else 0


if __name__ == "__main__":
    sys.exit(main())
