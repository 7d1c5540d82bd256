"""FastAPI entrypoint and HTTP routes."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel, StrictInt

from dominant_color.config.settings import get_settings
from dominant_color.imgproc.color_extract import InvalidPixelData
from dominant_color.imgproc.normalize import ImageDecodeError
from dominant_color.monitoring.logging import configure_logging
from dominant_color.services.extraction import DominantColorService, ExtractionResult


class PixelPayload(BaseModel):
    """Raw RGBA samples in scan order."""

    pixels: list[list[StrictInt]]


class ThemePayload(BaseModel):
    label: str
    background_image: str
    box_shadow: str
    padding: str


class DominantColorResponse(BaseModel):
    """Dominant colour of a submitted image or pixel buffer."""

    color: list[int] | None
    hex: str | None
    label: str | None
    theme: ThemePayload | None
    pixel_count: int

    @classmethod
    def from_result(cls, result: ExtractionResult) -> "DominantColorResponse":
        if result.color is None or result.theme is None:
            return cls(color=None, hex=None, label=None, theme=None, pixel_count=result.pixel_count)
        theme = result.theme
        return cls(
            color=list(result.color),
            hex=result.color.hex,
            label=result.color.label,
            theme=ThemePayload(
                label=theme.label,
                background_image=theme.background_image,
                box_shadow=theme.box_shadow,
                padding=theme.padding,
            ),
            pixel_count=result.pixel_count,
        )


async def _read_body(request: Request, limit: int) -> bytes:
    """Read the request body, giving up with 413 once it passes ``limit`` bytes."""

    declared = request.headers.get("content-length", "")
    if limit and declared.isdigit() and int(declared) > limit:
        raise HTTPException(status_code=413, detail="Image is too large.")

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if limit and len(body) > limit:
            raise HTTPException(status_code=413, detail="Image is too large.")
    return bytes(body)


def create_app() -> FastAPI:
    """Initialise the FastAPI application."""

    settings = get_settings()
    configure_logging()
    service = DominantColorService(settings)

    app = FastAPI(
        title="Dominant Color API",
        version="0.1.0",
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
    )

    @app.exception_handler(InvalidPixelData)
    async def invalid_pixels_handler(request: Request, exc: InvalidPixelData) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc), "index": exc.index})

    @app.exception_handler(ImageDecodeError)
    async def decode_error_handler(request: Request, exc: ImageDecodeError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok"}

    @app.get("/metrics", tags=["system"])
    async def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.post("/colors/dominant", tags=["colors"], response_model=DominantColorResponse)
    async def dominant_from_image(request: Request) -> DominantColorResponse:
        """Return the dominant colour of the image sent as the request body."""

        body = await _read_body(request, settings.max_image_bytes)
        if not body:
            raise HTTPException(status_code=400, detail="Request body is empty.")
        # Decoding and voting are CPU bound; keep them off the event loop
        result = await run_in_threadpool(service.from_image, body)
        return DominantColorResponse.from_result(result)

    @app.post("/colors/dominant/pixels", tags=["colors"], response_model=DominantColorResponse)
    async def dominant_from_pixels(payload: PixelPayload) -> DominantColorResponse:
        """Return the dominant colour of an RGBA pixel list."""

        result = await run_in_threadpool(service.from_pixels, payload.pixels)
        return DominantColorResponse.from_result(result)

    return app


app = create_app()
