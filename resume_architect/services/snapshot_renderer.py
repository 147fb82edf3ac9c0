"""Raster snapshots of rendered resume HTML."""

import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Protocol
from PIL import Image
from playwright.async_api import async_playwright, Error as PlaywrightError
from resume_architect.errors import ExportError

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255)


@dataclass(frozen=True)
class Snapshot:
    """PNG image of a rendered element, with its pixel dimensions."""

    png: bytes
    width: int
    height: int


def flatten_on_white(png: bytes) -> Snapshot:
    """
    Composite an image onto an opaque white background.

    Args:
        png: Encoded image (any format Pillow reads)

    Returns:
        Snapshot: Opaque RGB PNG and its size in pixels

    Raises:
        ExportError: If the image cannot be decoded
    """
    try:
        with Image.open(BytesIO(png)) as source:
            image = source.convert("RGBA")
    except (OSError, ValueError) as e:
        raise ExportError(f"Snapshot is not a readable image: {e}") from e

    canvas = Image.new("RGB", image.size, WHITE)
    canvas.paste(image, mask=image.getchannel("A"))

    buffer = BytesIO()
    canvas.save(buffer, format="PNG")
    width, height = canvas.size
    return Snapshot(png=buffer.getvalue(), width=width, height=height)


class Renderer(Protocol):
    """Captures a snapshot of one element of an HTML document."""

    async def capture(self, html: str, selector: str, scale: int) -> Snapshot:
        ...


class PlaywrightRenderer:
    """Render HTML in headless Chromium and screenshot a single element."""

    def __init__(self, viewport_width: int = 1024, viewport_height: int = 1400):
        """
        Initialize the renderer.

        Args:
            viewport_width: CSS pixel width of the browser viewport
            viewport_height: CSS pixel height of the browser viewport
        """
        self.viewport = {"width": viewport_width, "height": viewport_height}

    async def capture(self, html: str, selector: str, scale: int) -> Snapshot:
        """
        Capture the element matching ``selector`` at ``scale`` device pixels per CSS pixel.

        Raises:
            ExportError: If the element is missing or the browser fails
        """
        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=True)
                try:
                    page = await browser.new_page(
                        viewport=self.viewport,
                        device_scale_factor=scale,
                    )
                    await page.set_content(html, wait_until="load")
                    element = await page.query_selector(selector)
                    if element is None:
                        raise ExportError(f"Render target {selector!r} not found")
                    png = await element.screenshot(type="png", omit_background=False)
                finally:
                    await browser.close()
        except PlaywrightError as e:
            raise ExportError(f"Failed to render resume snapshot: {str(e)}") from e

        snapshot = flatten_on_white(png)
        logger.debug("Captured %dx%d snapshot of %s", snapshot.width, snapshot.height, selector)
        return snapshot
