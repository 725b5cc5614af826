"""Image capture service for clipshot.

Wires the clipboard reader, the command runner and the temp file manager
together so callers get one object to ask for an image and to give it back.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from clipshot.capture.runner import AsyncCommandRunner, CommandRunner
from clipshot.capture.screenshot import capture_screenshot
from clipshot.clipboard.base import ClipboardReader
from clipshot.clipboard.factory import get_clipboard_reader
from clipshot.clipboard.image import resolve_clipboard_image
from clipshot.config import Settings
from clipshot.models.captured_image import CapturedImage, ImageSource
from clipshot.utils.temp_files import TempFileManager

logger = logging.getLogger(__name__)

SOURCES = ("clipboard", "screenshot", "auto")


class ImageCaptureService:

    def __init__(
        self,
        settings: Optional[Settings] = None,
        runner: Optional[CommandRunner] = None,
        reader: Optional[ClipboardReader] = None,
    ) -> None:
        """Initialise the service.

        Args:
            settings: Paths and names to use; read from the environment if omitted.
            runner: Executes external commands.
            reader: Host clipboard access; the platform reader is created
                lazily when omitted.
        """
        self.settings = settings or Settings.from_env()
        self.runner = runner or AsyncCommandRunner()
        self.temp_files = TempFileManager(self.settings)
        self._reader = reader

    @property
    def reader(self) -> ClipboardReader:
        if self._reader is None:
            self._reader = get_clipboard_reader()
        return self._reader

    async def resolve_clipboard_image(self) -> Optional[CapturedImage]:
        return await resolve_clipboard_image(
            self.reader,
            self.runner,
            self.temp_files,
            osascript_path=self.settings.osascript_path,
            output_env=self.settings.output_path_env,
        )

    async def resolve_clipboard_image_path(self) -> Optional[str]:
        image = await self.resolve_clipboard_image()
        return image.path if image else None

    async def capture_screenshot(self) -> str:
        return await capture_screenshot(
            self.runner,
            self.temp_files,
            screencapture_path=self.settings.screencapture_path,
        )

    async def capture_screenshot_image(self) -> CapturedImage:
        path = await self.capture_screenshot()
        return CapturedImage(path=path, source=ImageSource.SCREENSHOT, temporary=True)

    def cleanup(self, path: str) -> bool:
        return self.temp_files.cleanup(path)

    async def get_image(self, source: str = "auto") -> Optional[CapturedImage]:
        if source not in SOURCES:
            raise ValueError(f"Unknown image source '{source}'")

        if source in ("clipboard", "auto"):
            image = await self.resolve_clipboard_image()
            if image is not None or source == "clipboard":
                return image
            logger.info("No image on the clipboard, falling back to a screenshot")

        return await self.capture_screenshot_image()

    def release(self, image: Optional[CapturedImage]) -> None:
        if image is not None and image.temporary:
            self.cleanup(image.path)

    @asynccontextmanager
    async def acquire(self, source: str = "auto") -> AsyncIterator[Optional[CapturedImage]]:
        """Yield an image for ``source`` and remove it afterwards if it is ours."""
        image = await self.get_image(source)
        try:
            yield image
        finally:
            self.release(image)
