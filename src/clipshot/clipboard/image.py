"""Turn whatever is on the clipboard into an image file path.

A copied image file is used in place. Raw image data (a screenshot copied to
the clipboard, an image copied from a browser) is exported to a temp PNG
through AppleScript.
"""

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from clipshot.capture.runner import CommandRunner
from clipshot.clipboard.base import ClipboardReader
from clipshot.config import DEFAULT_OSASCRIPT, DEFAULT_OUTPUT_ENV, IMAGE_EXTENSIONS
from clipshot.models.captured_image import CapturedImage, ImageSource
from clipshot.utils.temp_files import TempFileManager

logger = logging.getLogger(__name__)

SUCCESS = "success"
NO_IMAGE = "no_image"

# The output path is read from the environment at run time so that it never
# becomes part of the script source.
APPLESCRIPT_TEMPLATE = """set outputFile to (system attribute "{env_var}")
set theFile to POSIX file outputFile
try
  set imageData to the clipboard as «class PNGf»
  set fileRef to open for access theFile with write permission
  write imageData to fileRef
  close access fileRef
  return "{success}"
on error
  return "{no_image}"
end try
"""


def render_script(env_var: str = DEFAULT_OUTPUT_ENV) -> str:
    return APPLESCRIPT_TEMPLATE.format(
        env_var=env_var, success=SUCCESS, no_image=NO_IMAGE)


def is_image_file(path: str) -> bool:
    return path.lower().endswith(IMAGE_EXTENSIONS)


def _write_text(path: str, body: str) -> None:
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(body)


@asynccontextmanager
async def script_file(temp_files: TempFileManager, body: str) -> AsyncIterator[str]:
    """Write ``body`` to a fresh temp script and remove it on exit."""
    path = temp_files.new_path(infix="script-", extension=".applescript")
    try:
        await asyncio.to_thread(_write_text, path, body)
        yield path
    finally:
        if os.path.lexists(path):
            temp_files.cleanup(path)


async def export_clipboard_image(
    runner: CommandRunner,
    temp_files: TempFileManager,
    osascript_path: str = DEFAULT_OSASCRIPT,
    output_env: str = DEFAULT_OUTPUT_ENV,
) -> Optional[str]:
    destination = temp_files.new_path()
    env = dict(os.environ)
    env[output_env] = destination

    try:
        async with script_file(temp_files, render_script(output_env)) as script_path:
            result = await runner.run([osascript_path, script_path], env=env)
    except Exception as e:
        logger.debug(f"Clipboard image export failed: {e}")
        _discard(temp_files, destination)
        return None

    status = result.stdout.strip()
    if status == SUCCESS:
        return destination

    logger.debug(f"No image data on the clipboard ({status or 'empty output'})")
    _discard(temp_files, destination)
    return None


def _discard(temp_files: TempFileManager, path: str) -> None:
    if os.path.lexists(path):
        temp_files.cleanup(path)


async def resolve_clipboard_image(
    reader: ClipboardReader,
    runner: CommandRunner,
    temp_files: TempFileManager,
    osascript_path: str = DEFAULT_OSASCRIPT,
    output_env: str = DEFAULT_OUTPUT_ENV,
) -> Optional[CapturedImage]:
    content = reader.read()

    if content.file and is_image_file(content.file):
        return CapturedImage(
            path=content.file, source=ImageSource.CLIPBOARD_FILE, temporary=False)

    path = await export_clipboard_image(
        runner, temp_files, osascript_path=osascript_path, output_env=output_env)
    if path is None:
        return None
    return CapturedImage(path=path, source=ImageSource.CLIPBOARD_DATA, temporary=True)


async def resolve_clipboard_image_path(
    reader: ClipboardReader,
    runner: CommandRunner,
    temp_files: TempFileManager,
    osascript_path: str = DEFAULT_OSASCRIPT,
    output_env: str = DEFAULT_OUTPUT_ENV,
) -> Optional[str]:
    """Return a path to the clipboard image, or None when there is none.

    A copied image file is returned as is and belongs to the user. Any other
    result is a temp file the caller has to clean up.
    """
    image = await resolve_clipboard_image(
        reader, runner, temp_files, osascript_path=osascript_path, output_env=output_env)
    return image.path if image else None
