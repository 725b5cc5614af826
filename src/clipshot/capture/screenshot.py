import logging

from clipshot.capture.runner import CommandRunner
from clipshot.utils.temp_files import TempFileManager

logger = logging.getLogger(__name__)


async def capture_screenshot(
    runner: CommandRunner,
    temp_files: TempFileManager,
    screencapture_path: str = "/usr/sbin/screencapture",
) -> str:
    """Let the user select a screen region and return where it was saved.

    Blocks until the selection is finished or cancelled. The path is returned
    either way, so the file may not exist. Failing to start the utility
    raises ``OSError``.
    """
    destination = temp_files.new_path(infix="screenshot-")

    result = await runner.run(
        [screencapture_path, "-i", destination], check=False)
    if result.returncode != 0:
        logger.warning(
            f"screencapture exited with {result.returncode}: {result.stderr.strip()}")

    return destination
