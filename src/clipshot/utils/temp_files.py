import logging
import os
from typing import Optional

import ulid

from clipshot.config import Settings

logger = logging.getLogger(__name__)


def is_safe_to_delete(path: str, temp_dir: str, prefix: str) -> bool:
    """Return True when ``path`` is a file this package may remove.

    The path has to carry the ``<temp_dir>/<prefix>`` sentinel, must not
    contain a ``..`` segment, and its canonical form must still sit under the
    canonical ``temp_dir`` (a symlink pointing elsewhere fails this).
    """
    if not path or not path.startswith(os.path.join(temp_dir, prefix)):
        return False

    if ".." in path.split(os.sep):
        return False

    resolved = os.path.realpath(path)
    root = os.path.realpath(temp_dir)
    if resolved == root:
        return False
    try:
        return os.path.commonpath([root, resolved]) == root
    except ValueError:
        return False


class TempFileManager:

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or Settings()
        self.temp_dir = settings.temp_dir
        self.prefix = settings.temp_prefix

    @property
    def sentinel(self) -> str:
        return os.path.join(self.temp_dir, self.prefix)

    def new_path(self, infix: str = "", extension: str = ".png") -> str:
        return f"{self.sentinel}{infix}{ulid.new()}{extension}"

    def owns(self, path: str) -> bool:
        return is_safe_to_delete(path, self.temp_dir, self.prefix)

    def cleanup(self, path: str) -> bool:
        if not self.owns(path):
            logger.debug(f"Refusing to remove {path!r}: outside {self.sentinel}")
            return False

        try:
            os.unlink(path)
        except OSError as e:
            logger.error(f"Failed to cleanup temp file {path}: {e}")
            return False

        logger.debug(f"Removed temp file {path}")
        return True
