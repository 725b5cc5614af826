import logging
from typing import Optional

try:
    from AppKit import NSPasteboard, NSPasteboardTypeString, NSPasteboardTypeFileURL
    from Foundation import NSURL
    HAS_APPKIT = True
except ImportError:
    HAS_APPKIT = False

from clipshot.clipboard.base import ClipboardContent, ClipboardReader

logger = logging.getLogger(__name__)


class MacOSClipboardReader(ClipboardReader):

    def read(self) -> ClipboardContent:
        if not HAS_APPKIT:
            logger.debug("PyObjC is not available, clipboard looks empty")
            return ClipboardContent()

        pasteboard = NSPasteboard.generalPasteboard()
        types = pasteboard.types() or []

        file_path = None
        if NSPasteboardTypeFileURL in types:
            file_path = self._get_file(pasteboard)

        text = None
        if NSPasteboardTypeString in types:
            text = self._get_text(pasteboard)

        return ClipboardContent(file=file_path, text=text)

    def _get_file(self, pasteboard) -> Optional[str]:
        try:
            file_urls = pasteboard.readObjectsForClasses_options_([NSURL], None)
        except Exception as e:
            logger.debug(f"Could not read file URLs from pasteboard: {e}")
            return None

        for url in file_urls or []:
            if url.isFileURL():
                return str(url.path())
        return None

    def _get_text(self, pasteboard) -> Optional[str]:
        try:
            text = pasteboard.stringForType_(NSPasteboardTypeString)
        except Exception as e:
            logger.debug(f"Could not read text from pasteboard: {e}")
            return None
        return str(text) if text else None
