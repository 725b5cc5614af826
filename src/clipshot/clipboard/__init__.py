from clipshot.clipboard.base import ClipboardContent, ClipboardReader
from clipshot.clipboard.factory import get_clipboard_reader
from clipshot.clipboard.image import resolve_clipboard_image_path

__all__ = [
    'ClipboardContent',
    'ClipboardReader',
    'get_clipboard_reader',
    'resolve_clipboard_image_path',
]
