"""clipshot: clipboard images and interactive screenshots as temp files."""

from clipshot.config import Settings
from clipshot.models.captured_image import CapturedImage, ImageSource
from clipshot.services.capture_service import ImageCaptureService

__all__ = [
    'CapturedImage',
    'ImageCaptureService',
    'ImageSource',
    'Settings',
]
