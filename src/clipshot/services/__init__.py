"""Service layer for clipshot."""

from .capture_service import ImageCaptureService

__all__ = ["ImageCaptureService"]
