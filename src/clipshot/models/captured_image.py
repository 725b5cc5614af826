from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field
import ulid


class ImageSource(str, Enum):
    CLIPBOARD_FILE = "clipboard_file"
    CLIPBOARD_DATA = "clipboard_data"
    SCREENSHOT = "screenshot"


class CapturedImage(BaseModel):
    """An image handed to the caller. ``temporary`` files are ours to delete."""
    capture_id: str = Field(default_factory=lambda: f"c_{ulid.new()}")
    path: str
    source: ImageSource
    temporary: bool
    captured_at: datetime = Field(default_factory=lambda: datetime.now())
